import functools
import logging

from flask import jsonify

from lyrics_gateway.exceptions import NotFoundError, UnauthorizedError

logger = logging.getLogger(__name__)


def not_found():
    return jsonify({"error": "NotFound"}), 404


def unauthorized():
    return jsonify({"error": "Unauthorized"}), 401


def upstream_errors(view):
    """
    Map upstream failures raised inside a route handler to JSON responses.

    NotFoundError becomes 404, UnauthorizedError becomes 401. Anything else
    is logged and re-raised so Flask answers with its default error page.
    """
    @functools.wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except NotFoundError:
            return not_found()
        except UnauthorizedError:
            return unauthorized()
        except Exception:
            logger.exception("Unhandled error in %s", view.__name__)
            raise
    return wrapper
