from flask import Flask

from lyrics_gateway import config
from lyrics_gateway.routes import register_routes


def create_app(overrides=None):
    app = Flask(__name__)
    app.config.from_object(config)
    if overrides:
        app.config.update(overrides)
    register_routes(app)
    return app
