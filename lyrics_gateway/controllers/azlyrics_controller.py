from flask import Blueprint, current_app, jsonify, request

from lyrics_gateway.responses import upstream_errors
from lyrics_gateway.services.azlyrics import scrape_lyrics
from lyrics_gateway.services.web_search import site_search

azlyrics_bp = Blueprint('azlyrics', __name__, url_prefix='/azlyrics')


@azlyrics_bp.route('/search', methods=['GET'])
def search():
    config = current_app.config
    results = site_search(
        request.args.get('q'),
        site=config['AZLYRICS_SITE'],
        engine_url=config['SEARCH_ENGINE_URL'],
        timeout=config['UPSTREAM_TIMEOUT'],
        user_agent=config['SEARCH_USER_AGENT'],
    )
    return jsonify(results)


@azlyrics_bp.route('/lyrics', methods=['GET'])
@upstream_errors
def get_lyrics():
    config = current_app.config
    lyrics = scrape_lyrics(
        request.args.get('url'),
        timeout=config['UPSTREAM_TIMEOUT'],
        user_agent=config['USER_AGENT'],
        selector=config['LYRICS_SELECTOR'],
    )
    return jsonify({'lyrics': lyrics})
