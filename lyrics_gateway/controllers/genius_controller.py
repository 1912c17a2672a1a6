from flask import Blueprint, current_app, jsonify, request

from lyrics_gateway.exceptions import UnauthorizedError
from lyrics_gateway.responses import upstream_errors
from lyrics_gateway.services.genius import GeniusService, bearer_token

genius_bp = Blueprint('genius', __name__)


def _genius_for_request():
    token = bearer_token(request.headers.get('Authorization'))
    if token is None:
        raise UnauthorizedError('Missing Authorization header')
    return GeniusService(token, timeout=current_app.config['UPSTREAM_TIMEOUT'])


@genius_bp.route('/<song_id>/lyrics', methods=['GET'])
@genius_bp.route('/genius/<song_id>/lyrics', methods=['GET'])
@upstream_errors
def get_lyrics(song_id):
    genius = _genius_for_request()
    # not validated: a non-numeric id fails here as an unhandled error
    lyrics = genius.lyrics(int(song_id))
    return jsonify({'lyrics': lyrics})


@genius_bp.route('/search', methods=['GET'])
@genius_bp.route('/genius/search', methods=['GET'])
@upstream_errors
def search_songs():
    genius = _genius_for_request()
    songs = genius.search(request.args.get('q'))
    return jsonify([song.to_dict() for song in songs])
