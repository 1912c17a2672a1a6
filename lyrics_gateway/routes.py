from lyrics_gateway.controllers.azlyrics_controller import azlyrics_bp
from lyrics_gateway.controllers.genius_controller import genius_bp

def register_routes(app):
    app.register_blueprint(azlyrics_bp)
    app.register_blueprint(genius_bp)
