from flask import Flask
from config import Config
from app_core import setup_app_core
from app_routes import setup_routes
from routes.chat import chat_bp
from routes.connections import connections_bp
from routes.messages import messages_bp


def create_app(config=Config, services=None, supabase=None):
    """Create the Flask app; tests pass their own services"""
    app = Flask(__name__)
    app.config.from_object(config)

    # Setup core services (degraded when Supabase is not configured)
    setup_app_core(app, config, services=services, supabase=supabase)

    # Setup basic routes
    setup_routes(app)

    # Register blueprints
    app.register_blueprint(chat_bp)
    app.register_blueprint(connections_bp)
    app.register_blueprint(messages_bp)

    return app


app = create_app()

if __name__ == '__main__':
    app.run(debug=False, host='0.0.0.0', port=Config.PORT)
