import logging
import os
from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException
from config import config
from app.extensions import csrf, login_manager, migrate
from app.models.db_init import initialize_db
from app.services import init_services


def configure_logging(app: Flask) -> None:
    level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    app.logger.setLevel(level)


def create_app(config_name='default', provider=None):
    template_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'templates')

    app = Flask(__name__, template_folder=template_dir)
    app.config.from_object(config[config_name])

    configure_logging(app)

    # Initialize database
    db = initialize_db(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    csrf.init_app(app)

    init_services(app, provider)

    from app.routes.main import main as main_blueprint
    from app.routes.api import api as api_blueprint
    from app.routes.files import files as files_blueprint

    app.register_blueprint(main_blueprint)
    app.register_blueprint(api_blueprint)
    app.register_blueprint(files_blueprint)

    from app.cli import register_commands
    register_commands(app)

    @app.errorhandler(HTTPException)
    def http_error(e):
        if request.path.startswith('/api/'):
            return jsonify({'success': False, 'error': e.description}), e.code
        return e

    @app.errorhandler(Exception)
    def internal_server_error(e):
        app.logger.exception('Unhandled error on %s', request.path)
        if request.path.startswith('/api/'):
            return jsonify({'success': False, 'error': 'Internal server error'}), 500
        return 'Internal server error', 500

    return app
