import logging

from flask import Flask, jsonify
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy
from flask_jwt_extended import JWTManager
from flask_migrate import Migrate
from config import Config

db = SQLAlchemy()
jwt = JWTManager()
migrate = Migrate()

def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s'
    )
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    db.init_app(app)
    jwt.init_app(app)
    migrate.init_app(app, db)
    CORS(app, resources={r'/api/*': {'origins': app.config['CORS_ORIGINS']}})

    # Import models to ensure they are registered with SQLAlchemy
    from cardapio import models  # noqa: F401

    from cardapio.auth import register_jwt_callbacks
    from cardapio.exceptions import register_error_handlers
    register_jwt_callbacks(jwt)
    register_error_handlers(app)

    from cardapio.routes import alimentos, autorizacoes, pratos, usuarios
    app.register_blueprint(usuarios.usuarios_bp)
    app.register_blueprint(alimentos.alimentos_bp)
    app.register_blueprint(pratos.pratos_bp)
    app.register_blueprint(autorizacoes.autorizacoes_bp)

    @app.route('/health')
    def health_check():
        """Health check endpoint"""
        return jsonify({'status': 'healthy', 'service': 'cardapio-api'})

    return app
