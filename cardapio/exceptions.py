"""
Domain errors raised by the services and the handlers that turn them
into JSON responses.
"""
from flask import jsonify
from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import HTTPException


class ErroApi(Exception):
    status_code = 500

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class RequisicaoInvalida(ErroApi):
    status_code = 400


class NaoAutenticado(ErroApi):
    status_code = 401


class AcessoNegado(ErroApi):
    status_code = 403


class NaoEncontrado(ErroApi):
    status_code = 404


def register_error_handlers(app):
    from cardapio import db

    @app.errorhandler(ErroApi)
    def handle_api_error(e):
        # Drop any half-applied changes from a rejected request
        db.session.rollback()
        if e.status_code >= 500:
            app.logger.error(f"Erro de aplicação: {e.message}")
        return jsonify({'error': e.message}), e.status_code

    @app.errorhandler(IntegrityError)
    def handle_integrity_error(e):
        db.session.rollback()
        app.logger.warning(f"Violação de integridade: {e.orig}")
        return jsonify({'error': 'Registro duplicado ou inconsistente'}), 409

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({'error': e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        db.session.rollback()
        app.logger.exception(f"Erro não tratado: {e}")
        return jsonify({'error': 'Erro interno no servidor'}), 500
