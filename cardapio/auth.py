"""
JWT wiring and role checks.

``@jwt_required()`` on a route already validates the token; the callbacks
below shape the 401 responses and load the ``Usuario`` behind the token so
routes can use ``current_user``. ``cargo_required`` extends this with a
role check against the database row.
"""
from functools import wraps

from flask import current_app, jsonify
from flask_jwt_extended import current_user, verify_jwt_in_request

from cardapio import db
from cardapio.exceptions import AcessoNegado
from cardapio.models import Usuario


def register_jwt_callbacks(jwt):

    @jwt.user_identity_loader
    def user_identity(usuario):
        if isinstance(usuario, Usuario):
            return str(usuario.id)
        return str(usuario)

    @jwt.user_lookup_loader
    def user_lookup(_jwt_header, jwt_data):
        try:
            usuario_id = int(jwt_data['sub'])
        except (KeyError, TypeError, ValueError):
            return None
        return db.session.get(Usuario, usuario_id)

    @jwt.unauthorized_loader
    def missing_token(reason):
        return jsonify({'error': 'Token não fornecido'}), 401

    @jwt.invalid_token_loader
    def invalid_token(reason):
        current_app.logger.info(f"Token rejeitado: {reason}")
        return jsonify({'error': 'Token inválido'}), 401

    @jwt.expired_token_loader
    def expired_token(_jwt_header, _jwt_data):
        return jsonify({'error': 'Token inválido'}), 401

    @jwt.user_lookup_error_loader
    def unknown_user(_jwt_header, jwt_data):
        current_app.logger.info(f"Token para usuário inexistente: {jwt_data.get('sub')}")
        return jsonify({'error': 'Token inválido'}), 401


def cargo_required(*cargos):
    """Exige um token válido de um usuário com um dos cargos informados."""
    def wrapper(fn):
        @wraps(fn)
        def decorator(*args, **kwargs):
            verify_jwt_in_request()
            if current_user.cargo not in cargos:
                raise AcessoNegado('Acesso negado')
            return fn(*args, **kwargs)
        return decorator
    return wrapper
