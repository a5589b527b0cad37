"""Database bootstrap shared by ``manage.py`` and ``setup_db.py``."""
from flask import current_app

from cardapio import db
from cardapio.models import Cargo, Usuario
from cardapio.services import UsuarioService


def criar_admin(nome=None, email=None, senha=None):
    """Create the superuser unless a user with that email already exists.

    Returns the ``Usuario`` and whether it was created now.
    """
    nome = nome or current_app.config['ADMIN_NOME']
    email = email or current_app.config['ADMIN_EMAIL']
    senha = senha or current_app.config['ADMIN_SENHA']
    if not senha:
        raise RuntimeError('ADMIN_SENHA não configurada')

    existente = UsuarioService.find_by_email(email)
    if existente:
        return existente, False

    admin = UsuarioService.create({
        'nome': nome,
        'email': email,
        'senha': senha,
        'cargo': Cargo.ADMIN.value
    })
    return admin, True


def setup_database(seed_admin=True):
    db.create_all()
    current_app.logger.info('Tabelas do banco criadas')
    if seed_admin and current_app.config.get('ADMIN_SENHA'):
        admin, criado = criar_admin()
        if criado:
            current_app.logger.info(f"Administrador {admin.email} criado")
    return Usuario.query.count()
