from datetime import datetime

import pytest
from flask_jwt_extended import create_access_token

from cardapio import create_app, db
from cardapio.models import Alimento, Autorizacao, Cargo, Prato, Usuario
from config import TestingConfig


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def make_usuario(nome, email, cargo, senha='senha123'):
    usuario = Usuario(nome=nome, email=email, cargo=cargo)
    usuario.set_password(senha)
    db.session.add(usuario)
    db.session.commit()
    return usuario


def make_alimento(nome, custo=1.0, peso=None, ativo=True):
    alimento = Alimento(nome=nome, custo=custo, peso=peso, ativo=ativo)
    db.session.add(alimento)
    db.session.commit()
    return alimento


def make_prato(nome, alimentos, autorizados=(), preco=30.0, custo=12.0, ativo=True):
    prato = Prato(
        nome=nome,
        preco=preco,
        custo=custo,
        data_lancamento=datetime(2024, 3, 1, 12, 0),
        alimentos=list(alimentos),
        ativo=ativo
    )
    db.session.add(prato)
    for usuario in autorizados:
        db.session.add(Autorizacao(usuario=usuario, prato=prato))
    db.session.commit()
    return prato


def auth_headers(usuario):
    token = create_access_token(
        identity=usuario,
        additional_claims={'email': usuario.email, 'cargo': usuario.cargo.value}
    )
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def admin(app):
    return make_usuario('Ana Admin', 'admin@example.com', Cargo.ADMIN)


@pytest.fixture
def editor(app):
    return make_usuario('Edu Editor', 'editor@example.com', Cargo.EDITOR)


@pytest.fixture
def leitor(app):
    return make_usuario('Lia Leitora', 'leitor@example.com', Cargo.LEITOR)


@pytest.fixture
def alimentos(app):
    return [
        make_alimento('Arroz', custo=2.5, peso=100.0),
        make_alimento('Feijão', custo=3.0, peso=80.0),
        make_alimento('Farofa', custo=1.2),
    ]
