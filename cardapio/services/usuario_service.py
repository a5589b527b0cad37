from flask import current_app
from flask_jwt_extended import create_access_token

from cardapio import db
from cardapio.exceptions import NaoAutenticado, NaoEncontrado, RequisicaoInvalida
from cardapio.models import Cargo, Usuario
from cardapio.utils import is_valid_email, normalize_email

SENHA_MIN_LENGTH = 6


def _parse_cargo(value):
    if not isinstance(value, str):
        raise RequisicaoInvalida('Este cargo não existe')
    try:
        return Cargo(value.strip().upper())
    except ValueError:
        raise RequisicaoInvalida('Este cargo não existe')


def _valid_senha(senha):
    return isinstance(senha, str) and len(senha) >= SENHA_MIN_LENGTH


class UsuarioService:
    """User management and credential checks"""

    @staticmethod
    def find_all():
        return Usuario.query.order_by(Usuario.id).all()

    @staticmethod
    def find_by_id(usuario_id):
        usuario = db.session.get(Usuario, usuario_id)
        if not usuario:
            raise NaoEncontrado('Usuário não encontrado')
        return usuario

    @staticmethod
    def find_by_email(email):
        if not isinstance(email, str):
            return None
        return Usuario.query.filter_by(email=normalize_email(email)).first()

    @staticmethod
    def create(data):
        nome = data.get('nome')
        if not isinstance(nome, str) or not nome.strip():
            raise RequisicaoInvalida('O nome é obrigatório e deve ser uma string')

        email = data.get('email')
        if not email or not is_valid_email(email):
            raise RequisicaoInvalida('Email é obrigatório e deve ser válido')

        senha = data.get('senha')
        if not _valid_senha(senha):
            raise RequisicaoInvalida(
                f'Senha é obrigatória e deve ter no mínimo {SENHA_MIN_LENGTH} caracteres'
            )

        if data.get('cargo') is None:
            raise RequisicaoInvalida('Este cargo não existe')
        cargo = _parse_cargo(data['cargo'])

        if UsuarioService.find_by_email(email):
            raise RequisicaoInvalida('Já existe um usuário com este email')

        usuario = Usuario(nome=nome.strip(), email=normalize_email(email), cargo=cargo)
        usuario.set_password(senha)

        db.session.add(usuario)
        db.session.commit()

        current_app.logger.info(f"Usuário {usuario.id} ({usuario.email}) criado com cargo {cargo.value}")
        return usuario

    @staticmethod
    def update(usuario_id, data):
        usuario = UsuarioService.find_by_id(usuario_id)

        if 'nome' in data:
            if not isinstance(data['nome'], str) or not data['nome'].strip():
                raise RequisicaoInvalida('O nome deve ser uma string')
            usuario.nome = data['nome'].strip()

        if 'email' in data:
            if not is_valid_email(data['email']):
                raise RequisicaoInvalida('Email deve ser uma string válida')
            outro = UsuarioService.find_by_email(data['email'])
            if outro and outro.id != usuario.id:
                raise RequisicaoInvalida('Já existe outro usuário com este email')
            usuario.email = normalize_email(data['email'])

        if 'senha' in data:
            if not _valid_senha(data['senha']):
                raise RequisicaoInvalida(f'Senha deve ter no mínimo {SENHA_MIN_LENGTH} caracteres')
            usuario.set_password(data['senha'])

        if 'cargo' in data:
            usuario.cargo = _parse_cargo(data['cargo'])

        db.session.commit()
        return usuario

    @staticmethod
    def delete(usuario_id):
        usuario = UsuarioService.find_by_id(usuario_id)
        db.session.delete(usuario)
        db.session.commit()
        current_app.logger.info(f"Usuário {usuario_id} removido")

    @staticmethod
    def login(email, senha):
        """Check the credentials and return a signed access token"""
        if not email or not senha:
            raise RequisicaoInvalida('Email e senha são obrigatórios')

        usuario = UsuarioService.find_by_email(email)
        if not usuario or not isinstance(senha, str) or not usuario.check_password(senha):
            current_app.logger.info(f"Falha de login para {email!r}")
            raise NaoAutenticado('Credenciais inválidas')

        token = create_access_token(
            identity=usuario,
            additional_claims={'email': usuario.email, 'cargo': usuario.cargo.value}
        )
        return token, usuario
