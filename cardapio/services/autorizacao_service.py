from flask import current_app

from cardapio import db
from cardapio.exceptions import NaoEncontrado, RequisicaoInvalida
from cardapio.models import Autorizacao, Prato, Usuario
from cardapio.utils import is_valid_id, parse_id_list


class AutorizacaoService:
    """Lookups and bulk management of the user <-> dish access grants"""

    @staticmethod
    def usuario_tem_acesso_ao_prato(usuario_id, prato_id):
        autorizacao = (
            db.session.query(Autorizacao.id)
            .filter_by(usuario_id=usuario_id, prato_id=prato_id)
            .first()
        )
        return autorizacao is not None

    @staticmethod
    def usuario_eh_admin(usuario_id):
        usuario = db.session.get(Usuario, usuario_id)
        if not usuario:
            raise NaoEncontrado('Usuário não encontrado')
        return usuario.is_admin

    @staticmethod
    def find_all():
        return Autorizacao.query.order_by(Autorizacao.id).all()

    @staticmethod
    def find_by_id(autorizacao_id):
        autorizacao = db.session.get(Autorizacao, autorizacao_id)
        if not autorizacao:
            raise NaoEncontrado('Autorização não encontrada')
        return autorizacao

    @staticmethod
    def find_by_usuario(usuario_id, somente_ativos=False):
        if not db.session.get(Usuario, usuario_id):
            raise NaoEncontrado('Usuário não encontrado')

        query = Autorizacao.query.filter(Autorizacao.usuario_id == usuario_id)
        if somente_ativos:
            query = query.join(Prato, Autorizacao.prato_id == Prato.id).filter(Prato.ativo.is_(True))
        return query.order_by(Autorizacao.id).all()

    @staticmethod
    def verificar_acesso(data):
        usuario_id = data.get('usuarioId')
        prato_id = data.get('pratoId')
        if not is_valid_id(usuario_id) or not is_valid_id(prato_id):
            raise RequisicaoInvalida('usuarioId e pratoId devem ser números')
        return AutorizacaoService.usuario_tem_acesso_ao_prato(usuario_id, prato_id)

    @staticmethod
    def atribuir(data):
        """Grant a user access to several dishes at once; existing grants are kept"""
        usuario_id = data.get('usuarioId')
        if not is_valid_id(usuario_id):
            raise RequisicaoInvalida('usuarioId deve ser um número')
        prato_ids = parse_id_list(data.get('pratoIds'), 'pratoIds deve ser uma lista não vazia de ids')

        usuario = db.session.get(Usuario, usuario_id)
        if not usuario:
            raise NaoEncontrado('Usuário não encontrado')

        pratos = Prato.query.filter(Prato.id.in_(prato_ids), Prato.ativo.is_(True)).all()
        if len(pratos) != len(prato_ids):
            raise RequisicaoInvalida('Um ou mais pratos informados não existem')

        existentes = {
            prato_id for (prato_id,) in
            db.session.query(Autorizacao.prato_id).filter(
                Autorizacao.usuario_id == usuario_id,
                Autorizacao.prato_id.in_(prato_ids)
            )
        }

        novas = [
            Autorizacao(usuario=usuario, prato=prato)
            for prato in pratos if prato.id not in existentes
        ]
        db.session.add_all(novas)
        db.session.commit()

        current_app.logger.info(
            f"{len(novas)} autorização(ões) concedida(s) ao usuário {usuario_id}"
        )
        return AutorizacaoService.find_by_usuario(usuario_id)

    @staticmethod
    def revogar(autorizacao_id):
        autorizacao = AutorizacaoService.find_by_id(autorizacao_id)
        usuario_id, prato_id = autorizacao.usuario_id, autorizacao.prato_id
        db.session.delete(autorizacao)
        db.session.commit()
        current_app.logger.info(
            f"Autorização {autorizacao_id} revogada (usuário {usuario_id}, prato {prato_id})"
        )
