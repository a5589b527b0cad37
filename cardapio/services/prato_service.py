from flask import current_app

from cardapio import db
from cardapio.exceptions import AcessoNegado, NaoEncontrado, RequisicaoInvalida
from cardapio.models import Alimento, Autorizacao, Prato
from cardapio.services.autorizacao_service import AutorizacaoService
from cardapio.utils import is_valid_number, parse_datetime, parse_id_list

REQUIRED_FIELDS = ('nome', 'preco', 'custo', 'data_lancamento')


def _load_alimentos(value):
    alimento_ids = parse_id_list(value, 'Lista de alimentos deve ser um array não vazio')
    alimentos = (
        Alimento.query
        .filter(Alimento.id.in_(alimento_ids), Alimento.ativo.is_(True))
        .order_by(Alimento.id)
        .all()
    )
    if len(alimentos) != len(alimento_ids):
        raise RequisicaoInvalida('Um ou mais alimentos informados não existem')
    return alimentos


def _validate_fields(data):
    if 'nome' in data and (not isinstance(data['nome'], str) or not data['nome'].strip()):
        raise RequisicaoInvalida('nome deve ser uma string')
    if 'preco' in data and not is_valid_number(data['preco']):
        raise RequisicaoInvalida('preco deve ser um número válido')
    if 'custo' in data and not is_valid_number(data['custo']):
        raise RequisicaoInvalida('custo deve ser um número válido')


class PratoService:
    """Dishes, gated by the authorization table for non-admin users"""

    @staticmethod
    def find_all(usuario):
        query = Prato.query.filter(Prato.ativo.is_(True))
        if not usuario.is_admin:
            query = query.join(Autorizacao, Autorizacao.prato_id == Prato.id).filter(
                Autorizacao.usuario_id == usuario.id
            )
        return query.order_by(Prato.id).all()

    @staticmethod
    def find_by_id(prato_id, usuario):
        prato = Prato.query.filter_by(id=prato_id, ativo=True).first()
        if not prato:
            raise NaoEncontrado('Prato não encontrado')

        if usuario.is_admin:
            return prato

        if not AutorizacaoService.usuario_tem_acesso_ao_prato(usuario.id, prato.id):
            raise AcessoNegado('Este usuário não tem acesso a este prato!')
        return prato

    @staticmethod
    def create(data, usuario):
        # Required fields
        if any(data.get(field) in (None, '') for field in REQUIRED_FIELDS):
            raise RequisicaoInvalida('Campos nome, preco, custo e data_lancamento são obrigatórios')

        _validate_fields(data)
        data_lancamento = parse_datetime(data['data_lancamento'])

        if data.get('alimentos') is None:
            raise RequisicaoInvalida('Lista de alimentos é obrigatória')
        alimentos = _load_alimentos(data['alimentos'])

        prato = Prato(
            nome=data['nome'].strip(),
            preco=data['preco'],
            custo=data['custo'],
            data_lancamento=data_lancamento,
            alimentos=alimentos,
            ativo=True
        )
        db.session.add(prato)

        # The creator can always see and edit the dish afterwards
        db.session.add(Autorizacao(usuario_id=usuario.id, prato=prato))
        db.session.commit()

        current_app.logger.info(f"Prato {prato.id} criado pelo usuário {usuario.id}")
        return prato

    @staticmethod
    def update(prato_id, usuario, data):
        prato = PratoService.find_by_id(prato_id, usuario)

        _validate_fields(data)
        data_lancamento = None
        if 'data_lancamento' in data:
            data_lancamento = parse_datetime(data['data_lancamento'])
        alimentos = None
        if 'alimentos' in data:
            alimentos = _load_alimentos(data['alimentos'])

        # id and ativo are never taken from the payload
        if 'nome' in data:
            prato.nome = data['nome'].strip()
        if 'preco' in data:
            prato.preco = data['preco']
        if 'custo' in data:
            prato.custo = data['custo']
        if data_lancamento is not None:
            prato.data_lancamento = data_lancamento
        if alimentos is not None:
            prato.alimentos = alimentos

        db.session.commit()
        return prato

    @staticmethod
    def soft_delete(prato_id, usuario):
        prato = PratoService.find_by_id(prato_id, usuario)
        prato.ativo = False
        db.session.commit()
        current_app.logger.info(f"Prato {prato_id} desativado pelo usuário {usuario.id}")
        return prato
