from flask import current_app

from cardapio import db
from cardapio.exceptions import NaoEncontrado, RequisicaoInvalida
from cardapio.models import Alimento
from cardapio.utils import is_valid_number


class AlimentoService:
    """CRUD for foods; deletion is soft and detaches the food from every dish"""

    @staticmethod
    def find_all():
        return Alimento.query.filter_by(ativo=True).order_by(Alimento.id).all()

    @staticmethod
    def find_by_id(alimento_id):
        alimento = Alimento.query.filter_by(id=alimento_id, ativo=True).first()
        if not alimento:
            raise NaoEncontrado('Alimento não encontrado')
        return alimento

    @staticmethod
    def create(data):
        nome = data.get('nome')
        if not isinstance(nome, str) or not nome.strip():
            raise RequisicaoInvalida('O nome do alimento é obrigatório e deve ser uma string')

        if not is_valid_number(data.get('custo')):
            raise RequisicaoInvalida('O custo é obrigatório e deve ser um número válido')

        peso = data.get('peso')
        if peso is not None and not is_valid_number(peso):
            raise RequisicaoInvalida('O peso, se fornecido, deve ser um número válido')

        alimento = Alimento(nome=nome.strip(), custo=data['custo'], peso=peso, ativo=True)
        db.session.add(alimento)
        db.session.commit()

        current_app.logger.info(f"Alimento {alimento.id} criado")
        return alimento

    @staticmethod
    def update(alimento_id, data):
        alimento = AlimentoService.find_by_id(alimento_id)

        # id and ativo are never taken from the payload
        if 'nome' in data:
            if not isinstance(data['nome'], str) or not data['nome'].strip():
                raise RequisicaoInvalida('O nome deve ser uma string')
            alimento.nome = data['nome'].strip()

        if 'custo' in data:
            if not is_valid_number(data['custo']):
                raise RequisicaoInvalida('O custo deve ser um número válido')
            alimento.custo = data['custo']

        if 'peso' in data:
            if data['peso'] is not None and not is_valid_number(data['peso']):
                raise RequisicaoInvalida('O peso deve ser um número válido')
            alimento.peso = data['peso']

        db.session.commit()
        return alimento

    @staticmethod
    def soft_delete(alimento_id):
        alimento = Alimento.query.filter_by(id=alimento_id, ativo=True).first()
        if not alimento:
            raise NaoEncontrado('O alimento informado não existe!')

        alimento.ativo = False

        # Remove the food from every dish that uses it
        pratos = list(alimento.pratos)
        alimento.pratos = []
        db.session.commit()

        current_app.logger.info(
            f"Alimento {alimento_id} desativado e removido de {len(pratos)} prato(s)"
        )
        return alimento
