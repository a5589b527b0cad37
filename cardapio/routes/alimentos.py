from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from cardapio.auth import cargo_required
from cardapio.models import Cargo
from cardapio.services import AlimentoService
from cardapio.utils import get_json_body

alimentos_bp = Blueprint('alimentos', __name__, url_prefix='/api/alimentos')

@alimentos_bp.route('', methods=['GET'])
@jwt_required()
def list_alimentos():
    """Get all active foods"""
    alimentos = AlimentoService.find_all()
    return jsonify([alimento.to_dict() for alimento in alimentos]), 200

@alimentos_bp.route('/<int:alimento_id>', methods=['GET'])
@jwt_required()
def get_alimento(alimento_id):
    return jsonify(AlimentoService.find_by_id(alimento_id).to_dict()), 200

@alimentos_bp.route('', methods=['POST'])
@cargo_required(Cargo.EDITOR, Cargo.ADMIN)
def create_alimento():
    alimento = AlimentoService.create(get_json_body())
    return jsonify(alimento.to_dict()), 201

@alimentos_bp.route('/<int:alimento_id>', methods=['PUT'])
@cargo_required(Cargo.EDITOR, Cargo.ADMIN)
def update_alimento(alimento_id):
    alimento = AlimentoService.update(alimento_id, get_json_body())
    return jsonify(alimento.to_dict()), 200

@alimentos_bp.route('/<int:alimento_id>', methods=['DELETE'])
@cargo_required(Cargo.EDITOR, Cargo.ADMIN)
def delete_alimento(alimento_id):
    """Soft delete a food and detach it from every dish"""
    AlimentoService.soft_delete(alimento_id)
    return '', 204
