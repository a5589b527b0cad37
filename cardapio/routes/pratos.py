from flask import Blueprint, jsonify
from flask_jwt_extended import current_user, jwt_required

from cardapio.auth import cargo_required
from cardapio.models import Cargo
from cardapio.services import PratoService
from cardapio.utils import get_json_body

pratos_bp = Blueprint('pratos', __name__, url_prefix='/api/pratos')

@pratos_bp.route('', methods=['GET'])
@jwt_required()
def list_pratos():
    """Get the active dishes visible to the current user"""
    pratos = PratoService.find_all(current_user)
    return jsonify([prato.to_dict() for prato in pratos]), 200

@pratos_bp.route('/<int:prato_id>', methods=['GET'])
@jwt_required()
def get_prato(prato_id):
    return jsonify(PratoService.find_by_id(prato_id, current_user).to_dict()), 200

@pratos_bp.route('', methods=['POST'])
@cargo_required(Cargo.EDITOR, Cargo.ADMIN)
def create_prato():
    prato = PratoService.create(get_json_body(), current_user)
    return jsonify(prato.to_dict()), 201

@pratos_bp.route('/<int:prato_id>', methods=['PUT'])
@cargo_required(Cargo.EDITOR, Cargo.ADMIN)
def update_prato(prato_id):
    prato = PratoService.update(prato_id, current_user, get_json_body())
    return jsonify(prato.to_dict()), 200

@pratos_bp.route('/<int:prato_id>', methods=['DELETE'])
@cargo_required(Cargo.EDITOR, Cargo.ADMIN)
def delete_prato(prato_id):
    PratoService.soft_delete(prato_id, current_user)
    return '', 204
