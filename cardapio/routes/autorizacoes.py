from flask import Blueprint, jsonify
from flask_jwt_extended import current_user, jwt_required

from cardapio.auth import cargo_required
from cardapio.models import Cargo
from cardapio.services import AutorizacaoService
from cardapio.utils import get_json_body

autorizacoes_bp = Blueprint('autorizacoes', __name__, url_prefix='/api/autorizacoes')

@autorizacoes_bp.route('/pratos-pelo-token', methods=['GET'])
@jwt_required()
def pratos_pelo_token():
    """Authorizations of the token's user, with dish and foods"""
    autorizacoes = AutorizacaoService.find_by_usuario(current_user.id, somente_ativos=True)
    return jsonify([a.to_dict(incluir_usuario=False) for a in autorizacoes]), 200

@autorizacoes_bp.route('', methods=['GET'])
@cargo_required(Cargo.ADMIN)
def list_autorizacoes():
    autorizacoes = AutorizacaoService.find_all()
    return jsonify([a.to_dict() for a in autorizacoes]), 200

@autorizacoes_bp.route('/<int:autorizacao_id>', methods=['GET'])
@cargo_required(Cargo.ADMIN)
def get_autorizacao(autorizacao_id):
    return jsonify(AutorizacaoService.find_by_id(autorizacao_id).to_dict()), 200

@autorizacoes_bp.route('/usuario/<int:usuario_id>', methods=['GET'])
@cargo_required(Cargo.ADMIN)
def get_autorizacoes_usuario(usuario_id):
    autorizacoes = AutorizacaoService.find_by_usuario(usuario_id)
    return jsonify([a.to_dict(incluir_usuario=False) for a in autorizacoes]), 200

@autorizacoes_bp.route('/verifica-acesso', methods=['POST'])
@cargo_required(Cargo.ADMIN)
def verificar_acesso():
    acesso = AutorizacaoService.verificar_acesso(get_json_body())
    return jsonify({'acesso': acesso}), 200

@autorizacoes_bp.route('/usuario/<int:usuario_id>/admin', methods=['GET'])
@cargo_required(Cargo.ADMIN)
def verificar_admin(usuario_id):
    return jsonify({'admin': AutorizacaoService.usuario_eh_admin(usuario_id)}), 200

@autorizacoes_bp.route('', methods=['POST'])
@cargo_required(Cargo.ADMIN)
def atribuir_autorizacoes():
    """Grant a user access to a list of dishes"""
    autorizacoes = AutorizacaoService.atribuir(get_json_body())
    return jsonify([a.to_dict(incluir_usuario=False) for a in autorizacoes]), 201

@autorizacoes_bp.route('/<int:autorizacao_id>', methods=['DELETE'])
@cargo_required(Cargo.ADMIN)
def revogar_autorizacao(autorizacao_id):
    AutorizacaoService.revogar(autorizacao_id)
    return '', 204
