from flask import Blueprint, jsonify
from flask_jwt_extended import current_user, jwt_required

from cardapio.auth import cargo_required
from cardapio.models import Cargo
from cardapio.services import UsuarioService
from cardapio.utils import get_json_body

usuarios_bp = Blueprint('usuarios', __name__, url_prefix='/api/usuarios')

@usuarios_bp.route('/login', methods=['POST'])
def login():
    """Login user and return JWT token"""
    data = get_json_body()
    token, usuario = UsuarioService.login(data.get('email'), data.get('senha'))
    return jsonify({'token': token, 'usuario': usuario.to_dict()}), 200

@usuarios_bp.route('/me', methods=['GET'])
@jwt_required()
def get_me():
    """Get current user profile"""
    return jsonify(current_user.to_dict()), 200

@usuarios_bp.route('', methods=['GET'])
@cargo_required(Cargo.ADMIN)
def list_usuarios():
    usuarios = UsuarioService.find_all()
    return jsonify([usuario.to_dict() for usuario in usuarios]), 200

@usuarios_bp.route('/<int:usuario_id>', methods=['GET'])
@cargo_required(Cargo.ADMIN)
def get_usuario(usuario_id):
    return jsonify(UsuarioService.find_by_id(usuario_id).to_dict()), 200

@usuarios_bp.route('', methods=['POST'])
@cargo_required(Cargo.ADMIN)
def create_usuario():
    """Register a new user"""
    usuario = UsuarioService.create(get_json_body())
    return jsonify(usuario.to_dict()), 201

@usuarios_bp.route('/<int:usuario_id>', methods=['PUT'])
@cargo_required(Cargo.ADMIN)
def update_usuario(usuario_id):
    usuario = UsuarioService.update(usuario_id, get_json_body())
    return jsonify(usuario.to_dict()), 200

@usuarios_bp.route('/<int:usuario_id>', methods=['DELETE'])
@cargo_required(Cargo.ADMIN)
def delete_usuario(usuario_id):
    UsuarioService.delete(usuario_id)
    return '', 204
