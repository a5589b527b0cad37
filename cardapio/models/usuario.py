import enum
from datetime import datetime

from werkzeug.security import generate_password_hash, check_password_hash

from cardapio import db


class Cargo(str, enum.Enum):
    LEITOR = 'LEITOR'
    EDITOR = 'EDITOR'
    ADMIN = 'ADMIN'


class Usuario(db.Model):
    __tablename__ = 'usuario'

    id = db.Column(db.Integer, primary_key=True)
    nome = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), unique=True, index=True, nullable=False)
    senha = db.Column(db.String(255), nullable=False)  # hash, never the raw password
    cargo = db.Column(db.Enum(Cargo), nullable=False, default=Cargo.LEITOR)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    autorizacoes = db.relationship('Autorizacao', backref='usuario', lazy=True, cascade='all, delete-orphan')

    def set_password(self, senha):
        self.senha = generate_password_hash(senha)

    def check_password(self, senha):
        return check_password_hash(self.senha, senha)

    @property
    def is_admin(self):
        return self.cargo == Cargo.ADMIN

    def to_dict(self):
        return {
            'id': self.id,
            'nome': self.nome,
            'email': self.email,
            'cargo': self.cargo.value,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }

    def __repr__(self):
        return f'<Usuario {self.email} cargo={self.cargo.value}>'
