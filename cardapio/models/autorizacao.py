"""Grants a LEITOR/EDITOR visibility (and, for editors, edit rights) on one dish.

Administrators never need a row here; a pair (usuario, prato) appears at most once.
"""
from datetime import datetime

from cardapio import db


class Autorizacao(db.Model):
    __tablename__ = 'autorizacao'

    id = db.Column(db.Integer, primary_key=True)
    usuario_id = db.Column(db.Integer, db.ForeignKey('usuario.id'), nullable=False, index=True)
    prato_id = db.Column(db.Integer, db.ForeignKey('prato.id'), nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    __table_args__ = (
        db.UniqueConstraint('usuario_id', 'prato_id', name='uq_autorizacao_usuario_prato'),
    )

    def to_dict(self, incluir_usuario=True):
        data = {
            'id': self.id,
            'usuario_id': self.usuario_id,
            'prato_id': self.prato_id,
            'prato': self.prato.to_dict()
        }
        if incluir_usuario:
            data['usuario'] = self.usuario.to_dict()
        return data

    def __repr__(self):
        return f'<Autorizacao usuario={self.usuario_id} prato={self.prato_id}>'
