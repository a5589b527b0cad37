from cardapio import db


class Alimento(db.Model):
    __tablename__ = 'alimento'

    id = db.Column(db.Integer, primary_key=True)
    nome = db.Column(db.String(255), nullable=False)
    custo = db.Column(db.Float, nullable=False)
    peso = db.Column(db.Float, nullable=True)
    ativo = db.Column(db.Boolean, nullable=False, default=True)  # soft delete flag

    def to_dict(self):
        return {
            'id': self.id,
            'nome': self.nome,
            'custo': self.custo,
            'peso': self.peso,
            'ativo': self.ativo
        }

    def __repr__(self):
        return f'<Alimento {self.id} {self.nome!r} ativo={self.ativo}>'
