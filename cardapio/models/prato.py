from cardapio import db

# Join table for the dish <-> food relationship; it carries no attributes of its own.
prato_alimento = db.Table(
    'prato_alimento',
    db.Column('prato_id', db.Integer, db.ForeignKey('prato.id'), primary_key=True),
    db.Column('alimento_id', db.Integer, db.ForeignKey('alimento.id'), primary_key=True)
)


class Prato(db.Model):
    __tablename__ = 'prato'

    id = db.Column(db.Integer, primary_key=True)
    nome = db.Column(db.String(255), nullable=False)
    preco = db.Column(db.Float, nullable=False)
    data_lancamento = db.Column(db.DateTime, nullable=False)
    custo = db.Column(db.Float, nullable=False)
    ativo = db.Column(db.Boolean, nullable=False, default=True)  # soft delete flag

    # Relationships
    alimentos = db.relationship(
        'Alimento',
        secondary=prato_alimento,
        lazy='selectin',
        order_by='Alimento.id',
        backref=db.backref('pratos', lazy=True)
    )
    autorizacoes = db.relationship('Autorizacao', backref='prato', lazy=True, cascade='all, delete-orphan')

    def to_dict(self):
        return {
            'id': self.id,
            'nome': self.nome,
            'preco': self.preco,
            'data_lancamento': self.data_lancamento.isoformat(),
            'custo': self.custo,
            'ativo': self.ativo,
            'alimentos': [alimento.to_dict() for alimento in self.alimentos]
        }

    def __repr__(self):
        return f'<Prato {self.id} {self.nome!r} ativo={self.ativo}>'
