from cardapio.models.usuario import Cargo, Usuario
from cardapio.models.alimento import Alimento
from cardapio.models.prato import Prato, prato_alimento
from cardapio.models.autorizacao import Autorizacao

__all__ = ['Cargo', 'Usuario', 'Alimento', 'Prato', 'prato_alimento', 'Autorizacao']
