from cardapio.services.usuario_service import UsuarioService
from cardapio.services.alimento_service import AlimentoService
from cardapio.services.autorizacao_service import AutorizacaoService
from cardapio.services.prato_service import PratoService

__all__ = ['UsuarioService', 'AlimentoService', 'AutorizacaoService', 'PratoService']
