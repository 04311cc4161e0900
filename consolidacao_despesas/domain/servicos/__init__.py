"""Inicializa módulo de serviços de domínio."""

from .extrator_periodo import extrair_periodo
from .filtro_despesas import FiltroDespesas
from .resumo_consolidado import ResumoConsolidado

__all__ = [
    'extrair_periodo',
    'FiltroDespesas',
    'ResumoConsolidado',
]
