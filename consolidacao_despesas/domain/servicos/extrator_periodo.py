"""Serviço de Domínio para extração do período (trimestre/ano) a partir do nome do arquivo.

Os arquivos publicados pela ANS seguem o padrão ``<trimestre>T<ano>.zip``
(ex: ``1T2025.zip``). Nomes fora do padrão recebem o período sentinela
``0T``/``0000`` e o processamento continua.
"""

import os
import re

from consolidacao_despesas.domain.entidades import Periodo, PERIODO_DESCONHECIDO
from consolidacao_despesas.infraestrutura.logger import get_logger

logger = get_logger('ExtratorPeriodo')

EXTENSAO_ARQUIVO = '.zip'
PADRAO_PERIODO = re.compile(r'(\d+)t(\d+)', re.ASCII)


def extrair_periodo(nome_arquivo: str) -> Periodo:
    """Deriva o período de um arquivo a partir do seu nome.

    Args:
        nome_arquivo: Nome (ou caminho) do arquivo, sem distinção de maiúsculas

    Returns:
        Periodo com trimestre (ex: "1T") e ano (ex: "2025"), ou o período
        sentinela quando o nome não segue o padrão <dígitos>T<dígitos>
    """
    limpo = os.path.basename(nome_arquivo).lower()
    if limpo.endswith(EXTENSAO_ARQUIVO):
        limpo = limpo[:-len(EXTENSAO_ARQUIVO)]

    match = PADRAO_PERIODO.fullmatch(limpo)
    if match is None:
        logger.warning(f"Nome de arquivo fora do padrão esperado: {nome_arquivo}")
        return PERIODO_DESCONHECIDO

    return Periodo(trimestre=f"{match.group(1)}T", ano=match.group(2))
