"""Leitura em streaming do CSV de demonstrações contábeis contido em cada ZIP da ANS."""

import io
import zipfile
from typing import Iterator, List, Optional

from consolidacao_despesas.config import ENCODING_ANS
from consolidacao_despesas.domain.servicos.filtro_despesas import FiltroDespesas
from consolidacao_despesas.infraestrutura.logger import get_logger

logger = get_logger('LeitorDemonstracoes')


class LeitorDemonstracoes:
    """Localiza o CSV interno de um ZIP e produz suas linhas já separadas em colunas."""

    EXTENSAO_TABELA = '.csv'
    SEPARADOR = ';'
    MIN_COLUNAS = FiltroDespesas.MIN_COLUNAS

    def __init__(self, encoding: str = ENCODING_ANS):
        self.encoding = encoding

    @classmethod
    def localizar_tabela(cls, zip_ref: zipfile.ZipFile) -> Optional[str]:
        """Retorna o nome da primeira entrada CSV do ZIP ou None."""
        for nome in zip_ref.namelist():
            if nome.lower().endswith(cls.EXTENSAO_TABELA):
                return nome
        return None

    @classmethod
    def separar_colunas(cls, linha: str) -> Optional[List[str]]:
        """Remove as aspas e separa a linha por ';'.

        Returns:
            Lista de colunas ou None se a linha tiver menos colunas que o mínimo
        """
        colunas = linha.rstrip('\r\n').replace('"', '').split(cls.SEPARADOR)
        if len(colunas) < cls.MIN_COLUNAS:
            return None
        return colunas

    def ler_linhas(self, caminho_zip: str) -> Iterator[List[str]]:
        """Percorre o CSV interno linha a linha, sem extrair o ZIP para o disco.

        O cabeçalho original é sempre descartado. ZIPs corrompidos
        (zipfile.BadZipFile) e erros de I/O são propagados para quem consome.
        """
        with zipfile.ZipFile(caminho_zip, 'r') as zip_ref:
            nome_tabela = self.localizar_tabela(zip_ref)
            if nome_tabela is None:
                logger.warning(f"Nenhum CSV encontrado dentro de {caminho_zip}")
                return

            logger.debug(f"Lendo {nome_tabela} de {caminho_zip}")
            with zip_ref.open(nome_tabela) as binario:
                with io.TextIOWrapper(binario, encoding=self.encoding) as texto:
                    next(texto, None)  # Pula cabeçalho original

                    for linha in texto:
                        colunas = self.separar_colunas(linha)
                        if colunas is not None:
                            yield colunas
