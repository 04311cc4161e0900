import os
from typing import List, Optional
from urllib.parse import unquote, urlparse

from consolidacao_despesas.config import DIRETORIO_DOWNLOADS, LIMITE_DOWNLOADS
from consolidacao_despesas.domain.repositorios import RepositorioAPI
from consolidacao_despesas.infraestrutura.logger import get_logger
from consolidacao_despesas.infraestrutura.repositorio_api_http import RepositorioAPIHTTP

logger = get_logger('BaixarArquivosTrimestres')


class BaixarArquivosTrimestres:
    def __init__(
        self,
        repositorio: Optional[RepositorioAPI] = None,
        diretorio_destino: str = None,
        limite: int = LIMITE_DOWNLOADS,
    ):
        if repositorio is None:
            self.repositorio_api_http = RepositorioAPIHTTP()
            self._repositorio_interno = True
        else:
            self.repositorio_api_http = repositorio
            self._repositorio_interno = False
        self.diretorio_destino = diretorio_destino or DIRETORIO_DOWNLOADS
        self.limite = limite

    @staticmethod
    def nome_arquivo(url: str) -> str:
        return os.path.basename(unquote(urlparse(url).path))

    def executar(self, anos: List[str]) -> List[str]:
        """Baixa os ZIPs trimestrais dos anos informados para o diretório de staging.

        Arquivos já presentes no diretório são mantidos (cache). O download
        para após `limite` arquivos novos.

        Returns:
            Lista com os caminhos dos arquivos baixados nesta execução
        """
        arquivos_baixados = []

        try:
            for ano in anos:
                for url in self.repositorio_api_http.listar_arquivos_do_ano(ano):
                    nome = self.nome_arquivo(url)
                    destino = os.path.join(self.diretorio_destino, nome)

                    if os.path.exists(destino):
                        logger.info(f"Arquivo já existe (Cache): {nome}")
                        continue

                    logger.info(f"Baixando {nome}...")
                    if self.repositorio_api_http.baixar_arquivo(url, destino):
                        arquivos_baixados.append(destino)

                    # Limite de segurança: apenas os últimos disponíveis
                    if len(arquivos_baixados) >= self.limite:
                        return arquivos_baixados
        finally:
            if self._repositorio_interno:
                self.repositorio_api_http.fechar()

        return arquivos_baixados
