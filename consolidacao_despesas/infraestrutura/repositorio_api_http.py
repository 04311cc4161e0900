import os
import re
from typing import List
from urllib.parse import urljoin

import requests

from consolidacao_despesas.config import API_BASE_URL, TIMEOUT_HTTP
from consolidacao_despesas.domain.repositorios import RepositorioAPI
from consolidacao_despesas.infraestrutura.logger import get_logger

logger = get_logger('RepositorioAPIHTTP')


class RepositorioAPIHTTP(RepositorioAPI):
    PADRAO_LINK = re.compile(r'href="([^"]+)"', re.IGNORECASE)

    def __init__(self, url_base: str = API_BASE_URL, timeout: int = TIMEOUT_HTTP):
        self.url_base = url_base if url_base.endswith('/') else f"{url_base}/"
        self.timeout = timeout
        self.sessao = requests.Session()

    def url_do_ano(self, ano: str) -> str:
        return f"{self.url_base}{ano}/"

    def listar_arquivos_do_ano(self, ano: str) -> List[str]:
        """Lista as URLs dos ZIPs trimestrais publicados para o ano.

        Apenas links .zip contendo "T" (indicativo de Trimestre, ex: 1T2025.zip)
        são considerados, evitando manuais e arquivos auxiliares.
        """
        url_ano = self.url_do_ano(ano)
        logger.info(f"Buscando arquivos em: {url_ano}")

        try:
            resposta = self.sessao.get(url_ano, timeout=self.timeout)
            resposta.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error(f"Falha ao acessar ano {ano}: {e}")
            return []

        urls = []
        for href in self.PADRAO_LINK.findall(resposta.text):
            nome = href.rsplit('/', 1)[-1]
            if nome.lower().endswith('.zip') and 'T' in nome.upper():
                # Alguns links no site são relativos
                url_completa = href if href.startswith('http') else urljoin(url_ano, href)
                if url_completa not in urls:
                    urls.append(url_completa)
        return urls

    def baixar_arquivo(self, url: str, destino: str) -> bool:
        try:
            resposta = self.sessao.get(url, timeout=self.timeout, stream=True)
            resposta.raise_for_status()

            with open(destino, 'wb') as f:
                for trecho in resposta.iter_content(chunk_size=8192):
                    f.write(trecho)

            return True
        except (requests.exceptions.RequestException, OSError) as e:
            logger.error(f"Falha ao baixar {url}: {e}")
            if os.path.exists(destino):
                os.remove(destino)
            return False

    def fechar(self) -> None:
        self.sessao.close()
