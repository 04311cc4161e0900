"""Caso de Uso: Consolidar Despesas.

Percorre os ZIPs do diretório de staging, um por vez, e grava no CSV
consolidado as despesas com Eventos/Sinistros de valor positivo:
1. Localizar arquivos
2. Extrair período do nome do arquivo
3. Ler linhas do CSV interno
4. Filtrar e normalizar
5. Gravar no consolidado
"""

import os
import zipfile
import zlib
from collections import Counter
from typing import Dict, Optional

from consolidacao_despesas.config import DIRETORIO_DOWNLOADS, ARQUIVO_CSV_FINAL, ENCODING_ANS
from consolidacao_despesas.domain.entidades import ReferenciaArquivo
from consolidacao_despesas.domain.excecoes import ErroFatal
from consolidacao_despesas.domain.servicos.extrator_periodo import extrair_periodo
from consolidacao_despesas.domain.servicos.filtro_despesas import FiltroDespesas
from consolidacao_despesas.infraestrutura.escritor_consolidado import EscritorConsolidado
from consolidacao_despesas.infraestrutura.leitor_demonstracoes import LeitorDemonstracoes
from consolidacao_despesas.infraestrutura.localizador_arquivos import localizar_arquivos
from consolidacao_despesas.infraestrutura.logger import get_logger

logger = get_logger('ConsolidarDespesas')

# Falhas de um ZIP (corrompido, truncado, criptografado ou com compressão
# não suportada) que fazem o arquivo ser pulado
ERROS_LEITURA_ARQUIVO = (
    zipfile.BadZipFile,
    zlib.error,
    EOFError,
    RuntimeError,
    NotImplementedError,
    OSError,
)


def preparar_diretorio(diretorio: str) -> None:
    """Cria o diretório de staging se não existir.

    Raises:
        ErroFatal: se o diretório não puder ser criado
    """
    try:
        os.makedirs(diretorio, exist_ok=True)
    except OSError as e:
        raise ErroFatal(f"Não foi possível criar o diretório {diretorio}: {e}") from e


class ConsolidarDespesas:
    """Orquestra a etapa de transformação (um arquivo por vez, uma linha por vez)."""

    def __init__(
        self,
        diretorio_downloads: str = None,
        arquivo_saida: str = None,
        encoding: str = ENCODING_ANS,
        leitor: Optional[LeitorDemonstracoes] = None,
    ):
        self.diretorio_downloads = diretorio_downloads or DIRETORIO_DOWNLOADS
        self.arquivo_saida = arquivo_saida or ARQUIVO_CSV_FINAL
        self.encoding = encoding
        self.leitor = leitor or LeitorDemonstracoes(encoding=encoding)

    def executar(self) -> Dict:
        """Executa a consolidação completa.

        Returns:
            Dict com contadores do processamento

        Raises:
            ErroFatal: se o diretório de staging ou o arquivo de saída não
                puderem ser preparados
        """
        logger.info("--- PROCESSANDO E CONSOLIDANDO DADOS ---")
        preparar_diretorio(self.diretorio_downloads)

        escritor = EscritorConsolidado(self.arquivo_saida, encoding=self.encoding)
        try:
            escritor.abrir()
        except OSError as e:
            raise ErroFatal(f"Não foi possível abrir o arquivo de saída {self.arquivo_saida}: {e}") from e

        arquivos_processados = 0
        arquivos_com_erro = 0
        descartes = Counter()

        with escritor:
            for caminho in localizar_arquivos(self.diretorio_downloads):
                referencia = ReferenciaArquivo(caminho=caminho, periodo=extrair_periodo(caminho))
                if self.processar_arquivo(referencia, escritor, descartes):
                    arquivos_processados += 1
                else:
                    arquivos_com_erro += 1

        logger.info(
            f"Consolidação concluída - {arquivos_processados} arquivo(s) processado(s), "
            f"{arquivos_com_erro} com erro, {escritor.registros_escritos} registro(s) gravado(s)"
        )

        return {
            "sucesso": True,
            "arquivos_processados": arquivos_processados,
            "arquivos_com_erro": arquivos_com_erro,
            "registros": escritor.registros_escritos,
            "descartes": {motivo.value: total for motivo, total in descartes.items()},
            "arquivo_saida": self.arquivo_saida,
        }

    def processar_arquivo(
        self,
        referencia: ReferenciaArquivo,
        escritor: EscritorConsolidado,
        descartes: Counter,
    ) -> bool:
        """Processa um único ZIP, gravando os registros qualificados.

        Linhas gravadas antes de uma falha no meio do arquivo permanecem no
        consolidado.

        Returns:
            True se o arquivo foi lido até o fim, False se foi pulado por erro
        """
        logger.info(f"Processando: {referencia.nome_base} (período {referencia.periodo})")
        gravados_antes = escritor.registros_escritos
        descartes_arquivo = Counter()

        try:
            for colunas in self.leitor.ler_linhas(referencia.caminho):
                resultado = FiltroDespesas.avaliar(colunas, referencia.periodo)
                if resultado.qualificado:
                    escritor.escrever(resultado.registro)
                else:
                    descartes_arquivo[resultado.motivo] += 1
        except ERROS_LEITURA_ARQUIVO as e:
            logger.error(f"Erro de leitura no arquivo {referencia.nome_base}: {e}")
            return False
        finally:
            escritor.descarregar()
            descartes.update(descartes_arquivo)

        logger.info(
            f"  {referencia.nome_base}: {escritor.registros_escritos - gravados_antes} registro(s) gravado(s), "
            f"{sum(descartes_arquivo.values())} linha(s) descartada(s)"
        )
        return True
