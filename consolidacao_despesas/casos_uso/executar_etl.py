"""Caso de Uso: Executar ETL.

Sequencia as três etapas do processamento:
1. Extração: download dos ZIPs trimestrais da ANS para a pasta de staging
2. Transformação: leitura, filtro e normalização no CSV consolidado
3. Carga: compactação do CSV final
"""

from typing import Dict, List, Optional

from consolidacao_despesas.config import (
    ANOS_BUSCA,
    ARQUIVO_CSV_FINAL,
    ARQUIVO_ZIP_FINAL,
    BAIXAR_ARQUIVOS,
    DIRETORIO_DOWNLOADS,
    ENCODING_ANS,
)
from consolidacao_despesas.casos_uso.baixar_arquivos import BaixarArquivosTrimestres
from consolidacao_despesas.casos_uso.consolidar_despesas import ConsolidarDespesas, preparar_diretorio
from consolidacao_despesas.domain.repositorios import RepositorioAPI
from consolidacao_despesas.domain.servicos.resumo_consolidado import ResumoConsolidado
from consolidacao_despesas.infraestrutura.gerenciador_zip import GerenciadorZIP
from consolidacao_despesas.infraestrutura.logger import get_logger

logger = get_logger('ExecutarETL')


class ExecutarETL:
    """Caso de uso principal: orquestra extração, transformação e carga."""

    def __init__(
        self,
        diretorio_downloads: str = None,
        arquivo_csv: str = None,
        arquivo_zip: str = None,
        anos: Optional[List[str]] = None,
        baixar: bool = BAIXAR_ARQUIVOS,
        repositorio: Optional[RepositorioAPI] = None,
        encoding: str = ENCODING_ANS,
    ):
        self.diretorio_downloads = diretorio_downloads or DIRETORIO_DOWNLOADS
        self.arquivo_csv = arquivo_csv or ARQUIVO_CSV_FINAL
        self.arquivo_zip = arquivo_zip or ARQUIVO_ZIP_FINAL
        self.anos = anos if anos is not None else ANOS_BUSCA
        self.baixar = baixar
        self.repositorio = repositorio
        self.encoding = encoding

    def executar(self) -> Dict:
        """Executa todas as etapas do ETL.

        Returns:
            Dict com resultado do processamento

        Raises:
            ErroFatal: se a pasta de staging ou o CSV de saída não puderem ser criados
        """
        logger.info("INICIANDO PROCESSAMENTO ETL (Extract, Transform, Load)")

        # 1. Extração
        preparar_diretorio(self.diretorio_downloads)
        arquivos_baixados = []
        if self.baixar:
            logger.info("--- 1. INICIANDO DOWNLOADS (Camada Raw) ---")
            baixar_arquivos = BaixarArquivosTrimestres(self.repositorio, self.diretorio_downloads)
            arquivos_baixados = baixar_arquivos.executar(self.anos)
            logger.info(f"Total de arquivos baixados: {len(arquivos_baixados)}")

        # 2. Transformação
        consolidar = ConsolidarDespesas(self.diretorio_downloads, self.arquivo_csv, encoding=self.encoding)
        resultado = consolidar.executar()

        # 3. Carga
        logger.info("--- 3. GERANDO ENTREGA FINAL ---")
        zip_gerado = GerenciadorZIP.compactar_arquivo(self.arquivo_csv, self.arquivo_zip)

        self._registrar_resumo()

        resultado.update({
            "arquivos_baixados": len(arquivos_baixados),
            "arquivo_zip": self.arquivo_zip if zip_gerado else None,
        })
        return resultado

    def _registrar_resumo(self) -> None:
        resumo = ResumoConsolidado.gerar(self.arquivo_csv, encoding=self.encoding)
        if resumo.empty:
            logger.info("Nenhum registro qualificado no consolidado")
            return

        for linha in resumo.itertuples(index=False):
            total = ResumoConsolidado.formatar_moeda_brasileira(linha.total_despesas)
            logger.info(f"  {linha.Trimestre}/{linha.Ano}: {linha.qtd_registros} registro(s), R$ {total}")
