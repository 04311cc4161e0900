"""Escrita incremental do CSV consolidado."""

from typing import Optional, TextIO

from consolidacao_despesas.config import ENCODING_ANS
from consolidacao_despesas.domain.entidades import RegistroDespesa
from consolidacao_despesas.domain.servicos.filtro_despesas import FiltroDespesas

CABECALHO = "CNPJ;RazaoSocial;Trimestre;Ano;ValorDespesas"
SEPARADOR = ";"


class EscritorConsolidado:
    """Mantém o arquivo de saída aberto durante toda a execução.

    O cabeçalho é gravado uma única vez, na abertura. Os registros são
    apenas acrescentados, na ordem em que chegam.
    """

    def __init__(self, caminho: str, encoding: str = ENCODING_ANS):
        self.caminho = caminho
        self.encoding = encoding
        self.registros_escritos = 0
        self._arquivo: Optional[TextIO] = None

    def __enter__(self) -> 'EscritorConsolidado':
        self.abrir()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.fechar()

    def abrir(self) -> None:
        if self._arquivo is not None:
            return
        self._arquivo = open(self.caminho, 'w', encoding=self.encoding, newline='')
        self._arquivo.write(CABECALHO + "\n")

    def escrever(self, registro: RegistroDespesa) -> None:
        if self._arquivo is None:
            raise ValueError("Escritor consolidado não está aberto")

        linha = SEPARADOR.join([
            registro.cnpj,
            registro.razao_social,
            registro.trimestre,
            registro.ano,
            FiltroDespesas.formatar_valor(registro.valor),
        ])
        self._arquivo.write(linha + "\n")
        self.registros_escritos += 1

    def descarregar(self) -> None:
        if self._arquivo is not None:
            self._arquivo.flush()

    def fechar(self) -> None:
        if self._arquivo is not None:
            self._arquivo.close()
            self._arquivo = None
