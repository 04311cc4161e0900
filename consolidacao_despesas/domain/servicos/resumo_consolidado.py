"""
Serviço responsável pelo resumo do CSV consolidado.
Agrupa os registros por ano e trimestre para conferência ao final da execução.
"""
import pandas as pd

from consolidacao_despesas.config import ENCODING_ANS

COLUNAS_RESUMO = ["Ano", "Trimestre", "qtd_registros", "total_despesas"]


class ResumoConsolidado:
    """Calcula totais do arquivo consolidado"""

    @staticmethod
    def gerar(caminho_csv: str, encoding: str = ENCODING_ANS) -> pd.DataFrame:
        """
        Lê o CSV consolidado e agrega quantidade e valor por período.

        Args:
            caminho_csv: Caminho do CSV consolidado
            encoding: Encoding do arquivo

        Returns:
            DataFrame com Ano, Trimestre, qtd_registros e total_despesas
        """
        df = pd.read_csv(caminho_csv, sep=";", encoding=encoding, dtype=str)
        if df.empty:
            return pd.DataFrame(columns=COLUNAS_RESUMO)

        df["VALOR_NUM"] = pd.to_numeric(df["ValorDespesas"], errors="coerce")

        resultado = df.groupby(["Ano", "Trimestre"], sort=True).agg(
            qtd_registros=("VALOR_NUM", "size"),
            total_despesas=("VALOR_NUM", "sum"),
        ).reset_index()
        resultado["total_despesas"] = resultado["total_despesas"].round(2)

        return resultado[COLUNAS_RESUMO]

    @staticmethod
    def formatar_moeda_brasileira(valor: float) -> str:
        """Formata valor como moeda brasileira: 1234567.89 -> 1.234.567,89"""
        return f"{valor:,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")
