"""Serviço de Domínio para filtragem e normalização das despesas.

Aplica a regra de negócio sobre cada linha do CSV da ANS: somente contas de
Eventos/Sinistros com valor positivo geram um registro consolidado.
"""

import re
from decimal import Context, Decimal, InvalidOperation, ROUND_HALF_UP
from typing import List, Optional

from consolidacao_despesas.domain.entidades import (
    MotivoDescarte,
    Periodo,
    RegistroDespesa,
    ResultadoFiltro,
)

CENTAVOS = Decimal('0.01')
PRECISAO_MINIMA = 28

# Formato pt-BR: sinal opcional, dígitos com "." de milhar e "," decimal
PADRAO_VALOR = re.compile(r'-?[0-9][0-9.]*(,[0-9]+)?', re.ASCII)


class FiltroDespesas:
    """Decide se uma linha qualifica e a converte em RegistroDespesa."""

    PALAVRAS_CHAVE = ("EVENTO", "SINISTRO")
    MIN_COLUNAS = 6

    # Posições das colunas no CSV da ANS
    COLUNA_REG_ANS = 1
    COLUNA_DESCRICAO = 3
    COLUNA_VALOR = 5

    # O arquivo da ANS não fornece Razão Social nem CNPJ completo
    SUFIXO_CNPJ = "000100"
    PREFIXO_RAZAO_SOCIAL = "OPERADORA "

    @staticmethod
    def normalizar_valor(valor: str) -> Optional[Decimal]:
        """Converte valor no formato brasileiro (1.234,56) para Decimal.

        Returns:
            Decimal normalizado ou None se o valor não for numérico
        """
        if valor is None:
            return None

        valor_limpo = valor.strip()
        if PADRAO_VALOR.fullmatch(valor_limpo) is None:
            return None

        return Decimal(valor_limpo.replace('.', '').replace(',', '.'))

    @staticmethod
    def arredondar_valor(valor: Decimal) -> Decimal:
        """Arredonda para centavos com precisão suficiente para o tamanho do valor.

        Raises:
            InvalidOperation: se o valor não puder ser representado em centavos
        """
        contexto = Context(prec=max(PRECISAO_MINIMA, valor.adjusted() + 3))
        return valor.quantize(CENTAVOS, rounding=ROUND_HALF_UP, context=contexto)

    @classmethod
    def formatar_valor(cls, valor: Decimal) -> str:
        """Formata o valor com duas casas decimais e ponto como separador (1234.56)."""
        return str(cls.arredondar_valor(valor))

    @classmethod
    def sintetizar_cnpj(cls, reg_ans: str) -> str:
        return f"{reg_ans}{cls.SUFIXO_CNPJ}"

    @classmethod
    def sintetizar_razao_social(cls, reg_ans: str) -> str:
        return f"{cls.PREFIXO_RAZAO_SOCIAL}{reg_ans}"

    @classmethod
    def contem_palavras_chave(cls, descricao: str) -> bool:
        descricao_maiuscula = descricao.upper()
        return any(palavra in descricao_maiuscula for palavra in cls.PALAVRAS_CHAVE)

    @classmethod
    def avaliar(cls, colunas: List[str], periodo: Periodo) -> ResultadoFiltro:
        """Avalia uma linha já separada em colunas.

        Args:
            colunas: Campos da linha (aspas já removidas)
            periodo: Período do arquivo de origem

        Returns:
            ResultadoFiltro com o registro qualificado ou o motivo do descarte
        """
        if len(colunas) < cls.MIN_COLUNAS:
            return ResultadoFiltro.descartar(MotivoDescarte.LINHA_INCOMPLETA)

        reg_ans = colunas[cls.COLUNA_REG_ANS]

        if not cls.contem_palavras_chave(colunas[cls.COLUNA_DESCRICAO]):
            return ResultadoFiltro.descartar(MotivoDescarte.CATEGORIA)

        valor = cls.normalizar_valor(colunas[cls.COLUNA_VALOR])
        if valor is None:
            return ResultadoFiltro.descartar(MotivoDescarte.VALOR_INVALIDO)

        # Estornos e ajustes (zerados ou negativos) ficam fora da consolidação
        if valor <= 0:
            return ResultadoFiltro.descartar(MotivoDescarte.VALOR_NAO_POSITIVO)

        try:
            valor = cls.arredondar_valor(valor)
        except InvalidOperation:
            return ResultadoFiltro.descartar(MotivoDescarte.VALOR_INVALIDO)

        return ResultadoFiltro.aceitar(RegistroDespesa(
            cnpj=cls.sintetizar_cnpj(reg_ans),
            razao_social=cls.sintetizar_razao_social(reg_ans),
            trimestre=periodo.trimestre,
            ano=periodo.ano,
            valor=valor,
        ))
