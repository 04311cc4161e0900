import os
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Periodo:
    trimestre: str
    ano: str

    def __str__(self) -> str:
        return f"{self.ano}/{self.trimestre}"


PERIODO_DESCONHECIDO = Periodo(trimestre="0T", ano="0000")


@dataclass(frozen=True)
class ReferenciaArquivo:
    caminho: str
    periodo: Periodo

    @property
    def nome_base(self) -> str:
        return os.path.basename(self.caminho)


@dataclass(frozen=True)
class RegistroDespesa:
    cnpj: str
    razao_social: str
    trimestre: str
    ano: str
    valor: Decimal


class MotivoDescarte(Enum):
    LINHA_INCOMPLETA = "linha_incompleta"
    CATEGORIA = "categoria"
    VALOR_INVALIDO = "valor_invalido"
    VALOR_NAO_POSITIVO = "valor_nao_positivo"


@dataclass(frozen=True)
class ResultadoFiltro:
    """Decisão do filtro para uma linha: registro qualificado ou motivo do descarte."""
    registro: Optional[RegistroDespesa] = None
    motivo: Optional[MotivoDescarte] = None

    @property
    def qualificado(self) -> bool:
        return self.registro is not None

    @classmethod
    def aceitar(cls, registro: RegistroDespesa) -> 'ResultadoFiltro':
        return cls(registro=registro)

    @classmethod
    def descartar(cls, motivo: MotivoDescarte) -> 'ResultadoFiltro':
        return cls(motivo=motivo)
