from decimal import Decimal

import pytest

from consolidacao_despesas.domain.entidades import RegistroDespesa
from consolidacao_despesas.infraestrutura.escritor_consolidado import CABECALHO, EscritorConsolidado


def registro(reg_ans="123456", valor="1234.56", trimestre="1T", ano="2025"):
    return RegistroDespesa(
        cnpj=f"{reg_ans}000100",
        razao_social=f"OPERADORA {reg_ans}",
        trimestre=trimestre,
        ano=ano,
        valor=Decimal(valor),
    )


def test_cabecalho_gravado_mesmo_sem_registros(caminho_saida, ler_saida):
    with EscritorConsolidado(caminho_saida):
        pass

    assert ler_saida(caminho_saida) == [CABECALHO]


def test_registros_gravados_na_ordem(caminho_saida, ler_saida):
    with EscritorConsolidado(caminho_saida) as escritor:
        escritor.escrever(registro())
        escritor.escrever(registro(reg_ans="1", valor="10", trimestre="2T", ano="2024"))

    assert ler_saida(caminho_saida) == [
        "CNPJ;RazaoSocial;Trimestre;Ano;ValorDespesas",
        "123456000100;OPERADORA 123456;1T;2025;1234.56",
        "1000100;OPERADORA 1;2T;2024;10.00",
    ]
    assert escritor.registros_escritos == 2


def test_abrir_duas_vezes_nao_repete_cabecalho(caminho_saida, ler_saida):
    escritor = EscritorConsolidado(caminho_saida)
    escritor.abrir()
    with escritor:
        escritor.escrever(registro())

    assert ler_saida(caminho_saida).count(CABECALHO) == 1


def test_escrever_sem_abrir_falha(caminho_saida):
    with pytest.raises(ValueError):
        EscritorConsolidado(caminho_saida).escrever(registro())


def test_saida_em_iso_8859_1(caminho_saida):
    with EscritorConsolidado(caminho_saida) as escritor:
        escritor.escrever(registro(reg_ans="SÃO"))

    with open(caminho_saida, "rb") as f:
        assert "OPERADORA SÃO".encode("iso-8859-1") in f.read()
