from consolidacao_despesas.domain.servicos.resumo_consolidado import COLUNAS_RESUMO, ResumoConsolidado


def escrever_consolidado(caminho, linhas):
    conteudo = "\n".join(["CNPJ;RazaoSocial;Trimestre;Ano;ValorDespesas"] + linhas) + "\n"
    caminho.write_bytes(conteudo.encode("iso-8859-1"))
    return str(caminho)


def test_resumo_agrupa_por_ano_e_trimestre(tmp_path):
    caminho = escrever_consolidado(tmp_path / "consolidado.csv", [
        "1000100;OPERADORA 1;1T;2025;1.10",
        "2000100;OPERADORA 2;1T;2025;2.20",
        "1000100;OPERADORA 1;4T;2024;10.00",
    ])

    resumo = ResumoConsolidado.gerar(caminho)

    assert list(resumo.columns) == COLUNAS_RESUMO
    registros = resumo.to_dict("records")
    assert registros == [
        {"Ano": "2024", "Trimestre": "4T", "qtd_registros": 1, "total_despesas": 10.0},
        {"Ano": "2025", "Trimestre": "1T", "qtd_registros": 2, "total_despesas": 3.3},
    ]


def test_resumo_consolidado_vazio(tmp_path):
    caminho = escrever_consolidado(tmp_path / "consolidado.csv", [])

    resumo = ResumoConsolidado.gerar(caminho)

    assert resumo.empty
    assert list(resumo.columns) == COLUNAS_RESUMO


def test_formatar_moeda_brasileira():
    assert ResumoConsolidado.formatar_moeda_brasileira(1234567.891) == "1.234.567,89"
