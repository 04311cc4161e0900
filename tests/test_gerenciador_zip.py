import zipfile

from consolidacao_despesas.infraestrutura.gerenciador_zip import GerenciadorZIP


def test_compactar_e_descompactar_preserva_bytes(tmp_path):
    caminho_csv = tmp_path / "consolidado.csv"
    conteudo = "CNPJ;RazaoSocial;Trimestre;Ano;ValorDespesas\n1000100;OPERADORA SÃO;1T;2025;1.00\n".encode("iso-8859-1")
    caminho_csv.write_bytes(conteudo)
    caminho_zip = tmp_path / "consolidado_despesas.zip"

    assert GerenciadorZIP.compactar_arquivo(str(caminho_csv), str(caminho_zip))

    with zipfile.ZipFile(caminho_zip) as zf:
        assert zf.namelist() == ["consolidado.csv"]
        assert zf.read("consolidado.csv") == conteudo


def test_compactar_arquivo_inexistente_retorna_false(tmp_path):
    assert not GerenciadorZIP.compactar_arquivo(str(tmp_path / "nao_existe.csv"), str(tmp_path / "saida.zip"))
