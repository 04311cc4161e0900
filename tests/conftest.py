import os
import zipfile

import pytest

CABECALHO_ANS = '"DATA";"REG_ANS";"CD_CONTA_CONTABIL";"DESCRICAO";"VL_SALDO_INICIAL";"VL_SALDO_FINAL"'


def criar_zip_ans(caminho_zip, linhas, nome_csv="1T2025.csv", cabecalho=CABECALHO_ANS, encoding="iso-8859-1"):
    """Cria um ZIP no formato da ANS com um CSV interno."""
    conteudo = "\r\n".join([cabecalho] + list(linhas)) + "\r\n"
    with zipfile.ZipFile(caminho_zip, "w", zipfile.ZIP_DEFLATED) as zf:
        zf.writestr(nome_csv, conteudo.encode(encoding))
    return str(caminho_zip)


@pytest.fixture
def diretorio_staging(tmp_path):
    diretorio = tmp_path / "downloads"
    diretorio.mkdir()
    return diretorio


@pytest.fixture
def ler_saida():
    def _ler(caminho):
        with open(caminho, "r", encoding="iso-8859-1", newline="") as f:
            return f.read().split("\n")[:-1]
    return _ler


@pytest.fixture
def caminho_saida(tmp_path):
    return os.path.join(str(tmp_path), "consolidado.csv")
