import zipfile

from consolidacao_despesas.casos_uso.executar_etl import ExecutarETL
from consolidacao_despesas import main
from consolidacao_despesas.domain.excecoes import ErroFatal
from tests.conftest import criar_zip_ans

LINHA_EVENTOS = '"";"123456";"X";"DESPESAS COM EVENTOS/SINISTROS";"Y";"1.234,56"'


def test_executar_etl_sem_download_gera_csv_e_zip(tmp_path):
    diretorio = tmp_path / "downloads"
    diretorio.mkdir()
    criar_zip_ans(diretorio / "1T2025.zip", [LINHA_EVENTOS])
    arquivo_csv = tmp_path / "consolidado.csv"
    arquivo_zip = tmp_path / "consolidado_despesas.zip"

    resultado = ExecutarETL(
        diretorio_downloads=str(diretorio),
        arquivo_csv=str(arquivo_csv),
        arquivo_zip=str(arquivo_zip),
        baixar=False,
    ).executar()

    assert resultado["registros"] == 1
    assert resultado["arquivos_baixados"] == 0
    assert resultado["arquivo_zip"] == str(arquivo_zip)
    with zipfile.ZipFile(arquivo_zip) as zf:
        assert zf.read("consolidado.csv") == arquivo_csv.read_bytes()


def test_executar_etl_usa_repositorio_informado(tmp_path):
    class RepositorioSemArquivos:
        def listar_arquivos_do_ano(self, ano):
            return []

        def baixar_arquivo(self, url, destino):
            return False

        def fechar(self):
            pass

    resultado = ExecutarETL(
        diretorio_downloads=str(tmp_path / "downloads"),
        arquivo_csv=str(tmp_path / "consolidado.csv"),
        arquivo_zip=str(tmp_path / "consolidado_despesas.zip"),
        anos=["2025"],
        baixar=True,
        repositorio=RepositorioSemArquivos(),
    ).executar()

    assert resultado["arquivos_baixados"] == 0
    assert resultado["registros"] == 0


def test_principal_retorna_1_em_erro_fatal(monkeypatch, tmp_path):
    class ETLComFalha:
        def executar(self):
            raise ErroFatal("sem diretório")

    monkeypatch.setattr(main.LoggerConfig, "configurar", classmethod(lambda cls, log_dir=None: str(tmp_path)))
    monkeypatch.setattr(main, "ExecutarETL", ETLComFalha)

    assert main.principal() == 1
