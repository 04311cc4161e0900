import logging
import os

from consolidacao_despesas.infraestrutura.logger import NOME_LOGGER_RAIZ, LoggerConfig, get_logger, obter_arquivo_log_sessao


def test_get_logger_retorna_filho_do_logger_do_projeto():
    assert get_logger('Teste').name == f"{NOME_LOGGER_RAIZ}.Teste"


def test_configurar_cria_logs_de_aplicacao_e_sessao(tmp_path):
    diretorio = str(tmp_path / "logs")
    raiz = logging.getLogger(NOME_LOGGER_RAIZ)
    try:
        assert LoggerConfig.configurar(diretorio) == diretorio

        get_logger('Teste').info("mensagem de teste")
        for handler in raiz.handlers:
            handler.flush()

        with open(os.path.join(diretorio, "aplicacao.log"), encoding="utf-8") as f:
            assert "mensagem de teste" in f.read()
        assert os.path.exists(obter_arquivo_log_sessao())
    finally:
        for handler in raiz.handlers[:]:
            raiz.removeHandler(handler)
            handler.close()
        raiz.setLevel(logging.NOTSET)
