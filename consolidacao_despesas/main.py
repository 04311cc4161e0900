import sys

from consolidacao_despesas.casos_uso.executar_etl import ExecutarETL
from consolidacao_despesas.domain.excecoes import ErroFatal
from consolidacao_despesas.infraestrutura.logger import LoggerConfig, get_logger, obter_arquivo_log_sessao

logger = get_logger('Main')


def principal() -> int:
    LoggerConfig.configurar()

    print("=" * 60)
    print("CONSOLIDAÇÃO DE DESPESAS COM EVENTOS/SINISTROS - ANS")
    print("=" * 60)

    try:
        resultado = ExecutarETL().executar()
    except ErroFatal as e:
        logger.critical(f"Erro fatal na execução: {e}")
        return 1

    print("\n" + "=" * 60)
    print("PROCESSO FINALIZADO COM SUCESSO")
    print(f"  Registros gravados: {resultado['registros']}")
    print(f"  Arquivo gerado: {resultado['arquivo_zip'] or resultado['arquivo_saida']}")
    print(f"  Log da sessão: {obter_arquivo_log_sessao()}")
    print("=" * 60)
    return 0


if __name__ == '__main__':
    sys.exit(principal())
