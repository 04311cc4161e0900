"""
Sistema de logging centralizado para o projeto
"""

import os
import logging
from datetime import datetime
from typing import Optional

from consolidacao_despesas.config import DIRETORIO_LOGS, DEBUG

NOME_LOGGER_RAIZ = 'consolidacao_despesas'


class LoggerConfig:
    _log_dir = None
    _arquivo_log_sessao = None

    @classmethod
    def configurar(cls, log_dir: Optional[str] = None) -> str:
        """Configura handlers de arquivo e console no logger raiz do projeto.

        Args:
            log_dir: Diretório para logs (usa DIRETORIO_LOGS se não fornecido)

        Returns:
            str: Caminho do diretório de logs configurado
        """
        cls._log_dir = log_dir or DIRETORIO_LOGS
        os.makedirs(cls._log_dir, exist_ok=True)

        logger = logging.getLogger(NOME_LOGGER_RAIZ)
        logger.setLevel(logging.DEBUG)

        # Limpar handlers existentes
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            handler.close()

        # Formatar mensagens com informações de arquivo e linha
        formato_detalhado = logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(filename)s:%(lineno)d | %(funcName)s() | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        # Handler para arquivo (arquivo consolidado de todas as execuções)
        arquivo_log = os.path.join(cls._log_dir, 'aplicacao.log')
        fh = logging.FileHandler(arquivo_log, encoding='utf-8')
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(formato_detalhado)
        logger.addHandler(fh)

        # Handler para arquivo de sessão (arquivo único por execução)
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        cls._arquivo_log_sessao = os.path.join(cls._log_dir, f'sessao_{timestamp}.log')
        fh_sessao = logging.FileHandler(cls._arquivo_log_sessao, encoding='utf-8')
        fh_sessao.setLevel(logging.DEBUG)
        fh_sessao.setFormatter(formato_detalhado)
        logger.addHandler(fh_sessao)

        # Handler para console (menos detalhado)
        ch = logging.StreamHandler()
        ch.setLevel(logging.DEBUG if DEBUG else logging.INFO)
        formatter_console = logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(message)s',
            datefmt='%H:%M:%S'
        )
        ch.setFormatter(formatter_console)
        logger.addHandler(ch)

        return cls._log_dir

    @classmethod
    def obter_arquivo_log_sessao(cls) -> Optional[str]:
        """Retorna o caminho do arquivo de log da sessão atual"""
        return cls._arquivo_log_sessao


def get_logger(nome: str = 'app') -> logging.Logger:
    """Função auxiliar para obter o logger de um componente.

    Os loggers são filhos do logger raiz do projeto, de modo que os handlers
    configurados em LoggerConfig.configurar() valem para todos eles.
    """
    return logging.getLogger(f'{NOME_LOGGER_RAIZ}.{nome}')


def obter_arquivo_log_sessao() -> Optional[str]:
    """Retorna o caminho do arquivo de log da sessão atual"""
    return LoggerConfig.obter_arquivo_log_sessao()
