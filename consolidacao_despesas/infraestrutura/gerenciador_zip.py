"""
Serviço responsável pela compactação do resultado final.
"""
import os
import zipfile

from consolidacao_despesas.infraestrutura.logger import get_logger

logger = get_logger('GerenciadorZIP')


class GerenciadorZIP:
    """Gerencia operações de arquivos ZIP"""

    @staticmethod
    def compactar_arquivo(caminho_arquivo: str, caminho_zip: str) -> bool:
        """
        Cria um ZIP contendo apenas o arquivo informado, com o próprio nome.

        Args:
            caminho_arquivo: Caminho do arquivo a compactar
            caminho_zip: Caminho do ZIP a ser criado

        Returns:
            True se criado com sucesso, False caso contrário
        """
        try:
            with zipfile.ZipFile(caminho_zip, "w", zipfile.ZIP_DEFLATED) as zipf:
                zipf.write(caminho_arquivo, arcname=os.path.basename(caminho_arquivo))
        except OSError as e:
            logger.error(f"Erro ao criar ZIP {caminho_zip}: {e}")
            return False

        logger.info(f"ZIP criado com sucesso: {caminho_zip}")
        return True
