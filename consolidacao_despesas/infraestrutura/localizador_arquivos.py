import os
from typing import Iterator

EXTENSAO_ZIP = '.zip'


def localizar_arquivos(diretorio: str, extensao: str = EXTENSAO_ZIP) -> Iterator[str]:
    """Enumera os arquivos do diretório de staging com a extensão informada.

    A listagem é feita no momento da chamada e ordenada por nome, para que a
    ordem de processamento (e portanto a do CSV final) seja reproduzível.

    Raises:
        FileNotFoundError: se o diretório não existir
    """
    if not os.path.isdir(diretorio):
        raise FileNotFoundError(f"Diretório não encontrado: {diretorio}")

    nomes = sorted(
        nome for nome in os.listdir(diretorio)
        if nome.lower().endswith(extensao) and os.path.isfile(os.path.join(diretorio, nome))
    )
    return (os.path.join(diretorio, nome) for nome in nomes)
