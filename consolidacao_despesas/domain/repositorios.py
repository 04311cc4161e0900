from abc import ABC, abstractmethod
from typing import List


class RepositorioAPI(ABC):
    @abstractmethod
    def listar_arquivos_do_ano(self, ano: str) -> List[str]:
        pass

    @abstractmethod
    def baixar_arquivo(self, url: str, destino: str) -> bool:
        pass

    @abstractmethod
    def fechar(self) -> None:
        pass
