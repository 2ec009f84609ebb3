# Puerto de salida de resultados

from abc import ABC, abstractmethod

from core.domain.results import PDNResult


class ResultSink(ABC):
    """Destino de los resultados, uno a la vez"""

    @abstractmethod
    def emit(self, result: PDNResult) -> None:
        """Recibe un resultado. No debe bloquear indefinidamente"""
        pass
