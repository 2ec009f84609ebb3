# Puertos del núcleo - Interfaces para dependencias externas

from core.ports.database_port import DatabasePort
from core.ports.sink_port import ResultSink

__all__ = ["DatabasePort", "ResultSink"]
