# Enmascaramiento de muestras para el reporte

from core.domain.results import NOT_AVAILABLE

MASK = "****"
VISIBLE_CHARS = 4


def mask_value(value: str) -> str:
    if value == NOT_AVAILABLE:
        return value
    if len(value) > 2 * VISIBLE_CHARS:
        return value[:VISIBLE_CHARS] + MASK + value[-VISIBLE_CHARS:]
    return MASK
