# Abstracción de valores: reduce cada valor a su forma (letra/dígito/símbolo)

from typing import Dict, Iterable, List

from core.domain.results import SampleValue

LETTER = "A"
DIGIT = "9"
SYMBOL = "#"


def abstract(value: str) -> str:
    """
    Patrón estructural del valor, con la misma longitud.

    'Иванов И.И.' -> 'AAAAAA#A#A#', '+7 912' -> '#9#999'
    """
    pattern = []
    for char in value:
        if char.isalpha():
            pattern.append(LETTER)
        elif char.isdecimal():
            pattern.append(DIGIT)
        else:
            pattern.append(SYMBOL)
    return "".join(pattern)


def deduplicate(values: Iterable[str]) -> List[SampleValue]:
    """Un representante por patrón; gana el primero visto y se conserva el orden"""
    by_pattern: Dict[str, str] = {}
    for value in values:
        by_pattern.setdefault(abstract(value), value)
    return [SampleValue(value=value, pattern=pattern) for pattern, value in by_pattern.items()]
