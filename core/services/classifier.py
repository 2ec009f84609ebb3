# Clasificador de PDN: reglas por forma del valor y por palabras clave del encabezado

import re
from typing import List, Pattern, Tuple

EMAIL = "Email"
PHONE_RU = "Phone (RU)"
PASSPORT_RU = "Passport (RU)"
SNILS = "SNILS"
TAX_ID = "Individual Tax ID"
CREDIT_CARD = "Credit card"

FULL_NAME = "Full name"
PERSONAL_DATA = "Personal data"
ADDRESS = "Address"
PHONE = "Phone"
PASSPORT = "Passport"
SNILS_INN = "SNILS/INN"
BIRTH_DATE = "Birth date"
PERSONNEL_NUMBER = "Personnel number"
PHOTO = "Photo"

# Se evalúan en este orden sobre el texto ya normalizado (casefold)
VALUE_PATTERNS: Tuple[Tuple[str, Pattern], ...] = tuple(
    (category, re.compile(pattern))
    for category, pattern in (
        (EMAIL, r"[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}"),
        (
            PHONE_RU,
            r"(?<!\d)(?:\+7|8)[\s\-]*\(?\d{3}\)?[\s\-]*\d{3}[\s\-]?\d{2}[\s\-]?\d{2}(?!\d)",
        ),
        (
            PASSPORT_RU,
            r"(?<!\d)\d{2}\s?\d{2}\s?\d{6}(?!\d)"
            r"|(?:паспорт|серия|номер)\D*\d{4}\D*\d{6}",
        ),
        (SNILS, r"(?<!\d)\d{3}-?\d{3}-?\d{3}[-\s]?\d{2}(?!\d)"),
        (TAX_ID, r"(?<!\d)\d{12}(?!\d)"),
        (CREDIT_CARD, r"\d{4}[\s\-]?\d{4}[\s\-]?\d{4}[\s\-]?\d{4}"),
    )
)

HEADER_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    (
        FULL_NAME,
        (
            "фамил", "fami", "surn", "lastname", "last name", "имя", "name",
            "firstname", "first name", "отчест", "middlename", "middle name",
            "patronym", "фам", "fio", "фио", "fullname", "full name",
        ),
    ),
    (PERSONAL_DATA, ("сотруд", "руковод", "manag", "физи", "персон", "person", "empl")),
    (ADDRESS, ("адрес", "address", "addr", "location", "место")),
    (EMAIL, ("эп", "mail", "адресэп", "адрес эп", "email")),
    (PHONE, ("телефон", "phone", "tel", "мобильн", "mobile", "contactno")),
    (PASSPORT, ("паспорт", "passport", "серия", "series", "номер", "number")),
    (SNILS_INN, ("снилс", "snils", "инн", "taxid", "tax id")),
    (
        BIRTH_DATE,
        ("рожд", "birth", "dateofbirth", "birthdate", "датарожд", "дата рожд"),
    ),
    (PERSONNEL_NUMBER, ("таб", "табель")),
    (PHOTO, ("фото", "foto", "photo")),
)

STREET_TOKENS = ("ул.", "улица", "дом", "кв.", "квартира")
BIRTH_TOKENS = ("рожден", "birthday")


def _contains_any(text: str, tokens: Tuple[str, ...]) -> bool:
    return any(token in text for token in tokens)


def classify(text: str) -> List[str]:
    """
    Categorías PDN presentes en un nombre de columna o en un valor.

    Sin distinción de mayúsculas, determinista y total: una lista vacía
    significa que no hubo coincidencias. Las categorías no se repiten y
    siguen el orden de las tablas de reglas.
    """
    # upper() antes de casefold() iguala letras como la "ı" sin punto
    normalized = text.upper().casefold()
    found = {}

    for category, pattern in VALUE_PATTERNS:
        if pattern.search(normalized):
            found[category] = True

    for category, keywords in HEADER_KEYWORDS:
        if _contains_any(normalized, keywords):
            found[category] = True

    if _contains_any(normalized, STREET_TOKENS):
        found[ADDRESS] = True
    if _contains_any(normalized, BIRTH_TOKENS):
        found[BIRTH_DATE] = True

    return list(found)
