# Tests del clasificador de PDN
# Ejecutar con: pytest tests/test_classifier.py -v

import pytest


# =============================================================================
# REGLAS POR FORMA DEL VALOR
# =============================================================================

@pytest.mark.unit
class TestValueRules:
    """Tests para las expresiones sobre valores"""

    def test_email(self):
        from core.services.classifier import classify, EMAIL
        assert classify("ivanov@mail.ru") == [EMAIL]

    def test_phone_with_parentheses(self):
        from core.services.classifier import classify, PHONE_RU
        assert classify("+7 (912) 345-67-89") == [PHONE_RU]

    def test_phone_starting_with_eight(self):
        from core.services.classifier import classify, PHONE_RU
        assert PHONE_RU in classify("8-912-345-67-89")

    def test_passport(self):
        from core.services.classifier import classify, PASSPORT_RU
        assert classify("4510 123456") == [PASSPORT_RU]

    def test_snils(self):
        from core.services.classifier import classify, SNILS
        assert classify("112-233-445 95") == [SNILS]

    def test_inn(self):
        from core.services.classifier import classify, TAX_ID
        assert classify("500100732259") == [TAX_ID]

    def test_credit_card(self):
        from core.services.classifier import classify, CREDIT_CARD
        assert classify("4111 1111 1111 1111") == [CREDIT_CARD]

    def test_street_address(self):
        from core.services.classifier import classify, ADDRESS
        assert classify("ул. Ленина, дом 5") == [ADDRESS]

    def test_no_match(self):
        from core.services.classifier import classify
        assert classify("ok") == []
        assert classify("42") == []
        assert classify("") == []


# =============================================================================
# REGLAS POR PALABRAS CLAVE
# =============================================================================

@pytest.mark.unit
class TestHeaderRules:
    """Tests para las palabras clave de encabezados"""

    def test_email_address_has_both_categories(self):
        from core.services.classifier import classify, ADDRESS, EMAIL
        assert classify("email_address") == [ADDRESS, EMAIL]

    def test_phone(self):
        from core.services.classifier import classify, PHONE
        assert classify("phone") == [PHONE]

    def test_full_name(self):
        from core.services.classifier import classify, FULL_NAME
        assert classify("fio") == [FULL_NAME]
        assert FULL_NAME in classify("Фамилия")

    def test_passport(self):
        from core.services.classifier import classify, PASSPORT
        assert classify("passport_series") == [PASSPORT]

    def test_snils_inn(self):
        from core.services.classifier import classify, SNILS_INN
        assert classify("snils") == [SNILS_INN]

    def test_birth_date(self):
        from core.services.classifier import classify, BIRTH_DATE
        assert classify("дата рождения") == [BIRTH_DATE]

    def test_photo(self):
        from core.services.classifier import classify, PHOTO
        assert classify("photo") == [PHOTO]

    def test_personnel_number(self):
        from core.services.classifier import classify, PERSONNEL_NUMBER
        assert PERSONNEL_NUMBER in classify("табельный_номер")

    def test_plain_column_has_no_category(self):
        from core.services.classifier import classify
        assert classify("col1") == []
        assert classify("id") == []


@pytest.mark.unit
class TestClassifierProperties:
    """Propiedades generales"""

    def test_case_insensitive(self):
        from core.services.classifier import classify
        for text in ["email_address", "Ivanov@Mail.RU", "ФИО", "Phone", "ул. ленина"]:
            assert classify(text) == classify(text.upper())
            assert classify(text) == classify(text.lower())

    def test_dotless_i_matches_upper_case(self):
        from core.services.classifier import classify, EMAIL, FULL_NAME
        assert classify("fıo") == classify("FIO") == [FULL_NAME]
        assert classify("maıl") == classify("MAIL") == [EMAIL]
        for text in ["fıo", "maıl", "ımya"]:
            assert classify(text) == classify(text.upper())

    def test_no_duplicates(self):
        from core.services.classifier import classify
        # "mail" y la regex de email apuntan a la misma categoría
        result = classify("ivanov@mail.ru email")
        assert len(result) == len(set(result))

    def test_deterministic(self):
        from core.services.classifier import classify
        assert classify("fio phone адрес") == classify("fio phone адрес")
