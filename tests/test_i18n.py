"""Tests for translators"""

from lease_contracts.utils.i18n import get_translator


def test_portuguese_default():
    t = get_translator()
    assert t("single") == "solteiro(a)"
    assert t("married") == "casado(a)"


def test_english():
    t = get_translator("en-US")
    assert t("married") == "married"


def test_unknown_language_uses_portuguese():
    assert get_translator("fr")("single") == "solteiro(a)"


def test_missing_key_returns_key(caplog):
    assert get_translator("en")("no_such_key") == "no_such_key"
    assert "missing key 'no_such_key'" in caplog.text
