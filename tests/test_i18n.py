import pytest

from app.core.i18n import STRINGS, SUPPORTED_LOCALES, resolve_locale, translate
from app.core.templates import format_date_filter, money_filter

from conftest import login


@pytest.mark.parametrize("locale", ["pt", "es"])
def test_every_locale_has_every_key(locale):
    assert set(STRINGS[locale]) == set(STRINGS["en"])


def test_supported_locales():
    assert set(SUPPORTED_LOCALES) == {"en", "pt", "es"}


def test_unknown_locale_falls_back_to_default():
    assert resolve_locale("fr") == "pt"
    assert resolve_locale(None) == "pt"
    assert translate("auth.sign_in", "fr") == "Entrar"


def test_placeholders_are_filled():
    assert translate("worker.greeting", "en", name="Ana") == "Hello, Ana!"
    assert translate("client.days_late", "es", days=3) == "Atrasado 3 días"


def test_missing_key_returns_key():
    assert translate("does.not.exist", "en") == "does.not.exist"


def test_money_filter():
    assert money_filter(1234.5) == "€1.234,50"
    assert money_filter(-200) == "-€200,00"
    assert money_filter(None) == "€0,00"


def test_format_date_filter():
    assert format_date_filter("2024-03-01") == "01/03/2024"
    assert format_date_filter(None) == ""


class TestLocaleSwitch:
    def test_locale_cookie_changes_page_language(self, client):
        assert "Entrar" in client.get("/").text

        response = client.get("/locale/en", follow_redirects=False)
        assert response.status_code == 303
        assert response.cookies.get("locale") == "en"

        assert "Sign in" in client.get("/").text

    def test_unsupported_locale_is_ignored(self, client):
        response = client.get("/locale/xx", follow_redirects=False)
        assert "locale" not in response.cookies

    def test_toast_is_translated_for_reader(self, client, worker):
        login(client, worker)
        client.cookies.set("locale", "es")
        client.cookies.set("toast_message", "worker.checked_out")
        page = client.get("/worker/")
        assert "¡Jornada finalizada! ¡Hasta mañana!" in page.text
