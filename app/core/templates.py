from datetime import datetime, date
from pathlib import Path

from fastapi.templating import Jinja2Templates
from jinja2 import pass_context

from app.core.config import settings
from app.core.i18n import LOCALE_COOKIE, SUPPORTED_LOCALES, resolve_locale, translate

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

def format_date_filter(value, format_str="%d/%m/%Y"):
    if value is None:
        return ""
    if isinstance(value, str):
        try:
            # Try parsing ISO format
            value = datetime.strptime(value, "%Y-%m-%d")
        except ValueError:
            return value
    return value.strftime(format_str)

templates.env.filters["format_date"] = format_date_filter

def format_datetime_filter(value, format_str="%d/%m/%Y %H:%M"):
    if value is None:
        return ""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return value
    return value.strftime(format_str)

templates.env.filters["format_datetime"] = format_datetime_filter

def format_time_filter(value):
    return format_datetime_filter(value, "%H:%M")

templates.env.filters["format_time"] = format_time_filter

def money_filter(value):
    amount = float(value or 0)
    # 1.234,56 style, as shown to Portuguese and Spanish speaking clients
    text = f"{abs(amount):,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")
    return f"-€{text}" if amount < 0 else f"€{text}"

templates.env.filters["money"] = money_filter

def iso_date_filter(value):
    if isinstance(value, (date, datetime)):
        return value.strftime("%Y-%m-%d")
    return value or ""

templates.env.filters["iso_date"] = iso_date_filter

@pass_context
def t(context, key, **kwargs):
    """Looks up copy for the locale of the current request."""
    request = context.get("request")
    locale = request.cookies.get(LOCALE_COOKIE) if request is not None else None
    return translate(key, locale, **kwargs)

@pass_context
def current_locale(context):
    request = context.get("request")
    return resolve_locale(request.cookies.get(LOCALE_COOKIE) if request is not None else None)

templates.env.globals["t"] = t
templates.env.globals["current_locale"] = current_locale
templates.env.globals["locales"] = SUPPORTED_LOCALES
templates.env.globals["settings"] = settings
