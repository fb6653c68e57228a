"""
UI strings.  Finnish is the default; English is kept in sync key for key.

Lookup falls back to English, then to the key itself, so a missing
translation shows up on screen instead of raising.
"""

from __future__ import annotations

from .config import LANGUAGE

TRANSLATIONS: dict[str, dict[str, str]] = {
    "fi": {
        "title": "Spot-Hinnat",
        "subtitle": "Vuorokausimarkkinan tuntihinnat, sis. ALV 24 %",
        "pick_date": "Päivä",
        "fetch": "Hae",
        "refresh": "Päivitä",
        "cheapest": "Halvin tunti",
        "most_expensive": "Kallein tunti",
        "average": "Keskiarvo",
        "legend": "Hinnat",
        "no_data": "Ei tietoja tältä päivältä.",
        "loading": "Ladataan…",
        "load_failed": "Hintatietojen haku epäonnistui",
        "records_loaded": "{n} tuntia ladattu",
    },
    "en": {
        "title": "Spot Prices",
        "subtitle": "Day-ahead hourly prices, incl. 24 % VAT",
        "pick_date": "Day",
        "fetch": "Show",
        "refresh": "Refresh",
        "cheapest": "Cheapest hour",
        "most_expensive": "Most expensive hour",
        "average": "Average",
        "legend": "Prices",
        "no_data": "No data for this day.",
        "loading": "Loading…",
        "load_failed": "Failed to fetch prices",
        "records_loaded": "{n} hours loaded",
    },
}


def t(key: str, lang: str | None = None, **kwargs) -> str:
    lang = lang or LANGUAGE
    text = TRANSLATIONS.get(lang, {}).get(key) or TRANSLATIONS["en"].get(key, key)
    return text.format(**kwargs) if kwargs else text
