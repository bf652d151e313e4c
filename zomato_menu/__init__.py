"""
Zomato daily menu scraper.

    import asyncio
    from zomato_menu import fetch_daily_menu

    menu = asyncio.run(fetch_daily_menu("praha/lokal-dlouha"))
    print(menu.format_table())
"""
from .config import Settings, settings
from .exceptions import (
    MenuError,
    FetchError,
    NetworkError,
    HttpStatusError,
    FetchTimeoutError,
    ParseError,
    SpeechError,
)
from .models import RestaurantRef, Item, Section, Menu
from .utils import HttpClient
from .services import (
    MenuParser,
    parse_menu,
    fetch_daily_menu,
    get_daily_menu,
    resolve_menu_url,
)

__all__ = [
    "Settings",
    "settings",
    "MenuError",
    "FetchError",
    "NetworkError",
    "HttpStatusError",
    "FetchTimeoutError",
    "ParseError",
    "SpeechError",
    "RestaurantRef",
    "Item",
    "Section",
    "Menu",
    "HttpClient",
    "MenuParser",
    "parse_menu",
    "fetch_daily_menu",
    "get_daily_menu",
    "resolve_menu_url",
]
