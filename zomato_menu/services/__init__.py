from .menu_parser import MenuParser, menu_parser, parse_menu
from .daily_menu import fetch_daily_menu, get_daily_menu, resolve_menu_url
from .speech import TtsEngine, Festival, Espeak, Pico2Wave, create_engine

__all__ = [
    "MenuParser",
    "menu_parser",
    "parse_menu",
    "fetch_daily_menu",
    "get_daily_menu",
    "resolve_menu_url",
    "TtsEngine",
    "Festival",
    "Espeak",
    "Pico2Wave",
    "create_engine",
]
