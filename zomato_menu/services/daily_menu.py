"""
Fetch-then-parse entry point.

    menu = await fetch_daily_menu(RestaurantRef(city="brno", restaurant="lokal"))
    menu = await fetch_daily_menu("brno/lokal")
    menu = await fetch_daily_menu("https://www.zomato.com/brno/lokal/daily-menu")
"""
import logging
from typing import Optional, Tuple, Union
from urllib.parse import urlparse

from zomato_menu.config import settings
from zomato_menu.models import Menu, RestaurantRef
from zomato_menu.services.menu_parser import menu_parser
from zomato_menu.utils.http_client import HttpClient

logger = logging.getLogger(__name__)

MenuTarget = Union[RestaurantRef, Tuple[str, str], str]


def _site_host() -> str:
    host = urlparse(settings.base_url).hostname or ""
    return host[4:] if host.startswith("www.") else host


def _is_site_url(url: str) -> bool:
    parsed = urlparse(url)
    host = parsed.hostname or ""
    site = _site_host()
    return parsed.scheme in ("http", "https") and (host == site or host.endswith("." + site))


def resolve_menu_url(target: MenuTarget) -> str:
    """
    Turn a menu target into the daily-menu page URL.

    Accepts a RestaurantRef, a (city, restaurant) pair, a "city/restaurant"
    slug or a full URL on the Zomato domain.

    Raises:
        ValueError: target is malformed or points off-site
    """
    if isinstance(target, RestaurantRef):
        return target.url

    if isinstance(target, tuple):
        if len(target) != 2:
            raise ValueError(f"Expected (city, restaurant), got {target!r}")
        city, restaurant = target
        return RestaurantRef(city=city, restaurant=restaurant).url

    if not isinstance(target, str):
        raise TypeError(f"Unsupported menu target: {type(target).__name__}")

    target = target.strip()
    if "://" in target:
        if not _is_site_url(target):
            raise ValueError(f"Not a {_site_host()} URL: {target}")
        return target

    parts = [part for part in target.split("/") if part]
    if len(parts) != 2:
        raise ValueError(f"Expected 'city/restaurant', got {target!r}")
    return RestaurantRef(city=parts[0], restaurant=parts[1]).url


async def fetch_daily_menu(target: MenuTarget, *, client: Optional[HttpClient] = None) -> Menu:
    """
    Fetch and parse a restaurant's daily menu.

    Args:
        target: Restaurant reference, "city/restaurant" slug or page URL
        client: Caller-owned HttpClient to reuse; left open afterwards.
            Without one, a private client is opened and closed for this call.

    Returns:
        Parsed Menu

    Raises:
        ValueError: invalid target
        NetworkError, HttpStatusError, FetchTimeoutError: fetch failed
        ParseError: page has no daily menu
    """
    url = resolve_menu_url(target)
    logger.info(f"Fetching daily menu: {url}")

    if client is not None:
        html = await client.get(url)
    else:
        async with HttpClient() as own_client:
            html = await own_client.get(url)

    menu = menu_parser.parse(html, url=url)
    logger.info(f"Daily menu for {url}: {len(menu.sections)} sections, {len(menu.items)} items")
    return menu


async def get_daily_menu(city: str, restaurant: str) -> Menu:
    """Fetch daily menu by the city and restaurant slugs from the Zomato URL."""
    return await fetch_daily_menu(RestaurantRef(city=city, restaurant=restaurant))
