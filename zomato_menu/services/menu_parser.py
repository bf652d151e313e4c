"""
Daily menu extraction from a Zomato restaurant page.

Zomato renders the page client-side from a JSON blob embedded in a script:

    window.__PRELOADED_STATE__ = JSON.parse("{\"pages\": ...}")

The daily menu lives at pages.restaurant.<id>.sections.SECTION_DAILY_MENU,
a list of day blocks ({timeHeading, dishes: [{name, displayPrice}]}).
"""
import json
import logging
import re
from typing import Any, Dict, List, Optional

from bs4 import BeautifulSoup

from zomato_menu.exceptions import ParseError
from zomato_menu.models import Item, Menu, Section
from zomato_menu.utils.text_utils import clean_text

logger = logging.getLogger(__name__)

STATE_MARKER = "window.__PRELOADED_STATE__"

# Body of the JS string literal passed to JSON.parse(...)
STATE_PATTERN = re.compile(
    r'window\.__PRELOADED_STATE__\s*=\s*JSON\.parse\(\s*"((?:[^"\\]|\\.)*)"\s*\)',
    re.DOTALL,
)

DAILY_MENU_KEY = "SECTION_DAILY_MENU"

# Escapes valid in JS string literals but not in JSON
JS_ESCAPE_PATTERN = re.compile(r"\\(?:x([0-9a-fA-F]{2})|(\r\n|.))", re.DOTALL)

JS_SIMPLE_ESCAPES = {"'": "'", "0": "\\u0000", "v": "\\u000b"}

# Backslash followed by one of these is a line continuation
JS_LINE_TERMINATORS = ("\n", "\r", "\r\n", "\u2028", "\u2029")


def _js_string_to_json(body: str) -> str:
    """Rewrite a JS string literal body as a quoted JSON string."""
    def replace(match: re.Match) -> str:
        if match.group(1):
            return f"\\u00{match.group(1)}"
        char = match.group(2)
        if char in JS_LINE_TERMINATORS:
            return ""
        if char in JS_SIMPLE_ESCAPES:
            return JS_SIMPLE_ESCAPES[char]
        return "\\" + char

    return '"' + JS_ESCAPE_PATTERN.sub(replace, body) + '"'


def _parse_error(reason: str) -> ParseError:
    logger.warning(f"Daily menu parse failed: {reason}")
    return ParseError(reason)


class MenuParser:
    """Stateless parser turning page HTML into a Menu."""

    def parse(self, html: str, url: Optional[str] = None) -> Menu:
        """
        Parse daily menu from raw page HTML.

        Args:
            html: Page body
            url: Page URL, kept on the resulting Menu for reference

        Returns:
            Menu with sections in page order (possibly none)

        Raises:
            ParseError: daily menu container not found on the page
        """
        state = self._load_state(html)
        days = self._find_daily_menu(state)

        sections = [self._parse_section(day) for day in days if isinstance(day, dict)]

        logger.debug(
            f"Parsed {len(sections)} sections, "
            f"{sum(len(s.items) for s in sections)} items"
        )
        return Menu(sections=sections, url=url)

    def _load_state(self, html: str) -> Dict[str, Any]:
        """Locate the preloaded-state script and decode its JSON."""
        soup = BeautifulSoup(html or "", "lxml")

        # Other scripts may mention the state without assigning the literal
        match = None
        for script in soup.find_all("script"):
            text = script.string or script.get_text()
            if text and STATE_MARKER in text:
                match = STATE_PATTERN.search(text)
                if match:
                    break

        if match is None:
            raise _parse_error("preloaded state script not found")

        try:
            # Literal -> JSON text -> data; control chars from \0, \v stay in strings
            payload = json.loads(_js_string_to_json(match.group(1)))
            state = json.loads(payload, strict=False)
        except json.JSONDecodeError as e:
            raise _parse_error(f"preloaded state is not valid JSON ({e.msg})") from e

        if not isinstance(state, dict):
            raise _parse_error("preloaded state is not an object")
        return state

    def _find_daily_menu(self, state: Dict[str, Any]) -> List[Any]:
        """Walk pages.restaurant.<first>.sections.SECTION_DAILY_MENU."""
        pages = state.get("pages")
        restaurants = pages.get("restaurant") if isinstance(pages, dict) else None
        if not isinstance(restaurants, dict) or not restaurants:
            raise _parse_error("missing restaurant")

        restaurant = next(iter(restaurants.values()))
        sections = restaurant.get("sections") if isinstance(restaurant, dict) else None
        if not isinstance(sections, dict) or DAILY_MENU_KEY not in sections:
            raise _parse_error("daily menu section not found")

        days = sections[DAILY_MENU_KEY]
        if not isinstance(days, list):
            raise _parse_error("daily menu section is not a list")
        return days

    def _parse_section(self, day: Dict[str, Any]) -> Section:
        dishes = day.get("dishes")
        if not isinstance(dishes, list):
            dishes = []

        items = []
        for dish in dishes:
            item = self._parse_item(dish)
            if item is not None:
                items.append(item)

        return Section(name=clean_text(day.get("timeHeading")), items=items)

    def _parse_item(self, dish: Any) -> Optional[Item]:
        """Build an Item; dishes without a name are skipped."""
        if not isinstance(dish, dict):
            return None

        name = clean_text(dish.get("name"))
        if not name:
            logger.debug(f"Skipping dish without name: {dish!r}")
            return None

        return Item(
            name=name,
            description=clean_text(dish.get("desc")),
            price=clean_text(dish.get("displayPrice")),
        )


def parse_menu(html: str, url: Optional[str] = None) -> Menu:
    """Parse daily menu HTML with the shared parser."""
    return menu_parser.parse(html, url)


# Global parser instance
menu_parser = MenuParser()
