import logging

import pytest

from zomato_menu.exceptions import ParseError
from zomato_menu.models import Item, Menu, Section
from zomato_menu.services.menu_parser import MenuParser, parse_menu


def _page(literal_body: str) -> str:
    return (
        "<html><body><script>"
        f'window.__PRELOADED_STATE__ = JSON.parse("{literal_body}")'
        "</script></body></html>"
    )


@pytest.fixture
def parser() -> MenuParser:
    return MenuParser()


class TestMenuParser:
    def test_sections_in_page_order(self, parser: MenuParser, daily_menu_html: str) -> None:
        menu = parser.parse(daily_menu_html)

        assert [s.name for s in menu.sections] == ["Monday 12/10", "Tuesday 13/10", None]

    def test_item_fields(self, parser: MenuParser, daily_menu_html: str) -> None:
        monday = parser.parse(daily_menu_html).sections[0]

        assert monday.items[0] == Item(name="Tomato soup", description="with basil", price="45 Kč")
        assert monday.items[1] == Item(name="Beef goulash", price="149 Kč")

    def test_nameless_and_malformed_dishes_dropped(
        self, parser: MenuParser, daily_menu_html: str
    ) -> None:
        menu = parser.parse(daily_menu_html)

        # 6 dish entries on the page: one blank name, one not an object
        assert len(menu.items) == 4
        assert all(item.name for item in menu.items)

    def test_duplicate_names_kept_in_order(self, parser: MenuParser, daily_menu_html: str) -> None:
        monday = parser.parse(daily_menu_html).sections[0]

        assert [i.name for i in monday.items] == ["Tomato soup", "Beef goulash", "Beef goulash"]

    def test_empty_section_retained(self, parser: MenuParser, daily_menu_html: str) -> None:
        tuesday = parser.parse(daily_menu_html).sections[1]

        assert tuesday.name == "Tuesday 13/10"
        assert tuesday.items == ()

    def test_blank_price_is_none(self, parser: MenuParser, daily_menu_html: str) -> None:
        last = parser.parse(daily_menu_html).sections[2]

        assert last.items == (Item(name='Schnitzel "Vienna"', price=None),)

    def test_missing_price_is_none(self, parser: MenuParser, mains_html: str) -> None:
        menu = parser.parse(mains_html)

        assert menu == Menu(
            sections=(
                Section(
                    name="Mains",
                    items=(Item(name="Pasta", price="9.50"), Item(name="Salad")),
                ),
            )
        )

    def test_parse_is_idempotent(self, parser: MenuParser, daily_menu_html: str) -> None:
        assert parser.parse(daily_menu_html) == parser.parse(daily_menu_html)

    def test_url_kept_on_menu(self, mains_html: str) -> None:
        menu = parse_menu(mains_html, url="https://www.zomato.com/x/y/daily-menu")

        assert menu.url == "https://www.zomato.com/x/y/daily-menu"

    def test_empty_daily_menu_gives_empty_menu(self, parser: MenuParser) -> None:
        html = _page(
            r'{\"pages\":{\"restaurant\":{\"1\":{\"sections\":{\"SECTION_DAILY_MENU\":[]}}}}}'
        )

        menu = parser.parse(html)

        assert menu.sections == ()
        assert menu.is_empty

    def test_js_only_escapes_decoded(self, parser: MenuParser) -> None:
        html = _page(
            r'{\"pages\":{\"restaurant\":{\"1\":{\"sections\":{\"SECTION_DAILY_MENU\":'
            r'[{\"timeHeading\":\"Today\",\"dishes\":[{\"name\":\"Chef\'s special \x26 fries\"}]}]}}}}}'
        )

        menu = parser.parse(html)

        assert menu.items[0].name == "Chef's special & fries"

    def test_whitespace_collapsed(self, parser: MenuParser) -> None:
        html = _page(
            r'{\"pages\":{\"restaurant\":{\"1\":{\"sections\":{\"SECTION_DAILY_MENU\":'
            r'[{\"timeHeading\":\" Today \",\"dishes\":[{\"name\":\"Fried\\n  cheese\",\"displayPrice\":\" 120 Kč \"}]}]}}}}}'
        )

        section = parser.parse(html).sections[0]

        assert section.name == "Today"
        assert section.items[0] == Item(name="Fried cheese", price="120 Kč")

    def test_characters_kept_as_found(self, parser: MenuParser) -> None:
        html = _page(
            r'{\"pages\":{\"restaurant\":{\"1\":{\"sections\":{\"SECTION_DAILY_MENU\":'
            r'[{\"timeHeading\":\"Today\",\"dishes\":[{\"name\":\"Coca‑Cola™\",'
            r'\"displayPrice\":\"９．５０ ½\"}]}]}}}}}'
        )

        item = parser.parse(html).items[0]

        assert item.name == "Coca‑Cola™"
        assert item.price == "９．５０ ½"

    def test_state_mentioned_before_literal(self, parser: MenuParser, mains_html: str) -> None:
        html = mains_html.replace(
            "<body>",
            "<body><script>window.__PRELOADED_STATE__ = window.__PRELOADED_STATE__ || {};</script>",
        )

        menu = parser.parse(html)

        assert [i.name for i in menu.items] == ["Pasta", "Salad"]

    def test_remaining_js_escapes_decoded(self, parser: MenuParser) -> None:
        html = _page(
            r'{\"pages\":{\"restaurant\":{\"1\":{\"sections\":{\"SECTION_DAILY_MENU\":'
            r'[{\"timeHeading\":\"Today\",\"dishes\":[{\"name\":\"Fried\vcheese\",'
            r'\"desc\":\"Beef '
            "\\\n"  # line continuation inside the literal
            r'goulash\",\"displayPrice\":\"99\0\"}]}]}}}}}'
        )

        item = parser.parse(html).items[0]

        assert item.name == "Fried cheese"
        assert item.description == "Beef goulash"
        assert item.price == "99\x00"


class TestMenuParserErrors:
    def test_failure_logged_as_warning(
        self, parser: MenuParser, no_menu_html: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="zomato_menu.services.menu_parser"):
            with pytest.raises(ParseError):
                parser.parse(no_menu_html)

        assert [r.levelno for r in caplog.records] == [logging.WARNING]
        assert "preloaded state script not found" in caplog.records[0].getMessage()

    def test_missing_container_raises(self, parser: MenuParser, no_menu_html: str) -> None:
        with pytest.raises(ParseError, match="not found"):
            parser.parse(no_menu_html)

    def test_empty_document_raises(self, parser: MenuParser) -> None:
        with pytest.raises(ParseError):
            parser.parse("")

    def test_invalid_json_raises(self, parser: MenuParser) -> None:
        with pytest.raises(ParseError, match="not valid JSON"):
            parser.parse(_page(r"{\"pages\": "))

    def test_missing_restaurant_raises(self, parser: MenuParser) -> None:
        with pytest.raises(ParseError, match="missing restaurant"):
            parser.parse(_page(r'{\"pages\":{\"restaurant\":{}}}'))

    def test_missing_daily_menu_section_raises(self, parser: MenuParser) -> None:
        html = _page(r'{\"pages\":{\"restaurant\":{\"1\":{\"sections\":{\"SECTION_BASIC_INFO\":{}}}}}}')

        with pytest.raises(ParseError, match="daily menu section not found"):
            parser.parse(html)
