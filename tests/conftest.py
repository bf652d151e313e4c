from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def daily_menu_html() -> str:
    """Three days: full day, empty day, unlabeled day."""
    return load_fixture("daily_menu.html")


@pytest.fixture
def mains_html() -> str:
    """Single 'Mains' section: Pasta 9.50 and Salad without price."""
    return load_fixture("mains.html")


@pytest.fixture
def no_menu_html() -> str:
    return load_fixture("no_menu.html")
