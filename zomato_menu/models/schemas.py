"""
Data models for a restaurant's daily menu.
"""
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from zomato_menu.config import settings


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class RestaurantRef(BaseModel):
    """Restaurant as addressed on Zomato: /<city>/<restaurant>/daily-menu."""
    model_config = ConfigDict(frozen=True)

    city: str = Field(min_length=1)
    restaurant: str = Field(min_length=1)

    @field_validator("city", "restaurant")
    @classmethod
    def check_slug(cls, value: str) -> str:
        value = value.strip().strip("/")
        if not value or "/" in value:
            raise ValueError("must be a single URL path segment")
        return value

    @property
    def url(self) -> str:
        return f"{settings.base_url.rstrip('/')}/{self.city}/{self.restaurant}/daily-menu"


class Item(BaseModel):
    """A single dish."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)  # Parser drops dishes without a name
    description: Optional[str] = None
    price: Optional[str] = None  # Display string as found on the page

    @field_validator("description", "price")
    @classmethod
    def clean_optional(cls, value: Optional[str]) -> Optional[str]:
        return _blank_to_none(value)


class Section(BaseModel):
    """Named group of dishes; on Zomato, one day of the daily menu."""
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    items: Tuple[Item, ...] = ()

    @field_validator("name")
    @classmethod
    def clean_name(cls, value: Optional[str]) -> Optional[str]:
        return _blank_to_none(value)


class Menu(BaseModel):
    """Daily menu of a restaurant, sections in page order."""
    model_config = ConfigDict(frozen=True)

    sections: Tuple[Section, ...] = ()
    url: Optional[str] = None

    @property
    def items(self) -> Tuple[Item, ...]:
        return tuple(item for section in self.sections for item in section.items)

    @property
    def today(self) -> Optional[Section]:
        """First section on the page (Zomato lists the current day first)."""
        return self.sections[0] if self.sections else None

    @property
    def is_empty(self) -> bool:
        return not self.items

    def format_table(self) -> str:
        """
        Format menu as plain text: section heading, then one line per dish
        with names padded to the widest dish name and price after a bar.
        """
        if self.is_empty:
            return ""

        width = max(len(item.name) for item in self.items)
        lines = []
        for section in self.sections:
            if section.name:
                lines.append(section.name)
            for item in section.items:
                lines.append(f"{item.name.ljust(width)} | {item.price or ''}".rstrip())
        return "\n".join(lines)

    def format_for_speech(self, section: Optional[Section] = None) -> str:
        """Flatten one section (today's by default) into a sentence for TTS."""
        section = section if section is not None else self.today
        if section is None:
            return ""

        parts = []
        for item in section.items:
            parts.append(item.name)
            if item.price:
                parts.append(item.price)
        return " ".join(parts)
