from .schemas import (
    RestaurantRef,
    Item,
    Section,
    Menu,
)

__all__ = [
    "RestaurantRef",
    "Item",
    "Section",
    "Menu",
]
