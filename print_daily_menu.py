#!/usr/bin/env python3
"""
Print a restaurant's daily menu as a table.

Run: python print_daily_menu.py <city> <restaurant>

City and restaurant are the slugs from the Zomato URL, e.g.
https://www.zomato.com/brno/lokal-u-caipl/daily-menu -> brno lokal-u-caipl
"""
import asyncio
import logging
import sys

from zomato_menu import MenuError, get_daily_menu, settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stderr),
    ],
)

# Reduce noise from external libraries
logging.getLogger("aiohttp").setLevel(logging.WARNING)
logging.getLogger("asyncio").setLevel(logging.CRITICAL)

logger = logging.getLogger(__name__)


async def main(argv) -> int:
    if len(argv) < 2:
        print("usage: print_daily_menu.py <city> <restaurant>", file=sys.stderr)
        return 2

    city, restaurant = argv[0], argv[1]

    try:
        menu = await get_daily_menu(city, restaurant)
    except MenuError as e:
        logger.error(f"Failed to get daily menu: {e}")
        return 1

    if menu.is_empty:
        logger.info("No daily menu published")
        return 0

    print(menu.format_table())
    return 0


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(main(sys.argv[1:])))
    except KeyboardInterrupt:
        logger.info("Stopped by user")
