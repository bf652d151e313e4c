#!/usr/bin/env python3
"""
Read today's menu aloud.

Run: python today_tts.py <city> <restaurant> <engine> [engine options]

Engines:
    festival  [language]
    espeak    [language] [speed]
    pico2wave [language]
"""
import asyncio
import logging
import sys

from zomato_menu import MenuError, SpeechError, get_daily_menu, settings
from zomato_menu.services.speech import create_engine

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stderr),
    ],
)

logging.getLogger("aiohttp").setLevel(logging.WARNING)
logging.getLogger("asyncio").setLevel(logging.CRITICAL)

logger = logging.getLogger(__name__)


async def main(argv) -> int:
    if len(argv) < 3:
        print(
            "usage: today_tts.py <city> <restaurant> <festival|espeak|pico2wave> [options]",
            file=sys.stderr,
        )
        return 2

    city, restaurant, engine_name = argv[0], argv[1], argv[2]

    try:
        engine = create_engine(engine_name, argv[3:])
    except ValueError as e:
        print(e, file=sys.stderr)
        return 1

    try:
        menu = await get_daily_menu(city, restaurant)
    except MenuError as e:
        logger.error(f"Failed to get daily menu: {e}")
        return 1

    text = menu.format_for_speech()
    if not text:
        logger.info("Nothing on the menu today")
        return 0

    try:
        await engine.speak(text)
    except SpeechError as e:
        logger.error(f"Failed to speak: {e}")
        return 1

    return 0


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(main(sys.argv[1:])))
    except KeyboardInterrupt:
        logger.info("Stopped by user")
