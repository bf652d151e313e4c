"""
Text-to-speech engines for reading a menu aloud.

Each engine drives an external synthesizer binary as a subprocess:
festival and espeak read text from stdin, pico2wave renders a wav file
which is then played with aplay.
"""
import asyncio
import logging
import tempfile
from pathlib import Path
from typing import List, Optional, Sequence

from zomato_menu.exceptions import SpeechError

logger = logging.getLogger(__name__)


async def _run(cmd: List[str], stdin_text: Optional[str] = None) -> None:
    """Run command to completion, optionally feeding text on stdin."""
    logger.debug(f"Running: {cmd}")
    try:
        process = await asyncio.create_subprocess_exec(
            *cmd,
            stdin=asyncio.subprocess.PIPE if stdin_text is not None else None,
        )
    except OSError as e:
        raise SpeechError(f"Failed to start {cmd[0]}: {e}") from e

    stdin_data = stdin_text.encode("utf-8") if stdin_text is not None else None
    try:
        await process.communicate(stdin_data)
    except asyncio.CancelledError:
        logger.debug(f"Cancelled, killing {cmd[0]}")
        try:
            process.kill()
        except ProcessLookupError:
            pass  # already exited
        await process.wait()
        raise

    if process.returncode != 0:
        raise SpeechError(f"{cmd[0]} exited with status {process.returncode}")


class TtsEngine:
    """Abstract speech engine."""

    name = ""

    async def speak(self, text: str) -> None:
        raise NotImplementedError


class Festival(TtsEngine):
    name = "festival"

    def __init__(self, language: Optional[str] = None):
        self.language = language

    def command(self) -> List[str]:
        cmd = ["festival"]
        if self.language:
            cmd += ["--language", self.language]
        cmd.append("--tts")
        return cmd

    async def speak(self, text: str) -> None:
        await _run(self.command(), stdin_text=text)


class Espeak(TtsEngine):
    name = "espeak"

    def __init__(self, language: Optional[str] = None, speed: Optional[str] = None):
        self.language = language
        self.speed = speed

    def command(self) -> List[str]:
        cmd = ["espeak"]
        if self.language:
            cmd += ["-v", self.language]
        if self.speed:
            cmd += ["-s", self.speed]
        cmd.append("--stdin")
        return cmd

    async def speak(self, text: str) -> None:
        await _run(self.command(), stdin_text=text)


class Pico2Wave(TtsEngine):
    """pico2wave can only write files, so render to a temp wav and play it."""

    name = "pico2wave"

    def __init__(self, language: Optional[str] = None):
        self.language = language

    def command(self, wav_path: Path, text: str) -> List[str]:
        cmd = ["pico2wave"]
        if self.language:
            cmd += ["-l", self.language]
        cmd += ["-w", str(wav_path), text]
        return cmd

    async def speak(self, text: str) -> None:
        with tempfile.TemporaryDirectory(prefix="zomato_tts_") as tmp_dir:
            wav_path = Path(tmp_dir) / "message.wav"
            await _run(self.command(wav_path, text))
            await _run(["aplay", str(wav_path)])


ENGINES = ("festival", "espeak", "pico2wave")


def create_engine(name: str, options: Sequence[str] = ()) -> TtsEngine:
    """
    Build an engine from its name and positional options.

    festival [language], espeak [language] [speed], pico2wave [language]

    Raises:
        ValueError: unknown engine name
    """
    options = list(options)

    def option(index: int) -> Optional[str]:
        return options[index] if index < len(options) else None

    if name == "festival":
        return Festival(language=option(0))
    elif name == "espeak":
        return Espeak(language=option(0), speed=option(1))
    elif name == "pico2wave":
        return Pico2Wave(language=option(0))
    else:
        raise ValueError(f"Unknown text-to-speech engine: '{name}'")
