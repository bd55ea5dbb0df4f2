"""Command-line option parsing for the emulator front end."""

from __future__ import annotations

import re
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

_INT_RE = re.compile(r"[ \t\n\v\f\r]*[+-]?[0-9]+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)

AUDIO_BUFFER_MIN = 256
AUDIO_BUFFER_MAX = 8192
NETPLAY_DELAY_MAX = 10
PORT_MAX = 65535


class HardwareModePreference(Enum):
    """Which hardware model the user asked to emulate."""

    AUTO = "auto"
    DMG = "dmg"
    CGB = "cgb"


@dataclass
class AppOptions:
    """Settings collected from the command line."""

    rom_path: str = ""
    rom_suite_manifest: str = ""
    boot_rom_path: str = ""
    link_connect: str = ""
    netplay_connect: str = ""
    headless: bool = False
    choose_rom: bool = False
    precise_timing: bool = False
    hardware_mode: HardwareModePreference = HardwareModePreference.AUTO
    link_host_port: int = 0
    netplay_host_port: int = 0
    netplay_delay_frames: int = 0
    frames: int = 120
    scale: int = 4
    audio_buffer: int = 1024


class OptionsError(ValueError):
    """Raised when the command line cannot be parsed."""


def _parse_int(text: str) -> int | None:
    """Parse a whole string as a 32-bit decimal integer, or return None."""
    if not _INT_RE.fullmatch(text):
        return None
    value = int(text.lstrip(" \t\n\v\f\r"))
    if value < _INT_MIN or value > _INT_MAX:
        return None
    return value


def _take_string(pending: deque[str], option: str) -> str:
    if not pending:
        raise OptionsError(f"faltou valor para {option}")
    return pending.popleft()


def _take_int(pending: deque[str], option: str) -> int:
    text = _take_string(pending, option)
    value = _parse_int(text)
    if value is None:
        raise OptionsError(f"valor invalido para {option}: {text}")
    return value


def _take_port(pending: deque[str], option: str) -> int:
    port = _take_int(pending, option)
    if not 1 <= port <= PORT_MAX:
        raise OptionsError(f"porta invalida para {option}")
    return port


def parse_app_options(args: Iterable[str] | None = None) -> AppOptions:
    """Parse command-line arguments (without the program name) into options.

    Raises OptionsError on a missing value, a malformed number, an unknown
    option or an invalid argument.
    """
    options = AppOptions()
    pending = deque(args or ())

    while pending:
        arg = pending.popleft()

        if arg == "--rom":
            options.rom_path = _take_string(pending, arg)
        elif arg == "--rom-suite":
            options.rom_suite_manifest = _take_string(pending, arg)
            options.headless = True
        elif arg == "--boot-rom":
            options.boot_rom_path = _take_string(pending, arg)
        elif arg == "--choose-rom":
            options.choose_rom = True
        elif arg == "--precise-timing":
            options.precise_timing = True
        elif arg == "--hardware":
            mode = _take_string(pending, arg).translate(_ASCII_LOWER)
            try:
                options.hardware_mode = HardwareModePreference(mode)
            except ValueError:
                raise OptionsError(
                    f"valor invalido para --hardware: {mode} (use auto|dmg|cgb)"
                ) from None
        elif arg == "--headless":
            options.headless = True
            if pending:
                frames = _parse_int(pending[0])
                if frames is not None:
                    pending.popleft()
                    options.frames = max(1, frames)
        elif arg == "--scale":
            options.scale = max(1, _take_int(pending, arg))
        elif arg == "--audio-buffer":
            value = _take_int(pending, arg)
            options.audio_buffer = min(AUDIO_BUFFER_MAX, max(AUDIO_BUFFER_MIN, value))
        elif arg == "--link-host":
            options.link_host_port = _take_port(pending, arg)
        elif arg == "--link-connect":
            options.link_connect = _take_string(pending, arg)
        elif arg == "--netplay-host":
            options.netplay_host_port = _take_port(pending, arg)
        elif arg == "--netplay-connect":
            options.netplay_connect = _take_string(pending, arg)
        elif arg == "--netplay-delay":
            value = _take_int(pending, arg)
            options.netplay_delay_frames = min(NETPLAY_DELAY_MAX, max(0, value))
        elif arg and not arg.startswith("-") and not options.rom_path:
            options.rom_path = arg
        elif arg.startswith("-"):
            raise OptionsError(f"opcao invalida: {arg}")
        else:
            frames = _parse_int(arg)
            if frames is None:
                raise OptionsError(f"argumento invalido: {arg}")
            options.frames = max(1, frames)
            options.headless = True

    return options