"""Sound cues for game events using pygame's mixer.

The mixer is opened on first use.  When it cannot be opened (no audio
device, headless CI) every call becomes a no-op.
"""
from __future__ import annotations

import logging
import warnings
from pathlib import Path

import pygame

from .settings import SOUND_CUES

logger = logging.getLogger(__name__)

_SOUNDS: dict[str, "pygame.mixer.Sound"] = {}
_VOLUME = 1.0
_ENABLED = True


def _mixer_ready() -> bool:
    global _ENABLED
    if not _ENABLED:
        return False
    if pygame.mixer.get_init():
        return True
    try:
        pygame.mixer.init()
    except pygame.error as exc:
        logger.info("Sound disabled: %s", exc)
        _ENABLED = False
        return False
    return True


def load(name: str, path: str | Path) -> bool:
    """Load a sound effect from ``path`` under ``name``.

    Returns ``True`` on success.  Loading does nothing if sound is
    disabled or the file does not exist.
    """
    p = Path(path)
    if not p.is_file():
        warnings.warn(f"Sound file '{p}' not found", RuntimeWarning)
        return False
    if not _mixer_ready():
        return False
    try:
        snd = pygame.mixer.Sound(str(p))
    except pygame.error as exc:
        logger.info("Could not load %s: %s", p, exc)
        return False
    snd.set_volume(_VOLUME)
    _SOUNDS[name] = snd
    return True


def load_dir(directory: str | Path) -> list[str]:
    """Load ``<cue>.wav`` for every known cue found in ``directory``."""

    loaded = []
    for cue in SOUND_CUES:
        path = Path(directory) / f"{cue}.wav"
        if path.is_file() and load(cue, path):
            loaded.append(cue)
    return loaded


def play(name: str) -> None:
    """Play a loaded sound effect identified by ``name``."""
    if not _ENABLED:
        return
    snd = _SOUNDS.get(name)
    if snd is None:
        return
    snd.play()


def set_volume(vol: float) -> None:
    """Set volume for all loaded sound effects."""
    global _VOLUME
    _VOLUME = max(0.0, min(1.0, vol))
    for snd in _SOUNDS.values():
        snd.set_volume(_VOLUME)


def set_enabled(flag: bool) -> None:
    """Enable or disable all sound effects."""
    global _ENABLED
    _ENABLED = bool(flag)
