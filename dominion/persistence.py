"""Persistence helpers to save and load game state."""
from __future__ import annotations

import logging
import os
from pathlib import Path

from dominion.codec import decode, encode
from dominion.state import GameState

logger = logging.getLogger(__name__)


def save_game(state: GameState, path: str | Path) -> None:
    """Write *state* to ``path``, creating its directory if needed.

    Raises OSError when the file cannot be written.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    # An interrupted save must leave the previous file whole
    tmp = path.with_name(path.name + ".tmp")
    try:
        with open(tmp, "w", encoding="utf-8", newline="\n") as fh:
            fh.write(encode(state))
        os.replace(tmp, path)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise
    logger.debug("Saved game to %s", path)


def load_game(state: GameState, path: str | Path) -> bool:
    """Restore *state* from ``path``. Returns False if there is no save file.

    Raises OSError when an existing file cannot be read.
    """
    path = Path(path)
    if not path.exists():
        return False
    data = path.read_bytes()
    decode(data, state)
    logger.debug("Loaded game from %s", path)
    return True
