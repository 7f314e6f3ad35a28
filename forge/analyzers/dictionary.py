"""
Dictionary Word Lists
======================

Loads the weak-word list used by dictionary matching. The built-in list
is the floor: any failure to read a user-supplied list degrades to it
with a warning and never fails generation or analysis.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from shared.logger import ForgeLogger

# Built-in fallback of frequently leaked passwords
COMMON_WORDS: tuple[str, ...] = (
    "password", "123456", "qwerty", "admin", "welcome",
    "letmein", "monkey", "abc123", "starwars", "login",
    "dragon", "master", "football", "baseball", "access",
)


def load_words(
    path: str | Path | None,
    logger: Optional[ForgeLogger] = None,
) -> tuple[str, ...]:
    """Read a word list with one entry per line.

    Surrounding whitespace is stripped and blank lines dropped. When the
    file exists its words replace the built-in list entirely.

    Args:
        path: Word-list file. ``None`` selects the built-in list.
        logger: Logger for the fallback warning.

    Returns:
        The loaded words, or :data:`COMMON_WORDS` when *path* is missing
        or unreadable.
    """
    if path is None:
        return COMMON_WORDS

    word_file = Path(path)
    if not word_file.is_file():
        if logger is not None:
            logger.debug("No dictionary at %s, using built-in list", word_file)
        return COMMON_WORDS

    try:
        text = word_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        if logger is not None:
            logger.warning(
                "Could not read dictionary %s (%s), using built-in list",
                word_file,
                exc,
            )
        return COMMON_WORDS

    words = tuple(line.strip() for line in text.splitlines() if line.strip())
    if logger is not None:
        logger.info("Loaded %d dictionary words from %s", len(words), word_file)
    return words
