"""
Folder naming for file groups.

Turns a raw group key into a lowercase, dash-separated folder name that is
safe on any filesystem.
"""

import re

# Punctuation allowed to survive, but only as the final character
TERMINAL_SYMBOLS = "!?+"

_SEPARATORS = re.compile(r"[ _]")
_DASH_RUNS = re.compile(r"-{2,}")
_DISALLOWED = re.compile(r"[^A-Za-z0-9\-" + re.escape(TERMINAL_SYMBOLS) + r"]")
_REPEATED_SYMBOLS = re.compile(r"([" + re.escape(TERMINAL_SYMBOLS) + r"])\1+")
_SYMBOLS = re.compile(r"[" + re.escape(TERMINAL_SYMBOLS) + r"]")


def normalize_group_name(raw: str) -> str:
    """
    Normalize a group key into a folder name.

    Whitespace is trimmed, spaces and underscores become dashes, dash runs
    collapse, and anything other than ASCII letters, digits, dashes and the
    terminal symbols ``!``, ``?``, ``+`` is deleted (accented letters are
    dropped, not transliterated). A terminal symbol is kept once, and only
    when it ends the name after every other character has been stripped.

    Examples:
        "  My Folder  "     -> "my-folder"
        "Wait For It???"    -> "wait-for-it?"
        "Very+Exciting+++"  -> "veryexciting+"

    Args:
        raw: Group key as discovered from file names

    Returns:
        Normalized folder name (may be empty)
    """
    name = raw.strip()
    name = _SEPARATORS.sub("-", name)
    name = _DASH_RUNS.sub("-", name)
    name = _DISALLOWED.sub("", name)
    name = _REPEATED_SYMBOLS.sub(r"\1", name)

    name = name.rstrip("-")
    terminal = ""
    if name and name[-1] in TERMINAL_SYMBOLS:
        terminal = name[-1]
        name = name[:-1]

    name = _SYMBOLS.sub("", name)
    name = _DASH_RUNS.sub("-", name).rstrip("-")

    return (name + terminal).lower()
