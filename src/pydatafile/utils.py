# -*- encoding: utf-8 -*-
# @File   : utils.py
# @Time   : 2026/10/12 21:48:02

from .consts import WHITESPACE


def trim(text: str, whitespace: str = WHITESPACE) -> str:
    return text.strip(whitespace)


def compare_no_case(a: str, b: str) -> int:
    """Case-insensitive three-way compare, like `strcasecmp`."""
    a, b = a.casefold(), b.casefold()
    return (a > b) - (a < b)


def get_next_word(line: str, delimiters: str) -> tuple[str, str | None]:
    """Split `line` at the first occurrence of any char in `delimiters`.

    Both halves come back trimmed. The second one is `None`
    if no delimiter occurs at all, which tells `'key='` (empty value)
    apart from a bare `'key'`.
    """
    found = [i for i in map(line.find, delimiters) if i >= 0]
    if not found:
        return trim(line), None
    i = min(found)
    return trim(line[:i]), trim(line[i + 1:])
