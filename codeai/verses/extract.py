# Locate Swift array literals inside free-form text and split them around
# their brackets. Nothing in here raises on malformed input: a miss is None.

from __future__ import annotations
import re
from typing import Optional

from .types import ArrayParts

SWIFT_FENCE = re.compile(r"```swift\n([\s\S]*?)\n```")
GENERIC_FENCE = re.compile(r"```\n([\s\S]*?)\n```")
ARRAY_HEADER = re.compile(r"private\s+let\s+\w+\s*=\s*\[")


def find_closing_bracket(text: str, open_index: int) -> Optional[int]:
    """Return the index of the ``]`` matching the ``[`` at ``open_index``.

    Brackets inside string literals and comments are ignored, and a
    backslash escapes the next character inside a string. Returns None
    when the literal is never closed.
    """
    depth = 0
    in_string = False
    escaped = False
    i = open_index
    n = len(text)
    while i < n:
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif text.startswith("/*", i):
            end = text.find("*/", i + 2)
            if end == -1:
                return None
            i = end + 2
            continue
        elif text.startswith("//", i):
            end = text.find("\n", i)
            if end == -1:
                return None
            i = end
            continue
        elif ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
            if depth == 0:
                return i
        i += 1
    return None


def _extract_bare_array(text: str) -> Optional[str]:
    for match in ARRAY_HEADER.finditer(text):
        close = find_closing_bracket(text, match.end() - 1)
        if close is not None:
            return text[match.start():close + 1]
    return None


def extract_code(text: str) -> Optional[str]:
    """Pull Swift array code out of a chat message.

    Tried in order: a ```swift fenced block, a bare ``` fenced block, then a
    ``private let name = [ ... ]`` declaration anywhere in the text. The
    first non-blank hit is returned verbatim, without fence markers.
    """
    if not text:
        return None
    for pattern in (SWIFT_FENCE, GENERIC_FENCE):
        for match in pattern.finditer(text):
            if match.group(1).strip():
                return match.group(1)
    return _extract_bare_array(text)


def _split_at(code: str, open_index: int, close_index: int) -> ArrayParts:
    return ArrayParts(
        header=code[:open_index + 1],
        body=code[open_index + 1:close_index].split("\n"),
        footer=code[close_index:],
    )


def split_array(code: str) -> Optional[ArrayParts]:
    """Split ``code`` into header (through ``[``), body lines and footer (from ``]``).

    A ``private let`` declaration is matched first and closed with the
    bracket scanner; otherwise the first ``[`` and the last ``]`` are used.
    Nested array literals are not treated specially: their lines end up in
    the body like any other line.
    """
    if not code:
        return None

    match = ARRAY_HEADER.search(code)
    if match:
        open_index = match.end() - 1
        close_index = find_closing_bracket(code, open_index)
        if close_index is not None:
            return _split_at(code, open_index, close_index)

    # fallback: first/last bracket
    open_index = code.find("[")
    close_index = code.rfind("]")
    if open_index == -1 or close_index <= open_index:
        return None
    return _split_at(code, open_index, close_index)
