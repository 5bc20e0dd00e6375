# Deterministic, AI-free rewrites of Swift string arrays:
#   - renumber: give every element line a fresh /* n */ marker, 1..N
#   - clean: drop every /* n */ marker
# Both return a ```swift fenced block, or None when the code has no array.

from __future__ import annotations
import re
from typing import List, Optional

from .extract import extract_code, split_array

LEADING_MARKER = re.compile(r"^/\*\s*\d+\s*\*/\s*")
ANY_MARKER = re.compile(r"/\*\s*\d+\s*\*/\s*")


def fence(code: str) -> str:
    return f"```swift\n{code.rstrip()}\n```"


def is_candidate(line: str) -> bool:
    """An element line ends with a closing quote, optionally followed by a comma."""
    stripped = line.strip()
    return stripped.endswith('",') or stripped.endswith('"')


def renumber_lines(lines: List[str]) -> Optional[List[str]]:
    out = list(lines)
    number = 0
    for i, line in enumerate(lines):
        if not is_candidate(line):
            continue
        number += 1
        rest = line.lstrip()
        indent = line[:len(line) - len(rest)]
        rest = LEADING_MARKER.sub("", rest, count=1)
        out[i] = f"{indent}/* {number} */ {rest}"
    if number == 0:
        return None
    return out


def clean_lines(lines: List[str]) -> List[str]:
    return [ANY_MARKER.sub("", line) for line in lines]


def renumber_array(code: str) -> Optional[str]:
    parts = split_array(code)
    if parts is None:
        return None
    body = renumber_lines(parts.body)
    if body is None:
        return None
    return fence(parts.compose(body))


def clean_array(code: str) -> Optional[str]:
    parts = split_array(code)
    if parts is None:
        return None
    return fence(parts.compose(clean_lines(parts.body)))


def normalize_reply(text: str) -> Optional[str]:
    """Re-fence the array code found in a model reply, or None if there is none."""
    code = extract_code(text or "")
    if code is None or split_array(code) is None:
        return None
    return fence(code)
