# Data models for the verses layer.
# An ArrayParts only lives for the duration of one extract/rewrite call.

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List


class VerseTask(str, Enum):
    """Special commands recognized in the last user message."""
    RENUMBER = "renumber-verses"
    CLEAN = "clean-verses"

    @property
    def markers(self) -> tuple:
        return (f"@{self.value}", self.value)


@dataclass
class ArrayParts:
    """A Swift array literal split around its brackets.

    ``header + "\\n".join(body) + footer`` gives back the original code.
    """
    header: str
    body: List[str]
    footer: str

    def compose(self, body: List[str]) -> str:
        return self.header + "\n".join(body) + self.footer
