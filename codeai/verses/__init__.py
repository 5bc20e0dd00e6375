# Verses package: locate Swift string arrays and renumber/clean their
# /* n */ markers without any model call.

from .types import ArrayParts, VerseTask
from .extract import extract_code, split_array
from .rewrite import renumber_array, clean_array, normalize_reply, fence

__all__ = [
    "ArrayParts",
    "VerseTask",
    "extract_code",
    "split_array",
    "renumber_array",
    "clean_array",
    "normalize_reply",
    "fence",
]
