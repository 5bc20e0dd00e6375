# ===============================================
# tests/test_extract.py
# -----------------------------------------------
# Code-block extraction and array splitting.
# ===============================================

from codeai.verses import extract_code, split_array
from codeai.verses.extract import find_closing_bracket

from conftest import NUMBERED

BARE = 'private let other = [\n    "x"\n]'


def test_swift_fence_wins_over_bare_array():
    text = f"@renumber-verses {BARE}\n\n```swift\n{NUMBERED}\n```\n"
    assert extract_code(text) == NUMBERED


def test_swift_fence_wins_over_generic_fence():
    text = "```\nlet a = 1\n```\n\n```swift\nlet b = 2\n```"
    assert extract_code(text) == "let b = 2"


def test_generic_fence():
    text = f"please clean this\n```\n{NUMBERED}\n```\nthanks"
    assert extract_code(text) == NUMBERED


def test_blank_fence_does_not_hide_bare_array():
    text = f"```python\nx\n```\n\n```\n\n```\n{NUMBERED}"
    assert extract_code(text) == NUMBERED


def test_blank_swift_fence_skipped_for_next_one():
    text = f"```swift\n\n```\nand the real one:\n```swift\n{NUMBERED}\n```"
    assert extract_code(text) == NUMBERED


def test_bare_array_pattern():
    text = f"renumber-verses please: {NUMBERED} -- thanks!"
    assert extract_code(text) == NUMBERED


def test_bare_array_ignores_brackets_inside_strings():
    code = 'private let v = [\n    "a]",\n    "say \\"hi]\\"",\n    "b"\n]'
    assert extract_code(f"look: {code} end") == code


def test_not_found_is_none():
    assert extract_code("hello there") is None
    assert extract_code("") is None
    assert extract_code("private let v = [ \"never closed\"") is None


def test_find_closing_bracket_tracks_depth():
    assert find_closing_bracket("[[1], [2]] tail", 0) == 9
    assert find_closing_bracket("[1, 2", 0) is None


def test_find_closing_bracket_skips_comments():
    text = '[ /* ] */ "a", // ]\n "b" ]'
    assert find_closing_bracket(text, 0) == len(text) - 1


def test_split_array_structured():
    code = 'private let v = [\n    "a",\n    "b"\n]\n'
    parts = split_array(code)
    assert parts.header == "private let v = ["
    assert parts.body == ["", '    "a",', '    "b"', ""]
    assert parts.footer == "]\n"
    assert parts.compose(parts.body) == code


def test_split_array_fallback_brackets():
    parts = split_array('let v = ["a", "b"]')
    assert parts.header == "let v = ["
    assert parts.body == ['"a", "b"']
    assert parts.footer == "]"


def test_split_array_without_pair():
    assert split_array("no brackets here") is None
    assert split_array("] backwards [") is None
    assert split_array("") is None
