"""Conversion between hiragana and katakana."""

from __future__ import annotations

from .chars import (
    HIRAGANA_START,
    KATAKANA_START,
    is_char_hiragana,
    is_char_katakana,
    is_char_long_dash,
    is_char_slash_dot,
)
from .romaji_tree import to_romaji_tree

_KANA_SHIFT = KATAKANA_START - HIRAGANA_START

LONG_VOWELS = {
    "a": "あ",
    "i": "い",
    "u": "う",
    "e": "え",
    "o": "う",
}


def is_char_initial_long_dash(char: str, index: int) -> bool:
    """Return True if ``char`` is a long dash at the start of the text."""
    return is_char_long_dash(char) and index == 0


def is_char_inner_long_dash(char: str, index: int) -> bool:
    """Return True if ``char`` is a long dash anywhere but the start of the text."""
    return is_char_long_dash(char) and index != 0


def is_kana_as_symbol(char: str) -> bool:
    """Return True for small katakana used as counters ('ヶ' and 'ヵ')."""
    return char in ("ヶ", "ヵ")


def hiragana_to_katakana(text: str) -> str:
    """Convert hiragana in ``text`` to katakana, passing other characters through."""

    def convert(char: str) -> str:
        # The long dash and middle dot are shared by both syllabaries.
        if is_char_long_dash(char) or is_char_slash_dot(char):
            return char
        if is_char_hiragana(char):
            return chr(ord(char) + _KANA_SHIFT)
        return char

    return "".join(map(convert, text))


def _long_vowel_of(kana: str) -> str:
    node = to_romaji_tree().find_transition_node(kana)
    if node is None or not node.output:
        raise ValueError(f"could not find kana {kana!r} in the romaji table")
    return node.output[-1]


def katakana_to_hiragana(text: str, is_destination_romaji: bool = False) -> str:
    """Convert katakana in ``text`` to hiragana, passing other characters through.

    A long dash after katakana becomes the matching vowel ('オー' -> 'おう').
    When ``is_destination_romaji`` is set, a long 'o' becomes 'お' instead so
    that it later reads as 'oo'. Raises ValueError when the kana before a
    long dash has no romaji reading.
    """
    hira: list[str] = []
    previous_kana: str | None = None
    for index, char in enumerate(text):
        if (
            is_char_slash_dot(char)
            or is_char_initial_long_dash(char, index)
            or is_kana_as_symbol(char)
        ):
            hira.append(char)
        elif previous_kana is not None and is_char_inner_long_dash(char, index):
            vowel = _long_vowel_of(previous_kana)
            if is_destination_romaji and vowel == "o" and is_char_katakana(text[index - 1]):
                hira.append("お")
                continue
            if vowel in LONG_VOWELS:
                hira.append(LONG_VOWELS[vowel])
        elif not is_char_long_dash(char) and is_char_katakana(char):
            hira_char = chr(ord(char) - _KANA_SHIFT)
            hira.append(hira_char)
            previous_kana = hira_char
        else:
            hira.append(char)
            previous_kana = None
    return "".join(hira)