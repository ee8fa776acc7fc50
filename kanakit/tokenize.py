"""Split text into runs of characters that share a token type."""

from __future__ import annotations

from enum import Enum
from itertools import groupby

from .chars import (
    is_char_english_punctuation,
    is_char_hiragana,
    is_char_japanese,
    is_char_japanese_number,
    is_char_japanese_punctuation,
    is_char_kanji,
    is_char_katakana,
    is_char_latin_number,
    is_char_romaji,
)


class TokenType(Enum):
    """The kind of a token; compact tokenization uses only EN, JA and OTHER."""

    EN = "en"
    JA = "ja"
    EN_NUM = "en_num"
    JA_NUM = "ja_num"
    EN_PUNC = "en_punc"
    JA_PUNC = "ja_punc"
    KANJI = "kanji"
    HIRAGANA = "hiragana"
    KATAKANA = "katakana"
    SPACE = "space"
    OTHER = "other"


def _compact_type(char: str) -> TokenType:
    if char == " ":
        return TokenType.EN
    if char == "　":
        return TokenType.JA
    if (
        is_char_japanese_number(char)
        or is_char_latin_number(char)
        or is_char_english_punctuation(char)
        or is_char_japanese_punctuation(char)
    ):
        return TokenType.OTHER
    if is_char_japanese(char):
        return TokenType.JA
    if is_char_romaji(char):
        return TokenType.EN
    return TokenType.OTHER


_DETAILED_CHECKS = (
    (is_char_japanese_number, TokenType.JA_NUM),
    (is_char_latin_number, TokenType.EN_NUM),
    (is_char_english_punctuation, TokenType.EN_PUNC),
    (is_char_japanese_punctuation, TokenType.JA_PUNC),
    (is_char_kanji, TokenType.KANJI),
    (is_char_hiragana, TokenType.HIRAGANA),
    (is_char_katakana, TokenType.KATAKANA),
    (is_char_japanese, TokenType.JA),
    (is_char_romaji, TokenType.EN),
)


def _detailed_type(char: str) -> TokenType:
    if char in (" ", "　"):
        return TokenType.SPACE
    return next(
        (token_type for check, token_type in _DETAILED_CHECKS if check(char)),
        TokenType.OTHER,
    )


def tokenize_detailed(text: str, compact: bool = False) -> list[tuple[TokenType, str]]:
    """Split ``text`` into ``(TokenType, token)`` pairs.

    With ``compact`` set, same-language runs are merged (spaces with text,
    kanji with kana, numerals with punctuation).
    """
    get_type = _compact_type if compact else _detailed_type
    return [(token_type, "".join(group)) for token_type, group in groupby(text, key=get_type)]


def tokenize(text: str, compact: bool = False) -> list[str]:
    """Split ``text`` into tokens of characters sharing a token type."""
    return [token for _, token in tokenize_detailed(text, compact)]