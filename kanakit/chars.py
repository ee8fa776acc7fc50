"""Character classification helpers for Japanese and romaji text."""

from __future__ import annotations

from collections.abc import Iterable

Range = tuple[int, int]

HIRAGANA_START = 0x3041
HIRAGANA_END = 0x3096
KATAKANA_START = 0x30A1
KATAKANA_END = 0x30FC
KANJI_START = 0x4E00
KANJI_END = 0x9FAF
PROLONGED_SOUND_MARK = 0x30FC
KANA_SLASH_DOT = 0x30FB
UPPERCASE_START = 0x41
UPPERCASE_END = 0x5A

LATIN_NUMBERS: Range = (0x30, 0x39)
ZENKAKU_NUMBERS: Range = (0xFF10, 0xFF19)
ZENKAKU_UPPERCASE: Range = (0xFF21, 0xFF3A)
ZENKAKU_LOWERCASE: Range = (0xFF41, 0xFF5A)
ZENKAKU_PUNCTUATION: tuple[Range, ...] = (
    (0xFF01, 0xFF0F),
    (0xFF1A, 0xFF1F),
    (0xFF3B, 0xFF3F),
    (0xFF5B, 0xFF60),
)
ZENKAKU_SYMBOLS_CURRENCY: Range = (0xFFE0, 0xFFEE)
HIRAGANA_CHARS: Range = (0x3040, 0x309F)
KATAKANA_CHARS: Range = (0x30A0, 0x30FF)
HANKAKU_KATAKANA: Range = (0xFF66, 0xFF9F)
KATAKANA_PUNCTUATION: Range = (0x30FB, 0x30FC)
KANA_PUNCTUATION: Range = (0xFF61, 0xFF65)
CJK_SYMBOLS_PUNCTUATION: Range = (0x3000, 0x303F)
COMMON_CJK: Range = (0x4E00, 0x9FFF)
RARE_CJK: Range = (0x3400, 0x4DBF)

KANA_RANGES: tuple[Range, ...] = (
    HIRAGANA_CHARS,
    KATAKANA_CHARS,
    KANA_PUNCTUATION,
    HANKAKU_KATAKANA,
)

JA_PUNCTUATION_RANGES: tuple[Range, ...] = (
    CJK_SYMBOLS_PUNCTUATION,
    KANA_PUNCTUATION,
    KATAKANA_PUNCTUATION,
    *ZENKAKU_PUNCTUATION,
    ZENKAKU_SYMBOLS_CURRENCY,
)

JAPANESE_RANGES: tuple[Range, ...] = (
    *KANA_RANGES,
    *JA_PUNCTUATION_RANGES,
    ZENKAKU_UPPERCASE,
    ZENKAKU_LOWERCASE,
    ZENKAKU_NUMBERS,
    COMMON_CJK,
    RARE_CJK,
)

MODERN_ENGLISH: Range = (0x0000, 0x007F)
HEPBURN_MACRON_RANGES: tuple[Range, ...] = (
    (0x0100, 0x0101),
    (0x0112, 0x0113),
    (0x012A, 0x012B),
    (0x014C, 0x014D),
    (0x016A, 0x016B),
)
SMART_QUOTE_RANGES: tuple[Range, ...] = (
    (0x2018, 0x2019),
    (0x201C, 0x201D),
)

ROMAJI_RANGES: tuple[Range, ...] = (MODERN_ENGLISH, *HEPBURN_MACRON_RANGES)

EN_PUNCTUATION_RANGES: tuple[Range, ...] = (
    (0x20, 0x2F),
    (0x3A, 0x3F),
    (0x5B, 0x60),
    (0x7B, 0x7E),
    *SMART_QUOTE_RANGES,
)

_CONSONANTS = frozenset("bcdfghjklmnpqrstvwxz")
_VOWELS = frozenset("aeiou")


def is_char_in_range(char: str, start: int, end: int) -> bool:
    """Return True if the code point of ``char`` lies within ``start..=end``."""
    return start <= ord(char) <= end


def _in_any_range(char: str, ranges: Iterable[Range]) -> bool:
    code = ord(char)
    return any(start <= code <= end for start, end in ranges)


def is_char_consonant(char: str, include_y: bool = True) -> bool:
    """Return True if ``char`` is a lowercase English consonant."""
    if char == "y":
        return include_y
    return char in _CONSONANTS


def is_char_vowel(char: str, include_y: bool = True) -> bool:
    """Return True if ``char`` is a lowercase English vowel."""
    if char == "y":
        return include_y
    return char in _VOWELS


def is_char_english_punctuation(char: str) -> bool:
    """Return True if ``char`` is English punctuation (space included)."""
    return _in_any_range(char, EN_PUNCTUATION_RANGES)


def is_char_japanese_punctuation(char: str) -> bool:
    """Return True if ``char`` is Japanese punctuation (ideographic space included)."""
    return _in_any_range(char, JA_PUNCTUATION_RANGES)


def is_char_punctuation(char: str) -> bool:
    """Return True if ``char`` is English or Japanese punctuation."""
    return is_char_english_punctuation(char) or is_char_japanese_punctuation(char)


def is_char_long_dash(char: str) -> bool:
    """Return True if ``char`` is the prolonged sound mark 'ー'."""
    return ord(char) == PROLONGED_SOUND_MARK


def is_char_slash_dot(char: str) -> bool:
    """Return True if ``char`` is the katakana middle dot '・'."""
    return ord(char) == KANA_SLASH_DOT


def is_char_hiragana(char: str) -> bool:
    """Return True if ``char`` is hiragana; the long dash counts as hiragana."""
    return is_char_long_dash(char) or is_char_in_range(char, HIRAGANA_START, HIRAGANA_END)


def is_char_katakana(char: str) -> bool:
    """Return True if ``char`` is katakana."""
    return is_char_in_range(char, KATAKANA_START, KATAKANA_END)


def is_char_kana(char: str) -> bool:
    """Return True if ``char`` is hiragana or katakana."""
    return is_char_hiragana(char) or is_char_katakana(char)


def is_char_kanji(char: str) -> bool:
    """Return True if ``char`` is a CJK ideograph."""
    return is_char_in_range(char, KANJI_START, KANJI_END)


def is_char_japanese(char: str) -> bool:
    """Return True if ``char`` lies in any Unicode range used by Japanese."""
    return _in_any_range(char, JAPANESE_RANGES)


def is_char_japanese_number(char: str) -> bool:
    """Return True if ``char`` is a full-width digit (０-９)."""
    return is_char_in_range(char, *ZENKAKU_NUMBERS)


def is_char_latin_number(char: str) -> bool:
    """Return True if ``char`` is an ASCII digit (0-9)."""
    return is_char_in_range(char, *LATIN_NUMBERS)


def is_char_upper_case(char: str) -> bool:
    """Return True if ``char`` is an ASCII uppercase letter."""
    return is_char_in_range(char, UPPERCASE_START, UPPERCASE_END)


def is_char_romaji(char: str) -> bool:
    """Return True if ``char`` is romaji, allowing Hepburn macrons."""
    return _in_any_range(char, ROMAJI_RANGES)


def get_chunk(text: str, start: int, end: int) -> str:
    """Return the characters of ``text`` from position ``start`` up to ``end``.

    A start past the end of the text falls back to 0, and an end past the
    end of the text falls back to the text's length.
    """
    length = len(text)
    begin = start if start < length else 0
    stop = end if end < length else length
    if begin > stop:
        raise ValueError(f"chunk start {begin} is after chunk end {stop}")
    return text[begin:stop]