"""Trimming of okurigana from words that mix kanji and kana."""

from __future__ import annotations

from .chars import is_char_japanese, is_char_kana, is_char_kanji
from .tokenize import tokenize


def _is_japanese(text: str) -> bool:
    return bool(text) and all(map(is_char_japanese, text))


def _is_kana(text: str) -> bool:
    return bool(text) and all(map(is_char_kana, text))


def _is_invalid_matcher(text: str, match_kanji: str | None) -> bool:
    if match_kanji is not None:
        return all(map(is_char_kanji, match_kanji))
    return _is_kana(text)


def _strip_leading(text: str, token: str) -> str:
    while token and text.startswith(token):
        text = text[len(token):]
    return text


def _strip_trailing(text: str, token: str) -> str:
    while token and text.endswith(token):
        text = text[: -len(token)]
    return text


def trim_okurigana(
    text: str, trim_from_start: bool = False, match_kanji: str | None = None
) -> str:
    """Strip okurigana from ``text`` when it mixes kanji and kana.

    ``trim_from_start`` trims the start instead of the end. When ``text`` is
    all kana, ``match_kanji`` gives the written word that shows where to trim.
    Text that cannot be trimmed comes back unchanged.
    """
    if (
        not _is_japanese(text)
        or (trim_from_start and not is_char_kana(text[0]))
        or (not trim_from_start and not is_char_kana(text[-1]))
        or _is_invalid_matcher(text, match_kanji)
    ):
        return text

    tokens = tokenize(match_kanji if match_kanji is not None else text)
    if trim_from_start:
        return _strip_leading(text, tokens[0])
    return _strip_trailing(text, tokens[-1])