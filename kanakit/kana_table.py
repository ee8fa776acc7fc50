"""Nested mapping that spells romaji sequences out as kana."""

from __future__ import annotations

from typing import Any

_OUTPUT_KEY = ""
_VOWELS = "aiueo"
_SOKUON = "っ"

# Consonants whose doubled form starts with the small tsu.
_DOUBLING = "kstmyhrwgzdbpvqfcj"

_PUNCTUATION = {
    ".": "。",
    ",": "、",
    ":": "：",
    "/": "・",
    "!": "！",
    "?": "？",
    "~": "〜",
    "-": "ー",
    "‘": "「",
    "’": "」",
    "“": "『",
    "”": "』",
    "[": "［",
    "]": "］",
    "(": "（",
    ")": "）",
    "{": "｛",
    "}": "｝",
}


def _leaf(output: str) -> dict[str, str]:
    return {_OUTPUT_KEY: output}


def _row(*outputs: str) -> dict[str, Any]:
    """Map the five vowels, in a-i-u-e-o order, to the given outputs."""
    if len(outputs) != len(_VOWELS):
        raise ValueError(f"a row needs {len(_VOWELS)} outputs, got {len(outputs)}")
    return {vowel: _leaf(output) for vowel, output in zip(_VOWELS, outputs)}


def _yoon(stem: str) -> dict[str, Any]:
    return _row(stem + "ゃ", stem + "ぃ", stem + "ゅ", stem + "ぇ", stem + "ょ")


def _prefixed(node: dict[str, Any], prefix: str) -> dict[str, Any]:
    return {
        key: prefix + value if key == _OUTPUT_KEY else _prefixed(value, prefix)
        for key, value in node.items()
    }


def _small_kana() -> dict[str, Any]:
    return {
        "t": {"u": _leaf("っ"), "s": {"u": _leaf("っ")}},
        "w": {"a": _leaf("ゎ")},
        "k": {"a": _leaf("ヵ"), "e": _leaf("ヶ")},
        "c": {"a": _leaf("ヵ"), "e": _leaf("ヶ")},
        **_row("ぁ", "ぃ", "ぅ", "ぇ", "ぉ"),
        "y": _row("ゃ", "ぃ", "ゅ", "ぇ", "ょ"),
    }


def _consonants() -> dict[str, dict[str, Any]]:
    return {
        "k": {
            **_row("か", "き", "く", "け", "こ"),
            "y": _yoon("き"),
            "w": {"a": _leaf("くぁ")},
        },
        "s": {
            **_row("さ", "し", "す", "せ", "そ"),
            "y": _yoon("し"),
            "w": _row("すぁ", "すぃ", "すぅ", "すぇ", "すぉ"),
            "h": {**_row("しゃ", "し", "しゅ", "しぇ", "しょ"), "y": _yoon("し")},
        },
        "t": {
            **_row("た", "ち", "つ", "て", "と"),
            "y": _yoon("ち"),
            "s": _row("つぁ", "つぃ", "つ", "つぇ", "つぉ"),
            "h": _row("てゃ", "てぃ", "てゅ", "てぇ", "てょ"),
            "w": _row("とぁ", "とぃ", "とぅ", "とぇ", "とぉ"),
        },
        "h": {**_row("は", "ひ", "ふ", "へ", "ほ"), "y": _yoon("ひ")},
        "m": {**_row("ま", "み", "む", "め", "も"), "y": _yoon("み")},
        "y": _row("や", "い", "ゆ", "いぇ", "よ"),
        "r": {**_row("ら", "り", "る", "れ", "ろ"), "y": _yoon("り")},
        "w": {
            "a": _leaf("わ"),
            "i": _leaf("うぃ"),
            "u": _leaf("う"),
            "e": _leaf("うぇ"),
            "o": _leaf("を"),
            "h": _row("うぁ", "うぃ", "う", "うぇ", "うぉ"),
        },
        "g": {
            **_row("が", "ぎ", "ぐ", "げ", "ご"),
            "y": _yoon("ぎ"),
            "w": _row("ぐぁ", "ぐぃ", "ぐぅ", "ぐぇ", "ぐぉ"),
        },
        "z": {**_row("ざ", "じ", "ず", "ぜ", "ぞ"), "y": _yoon("じ")},
        "d": {
            **_row("だ", "ぢ", "づ", "で", "ど"),
            "y": _yoon("ぢ"),
            "h": _row("でゃ", "でぃ", "でゅ", "でぇ", "でょ"),
            "w": _row("どぁ", "どぃ", "どぅ", "どぇ", "どぉ"),
        },
        "b": {**_row("ば", "び", "ぶ", "べ", "ぼ"), "y": _yoon("び")},
        "p": {**_row("ぱ", "ぴ", "ぷ", "ぺ", "ぽ"), "y": _yoon("ぴ")},
        "v": {
            **_row("ゔぁ", "ゔぃ", "ゔ", "ゔぇ", "ゔぉ"),
            "y": _row("ゔゃ", "ゔぃ", "ゔゅ", "ゔぇ", "ゔょ"),
        },
        "q": {
            **_row("くぁ", "くぃ", "くぅ", "くぇ", "くぉ"),
            "y": _row("くゃ", "くぃ", "くゅ", "くぇ", "くょ"),
            "w": _row("くぁ", "くぃ", "くぅ", "くぇ", "くぉ"),
        },
        "f": {
            **_row("ふぁ", "ふぃ", "ふ", "ふぇ", "ふぉ"),
            "y": _row("ふゃ", "ふぃ", "ふゅ", "ふぇ", "ふょ"),
            "w": _row("ふぁ", "ふぃ", "ふぅ", "ふぇ", "ふぉ"),
        },
        "c": {
            **_row("か", "き", "く", "け", "こ"),
            "y": _yoon("ち"),
            "h": {**_row("ちゃ", "ち", "ちゅ", "ちぇ", "ちょ"), "y": _yoon("ち")},
        },
        "j": {
            **_row("じゃ", "じ", "じゅ", "じぇ", "じょ"),
            "y": _yoon("じ"),
        },
    }


def kana_table() -> dict[str, Any]:
    """Return a fresh nested mapping from romaji to kana.

    Each key is one romaji character leading to a child mapping; the empty
    key of a mapping holds the kana spelled by the path to it. The top level
    has no output of its own.
    """
    table: dict[str, Any] = dict(_row("あ", "い", "う", "え", "お"))

    for consonant, node in _consonants().items():
        if consonant in _DOUBLING:
            node[consonant] = _prefixed(node, _SOKUON)
        table[consonant] = node

    table["n"] = {
        **_row("な", "に", "ぬ", "ね", "の"),
        "y": _yoon("に"),
        "'": _leaf("ん"),
        _OUTPUT_KEY: "ん",
    }

    table.update((mark, _leaf(kana)) for mark, kana in _PUNCTUATION.items())

    table["x"] = {"n": _leaf("ん"), **_small_kana()}
    table["l"] = _small_kana()
    return table