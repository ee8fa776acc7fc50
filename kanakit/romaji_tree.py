"""Transition tree that maps kana sequences to their romaji spelling."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any

_OUTPUT_KEY = ""

# Letters whose sound is doubled after the small tsu. 'n' and 'y' are never
# doubled, and 'ch' takes a leading 't' instead.
_DOUBLED_CONSONANTS = frozenset("bcdfghjkmprstvwz")


@dataclass
class TransitionNode:
    """A node of the kana-to-romaji tree: its romaji output and its children."""

    output: str = ""
    transitions: dict[str, TransitionNode] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> TransitionNode:
        """Build a tree from nested mappings.

        The empty key holds a node's output and every other key leads to a
        child. Only the first character of a key is used; when several keys
        share a first character, the one that sorts first wins. The top-level
        mapping may omit its output, every nested one must have it.
        """
        if not isinstance(mapping, Mapping):
            raise ValueError(f"expected a mapping, got {type(mapping).__name__}")
        output = mapping.get(_OUTPUT_KEY, "")
        if not isinstance(output, str):
            raise ValueError(f"node output must be a string, got {output!r}")
        return cls(output=output, transitions=cls._children(mapping))

    @classmethod
    def _children(cls, mapping: Mapping[str, Any]) -> dict[str, TransitionNode]:
        children: dict[str, TransitionNode] = {}
        for key in sorted(k for k in mapping if k != _OUTPUT_KEY):
            char = key[0]
            if char in children:
                continue
            value = mapping[key]
            if not isinstance(value, Mapping):
                raise ValueError(f"transition {key!r} does not lead to a mapping")
            if _OUTPUT_KEY not in value:
                raise ValueError(f"transition {key!r} has no output")
            children[char] = cls.from_mapping(value)
        return children

    def find_transition_node(self, char: str) -> TransitionNode | None:
        """Return the child reached through ``char``, or None if there is none."""
        return self.transitions.get(char)


def _yoon(stem: str, yi_stem: str) -> dict[str, dict[str, str]]:
    return {
        "ゃ": {_OUTPUT_KEY: stem + "a"},
        "ゅ": {_OUTPUT_KEY: stem + "u"},
        "ょ": {_OUTPUT_KEY: stem + "o"},
        "ぃ": {_OUTPUT_KEY: yi_stem + "yi"},
        "ぇ": {_OUTPUT_KEY: stem + "e"},
    }


def _leaf(output: str) -> dict[str, str]:
    return {_OUTPUT_KEY: output}


def _with_yoon(output: str, stem: str, yi_stem: str) -> dict[str, Any]:
    return {_OUTPUT_KEY: output, **_yoon(stem, yi_stem)}


_PUNCTUATION = {
    "。": ".",
    "、": ",",
    "：": ":",
    "・": "/",
    "！": "!",
    "？": "?",
    "〜": "~",
    "ー": "-",
    "「": "‘",
    "」": "’",
    "『": "“",
    "』": "”",
    "［": "[",
    "］": "]",
    "（": "(",
    "）": ")",
    "｛": "{",
    "｝": "}",
    "　": " ",
}

_SMALL_KANA = {
    "ゃ": "ya",
    "ゅ": "yu",
    "ょ": "yo",
    "ぁ": "a",
    "ぃ": "i",
    "ぅ": "u",
    "ぇ": "e",
    "ぉ": "o",
}

_PLAIN = {
    "あ": "a", "い": "i", "う": "u", "え": "e", "お": "o",
    "か": "ka", "け": "ke", "こ": "ko",
    "さ": "sa", "す": "su", "せ": "se", "そ": "so",
    "た": "ta", "つ": "tsu", "て": "te", "と": "to",
    "な": "na", "ぬ": "nu", "ね": "ne", "の": "no",
    "は": "ha", "へ": "he", "ほ": "ho",
    "ま": "ma", "む": "mu", "め": "me", "も": "mo",
    "ら": "ra", "る": "ru", "れ": "re", "ろ": "ro",
    "や": "ya", "ゆ": "yu", "よ": "yo",
    "わ": "wa", "ゐ": "wi", "ゑ": "we", "を": "wo",
    "が": "ga", "ぐ": "gu", "げ": "ge", "ご": "go",
    "ざ": "za", "ず": "zu", "ぜ": "ze", "ぞ": "zo",
    "だ": "da", "づ": "zu", "で": "de", "ど": "do",
    "ば": "ba", "ぶ": "bu", "べ": "be", "ぼ": "bo",
    "ぱ": "pa", "ぷ": "pu", "ぺ": "pe", "ぽ": "po",
    "ゔぁ": "va", "ゔぃ": "vi", "ゔぇ": "ve", "ゔぉ": "vo",
}

# kana -> (output, yoon stem, stem used before 'yi')
_WITH_YOON = {
    "き": ("ki", "ky", "k"),
    "く": ("ku", "ky", "k"),
    "し": ("shi", "sh", "sh"),
    "ち": ("chi", "ch", "ch"),
    "に": ("ni", "ny", "n"),
    "ひ": ("hi", "hy", "h"),
    "ふ": ("fu", "fy", "f"),
    "み": ("mi", "my", "m"),
    "り": ("ri", "ry", "r"),
    "ぎ": ("gi", "gy", "g"),
    "じ": ("ji", "j", "j"),
    "ぢ": ("ji", "j", "j"),
    "び": ("bi", "by", "b"),
    "ぴ": ("pi", "py", "p"),
    "ゔ": ("vu", "vy", "v"),
}

_N_FOLLOWERS = {
    "あ": "n'a",
    "い": "n'i",
    "う": "n'u",
    "え": "n'e",
    "お": "n'o",
    "や": "n'ya",
    "ゆ": "n'yu",
    "よ": "n'yo",
}


def _geminate(output: str) -> str:
    if output.startswith("ch"):
        return "t" + output
    if output and output[0] in _DOUBLED_CONSONANTS:
        return output[0] + output
    return output


def _geminated(node: Mapping[str, Any]) -> dict[str, Any]:
    return {
        key: _geminate(value) if key == _OUTPUT_KEY else _geminated(value)
        for key, value in node.items()
    }


def _romaji_mapping() -> dict[str, Any]:
    base: dict[str, Any] = {kana: _leaf(out) for kana, out in _PLAIN.items()}
    base.update(
        (kana, _with_yoon(out, stem, yi_stem))
        for kana, (out, stem, yi_stem) in _WITH_YOON.items()
    )
    base.update((kana, _leaf(out)) for kana, out in _PUNCTUATION.items())
    base.update((kana, _leaf(out)) for kana, out in _SMALL_KANA.items())

    sokuon: dict[str, Any] = {kana: _geminated(node) for kana, node in base.items()}
    sokuon["ん"] = _leaf("n")
    sokuon[_OUTPUT_KEY] = ""

    base["ん"] = {
        _OUTPUT_KEY: "n",
        **{kana: _leaf(out) for kana, out in _N_FOLLOWERS.items()},
    }
    base["っ"] = sokuon
    return base


@lru_cache(maxsize=None)
def to_romaji_tree() -> TransitionNode:
    """Return the shared kana-to-romaji transition tree."""
    return TransitionNode.from_mapping(_romaji_mapping())