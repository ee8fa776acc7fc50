"""Transition tree that maps romaji sequences to kana."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any

from .kana_table import kana_table

_OUTPUT_KEY = ""


@dataclass
class KanaNode:
    """A node of the romaji-to-kana tree.

    ``output`` is the kana spelled by the path leading to this node, or None
    when that path is only the start of a longer sequence.
    """

    output: str | None = None
    transitions: dict[str, KanaNode] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> KanaNode:
        """Build a tree from nested mappings.

        The empty key holds a node's output and every other key leads to a
        child mapping. Only the first character of a key is used; when several
        keys share a first character, the one that sorts first wins. Raises
        ValueError on a value that is not a mapping or an output that is not
        a string.
        """
        if not isinstance(mapping, Mapping):
            raise ValueError(f"expected a mapping, got {type(mapping).__name__}")
        output = mapping.get(_OUTPUT_KEY)
        if output is not None and not isinstance(output, str):
            raise ValueError(f"node output must be a string, got {output!r}")
        return cls(output=output, transitions=cls._children(mapping))

    @classmethod
    def _children(cls, mapping: Mapping[str, Any]) -> dict[str, KanaNode]:
        children: dict[str, KanaNode] = {}
        for key in sorted(k for k in mapping if k != _OUTPUT_KEY):
            char = key[0]
            if char in children:
                continue
            value = mapping[key]
            if not isinstance(value, Mapping):
                raise ValueError(f"transition {key!r} does not lead to a mapping")
            children[char] = cls.from_mapping(value)
        return children

    def find_transition_node(self, char: str) -> KanaNode | None:
        """Return the child reached through ``char``, or None if there is none."""
        return self.transitions.get(char)


@lru_cache(maxsize=None)
def to_kana_tree() -> KanaNode:
    """Return the shared romaji-to-kana transition tree."""
    return KanaNode.from_mapping(kana_table())