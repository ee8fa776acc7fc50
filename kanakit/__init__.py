"""Character classification, kana conversion, tokenizing, okurigana trimming and romaji/kana transition trees for Japanese text."""

__version__ = "0.1.0"