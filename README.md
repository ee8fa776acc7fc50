# kanakit

Tools for working with Japanese text in plain Python. The package has no third-party dependencies.

## What it offers

- **Character tests** (`kanakit.chars`): `is_char_hiragana`, `is_char_katakana`,
  `is_char_kana`, `is_char_kanji`, `is_char_japanese`, `is_char_romaji`,
  `is_char_japanese_number`, `is_char_latin_number`, `is_char_english_punctuation`,
  `is_char_japanese_punctuation`, `is_char_punctuation`, `is_char_long_dash`,
  `is_char_slash_dot`, `is_char_upper_case`, `is_char_vowel`, `is_char_consonant`
  and `is_char_in_range`. The module also holds the Unicode ranges these tests use.
  Note that the prolonged sound mark `ー` counts as hiragana. `is_char_vowel` and
  `is_char_consonant` take `include_y`, which defaults to `True`.
- **Slicing by character position** (`kanakit.chars.get_chunk`): `get_chunk(text, start, end)`.
  A `start` past the end of the text falls back to 0. An `end` past the end falls back to
  the text's length. If the start still ends up after the end, it raises `ValueError`.
- **Kana conversion** (`kanakit.kana_conversion`):
  - `hiragana_to_katakana` converts hiragana to katakana.
  - `katakana_to_hiragana` converts katakana to hiragana. A long dash after katakana
    becomes the matching vowel, so `バツゴー` becomes `ばつごう`. With
    `is_destination_romaji=True`, a long "o" becomes `お` instead of `う`.
  - Both pass every other character through unchanged. `ー` and `・` are kept as they are.
- **Tokenizing** (`kanakit.tokenize`): `tokenize` and `tokenize_detailed` split text into
  runs of characters that share a `TokenType`. With `compact=True`, they use only
  `TokenType.EN`, `TokenType.JA` and `TokenType.OTHER`. This merges spaces with text, kanji
  with kana, and numerals with punctuation.
- **Okurigana trimming** (`kanakit.okurigana`): `trim_okurigana(text, trim_from_start=False,
  match_kanji=None)` strips trailing kana from a word that mixes kanji and kana. With
  `trim_from_start=True`, it strips leading kana instead. When the text is all kana,
  `match_kanji` gives the written word that shows where to trim. Text that cannot be
  trimmed comes back unchanged.
- **Conversion trees**:
  - `kanakit.romaji_tree`: `to_romaji_tree()` returns the kana-to-romaji tree of
    `TransitionNode` objects.
  - `kanakit.kana_table`: `kana_table()` returns a fresh nested dict from romaji to kana.
  - `kanakit.kana_tree`: `to_kana_tree()` returns that table as a tree of `KanaNode`
    objects.
  - Each node has an `output`, a `transitions` dict and `find_transition_node(char)`.
    `TransitionNode.from_mapping` and `KanaNode.from_mapping` build trees from nested
    mappings of your own.

## Installation

```
pip install kanakit
```

## Examples

```python
from kanakit.chars import is_char_kana, is_char_kanji, get_chunk
from kanakit.kana_conversion import hiragana_to_katakana, katakana_to_hiragana
from kanakit.tokenize import tokenize, tokenize_detailed, TokenType
from kanakit.okurigana import trim_okurigana
from kanakit.romaji_tree import to_romaji_tree
from kanakit.kana_tree import to_kana_tree

is_char_kana("ー")                       # True
is_char_kanji("腹")                      # True
get_chunk("derpalerp", 3, 6)             # "pal"

hiragana_to_katakana("ひらがな")          # "ヒラガナ"
katakana_to_hiragana("カタカナ")          # "かたかな"
katakana_to_hiragana("バツゴー")          # "ばつごう"

tokenize("私は悲しい")                    # ["私", "は", "悲", "しい"]
tokenize("ふふフフ")                      # ["ふふ", "フフ"]
tokenize_detailed("感じ")                 # [(TokenType.KANJI, "感"), (TokenType.HIRAGANA, "じ")]

trim_okurigana("踏み込む")                                     # "踏み込"
trim_okurigana("お祝い", trim_from_start=True)                  # "祝い"
trim_okurigana("ふみこむ", match_kanji="踏み込む")               # "ふみこ"

to_romaji_tree().find_transition_node("か").output              # "ka"
to_kana_tree().find_transition_node("k").find_transition_node("a").output  # "か"
```

## What it does not do

The package builds the romaji-to-kana and kana-to-romaji trees. It has no function that
walks them to convert whole strings, so there is no romaji-to-kana or kana-to-romaji
text conversion. The only text converters are `hiragana_to_katakana` and
`katakana_to_hiragana`. The package also has no whole-string tests such as "is this text
all hiragana". It has no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```