import pytest

from kanakit.chars import (
    HIRAGANA_END,
    HIRAGANA_START,
    get_chunk,
    is_char_consonant,
    is_char_english_punctuation,
    is_char_hiragana,
    is_char_in_range,
    is_char_japanese,
    is_char_japanese_number,
    is_char_japanese_punctuation,
    is_char_kana,
    is_char_kanji,
    is_char_katakana,
    is_char_latin_number,
    is_char_long_dash,
    is_char_punctuation,
    is_char_romaji,
    is_char_slash_dot,
    is_char_upper_case,
    is_char_vowel,
)

JA_PUNC = "！？。：・、〜ー「」『』［］（）｛｝"
EN_PUNC = "!?.:/,~-‘’“”[](){}"


def test_english_punctuation():
    assert all(is_char_english_punctuation(c) for c in EN_PUNC) is True
    assert all(is_char_english_punctuation(c) for c in JA_PUNC) is False
    assert is_char_english_punctuation(" ") is True
    assert is_char_english_punctuation("a") is False
    assert is_char_english_punctuation("ふ") is False
    assert is_char_english_punctuation("字") is False


def test_punctuation():
    assert all(is_char_punctuation(c) for c in EN_PUNC) is True
    assert all(is_char_punctuation(c) for c in JA_PUNC) is True
    assert is_char_punctuation(" ") is True
    assert is_char_punctuation("　") is True
    assert is_char_punctuation("a") is False
    assert is_char_punctuation("ふ") is False
    assert is_char_punctuation("字") is False


def test_japanese_punctuation():
    assert all(is_char_japanese_punctuation(c) for c in EN_PUNC) is False
    assert all(is_char_japanese_punctuation(c) for c in JA_PUNC) is True
    assert is_char_japanese_punctuation("　") is True
    assert is_char_japanese_punctuation("?") is False
    assert is_char_japanese_punctuation("a") is False
    assert is_char_japanese_punctuation("ふ") is False
    assert is_char_japanese_punctuation("字") is False


@pytest.mark.parametrize(
    "text, start, end, expected",
    [("derpalerp", 3, 6, "pal"), ("de", 0, 1, "d"), ("", 1, 2, "")],
)
def test_get_chunk(text, start, end, expected):
    assert get_chunk(text, start, end) == expected


def test_get_chunk_clamps_end_to_length():
    assert get_chunk("abc", 1, 10) == "bc"


def test_get_chunk_start_past_end_of_text_falls_back_to_zero():
    assert get_chunk("abc", 5, 7) == "abc"


def test_get_chunk_counts_characters_not_bytes():
    assert get_chunk("ひらがな", 1, 3) == "らが"


def test_get_chunk_rejects_reversed_bounds():
    with pytest.raises(ValueError):
        get_chunk("abcdef", 4, 2)


def test_consonant():
    assert is_char_consonant("y", False) is False
    assert is_char_consonant("y", True) is True
    assert is_char_consonant("a", True) is False
    assert is_char_consonant("!", True) is False
    assert is_char_consonant("k", False) is True


def test_vowel():
    assert is_char_vowel("y", False) is False
    assert is_char_vowel("y", True) is True
    assert is_char_vowel("x") is False
    assert is_char_vowel("!") is False
    assert is_char_vowel("y") is True
    assert is_char_vowel("e") is True


def test_hiragana():
    assert is_char_hiragana("な") is True
    assert is_char_hiragana("ナ") is False
    assert is_char_hiragana("n") is False
    assert is_char_hiragana("!") is False
    assert is_char_hiragana("ー") is True


def test_katakana():
    assert is_char_katakana("ナ") is True
    assert is_char_katakana("は") is False
    assert is_char_katakana("n") is False
    assert is_char_katakana("!") is False


def test_kana():
    assert is_char_kana("は") is True
    assert is_char_kana("ナ") is True
    assert is_char_kana("n") is False
    assert is_char_kana("!") is False
    assert is_char_kana("-") is False
    assert is_char_kana("ー") is True


def test_kanji():
    assert is_char_kanji("腹") is True
    assert is_char_kanji("一") is True
    assert is_char_kanji("ー") is False
    assert is_char_kanji("は") is False
    assert is_char_kanji("ナ") is False
    assert is_char_kanji("n") is False
    assert is_char_kanji("!") is False


@pytest.mark.parametrize(
    "char, expected",
    [
        ("１", True),
        ("ナ", True),
        ("は", True),
        ("缶", True),
        ("〜", True),
        ("ｎ", True),
        ("Ｋ", True),
        ("1", False),
        ("n", False),
        ("K", False),
        ("!", False),
    ],
)
def test_japanese(char, expected):
    assert is_char_japanese(char) is expected


def test_in_range():
    assert is_char_in_range("は", HIRAGANA_START, HIRAGANA_END) is True
    assert is_char_in_range("d", HIRAGANA_START, HIRAGANA_END) is False


def test_long_dash():
    assert is_char_long_dash("ー") is True
    assert is_char_long_dash("-") is False
    assert is_char_long_dash("f") is False
    assert is_char_long_dash("ふ") is False


def test_slash_dot():
    assert is_char_slash_dot("・") is True
    assert is_char_slash_dot("/") is False


def test_upper_case():
    assert is_char_upper_case("A") is True
    assert is_char_upper_case("D") is True
    assert is_char_upper_case("-") is False
    assert is_char_upper_case("ー") is False
    assert is_char_upper_case("a") is False
    assert is_char_upper_case("d") is False


def test_romaji():
    assert is_char_romaji("n") is True
    assert is_char_romaji("!") is True
    assert is_char_romaji("ナ") is False
    assert is_char_romaji("は") is False
    assert is_char_romaji("缶") is False
    assert is_char_romaji("ō") is True


def test_numbers():
    assert all(is_char_japanese_number(c) for c in "０１２３４５６７８９") is True
    assert is_char_japanese_number("5") is False
    assert all(is_char_latin_number(c) for c in "0123456789") is True
    assert is_char_latin_number("５") is False
    assert is_char_latin_number("a") is False


def test_multi_character_input_is_rejected():
    with pytest.raises(TypeError):
        is_char_kana("あい")