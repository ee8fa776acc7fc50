import pytest

from kanakit.kana_conversion import (
    hiragana_to_katakana,
    is_char_initial_long_dash,
    is_char_inner_long_dash,
    is_kana_as_symbol,
    katakana_to_hiragana,
)


def test_katakana_to_hiragana_basic():
    assert katakana_to_hiragana("カタカナ") == "かたかな"
    assert katakana_to_hiragana("カタカナ is a type of kana") == "かたかな is a type of kana"


def test_hiragana_to_katakana_basic():
    assert hiragana_to_katakana("ひらがな") == "ヒラガナ"
    assert hiragana_to_katakana("ひらがな is a type of kana") == "ヒラガナ is a type of kana"


def test_hiragana_to_katakana_keeps_dash_and_dot():
    assert hiragana_to_katakana("ばつげーむ") == "バツゲーム"
    assert hiragana_to_katakana("・") == "・"


def test_hiragana_to_katakana_mixed():
    assert hiragana_to_katakana("アメリカじん") == "アメリカジン"
    assert hiragana_to_katakana("ばける") == "バケル"


def test_katakana_to_hiragana_mixed():
    assert katakana_to_hiragana("アメリカじん") == "あめりかじん"
    assert katakana_to_hiragana("バケル") == "ばける"


def test_long_vowel_o_becomes_u():
    assert katakana_to_hiragana("バツゴー") == "ばつごう"


def test_long_vowel_o_for_romaji_destination():
    assert katakana_to_hiragana("バツゴー", True) == "ばつごお"


def test_long_vowels_other():
    assert katakana_to_hiragana("セーラー") == "せえらあ"


def test_long_dash_after_hiragana_is_kept():
    assert katakana_to_hiragana("てすート") == "てすーと"
    assert katakana_to_hiragana("手巣ート") == "手巣ーと"
    assert katakana_to_hiragana("tesート") == "tesーと"


def test_initial_long_dash_is_kept():
    assert katakana_to_hiragana("ートtesu") == "ーとtesu"


def test_kana_as_symbol_is_kept():
    assert katakana_to_hiragana("ヶヵ") == "ヶヵ"


def test_round_trip():
    text = "ひらがなとカタカナ"
    assert katakana_to_hiragana(hiragana_to_katakana(text)) == "ひらがなとかたかな"


def test_unknown_kana_before_dash_raises():
    with pytest.raises(ValueError):
        katakana_to_hiragana("ッー")


def test_kana_missing_from_table_raises():
    with pytest.raises(ValueError):
        katakana_to_hiragana("ヮー")


def test_predicates():
    assert is_char_initial_long_dash("ー", 0) is True
    assert is_char_initial_long_dash("ー", 1) is False
    assert is_char_inner_long_dash("ー", 2) is True
    assert is_char_inner_long_dash("ー", 0) is False
    assert is_char_inner_long_dash("-", 2) is False
    assert is_kana_as_symbol("ヶ") is True
    assert is_kana_as_symbol("ヵ") is True
    assert is_kana_as_symbol("カ") is False


@pytest.mark.parametrize(
    ("katakana", "hiragana"),
    [
        ("カー", "かあ"),
        ("キー", "きい"),
        ("クー", "くう"),
        ("ケー", "けえ"),
        ("コー", "こう"),
    ],
)
def test_long_vowel_table(katakana, hiragana):
    assert katakana_to_hiragana(katakana) == hiragana