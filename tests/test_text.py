from collections import Counter

from studykit.text import capitalize, fmt, tokenize


def test_tokenize_drops_stop_words_and_short_words():
    assert tokenize("The Mitochondria is the POWERHOUSE of the cell.", "en") == [
        "mitochondria",
        "powerhouse",
        "cell",
    ]


def test_tokenize_keeps_duplicates():
    assert Counter(tokenize("Energy, energy and more ENERGY!", "en"))["energy"] == 3


def test_tokenize_keeps_hyphenated_words():
    assert tokenize("A state-of-the-art design.", "en") == ["state-of-the-art", "design"]


def test_tokenize_composes_accents():
    decomposed = "Cafe\u0301 re\u0301sume\u0301 an\u0303o"
    assert tokenize(decomposed, "es") == ["caf\u00e9", "r\u00e9sum\u00e9", "a\u00f1o"]


def test_tokenize_chinese_is_per_character():
    assert tokenize("光合作用是植物的过程。", "zh") == ["光", "合", "作", "用", "植", "物", "过", "程"]


def test_tokenize_chinese_keeps_ascii_letters_and_digits():
    assert tokenize("DNA有2条链", "zh") == ["d", "n", "a", "2", "条", "链"]


def test_unknown_language_uses_english_rules():
    text = "The cell and the nucleus."
    assert tokenize(text, "xx") == tokenize(text, "en")
    assert tokenize(text, None) == tokenize(text, "en")


def test_region_subtags_resolve():
    assert tokenize("光合作用", "zh-CN") == ["光", "合", "作", "用"]


def test_tokenize_twice_adds_nothing():
    text = "Ribosomes translate mRNA into proteins; proteins fold (mostly) on their own!"
    first = tokenize(text, "en")
    second = tokenize(" ".join(first), "en")
    assert not Counter(second) - Counter(first)


def test_punctuation_only_yields_nothing():
    assert tokenize("?!... 🙂 ,;", "en") == []


def test_fmt_fills_and_leaves_unknown():
    assert fmt('Based on: "{0}" {1}', "x") == 'Based on: "x" {1}'


def test_capitalize():
    assert capitalize("energy") == "Energy"
    assert capitalize("") == ""
