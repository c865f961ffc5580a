import random

from studykit.lexicon import get_profile
from studykit.quiz import BLANK, blank_term, cloze_text, generate_quiz, pick_distractors
from studykit.segment import segment

EN = get_profile("en")


def test_quiz_items_are_well_formed(biology):
    sentences = segment(biology, "en")
    quiz = generate_quiz(biology, "en", 5, rng=random.Random(3))
    assert len(quiz) == 5
    for item in quiz:
        assert len(item.options) == 4
        assert 0 <= item.correct_answer_index < 4
        assert item.question.startswith("Fill in the blank:")
        assert BLANK in item.question
        assert item.explanation in sentences
        assert item.answer.lower() in item.explanation.lower()
        assert item.answer not in item.options[:item.correct_answer_index]


def test_distinct_sentences_per_quiz(biology):
    quiz = generate_quiz(biology, "en", 8, rng=random.Random(0))
    explanations = [q.explanation for q in quiz]
    assert len(explanations) == len(set(explanations))


def test_seeded_quiz_is_reproducible(biology):
    a = generate_quiz(biology, "en", 3, rng=random.Random(42))
    b = generate_quiz(biology, "en", 3, rng=random.Random(42))
    assert [q.to_dict() for q in a] == [q.to_dict() for q in b]


def test_empty_and_degenerate_input():
    assert generate_quiz("", "en") == []
    assert generate_quiz("no punctuation so no sentences at all here", "en") == []
    assert generate_quiz("Some text that is long enough.", "en", 0) == []


def test_fewer_sentences_than_questions():
    quiz = generate_quiz("Mitochondria produce energy for every living cell.", "en", 5, rng=random.Random(1))
    assert len(quiz) == 1
    assert quiz[0].answer == "mitochondria"


def test_placeholder_pads_distractors():
    quiz = generate_quiz(
        "Quantum quantum quantum entanglement entanglement!", "en", 1, rng=random.Random(5)
    )
    item = quiz[0]
    assert item.answer == "entanglement"
    assert sorted(item.options) == ["entanglement", "quantum", "variable", "variable"]


def test_custom_placeholder():
    quiz = generate_quiz(
        "Quantum quantum quantum entanglement entanglement!",
        "en",
        1,
        rng=random.Random(5),
        placeholder="none",
    )
    assert quiz[0].options.count("none") == 2


def test_blank_respects_word_boundaries():
    s = "The Cell divides; cellular cells and the cell."
    assert blank_term(s, "cell", EN) == f"The {BLANK} divides; cellular cells and the {BLANK}."


def test_blank_accented_terms():
    es = get_profile("es")
    s = "La canción y el año nuevo; los años pasan."
    assert blank_term(s, "año", es) == f"La canción y el {BLANK} nuevo; los años pasan."
    assert blank_term("La canción", "ción", es) == "La canción"


def test_blank_chinese_has_no_boundaries():
    zh = get_profile("zh")
    assert blank_term("光合作用需要光。", "光", zh) == f"{BLANK}合作用需要{BLANK}。"


def test_cloze_keeps_original_casing():
    assert cloze_text("The Cell is small.", "cell", EN) == "The {{c1::Cell}} is small."


def test_distractors_prefer_same_initial():
    keywords = ["cell", "cytoplasm", "carbon", "energy", "chlorophyll"]
    out = pick_distractors("cell", keywords, random.Random(0))
    assert sorted(out) == ["carbon", "chlorophyll", "cytoplasm"]


def test_distractors_fill_then_pad():
    out = pick_distractors("energy", ["energy", "enzyme", "cell"], random.Random(0))
    assert out == ["enzyme", "cell", "variable"]


def test_chinese_quiz():
    text = "光合作用是植物利用光能制造养分的过程。植物需要水和阳光才能生长。"
    quiz = generate_quiz(text, "zh", 2, rng=random.Random(2))
    assert len(quiz) == 2
    for item in quiz:
        assert item.question.startswith("填空")
        assert BLANK in item.question
        assert len(item.options) == 4
