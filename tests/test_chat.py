import pytest

from studykit.chat import ChatEngine, create_chat_engine, jaccard, stream_chunks
from studykit.config import EngineConfig

MITO = "The mitochondria is the powerhouse of the cell."


def test_reply_quotes_matching_sentence(biology):
    engine = create_chat_engine(biology, "en")
    reply = engine.reply("mitochondria")
    assert reply.startswith("Based on your notes:")
    assert MITO in reply


def test_unknown_term_gets_generic_fallback(biology):
    engine = create_chat_engine(biology, "en")
    assert engine.reply("xyzzy") == (
        "I couldn't find a specific reference to that in the text. "
        "Try using keywords from your document."
    )


@pytest.mark.parametrize("query", ["?!", "🙂", "the", "   ", "it is"])
def test_unparseable_queries_get_canned_reply(biology, query):
    engine = create_chat_engine(biology, "en")
    reply = engine.reply(query)
    assert reply.startswith("I didn't catch that")
    assert "".join(engine.respond(query)) == reply


def test_greeting(biology):
    engine = create_chat_engine(biology, "en")
    assert engine.reply("hello there") == engine.welcome


def test_summary_request_points_at_key_sentence(biology):
    engine = create_chat_engine(biology, "en")
    reply = engine.reply("can you give me a summary")
    assert reply.startswith("I suggest checking the Simplify tab")
    assert any(s in reply for s in engine.sentences)


def test_summary_request_on_empty_document():
    engine = create_chat_engine("", "en")
    assert engine.reply("summary please").startswith("I couldn't find")


def test_matches_are_sorted_and_positive(biology):
    engine = ChatEngine(biology, "en")
    found = engine.matches("mitochondria energy")
    assert found
    scores = [m.score for m in found]
    assert scores == sorted(scores, reverse=True)
    assert all(s > 0 for s in scores)


def test_substring_bonus(biology):
    engine = ChatEngine(biology, "en")
    best = engine.matches("powerhouse of the cell")[0]
    assert best.sentence == MITO
    assert best.score == pytest.approx(2 / 3 + 0.5)


def test_reply_joins_top_two(biology):
    engine = ChatEngine(biology, "en")
    top = engine.matches("mitochondria")[:2]
    assert engine.reply("mitochondria") == 'Based on your notes: "{} {}"'.format(
        top[0].sentence, top[1].sentence
    )


def test_stream_reconstructs_reply(biology):
    engine = create_chat_engine(biology, "en")
    chunks = list(engine.respond("mitochondria"))
    assert "".join(chunks) == engine.reply("mitochondria")
    assert all(len(c) == 5 for c in chunks[:-1])
    assert 0 < len(chunks[-1]) <= 5


def test_stream_chunk_size_from_config(biology):
    engine = create_chat_engine(biology, "en", EngineConfig(stream_chunk_size=3))
    chunks = list(engine.respond("xyzzy"))
    assert all(len(c) == 3 for c in chunks[:-1])


def test_stream_chunks():
    assert list(stream_chunks("abcdefghijkl", 5)) == ["abcde", "fghij", "kl"]
    assert list(stream_chunks("", 5)) == []
    with pytest.raises(ValueError):
        list(stream_chunks("abc", 0))


def test_stream_can_be_closed_early():
    gen = stream_chunks("abcdefghij", 2)
    assert next(gen) == "ab"
    gen.close()
    assert list(gen) == []


def test_jaccard():
    assert jaccard(frozenset(), frozenset()) == 0.0
    assert jaccard(frozenset("ab"), frozenset("bc")) == pytest.approx(1 / 3)


def test_localized_replies():
    engine = create_chat_engine("Die Zelle ist die kleinste Einheit des Lebens.", "de")
    assert engine.reply("Zelle").startswith("Basierend auf Ihren Notizen:")
    assert engine.reply("hallo") == "Hallo! Ich bin bereit, Ihnen beim Lernen Ihrer Notizen zu helfen."


def test_chinese_chat():
    engine = create_chat_engine("线粒体是细胞的动力工厂。植物需要水和阳光。", "zh")
    assert "线粒体是细胞的动力工厂。" in engine.reply("线粒体")
    assert engine.reply("你好啊") == "你好！我准备好帮您学习上传的笔记了。"


def test_unsupported_language_falls_back(biology):
    engine = create_chat_engine(biology, "klingon")
    assert engine.profile.tag == "en"
    assert MITO in engine.reply("mitochondria")
