import random

import pytest

from lipsum import InsufficientData, InvalidOrder
from lipsum.markov_chain import END, ChainModel, Successor, build_model, tokenize, words

QUICK = "The quick fox jumps. The fox runs."


def test_chain_map():
    model = build_model("foo bar baz quuz", order=2)
    assert len(model) == 3
    assert model.successors(("foo", "bar")) == [(Successor("baz", False), 1)]
    assert model.successors(("bar", "baz")) == [(Successor("quuz", False), 1)]
    assert model.successors(("baz", "quuz")) == [(Successor(END, True), 1)]


def test_words_accumulate_across_learn_calls():
    model = build_model("red green blue", order=2)
    assert model.words(("red", "green")) == ["blue"]

    model.learn("red green yellow")
    assert model.words(("red", "green")) == ["blue", "yellow"]
    assert model.words(("foo", "bar")) is None


def test_len_and_is_empty():
    model = ChainModel(2)
    assert len(model) == 0
    assert model.is_empty()

    model.learn("red orange yellow green blue indigo")
    assert len(model) == 5
    assert not model.is_empty()


def test_quick_fox_start_keys():
    model = build_model(QUICK, order=1)
    assert ("The",) in model.start_keys
    assert model.start_keys == (("The",),)
    assert dict(model.successors("The")) == {
        Successor("quick"): 1,
        Successor("fox"): 1,
    }


def test_sentence_boundary_is_recorded_on_the_transition():
    model = build_model(QUICK, order=1)
    assert model.successors(("jumps",)) == [(Successor("The", True), 1)]
    assert model.successors(("runs",)) == [(Successor(END, True), 1)]


def test_start_key_after_paragraph_break():
    model = build_model("a b\n\nc d e", order=2)
    assert model.start_keys == (("a", "b"), ("c", "d"))


def test_window_spans_sentence_boundaries():
    model = build_model(QUICK, order=2)
    assert ("jumps", "The") in model
    assert model.start_keys == (("The", "quick"), ("The", "fox"))


@pytest.mark.parametrize("order", [1, 2, 3])
def test_counts_match_observations(order):
    corpus = "a b a b a c. b a c a b b a."
    model = build_model(corpus, order=order)
    total = 0
    for key in model.keys():
        pairs = model.successors(key)
        assert pairs
        assert all(count >= 1 for _, count in pairs)
        total += sum(count for _, count in pairs)
    # One transition per full window, the last one going to END.
    assert total == len(words(corpus)) - order + 1


def test_repeated_words_are_counted():
    model = build_model("a b a b a c", order=1)
    assert dict(model.successors("a")) == {Successor("b"): 2, Successor("c"): 1}


def test_too_short_corpus_gives_an_empty_model():
    model = build_model("one two", order=2)
    assert model.is_empty()
    assert model.start_keys == ()

    model = build_model("one two three", order=2)
    assert not model.is_empty()


def test_empty_corpus():
    model = build_model("", order=2)
    assert model.start_keys == ()
    with pytest.raises(InsufficientData):
        model.choose_start(random.Random(0))


@pytest.mark.parametrize("order", [0, -1, 9, 1.5, True, "2"])
def test_invalid_order(order):
    with pytest.raises(InvalidOrder):
        build_model(QUICK, order=order)


def test_invalid_order_is_a_value_error():
    with pytest.raises(ValueError):
        ChainModel(0)


def test_build_is_idempotent():
    first = build_model(" ".join([QUICK] * 3), order=2)
    second = build_model(" ".join([QUICK] * 3), order=2)
    assert first == second
    for key in first.keys():
        assert first.successors(key) == second.successors(key)
    assert first != build_model(" ".join([QUICK] * 3), order=1)


def test_each_learn_call_is_its_own_segment():
    model = ChainModel(1)
    model.learn("x y")
    model.learn("x z")
    assert dict(model.successors("x")) == {Successor("y"): 1, Successor("z"): 1}
    assert model.successors("y") == [(Successor(END, True), 1)]
    assert model.start_keys == (("x",),)


def test_learn_accepts_tokens():
    model = ChainModel(2)
    model.learn(tokenize("a b c"))
    assert model == build_model("a b c", order=2)


def test_learn_with_progress_bar():
    model = ChainModel(2)
    model.learn(QUICK, progress=True)
    assert len(model) == 6


def test_sample_is_weighted_and_reaches_every_successor():
    model = build_model("a b. a b. a b. a c.", order=1)
    rng = random.Random(0)
    draws = [model.sample(("a",), rng).word for _ in range(2000)]
    assert set(draws) == {"b", "c"}
    assert draws.count("b") > draws.count("c")


def test_sample_unknown_key():
    model = build_model(QUICK, order=1)
    assert model.sample(("nope",), random.Random(0)) is None
