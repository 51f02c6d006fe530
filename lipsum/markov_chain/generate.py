import logging
import random
import re
from itertools import islice

from .. import config
from ..errors import InsufficientData
from .markov_chain import as_key

logger = logging.getLogger(__name__)

# Trailing punctuation dropped from a sentence-final word or the last word of a title.
_TRAILING_PUNCTUATION_RE = re.compile(r'[\W_]+$')


def _ensure_rng(rng):
    return random.Random() if rng is None else rng


def _check_model(model):
    if not model.start_keys:
        raise InsufficientData(order=model.order)


def _check_count(count, name='count'):
    if count < 0:
        raise ValueError(f"{name} must be non-negative, got {count}")


def capitalize(word):
    """Upper-cases the first character only, unlike str.capitalize()."""
    return word[:1].upper() + word[1:]


def strip_trailing_punctuation(word):
    """Drops trailing non-alphanumeric characters, keeping a word made only of them."""
    return _TRAILING_PUNCTUATION_RE.sub('', word) or word


def _walk(model, rng, start=None):
    """
    Walks the chain forever, yielding (word, starts_sentence) pairs.

    The words of the starting key are yielded first. Drawing END, or
    landing on a key the chain does not know, restarts the walk from a
    random start key.
    """
    key = None
    if start is not None:
        key = as_key(start)
        if key not in model:
            logger.debug(f"Unknown start key {key!r}, picking a random one")
            key = None
    if key is None:
        key = model.choose_start(rng)

    while True:
        yield from zip(key, model.sentence_starts(key))
        while True:
            successor = model.sample(key, rng)
            if successor is None or successor.is_end:
                break
            yield successor.word, successor.boundary
            key = key[1:] + (successor.word,)
        logger.debug("Reached the end of a training segment, restarting")
        key = model.choose_start(rng)


def _finish_sentence(words):
    words = list(words)
    words[0] = capitalize(words[0])
    words[-1] = strip_trailing_punctuation(words[-1]) + '.'
    return ' '.join(words)


def _sentences(model, rng, start=None):
    """Yields finished sentences from a single walk."""
    sentence = []
    for word, starts_sentence in _walk(model, rng, start):
        if starts_sentence and sentence:
            yield _finish_sentence(sentence)
            sentence = []
        sentence.append(word)


def iter_words(model, rng=None, start=None):
    """
    Returns a never-ending iterator over raw words from the chain, with no
    capitalization or punctuation applied.
    """
    _check_model(model)
    rng = _ensure_rng(rng)
    return (word for word, _ in _walk(model, rng, start))


def generate_from(model, rng, count, start):
    """
    Generates `count` words of text, starting the walk at `start`.

    An unknown start key falls back to a random start key.
    """
    _check_model(model)
    _check_count(count)
    rng = _ensure_rng(rng)

    sentences = []
    sentence = []
    for word, starts_sentence in islice(_walk(model, rng, start), count):
        if starts_sentence and sentence:
            sentences.append(_finish_sentence(sentence))
            sentence = []
        sentence.append(word)
    if sentence:
        # The last word always gets a period, even mid-sentence.
        sentences.append(_finish_sentence(sentence))
    return ' '.join(sentences)


def generate_words(model, rng, count):
    """Generates exactly `count` words of text from a random start key."""
    return generate_from(model, rng, count, None)


def generate_sentences(model, rng, count):
    """Generates exactly `count` sentences."""
    _check_model(model)
    _check_count(count)
    rng = _ensure_rng(rng)
    return ' '.join(islice(_sentences(model, rng), count))


def generate_paragraphs(model, rng, count, min_sentences=None, max_sentences=None):
    """
    Generates `count` paragraphs separated by blank lines. Each paragraph
    holds between `min_sentences` and `max_sentences` sentences.
    """
    _check_model(model)
    _check_count(count)
    if min_sentences is None:
        min_sentences = config.MIN_SENTENCES_PER_PARAGRAPH
    if max_sentences is None:
        max_sentences = config.MAX_SENTENCES_PER_PARAGRAPH
    if not 1 <= min_sentences <= max_sentences:
        raise ValueError(
            f"Sentences per paragraph must satisfy 1 <= min <= max, got {min_sentences} and {max_sentences}"
        )
    rng = _ensure_rng(rng)

    sentences = _sentences(model, rng)
    paragraphs = []
    for _ in range(count):
        length = rng.randint(min_sentences, max_sentences)
        paragraphs.append(' '.join(islice(sentences, length)))
    return '\n\n'.join(paragraphs)


def generate_title(model, rng):
    """Generates a short title-cased phrase with no closing punctuation."""
    _check_model(model)
    rng = _ensure_rng(rng)

    length = rng.randint(config.TITLE_MIN_WORDS, config.TITLE_MAX_WORDS)
    words = [capitalize(word) for word, _ in islice(_walk(model, rng), length)]
    words[-1] = strip_trailing_punctuation(words[-1])
    return ' '.join(words)
