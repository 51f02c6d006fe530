"""
Built-in training texts and the default chain learned from them.

LOREM_IPSUM is the traditional filler text. On its own it makes a poor
order-two chain, since nearly every pair of words is followed by exactly
one other word and the chain just recites the text. LIBER_PRIMUS holds
passages from the first book of Cicero's De finibus bonorum et malorum,
which the lorem ipsum text is a scrambled excerpt of. Learning both gives
the chain enough branching to produce varied text.
"""
import logging
import threading

from . import config
from .markov_chain import ChainModel, generate_from, generate_title, generate_words, words

logger = logging.getLogger(__name__)


def _read_text(path):
    logger.debug(f"Loading corpus text from {path}")
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


LOREM_IPSUM = _read_text(config.LOREM_IPSUM_PATH)
LIBER_PRIMUS = _read_text(config.LIBER_PRIMUS_PATH)

# --- Default model, built on first use and shared read-only afterwards ---
_default_model = None
_default_model_lock = threading.Lock()


def build_default_model(order=None, progress=False):
    """Builds a fresh chain of the given order from the built-in texts."""
    model = ChainModel(order)
    # The smaller text goes first, like any later additions would.
    model.learn(LOREM_IPSUM, progress=progress)
    model.learn(LIBER_PRIMUS, progress=progress)
    return model


def default_model():
    """Returns the shared chain learned from LOREM_IPSUM and LIBER_PRIMUS."""
    global _default_model
    if _default_model is None:
        with _default_model_lock:
            if _default_model is None:
                _default_model = build_default_model(config.DEFAULT_ORDER)
    return _default_model


def lipsum(count, rng=None):
    """
    Generates `count` words of lorem ipsum text. The output starts with
    "Lorem ipsum" and follows the traditional text for a while before the
    chain drifts off into random text.
    """
    model = default_model()
    start = tuple(words(LOREM_IPSUM)[:model.order])
    return generate_from(model, rng, count, start)


def lipsum_words(count, rng=None):
    """Generates `count` words of lorem ipsum text from a random starting point."""
    return generate_words(default_model(), rng, count)


def lipsum_title(rng=None):
    """Generates a short lorem ipsum title."""
    return generate_title(default_model(), rng)
