import logging
from collections import defaultdict, Counter, deque
from typing import NamedTuple

from tqdm import tqdm

from .. import config
from ..errors import InsufficientData, InvalidOrder
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


class _EndOfText:
    """Successor marking the end of a training text."""
    def __repr__(self):
        return '<END>'


END = _EndOfText()


class Successor(NamedTuple):
    word: object
    # True when a sentence or paragraph break separated the key from `word`.
    boundary: bool = False

    @property
    def is_end(self):
        return self.word is END


def as_key(key):
    """Turns a word, or a sequence of words, into a chain key."""
    if isinstance(key, str):
        return (key,)
    return tuple(key)


class ChainModel:
    """
    A word-level Markov chain of a fixed order.

    Each key is a tuple of `order` consecutive words and maps to a Counter
    of the successors observed after it. Keys that began a sentence in the
    training text are remembered as start keys, the only places a walk may
    begin.
    """
    def __init__(self, order=None):
        if order is None:
            order = config.DEFAULT_ORDER
        if isinstance(order, bool) or not isinstance(order, int) or not 1 <= order <= config.MAX_ORDER:
            raise InvalidOrder(order, config.MAX_ORDER)
        self.order = order
        self.model = defaultdict(Counter)
        self._start_keys = {}
        # Sampling tables, rebuilt at the end of every learn() call.
        self._tables = {}
        self._start_list = ()

    def learn(self, text, progress=False):
        """
        Adds the transitions found in `text` to the chain.

        `text` is either a string or an iterable of tokens. It is treated
        as one training segment: its last key is followed by END. A
        segment with `order` words or fewer contributes nothing.
        """
        tokens = tokenize(text) if text is None or isinstance(text, str) else text

        window = deque(maxlen=self.order)
        # Parallel to `window`: whether each word began a sentence.
        sentence_starts = deque(maxlen=self.order)
        boundary_pending = False
        word_count = 0

        for token in tqdm(tokens, desc="Learning transitions", unit="tok", disable=not progress):
            if token.is_boundary:
                boundary_pending = word_count > 0
                continue

            if len(window) == self.order:
                self._record(tuple(window), Successor(token.text, boundary_pending), tuple(sentence_starts))
            sentence_starts.append(word_count == 0 or boundary_pending)
            window.append(token.text)
            boundary_pending = False
            word_count += 1

        if word_count > self.order:
            self._record(tuple(window), Successor(END, True), tuple(sentence_starts))
        else:
            logger.debug(f"Skipping segment of {word_count} words, too short for order {self.order}")

        self._freeze()
        logger.info(f"Learned {word_count} words: {len(self)} keys, {len(self._start_list)} start keys")

    def _record(self, key, successor, starts):
        self.model[key][successor] += 1
        # Only the first layout seen for a start key is kept.
        if starts[0]:
            self._start_keys.setdefault(key, starts)

    def _freeze(self):
        tables = {}
        for key, counts in self.model.items():
            successors = tuple(counts)
            cum_weights = []
            total = 0
            for successor in successors:
                total += counts[successor]
                cum_weights.append(total)
            tables[key] = (successors, tuple(cum_weights))
        self._tables = tables
        self._start_list = tuple(self._start_keys)

    # --- Lookups ---

    @property
    def start_keys(self):
        return self._start_list

    def keys(self):
        return list(self._tables)

    def sentence_starts(self, key):
        """
        Returns one flag per word of `key`, true where that word began a
        sentence in training. Keys that are not start keys only begin a
        sentence at their first word.
        """
        key = as_key(key)
        starts = self._start_keys.get(key)
        if starts is None:
            return (True,) + (False,) * (len(key) - 1)
        return starts

    def successors(self, key):
        """Returns the (successor, count) pairs for `key`, or None for an unknown key."""
        counts = self.model.get(as_key(key))
        if counts is None:
            return None
        return list(counts.items())

    def words(self, key):
        """
        Returns the words observed after `key`, one entry per observation,
        or None if the key is unknown. The end-of-text marker is left out.
        """
        counts = self.model.get(as_key(key))
        if counts is None:
            return None
        return [s.word for s, n in counts.items() if not s.is_end for _ in range(n)]

    def __len__(self):
        return len(self._tables)

    def __contains__(self, key):
        return as_key(key) in self._tables

    def is_empty(self):
        return len(self) == 0

    def __eq__(self, other):
        if not isinstance(other, ChainModel):
            return NotImplemented
        return (self.order == other.order
                and dict(self.model) == dict(other.model)
                and self._start_list == other._start_list
                and self._start_keys == other._start_keys)

    def __repr__(self):
        return f"ChainModel(order={self.order}, keys={len(self)}, start_keys={len(self._start_list)})"

    # --- Sampling ---

    def choose_start(self, rng):
        """Picks a start key uniformly at random."""
        if not self._start_list:
            raise InsufficientData(order=self.order)
        return rng.choice(self._start_list)

    def sample(self, key, rng):
        """
        Draws a successor of `key` with probability proportional to its
        count. Returns None when the key is not in the chain.
        """
        table = self._tables.get(key)
        if table is None:
            return None
        successors, cum_weights = table
        return rng.choices(successors, cum_weights=cum_weights)[0]


def build_model(corpus, order=None, progress=False):
    """Builds a chain of the given order from a training corpus."""
    model = ChainModel(order)
    model.learn(corpus, progress=progress)
    return model
