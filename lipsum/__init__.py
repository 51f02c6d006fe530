"""
Lorem ipsum text generation with a word-level Markov chain.

The chain can be trained on any text with build_model() and sampled with
the generate_* functions. lipsum() and friends use a chain trained on the
built-in LOREM_IPSUM and LIBER_PRIMUS texts.
"""
from .errors import InsufficientData, InvalidOrder, LipsumError
from .markov_chain import (
    END,
    ChainModel,
    Successor,
    Token,
    TokenKind,
    build_model,
    generate_from,
    generate_paragraphs,
    generate_sentences,
    generate_title,
    generate_words,
    iter_words,
    tokenize,
)
from .corpus import LIBER_PRIMUS, LOREM_IPSUM, default_model, lipsum, lipsum_title, lipsum_words

__version__ = '0.1.0'
