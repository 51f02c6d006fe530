from .tokenizer import Token, TokenKind, Tokens, tokenize, words
from .markov_chain import END, ChainModel, Successor, build_model
from .generate import (
    generate_from,
    generate_paragraphs,
    generate_sentences,
    generate_title,
    generate_words,
    iter_words,
)
