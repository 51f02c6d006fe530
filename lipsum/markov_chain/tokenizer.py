import re
from enum import Enum
from typing import NamedTuple

# A blank line (two newlines with only spaces or tabs between them) or a word.
_CHUNK_RE = re.compile(r'(?P<brk>\n[^\S\n]*\n)|(?P<word>\S+)')

SENTENCE_TERMINATORS = '.!?'


class TokenKind(Enum):
    WORD = 'word'
    SENTENCE_END = 'sentence_end'
    PARAGRAPH_END = 'paragraph_end'


class Token(NamedTuple):
    kind: TokenKind
    text: str = ''

    @property
    def is_word(self):
        return self.kind is TokenKind.WORD

    @property
    def is_boundary(self):
        return self.kind is not TokenKind.WORD


PARAGRAPH_END = Token(TokenKind.PARAGRAPH_END)


class Tokens:
    """
    A lazy view of the tokens in a piece of training text.

    Every iteration scans the text again from the start, so the same
    object can be consumed any number of times.
    """
    def __init__(self, text):
        self.text = text or ''

    def __iter__(self):
        emitted_word = False
        pending_paragraph = False
        for match in _CHUNK_RE.finditer(self.text):
            if match.group('brk'):
                pending_paragraph = emitted_word
                continue

            word = match.group('word')
            terminator = ''
            if word[-1] in SENTENCE_TERMINATORS:
                word, terminator = word[:-1], word[-1]

            if word:
                if pending_paragraph:
                    yield PARAGRAPH_END
                    pending_paragraph = False
                yield Token(TokenKind.WORD, word)
                emitted_word = True
            if terminator:
                yield Token(TokenKind.SENTENCE_END, terminator)

    def __repr__(self):
        preview = self.text[:30] + ('...' if len(self.text) > 30 else '')
        return f"Tokens({preview!r})"


def tokenize(text):
    """Splits training text into word and boundary tokens, in document order."""
    return Tokens(text)


def words(text):
    """Returns only the word tokens of `text`, as plain strings."""
    return [token.text for token in tokenize(text) if token.is_word]
