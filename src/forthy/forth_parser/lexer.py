"""Split a line of Forth into lexemes"""

import logging
from typing import Iterator, List

from sly import Lexer

LOG = logging.getLogger(__name__)


class ForthLexer(Lexer):
    tokens = {LEXEME, SPACE}

    # One separator per token, so that runs of whitespace can be turned into
    # empty lexemes by post_lex
    SPACE = r"\s"

    @_(r"\S+")
    def LEXEME(self, t):
        t.value = t.value.lower()
        return t


def post_lex(toks) -> Iterator[str]:
    """Turn the token stream into the same pieces as str.split(' ')

    Every separator closes the lexeme before it, even if that lexeme is empty.
    """
    current = ""
    for t in toks:
        if t.type == "SPACE":
            yield current
            current = ""
        else:
            current = t.value
    yield current


def forth_lex(text: str) -> List[str]:
    """Lex a line into a list of lower-cased lexemes"""
    if not text:
        return []
    lexemes = list(post_lex(ForthLexer().tokenize(text)))
    LOG.debug("lexemes %s", lexemes)
    return lexemes
