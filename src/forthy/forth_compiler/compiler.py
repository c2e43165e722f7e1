"""Compile lexemes into executable tokens, installing definitions"""
import logging
from typing import List, Optional

from ..exceptions import InvalidWord, UnknownWord, Unterminated
from ..machine.dictionary import Dictionary
from ..machine.instructionset import lookup_builtin
from ..machine.types import Definition, DefinitionBlock, Number, Word

LOG = logging.getLogger(__name__)

DEFINE_OPEN = ":"
DEFINE_CLOSE = ";"


def parse_number(lexeme: str) -> Optional[Number]:
    """Make a Number if the lexeme is a float literal

    Digit separators (`1_000') are not part of Forth number syntax.
    """
    if "_" in lexeme:
        return None
    try:
        return Number(float(lexeme))
    except ValueError:
        return None


class ForthCompiler:
    """Turn lexemes into a token sequence for the machine.

    Definition blocks are resolved against the Dictionary when their `;' is
    seen, and installed immediately. Every name in a definition body is
    replaced by what it means at that moment, so redefining a word later does
    not change the words that already use it.
    """

    def __init__(self, dictionary: Dictionary):
        self.dictionary = dictionary

    def compile(self, lexemes: List[str]) -> list:
        code = []
        block = None
        for lexeme in lexemes:
            if not lexeme:
                continue

            if block is None:
                if lexeme == DEFINE_OPEN:
                    block = DefinitionBlock()
                else:
                    code.append(self.compile_lexeme(lexeme))

            elif lexeme == DEFINE_CLOSE:
                self.install(block)
                block = None

            elif block.name is None:
                block.name = lexeme

            else:
                block.body.append(lexeme)

        if block is not None:
            raise Unterminated(block.name)

        LOG.debug("tokens %s", code)
        return code

    def compile_lexeme(self, lexeme: str):
        """Compile a top-level lexeme. Unknown names are left for later."""
        number = parse_number(lexeme)
        if number is not None:
            return number

        instr = lookup_builtin(lexeme)
        if instr is not None:
            return instr

        return Word(lexeme)

    def resolve(self, lexeme: str):
        """Resolve a lexeme inside a definition body, or fail"""
        number = parse_number(lexeme)
        if number is not None:
            return number

        entry = self.dictionary.lookup(lexeme)
        if entry is not None:
            return entry

        instr = lookup_builtin(lexeme)
        if instr is not None:
            return instr

        raise UnknownWord(lexeme)

    def install(self, block: DefinitionBlock) -> Definition:
        """Resolve a closed definition block and add it to the Dictionary"""
        name = block.name
        if name is None:
            raise InvalidWord("definition has no name")
        if parse_number(name) is not None:
            raise InvalidWord(f"cannot name a definition with the number {name}")
        if name in (DEFINE_OPEN, DEFINE_CLOSE):
            raise InvalidWord(f"cannot name a definition `{name}'")

        definition = Definition(tuple(self.resolve(l) for l in block.body))
        self.dictionary.define(name, definition)
        LOG.debug("defined %s (%d tokens)", name, len(definition.body))
        return definition


def forth_compile(lexemes: List[str], dictionary: Dictionary) -> list:
    return ForthCompiler(dictionary).compile(lexemes)
