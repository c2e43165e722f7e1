"""The Forth stack machine

Tokens are evaluated in order. Each may produce a value, which is pushed
before the next token runs. Words bound to definitions run their (already
resolved) body in place.
"""

import logging
import math
import sys
from functools import singledispatchmethod
from typing import Optional, TextIO

from ..exceptions import (
    DivisionByZero,
    InvalidWord,
    UnexpectedError,
    UnknownWord,
    UserQuit,
)
from .instructionset import *
from .instructionset import lookup_builtin
from .state import State
from .types import Definition, DefinitionBlock, Number, Word

LOG = logging.getLogger(__name__)

# Largest count SPACES accepts
MAX_SPACES = 65536


def format_number(value: float) -> str:
    """Integral values without the trailing `.0'"""
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


class ForthMachine:
    """Execute token sequences against a State.

    Character output goes to stdout, which defaults to whatever sys.stdout is
    at the time of writing.
    """

    def __init__(self, state: State, stdout: Optional[TextIO] = None):
        self.state = state
        self._stdout = stdout

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    def write(self, text: str):
        self.stdout.write(text)

    def resolve(self, t: Word):
        """Get what a Word names now: a dictionary entry, else a builtin"""
        entry = self.state.dictionary.lookup(t.name)
        if entry is None:
            instr = lookup_builtin(t.name)
            if instr is None:
                raise UnknownWord(t.name)
            return instr
        if isinstance(entry, (Number, Definition)):
            return entry
        raise InvalidWord(f"`{t.name}' is bound to {entry!r}")

    def run(self, tokens) -> Optional[float]:
        """Evaluate tokens in order and return what the last one produced

        Definition bodies are expanded onto an explicit stack of iterators,
        not run recursively.
        """
        result = None
        frames = [iter(tokens)]
        while frames:
            token = next(frames[-1], None)
            if token is None:
                frames.pop()
                continue

            toplevel = len(frames) == 1
            if isinstance(token, Word):
                token = self.resolve(token)

            if isinstance(token, Definition) and not token.is_variable:
                frames.append(iter(token.body))
                value = None
            else:
                value = self.evali(token)
                if value is not None:
                    self.state.ds_push(value)

            if toplevel:
                result = value
        return result

    def _divisor(self, word: str):
        """Get (a, b) for a division-like word, checking b before popping"""
        a, b = self.state.ds_take(2)
        if b == 0:
            raise DivisionByZero(word)
        self.state.ds_drop(2)
        return a, b

    @singledispatchmethod
    def evali(self, token):
        """Evaluate one token"""
        raise UnexpectedError(f"Cannot evaluate {token!r} ({type(token)})")

    @evali.register
    def _(self, t: Number):
        return t.value

    @evali.register
    def _(self, t: Word):
        return self.evali(self.resolve(t))

    @evali.register
    def _(self, t: Definition):
        if t.is_variable:
            return t.body[0].value
        self.run(t.body)

    @evali.register
    def _(self, t: DefinitionBlock):
        raise UnexpectedError(f"Definition block {t.name} reached the machine")

    ## Arithmetic

    @evali.register
    def _(self, i: Add):
        a, b = self.state.ds_pop_many(2)
        return a + b

    @evali.register
    def _(self, i: Subtract):
        a, b = self.state.ds_pop_many(2)
        return a - b

    @evali.register
    def _(self, i: Multiply):
        a, b = self.state.ds_pop_many(2)
        return a * b

    @evali.register
    def _(self, i: Divide):
        a, b = self._divisor("/")
        return a / b

    @evali.register
    def _(self, i: Mod):
        a, b = self._divisor("mod")
        return math.fmod(a, b)

    @evali.register
    def _(self, i: SlashMod):
        a, b = self._divisor("/mod")
        self.state.ds_push(math.fmod(a, b))
        return a / b

    ## Stack manipulation

    @evali.register
    def _(self, i: Drop):
        self.state.ds_drop(1)

    @evali.register
    def _(self, i: Dup):
        self.state.ds_push_all(self.state.ds_take(1))

    @evali.register
    def _(self, i: Swap):
        a, b = self.state.ds_pop_many(2)
        self.state.ds_push_all((b, a))

    @evali.register
    def _(self, i: Over):
        a, _ = self.state.ds_take(2)
        self.state.ds_push(a)

    @evali.register
    def _(self, i: Rot):
        a, b, c = self.state.ds_pop_many(3)
        self.state.ds_push_all((b, c, a))

    @evali.register
    def _(self, i: TwoDrop):
        self.state.ds_drop(2)

    @evali.register
    def _(self, i: TwoDup):
        self.state.ds_push_all(self.state.ds_take(2))

    @evali.register
    def _(self, i: TwoOver):
        a, b, _, _ = self.state.ds_take(4)
        self.state.ds_push_all((a, b))

    @evali.register
    def _(self, i: TwoSwap):
        a, b, c, d = self.state.ds_pop_many(4)
        self.state.ds_push_all((c, d, a, b))

    ## Output

    @evali.register
    def _(self, i: Emit):
        n = self.state.ds_peek(0)
        if not math.isfinite(n) or not 0 <= int(n) < 128:
            raise InvalidWord(f"cannot emit {format_number(n)} as ASCII")
        self.state.ds_drop(1)
        self.write(chr(int(n)))

    @evali.register
    def _(self, i: CR):
        self.write("\n")

    @evali.register
    def _(self, i: Space):
        self.write(" ")

    @evali.register
    def _(self, i: Spaces):
        n = self.state.ds_peek(0)
        if not math.isfinite(n):
            raise InvalidWord(f"cannot write {format_number(n)} spaces")
        if n > MAX_SPACES:
            raise InvalidWord(f"cannot write more than {MAX_SPACES} spaces")
        self.state.ds_drop(1)
        self.write(" " * max(int(n), 0))

    @evali.register
    def _(self, i: Display):
        n = self.state.ds_pop()
        self.write(format_number(n) + " ")

    @evali.register
    def _(self, i: Show):
        values = "".join(format_number(v) + " " for v in self.state.stack)
        self.write(f"<{len(self.state)}> {values}")

    ## Session

    @evali.register
    def _(self, i: Bye):
        LOG.info("quit requested")
        raise UserQuit()
