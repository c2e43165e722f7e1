"""Token data types

Operators and builtins are Instructions (see instruction.py); everything else
the compiler can produce lives here.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Number:
    """A 64-bit float literal"""

    value: float

    def __repr__(self):
        return f"NUMBER   {self.value}"


@dataclass(frozen=True)
class Word:
    """Reference to a name, resolved when it is evaluated"""

    name: str

    def __repr__(self):
        return f"WORD     {self.name}"


@dataclass(frozen=True)
class Definition:
    """A fully resolved body bound to a name in the Dictionary

    The body never contains a Word, only Numbers, Instructions and nested
    Definitions.
    """

    body: Tuple = ()

    @property
    def is_variable(self) -> bool:
        """A body holding a single literal evaluates to that literal"""
        return len(self.body) == 1 and isinstance(self.body[0], Number)

    def __repr__(self):
        inner = " ".join(shortrepr(t) for t in self.body)
        return f"DEFINITION [{inner}]"


@dataclass
class DefinitionBlock:
    """Raw lexemes captured between `:' and `;'"""

    name: Optional[str] = None
    body: List[str] = field(default_factory=list)

    def __repr__(self):
        return f"BLOCK    {self.name} {self.body}"


def shortrepr(token) -> str:
    """Compact representation used inside Definition listings"""
    if isinstance(token, Number):
        return str(token.value)
    if isinstance(token, Definition):
        return repr(token)[len("DEFINITION ") :]
    return repr(token).strip().lower()
