from typing import Dict, Optional

from .instruction import Builtin
from .instruction import Instruction as I
from .instruction import Operator

##± Arithmetic ±################################################################


class Add(Operator):
    """( a b -- a+b )"""

    names = ("+",)


class Subtract(Operator):
    """( a b -- a-b )"""

    names = ("-",)


class Multiply(Operator):
    """( a b -- a*b )"""

    names = ("*",)


class Divide(Operator):
    """( a b -- a/b ), fails if b is zero"""

    names = ("/",)


class Mod(Builtin):
    """( a b -- a mod b ), fails if b is zero"""

    names = ("mod",)


class SlashMod(Builtin):
    """( a b -- a-mod-b a/b ), fails if b is zero"""

    names = ("/mod",)


##± Stack Manipulation ±########################################################


class Drop(Builtin):
    """( a -- )"""

    names = ("drop",)


class Dup(Builtin):
    """( a -- a a )"""

    names = ("dup",)


class Swap(Builtin):
    """( a b -- b a )"""

    names = ("swap",)


class Over(Builtin):
    """( a b -- a b a )"""

    names = ("over",)


class Rot(Builtin):
    """( a b c -- b c a )"""

    names = ("rot",)


class TwoDrop(Builtin):
    """( a b -- )"""

    names = ("2drop",)


class TwoDup(Builtin):
    """( a b -- a b a b )"""

    names = ("2dup",)


class TwoOver(Builtin):
    """( a b c d -- a b c d a b )"""

    names = ("2over",)


class TwoSwap(Builtin):
    """( a b c d -- c d a b )"""

    names = ("2swap",)


##± Output ±####################################################################


class Emit(Builtin):
    """( n -- ) Write n as an ASCII character"""

    names = ("emit",)


class CR(Builtin):
    """( -- ) Write a newline"""

    names = ("cr",)


class Space(Builtin):
    """( -- ) Write one space"""

    names = ("space",)


class Spaces(Builtin):
    """( n -- ) Write n spaces"""

    names = ("spaces",)


class Display(Builtin):
    """( n -- ) Write n"""

    names = (".",)


class Show(Builtin):
    """( -- ) Write the whole stack without changing it"""

    names = (".s",)


##± Session ±###################################################################


class Bye(Builtin):
    """( -- ) End the session"""

    names = ("bye", "quit")


INSTRUCTIONS = [
    Add,
    Subtract,
    Multiply,
    Divide,
    Mod,
    SlashMod,
    Drop,
    Dup,
    Swap,
    Over,
    Rot,
    TwoDrop,
    TwoDup,
    TwoOver,
    TwoSwap,
    Emit,
    CR,
    Space,
    Spaces,
    Display,
    Show,
    Bye,
]

BUILTINS: Dict[str, type] = {
    name: cls for cls in INSTRUCTIONS for name in cls.names
}


def lookup_builtin(name: str) -> Optional[I]:
    """Get the operator or builtin called name, if there is one"""
    cls = BUILTINS.get(name.lower())
    return cls() if cls else None
