"""The Forth Machine Instruction classes"""


class Instruction:
    """A primitive Forth operation

    Instructions carry no data, so all instances of one class are equal.
    """

    # Lower-case names this primitive is recognised by
    names = ()

    def __init__(self):
        self.name = type(self).__name__

    def __repr__(self):
        return self.name.upper()

    def __eq__(self, other):
        return type(self) == type(other)

    def __hash__(self):
        return hash(type(self))


class Operator(Instruction):
    """One of the four arithmetic operators"""


class Builtin(Instruction):
    """A named primitive"""
