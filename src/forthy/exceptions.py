"""Top level Forthy exceptions"""


class ForthyError(Exception):
    """Base for all Forthy errors"""


class UserResolvableError(ForthyError):
    """An error which the user can probably solve"""

    def __init__(self, msg, suggested_fix):
        self.msg = msg
        self.suggested_fix = suggested_fix

    def __str__(self):
        if type(self) == UserResolvableError:
            return f"{self.msg}\n\n{self.suggested_fix}"
        else:
            return f"{self.__doc__}: {self.msg}\n\n{self.suggested_fix}"


class UnexpectedError(ForthyError):
    """An error which is unexpected and with no obvious solution"""

    def __init__(self, msg):
        self.msg = msg

    def __str__(self):
        if type(self) == UnexpectedError:
            return self.msg
        else:
            return f"{self.__doc__}:\n{self.msg}"


class UserQuit(ForthyError):
    """The session was asked to end (BYE or QUIT)"""


### Evaluation errors. Any of these aborts the current line.


class EvalError(UserResolvableError):
    """Error evaluating a line"""

    def __str__(self):
        return self.msg


class DivisionByZero(EvalError):
    """Division by zero"""

    def __init__(self, word: str):
        super().__init__(
            "Division by zero", f"The divisor of `{word}' must not be zero.",
        )


class StackUnderflow(EvalError):
    """Stack underflow"""

    def __init__(self, needed: int, available: int):
        self.needed = needed
        self.available = available
        super().__init__(
            "Stack underflow",
            f"Needed {needed} value(s) but the stack holds {available}.",
        )


class UnknownWord(EvalError):
    """Unknown word"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Unknown word `{name}'",
            "Define it first, e.g. `: " + name + " ... ;'.",
        )


class InvalidWord(EvalError):
    """Invalid word"""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Invalid word: {detail}", "")


class Unterminated(EvalError):
    """Unterminated definition"""

    def __init__(self, name=None):
        self.name = name
        what = f"`{name}'" if name else "definition"
        super().__init__(
            f"Unterminated {what}",
            "Close the definition with `;' on the same line.",
        )
