"""Top-level entry point: evaluate lines of Forth in one session"""
import logging
from typing import List, Optional, TextIO

from .forth_compiler import forth_compile
from .forth_parser import forth_lex
from .machine import Dictionary, ForthMachine, State

LOG = logging.getLogger(__name__)


class Session:
    """One interactive session.

    The stack and the Dictionary start empty and live as long as the session.
    Each call to eval is applied in full before the next one starts; an error
    stops the line where it happened, keeping whatever the earlier tokens did.
    """

    def __init__(self, stdout: Optional[TextIO] = None):
        self.state = State()
        self.machine = ForthMachine(self.state, stdout)

    @property
    def stack(self) -> List[float]:
        return self.state.stack

    @property
    def dictionary(self) -> Dictionary:
        return self.state.dictionary

    def compile(self, line: str) -> list:
        "Lex and compile a line (installing any definitions), but don't run it"
        return forth_compile(forth_lex(line.strip()), self.state.dictionary)

    def eval(self, line: str) -> Optional[float]:
        """Evaluate a line, returning the value produced last, if any

        Raises EvalError subclasses on failure and UserQuit on BYE/QUIT.
        """
        if not line.strip():
            return None
        tokens = self.compile(line)
        return self.machine.run(tokens)
