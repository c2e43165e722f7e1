"""The interactive read-eval-print loop"""

import logging

from .. import __version__
from ..config import Config
from ..exceptions import EvalError, UserQuit
from ..machine import format_number
from ..session import Session
from . import interface as ui
from .interface import bad, dim

LOG = logging.getLogger(__name__)

BANNER = f"Forthy {__version__}. Type BYE or QUIT (or end of input) to leave."


def report(session: Session, line: str) -> bool:
    """Evaluate one line and print the outcome. False means stop."""
    try:
        value = session.eval(line)
    except UserQuit:
        return False
    except EvalError as exc:
        print(bad(f"? Error: {exc.msg}"))
        if ui.VERBOSE and exc.suggested_fix:
            print(dim(exc.suggested_fix))
        return True

    if value is None:
        print(" Ok")
    else:
        print(f"{format_number(value)} Ok")
    return True


def run_prelude(session: Session, lines):
    """Evaluate configured start-up lines without printing Ok"""
    for line in lines:
        LOG.info("prelude: %s", line)
        session.eval(line)


def forth_repl(cfg: Config) -> Session:
    """Read lines until end of input or BYE"""
    session = Session()
    try:
        run_prelude(session, cfg.repl.prelude)
    except UserQuit:
        return session

    if cfg.repl.banner:
        ui.info(BANNER)

    while True:
        try:
            line = input(cfg.repl.prompt)
        except EOFError:
            break
        if not report(session, line):
            break
        if cfg.repl.show_stack:
            print(dim(ui.format_stack(session.stack)))

    return session
