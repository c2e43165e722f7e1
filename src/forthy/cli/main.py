"""Forthy.

Usage:
  forthy [options]
  forthy [options] asm LINE
  forthy [options] init
  forthy --version
  forthy -h | --help

Commands:
  default  Start an interactive session.
  asm      Compile LINE and print the token listing and dictionary.
  init     Create a forthy.toml in the current directory.

Options:
  --version       Show version.
  -h, --help      Show this screen.
  -q, --quiet     Be quiet.
  -v, --verbose   Be verbose.
  -V, --vverbose  Be very verbose.
  --no-colours    Disable colours in CLI output.

  --config=CONFIG  Config file to use (forthy.toml is used if it exists)
"""

import logging

from docopt import docopt

from .. import __version__, config
from ..exceptions import UnexpectedError, UserQuit, UserResolvableError
from ..session import Session
from . import interface as ui
from .interface import TICK, exit_bug, exit_problem, good, init, neutral
from .repl import forth_repl, run_prelude

LOG = logging.getLogger(__name__)


def _repl(args):
    cfg = config.load(args)
    if args["--quiet"]:
        cfg.repl.banner = False
    forth_repl(cfg)


def _asm(args):
    """Compile a line and print the tokens"""
    cfg = config.load(args)
    session = Session()
    run_prelude(session, cfg.repl.prelude)

    tokens = session.compile(args["LINE"])
    print(neutral("\nTOKENS:"))
    ui.print_listing(tokens)
    print(neutral("\nDICTIONARY:\n"))
    ui.print_dictionary(session.dictionary)
    print()


def _init(args):
    filename = config.create_skeleton()
    print("\n" + TICK + " Created " + good(filename))


def dispatch(args):
    if args["asm"]:
        _asm(args)
    elif args["init"]:
        _init(args)
    else:
        _repl(args)


def main():
    args = docopt(__doc__, version=__version__)
    init(args)
    LOG.debug("CLI args: %s", args)

    try:
        dispatch(args)
    except UserQuit:
        LOG.info("quit during start-up")
    except UserResolvableError as exc:
        exit_problem(exc.msg, exc.suggested_fix)
    except UnexpectedError as exc:
        exit_bug(str(exc))


if __name__ == "__main__":
    main()
