"""Forthy configuration data, usually stored in forthy.toml"""

from dataclasses import dataclass

# Constants
DEFAULT_PROMPT = "> "


@dataclass(unsafe_hash=True)
class ReplConfig:
    prompt: str = DEFAULT_PROMPT
    banner: bool = True
    show_stack: bool = False
    prelude: tuple = ()

    def __post_init__(self):
        # lists are not hashable, and Config must be hashable
        self.prelude = tuple(self.prelude)
