"""The Forth Dictionary: user-defined words"""

import logging
from typing import Dict, Iterator, Optional, Tuple, Union

from ..exceptions import InvalidWord
from .types import Definition, Number

LOG = logging.getLogger(__name__)

Entry = Union[Number, Definition]


class Dictionary:
    """Case-insensitive mapping from word name to Number or Definition

    Entries are only ever added or overwritten, never removed.
    """

    def __init__(self):
        self._words: Dict[str, Entry] = {}

    def define(self, name: str, value: Entry):
        """Bind name to value, replacing any previous binding"""
        if not isinstance(value, (Number, Definition)):
            raise InvalidWord(f"cannot bind `{name}' to {value!r}")
        key = name.lower()
        if key in self._words:
            LOG.debug("redefining %s", key)
        self._words[key] = value

    def lookup(self, name: str) -> Optional[Entry]:
        """Get the current binding of name, or None"""
        return self._words.get(name.lower())

    def names(self):
        return sorted(self._words.keys())

    def __contains__(self, name):
        return name.lower() in self._words

    def __len__(self):
        return len(self._words)

    def __iter__(self) -> Iterator[Tuple[str, Entry]]:
        return iter(self._words.items())
