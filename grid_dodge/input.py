"""Input provider capability.

The game loop only ever asks for the next :data:`GameInput`; where it comes
from is behind the :class:`InputProvider` protocol. Terminal backends block on
raw key events (see :mod:`grid_dodge.terminal`), while tests and bots use
:class:`ScriptedInputProvider`.
"""

import logging
from typing import Callable, Iterable, Iterator, Mapping, Optional, Protocol, TypeVar

from grid_dodge.actions import KEY_BINDINGS, GameInput, Key

logger = logging.getLogger(__name__)

RawKey = TypeVar("RawKey")


class InputProvider(Protocol):
    def poll_input(self) -> GameInput:
        """Block until a recognized command is available and return it."""
        ...


class ScriptExhausted(RuntimeError):
    """Raised when a scripted provider has no inputs left."""


def poll_until_bound(
    read_key: Callable[[], RawKey],
    key_map: Mapping[RawKey, Key],
    bindings: Mapping[Key, GameInput] = KEY_BINDINGS,
) -> GameInput:
    """Read raw keys until one maps to a bound command.

    Unrecognized keys are discarded silently and reading continues; this is a
    blocking wait with no timeout.

    Args:
        read_key: Blocking reader returning one raw key event per call.
        key_map: Raw key to logical :class:`Key` translation.
        bindings: Logical key to command table.

    Returns:
        GameInput: The command bound to the first recognized key.
    """
    while True:
        raw = read_key()
        key: Optional[Key] = key_map.get(raw)
        if key is not None and key in bindings:
            return bindings[key]
        logger.debug("Ignoring key %r", raw)


class ScriptedInputProvider:
    """Headless provider replaying a fixed sequence of commands."""

    def __init__(self, inputs: Iterable[GameInput]):
        self._inputs: Iterator[GameInput] = iter(inputs)

    def poll_input(self) -> GameInput:
        try:
            return next(self._inputs)
        except StopIteration:
            raise ScriptExhausted("No scripted inputs left") from None
