"""Growable vector of strings with a None-terminated argv view

A StrVec keeps the invariant that its backing array always exists and
that slot ``argc`` holds the terminator (None). This makes the array
suitable for handing to process-invocation APIs that expect a
main()-style argument vector and scan for the terminator instead of
taking a length.

Every string pushed is stored as a private copy, and all of them are
released by clear(). detach() hands the array and its strings over to
the caller and leaves the vector empty and reusable.

A string list that pairs each entry with auxiliary data cannot be used
for argv purposes: its slots are not bare strings.
"""

import os
import re
from collections.abc import Mapping
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from strvec.core.growth import DEFAULT_POLICY, GrowthPolicy
from strvec.core.growth_logger import GrowthLogger

StrLike = Union[str, bytes, bytearray, os.PathLike]

# Shared terminator-only array used by every empty vector. Never written to.
EMPTY_STRVEC: Tuple[None] = (None,)

# isspace() in the C locale
_WHITESPACE = re.compile(r'[ \t\n\v\f\r]+')


def own_string(value: StrLike) -> str:
    """Make a private str copy of a string-like value

    bytes-like values and paths are decoded with the filesystem encoding,
    the same one used for process arguments.

    Args:
        value: str, bytes, bytearray or os.PathLike

    Returns:
        Independent str holding the same text

    Raises:
        TypeError: If value is None or not string-like
    """
    if isinstance(value, str):
        return str(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return os.fsdecode(bytes(value))
    if isinstance(value, os.PathLike):
        return os.fsdecode(value)
    raise TypeError(
        f"expected str, bytes or os.PathLike, got {type(value).__name__}"
    )


def split_whitespace(text: StrLike) -> List[str]:
    """Split text on runs of whitespace; quoting is not interpreted"""
    return [token for token in _WHITESPACE.split(own_string(text)) if token]


class StrVec:
    """Owning, growable, None-terminated array of strings

    Attributes exposed read-only:
        argv: Live view of the backing array, ``argc + 1`` slots long
        argc: Number of strings, not counting the terminator
        alloc: Number of allocated slots (0 while using EMPTY_STRVEC)
    """

    __hash__ = None

    def __init__(self,
                 policy: Optional[GrowthPolicy] = None,
                 logger: Optional[GrowthLogger] = None) -> None:
        """Initialize an empty vector

        Args:
            policy: Growth policy for the backing array
            logger: Optional logger receiving backing array events
        """
        self.policy = policy if policy is not None else DEFAULT_POLICY
        self.logger = logger
        self.init()

    def init(self) -> None:
        """Reset to the empty state without releasing anything

        Call clear() first on a vector that holds strings.
        """
        self._slots: Union[Tuple[None], List[Optional[str]]] = EMPTY_STRVEC
        self._argc = 0
        self._alloc = 0

    @property
    def argv(self) -> Tuple[Optional[str], ...]:
        if self._alloc == 0:
            return EMPTY_STRVEC
        return tuple(self._slots[:self._argc + 1])

    @property
    def argc(self) -> int:
        return self._argc

    @property
    def alloc(self) -> int:
        return self._alloc

    def _grow(self, needed: int) -> None:
        """Make room for ``needed`` slots, terminator included"""
        if needed <= self._alloc:
            return
        new_alloc = self.policy.next_capacity(self._alloc, needed)
        slots = list(self._slots[:self._argc])
        slots.extend([None] * (new_alloc - self._argc))
        if self.logger is not None:
            self.logger.log_grow(self._argc, self._alloc, new_alloc)
        self._slots = slots
        self._alloc = new_alloc

    def _append_owned(self, strings: List[str]) -> None:
        """Append already-owned strings, keeping the terminator in place"""
        if not strings:
            return
        self._grow(self._argc + len(strings) + 1)
        for s in strings:
            self._slots[self._argc] = s
            self._argc += 1
        self._slots[self._argc] = None

    def push(self, value: StrLike) -> str:
        """Push a copy of a string onto the end of the array

        Args:
            value: String to copy

        Returns:
            The stored copy
        """
        owned = own_string(value)
        self._append_owned([owned])
        return owned

    def pushf(self, fmt: str, *args) -> str:
        """Format a string printf-style and push it

        A single mapping argument feeds %(name)s style templates.

        Args:
            fmt: Format template using %-style conversions
            *args: Values for the conversions

        Returns:
            The stored string
        """
        if len(args) == 1 and isinstance(args[0], Mapping):
            return self.push(fmt % args[0])
        return self.push(fmt % args)

    def pushl(self, *values: StrLike) -> None:
        """Push each argument in order"""
        self._append_owned([own_string(v) for v in values])

    def pushv(self, array: Iterable[Optional[StrLike]]) -> None:
        """Push copies of the strings in a None-terminated array

        Iteration stops at the first None slot, or at the end of the
        iterable if it has no terminator. ``array`` itself is not
        modified.
        """
        owned = []
        for value in array:
            if value is None:
                break
            owned.append(own_string(value))
        self._append_owned(owned)

    def pop(self) -> None:
        """Remove the final string, if any. Capacity is kept."""
        if self._argc == 0:
            return
        self._argc -= 1
        self._slots[self._argc] = None

    def split(self, text: StrLike) -> None:
        """Push each whitespace-separated token of text

        Does not handle quoted arguments.
        """
        self._append_owned(split_whitespace(text))

    def clear(self) -> None:
        """Release every string and the array, returning to the empty state"""
        if self.logger is not None and self._alloc:
            self.logger.log_clear(self._argc, self._alloc)
        if self._alloc:
            self._slots.clear()
        self.init()

    def detach(self) -> List[Optional[str]]:
        """Hand the array and its strings over to the caller

        Returns:
            A list of ``argc + 1`` slots ending in None, owned by the
            caller. A new list is returned even when the vector is empty.
        """
        if self._alloc == 0:
            return [None]
        if self.logger is not None:
            self.logger.log_detach(self._argc, self._alloc)
        argv = self._slots
        del argv[self._argc + 1:]
        self.init()
        return argv

    def __len__(self) -> int:
        return self._argc

    def __iter__(self) -> Iterator[str]:
        return iter(self._slots[:self._argc])

    def __getitem__(self, index):
        return self._slots[:self._argc][index]

    def __eq__(self, other) -> bool:
        if isinstance(other, StrVec):
            return list(self) == list(other)
        if isinstance(other, (list, tuple)):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"StrVec(argc={self._argc}, alloc={self._alloc}, argv={list(self)!r})"
