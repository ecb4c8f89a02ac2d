"""Owned, length-bearing token container produced by ``split``."""

from __future__ import annotations

from collections.abc import Sequence
from contextlib import AbstractContextManager
from typing import Iterable, Iterator, List, Optional, overload

from .errors import TokenListReleasedError


class TokenList(Sequence, AbstractContextManager["TokenList"]):
    """Ordered, immutable sequence of ``bytes`` tokens.

    ``release`` drops every token exactly once; later calls are no-ops and
    any further read raises ``TokenListReleasedError``.
    """

    __slots__ = ("_tokens", "_released")

    def __init__(self, tokens: Iterable[bytes] = ()) -> None:
        self._tokens: List[bytes] = list(tokens)
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def _live(self) -> List[bytes]:
        if self._released:
            raise TokenListReleasedError("token list has been released")
        return self._tokens

    @overload
    def __getitem__(self, index: int) -> bytes: ...

    @overload
    def __getitem__(self, index: slice) -> List[bytes]: ...

    def __getitem__(self, index):
        return self._live()[index]

    def __len__(self) -> int:
        return len(self._live())

    def __iter__(self) -> Iterator[bytes]:
        return iter(tuple(self._live()))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TokenList):
            return self._live() == other._live()
        if isinstance(other, (list, tuple)):
            return self._live() == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._released:
            return "TokenList(<released>)"
        return f"TokenList({self._tokens!r})"

    def to_list(self) -> List[bytes]:
        return list(self._live())

    def release(self) -> None:
        if self._released:
            return
        self._tokens.clear()
        self._released = True

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.release()
        return False


def release(tokens: Optional[TokenList]) -> None:
    """Release ``tokens``; accepts ``None`` so callers need no guard."""

    if tokens is not None:
        tokens.release()


__all__ = ["TokenList", "release"]
