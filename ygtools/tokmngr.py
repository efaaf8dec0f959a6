"""Token manager: collects tokens produced by a scanning callback."""

from __future__ import annotations

from typing import Callable, Generic, Optional, TypeVar

from ygtools.srcmngr import SrcMngr

T = TypeVar("T")

#: A callback scans one token: ``(token, line, column_range)`` or None when done.
TokenMgrCallback = Callable[[SrcMngr], Optional[tuple[T, int, range]]]


class TokenMgr(Generic[T]):
    """Stores tokens with their line and column range."""

    def __init__(self, callback: TokenMgrCallback) -> None:
        self._callback = callback
        self.tokens: list[tuple[T, int, range]] = []

    def set_backend(self, callback: TokenMgrCallback) -> None:
        """Replace the callback that scans a single token."""
        self._callback = callback

    def scan(self, src_mngr: SrcMngr) -> None:
        """Call the callback until it returns None, collecting each token.

        Exceptions raised by the callback propagate.
        """
        while (scanned := self._callback(src_mngr)) is not None:
            self.tokens.append(scanned)