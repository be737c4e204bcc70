"""Maidenhead grid locator reports (DTI ``[``)."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import UnsupportedPositionFormatError

_UPPER = frozenset(b"ABCDEFGHIJKLMNOPQRSTUVWXYZ")
_DIGITS = frozenset(b"0123456789")
_LETTERS = _UPPER | frozenset(b"abcdefghijklmnopqrstuvwxyz")


def _valid_grid(grid: bytes) -> bool:
    if len(grid) not in (4, 6):
        return False
    if grid[0] not in _UPPER or grid[1] not in _UPPER:
        return False
    if grid[2] not in _DIGITS or grid[3] not in _DIGITS:
        return False
    return len(grid) == 4 or (grid[4] in _LETTERS and grid[5] in _LETTERS)


@dataclass(frozen=True)
class AprsGridLocator:
    """A grid square such as ``IO91`` or ``IO91SX``, followed by a comment."""

    grid: bytes
    comment: bytes = b""

    @classmethod
    def parse(cls, info: bytes) -> AprsGridLocator:
        """Decode an information field of the form ``[GRID]comment``."""
        body = bytes(info)[1:]
        grid, bracket, comment = body.partition(b"]")
        if not bracket or not _valid_grid(grid):
            raise UnsupportedPositionFormatError()
        return cls(grid=grid, comment=comment)

    def encode(self) -> bytes:
        """The information field, starting with the ``[`` DTI."""
        return b"[" + self.grid + b"]" + self.comment