"""APRS station capabilities reports (DTI ``<``)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AprsCapabilities:
    """A capabilities report; the text after ``<`` is kept verbatim."""

    raw: bytes

    @classmethod
    def parse(cls, info: bytes) -> AprsCapabilities:
        """Decode an information field that starts with the ``<`` DTI."""
        return cls(raw=bytes(info)[1:])

    def encode(self) -> bytes:
        """The information field, starting with the ``<`` DTI."""
        return b"<" + self.raw