"""Raw NMEA sentences carried in APRS packets (DTI ``$``)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AprsNmea:
    """An NMEA sentence, kept opaque after the ``$`` DTI."""

    data: bytes

    @classmethod
    def parse(cls, info: bytes) -> AprsNmea:
        """Decode an information field that starts with the ``$`` DTI."""
        return cls(data=bytes(info)[1:])

    def encode(self) -> bytes:
        """The information field, starting with the ``$`` DTI."""
        return b"$" + self.data