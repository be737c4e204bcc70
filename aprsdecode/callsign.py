"""APRS callsigns with optional SSID, in textual and AX.25 form."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidCallsignError, TruncatedPacketError

MAX_CALL_LEN = 9
"""Longest base call accepted (AX.25 allows 6, APRS-IS up to 9)."""

MAX_SSID_LEN = 6
"""Longest textual SSID accepted (numeric or short alphanumeric)."""

AX25_ADDRESS_LEN = 7
"""Size of one AX.25 address field in bytes."""


def _as_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(data, str):
        return data.encode()
    return bytes(data)


def _parse_call(raw: bytes) -> str | None:
    if not raw or len(raw) > MAX_CALL_LEN or not raw.isalnum():
        return None
    return raw.decode("ascii").upper()


def _parse_ssid(raw: bytes, whole: bytes) -> str | None:
    """Return the canonical SSID, or None when it means "no SSID"."""
    if not raw or len(raw) > MAX_SSID_LEN:
        raise InvalidCallsignError(whole)
    if raw.isdigit():
        value = int(raw)
        if value > 15:
            raise InvalidCallsignError(whole)
        return str(value) if value else None
    if not raw.isalnum():
        raise InvalidCallsignError(whole)
    return raw.decode("ascii").upper()


@dataclass(frozen=True)
class Callsign:
    """A base call (uppercase ASCII) with an optional SSID such as ``9`` or ``S``."""

    call: str
    ssid: str | None = None

    @classmethod
    def decode_textual(cls, data: bytes | str) -> Callsign:
        """Parse a textual callsign such as ``W1AW-9`` or ``K0HRV-S``."""
        raw = _as_bytes(data)
        call_part, dash, ssid_part = raw.partition(b"-")
        ssid = _parse_ssid(ssid_part, raw) if dash else None
        call = _parse_call(call_part)
        if call is None:
            raise InvalidCallsignError(raw)
        return cls(call, ssid)

    @classmethod
    def decode_ax25(cls, data: bytes) -> tuple[Callsign, bool]:
        """Decode a 7-byte AX.25 address; return the callsign and the end-of-address flag."""
        raw = bytes(data)
        if len(raw) < AX25_ADDRESS_LEN:
            raise TruncatedPacketError(expected=AX25_ADDRESS_LEN, got=len(raw))
        field = raw[:AX25_ADDRESS_LEN]
        if any(b & 0x01 for b in field[:6]):
            raise InvalidCallsignError(field)
        chars = bytes(b >> 1 for b in field[:6]).rstrip(b" ")
        call = _parse_call(chars)
        if call is None:
            raise InvalidCallsignError(field)
        ssid_byte = field[6]
        ssid_value = (ssid_byte >> 1) & 0x0F
        ssid = str(ssid_value) if ssid_value else None
        return cls(call, ssid), bool(ssid_byte & 0x01)

    def ssid_numeric(self) -> int | None:
        """The SSID as a number 0–15, or None when absent or alphanumeric."""
        if self.ssid is None or not self.ssid.isdigit():
            return None
        value = int(self.ssid)
        return value if value <= 15 else None

    def encode_textual(self) -> bytes:
        """The callsign in textual APRS form."""
        return str(self).encode("ascii")

    def encode_ax25(self, eoa: bool) -> bytes:
        """The callsign as a 7-byte AX.25 address field.

        Only numeric SSIDs fit in AX.25; an alphanumeric SSID is written as 0.
        """
        call = self.call.encode("ascii")[:6].ljust(6, b" ")
        shifted = bytes((b << 1) & 0xFF for b in call)
        ssid_value = (self.ssid_numeric() or 0) & 0x0F
        # Bits 5 and 6 are reserved and set to 1.
        ssid_byte = 0x60 | (ssid_value << 1) | (0x01 if eoa else 0x00)
        return shifted + bytes([ssid_byte])

    def __str__(self) -> str:
        return self.call if self.ssid is None else f"{self.call}-{self.ssid}"