"""Exceptions raised while decoding or encoding APRS packets."""

from __future__ import annotations


class AprsError(ValueError):
    """Base class for every APRS decoding or encoding failure."""


class EmptyPacketError(AprsError):
    """The packet has no bytes at all."""

    def __init__(self) -> None:
        super().__init__("packet is empty")


class MissingDestinationDelimiterError(AprsError):
    """The header has no ``>`` between source and destination."""

    def __init__(self) -> None:
        super().__init__("missing '>' in packet header (expected FROM>TO,VIA:DATA)")


class MissingInfoDelimiterError(AprsError):
    """The packet has no ``:`` between header and information field."""

    def __init__(self) -> None:
        super().__init__("missing ':' in packet header (expected FROM>TO,VIA:DATA)")


class InvalidCallsignError(AprsError):
    """A callsign could not be parsed."""

    def __init__(self, raw: bytes) -> None:
        self.raw = bytes(raw)
        super().__init__(f"invalid callsign: {self.raw!r}")


class InvalidViaError(AprsError):
    """An element of the digipeater path could not be parsed."""

    def __init__(self, raw: bytes) -> None:
        self.raw = bytes(raw)
        super().__init__(f"invalid via element: {self.raw!r}")


class Ax25FrameTooShortError(AprsError):
    """An AX.25 frame is shorter than the smallest valid frame."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"AX.25 frame too short (got {length} bytes, need at least 15)")


class Ax25MissingEoaError(AprsError):
    """No address in an AX.25 frame carried the end-of-address bit."""

    def __init__(self) -> None:
        super().__init__("AX.25 frame missing end-of-address bit in expected range")


class Ax25NotUiFrameError(AprsError):
    """The AX.25 control byte is not that of a UI frame."""

    def __init__(self, byte: int) -> None:
        self.byte = byte
        super().__init__(f"AX.25 control byte is not UI frame (0x03), got 0x{byte:02x}")


class Ax25NotAprsPidError(AprsError):
    """The AX.25 protocol identifier is not the APRS one."""

    def __init__(self, byte: int) -> None:
        self.byte = byte
        super().__init__(f"AX.25 PID is not APRS (0xF0), got 0x{byte:02x}")


class TruncatedPacketError(AprsError):
    """The data ended before a required field."""

    def __init__(self, expected: int, got: int) -> None:
        self.expected = expected
        self.got = got
        super().__init__(
            f"truncated packet: expected at least {expected} bytes, got {got}"
        )


class InvalidMessageError(AprsError):
    """A message packet lacks the second ``:`` delimiter."""

    def __init__(self) -> None:
        super().__init__("invalid message: missing second ':' delimiter")


class UnsupportedPositionFormatError(AprsError):
    """A position could not be read in any supported format."""

    def __init__(self) -> None:
        super().__init__("unsupported position format")


class EncodeError(AprsError):
    """A structure cannot be written in the requested form."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"cannot encode: {detail}")