"""Whole APRS packets: header, digipeater path and information field.

Packets are read from and written to the textual APRS-IS form
``FROM>TO,VIA:DATA`` and the binary AX.25 UI frame form.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union

from .callsign import AX25_ADDRESS_LEN, Callsign
from .capabilities import AprsCapabilities
from .digipeater import Digipeater, DigipeaterCall, QConstructHop, parse_via
from .errors import (
    Ax25FrameTooShortError,
    Ax25MissingEoaError,
    Ax25NotAprsPidError,
    Ax25NotUiFrameError,
    EmptyPacketError,
    MissingDestinationDelimiterError,
    MissingInfoDelimiterError,
    TruncatedPacketError,
)
from .grid import AprsGridLocator
from .message import AprsMessage
from .nmea import AprsNmea
from .query import AprsQuery

AX25_CONTROL_UI = 0x03
AX25_PID_NO_LAYER3 = 0xF0
_AX25_MIN_FRAME = 16
_HEARD_BIT = 0x80


@dataclass(frozen=True)
class UnknownData:
    """An information field whose type is not decoded; kept verbatim.

    ``dti`` is the first byte of the field, or 0 for an empty field.
    """

    dti: int
    data: bytes

    def encode(self) -> bytes:
        """The information field exactly as it was received."""
        return self.data


AprsData = Union[
    AprsMessage,
    AprsQuery,
    AprsCapabilities,
    AprsGridLocator,
    AprsNmea,
    UnknownData,
]

_DECODERS: dict[int, Callable[[bytes], AprsData]] = {
    ord(":"): AprsMessage.parse,
    ord("<"): AprsCapabilities.parse,
    ord("?"): AprsQuery.parse,
    ord("["): AprsGridLocator.parse,
    ord("$"): AprsNmea.parse,
}


def decode_data(info: bytes, to: Callsign) -> AprsData:
    """Decode an information field by its Data Type Indicator.

    ``to`` is the packet's destination, which some formats draw on.
    Fields of a type not decoded here come back as :class:`UnknownData`.
    """
    raw = bytes(info)
    if not raw:
        return UnknownData(dti=0, data=b"")
    decoder = _DECODERS.get(raw[0])
    if decoder is None:
        return UnknownData(dti=raw[0], data=raw)
    return decoder(raw)


@dataclass(frozen=True)
class AprsPacket:
    """A decoded APRS packet."""

    source: Callsign
    destination: Callsign
    via: tuple[Digipeater, ...]
    data: AprsData

    @classmethod
    def decode_textual(cls, data: bytes | str) -> AprsPacket:
        """Decode a packet in APRS-IS form ``FROM>TO[,VIA...]:DATA``."""
        raw = data.encode() if isinstance(data, str) else bytes(data)
        if not raw:
            raise EmptyPacketError()
        header, colon, info = raw.partition(b":")
        if not colon:
            raise MissingInfoDelimiterError()
        from_bytes, arrow, dest_via = header.partition(b">")
        if not arrow:
            raise MissingDestinationDelimiterError()
        to_bytes, _, via_bytes = dest_via.partition(b",")

        source = Callsign.decode_textual(from_bytes)
        destination = Callsign.decode_textual(to_bytes)
        via = tuple(parse_via(via_bytes))
        return cls(source, destination, via, decode_data(info, destination))

    @classmethod
    def decode_ax25(cls, data: bytes) -> AprsPacket:
        """Decode a raw AX.25 UI frame.

        Layout: destination (7) + source (7) + up to 8 repeaters (7 each)
        + control ``0x03`` + PID ``0xF0`` + information field.
        """
        raw = bytes(data)
        if len(raw) < _AX25_MIN_FRAME:
            raise Ax25FrameTooShortError(len(raw))

        destination, _ = Callsign.decode_ax25(raw[0:7])
        source, last_address = Callsign.decode_ax25(raw[7:14])

        pos = 2 * AX25_ADDRESS_LEN
        via: list[Digipeater] = []
        while not last_address:
            field = raw[pos : pos + AX25_ADDRESS_LEN]
            if len(field) < AX25_ADDRESS_LEN:
                raise Ax25MissingEoaError()
            call, last_address = Callsign.decode_ax25(field)
            via.append(DigipeaterCall(call, bool(field[6] & _HEARD_BIT)))
            pos += AX25_ADDRESS_LEN
            if not last_address and pos >= len(raw):
                raise Ax25MissingEoaError()

        if pos >= len(raw):
            raise TruncatedPacketError(expected=pos + 2, got=len(raw))
        if raw[pos] != AX25_CONTROL_UI:
            raise Ax25NotUiFrameError(raw[pos])
        pos += 1
        if pos >= len(raw):
            raise TruncatedPacketError(expected=pos + 1, got=len(raw))
        if raw[pos] != AX25_PID_NO_LAYER3:
            raise Ax25NotAprsPidError(raw[pos])
        pos += 1

        info = raw[pos:]
        return cls(source, destination, tuple(via), decode_data(info, destination))

    def encode_textual(self) -> bytes:
        """The packet in APRS-IS form."""
        header = self.source.encode_textual() + b">" + self.destination.encode_textual()
        for hop in self.via:
            header += b"," + hop.encode_textual()
        return header + b":" + self.data.encode()

    def encode_ax25(self) -> bytes:
        """The packet as a raw AX.25 UI frame.

        A Q-construct hop is written as its gateway callsign, since AX.25
        has no place for the construct itself.
        """
        out = bytearray(self.destination.encode_ax25(False))
        out += self.source.encode_ax25(not self.via)
        last_index = len(self.via) - 1
        for index, hop in enumerate(self.via):
            is_last = index == last_index
            if isinstance(hop, QConstructHop):
                out += hop.gateway.encode_ax25(is_last)
                continue
            address = bytearray(hop.callsign.encode_ax25(is_last))
            if hop.heard:
                address[-1] |= _HEARD_BIT
            out += address
        out.append(AX25_CONTROL_UI)
        out.append(AX25_PID_NO_LAYER3)
        out += self.data.encode()
        return bytes(out)

    def __str__(self) -> str:
        return self.encode_textual().decode("latin-1")