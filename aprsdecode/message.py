"""APRS messages, bulletins, acknowledgements and telemetry metadata (DTI ``:``)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import InvalidMessageError

_ADDRESSEE_LEN = 9
_HEADER_LEN = 1 + _ADDRESSEE_LEN + 1
_NWS_PREFIXES = (b"NWS", b"SKY", b"CWA", b"BOM")


class MessageKind(Enum):
    """The kind of a message packet, decided from its addressee and text."""

    DIRECTED = "directed"
    ACK = "ack"
    REJ = "rej"
    BULLETIN = "bulletin"
    NWS_BULLETIN = "nws_bulletin"
    TELEMETRY_PARM = "telemetry_parm"
    TELEMETRY_UNIT = "telemetry_unit"
    TELEMETRY_EQNS = "telemetry_eqns"
    TELEMETRY_BITS = "telemetry_bits"
    DIRECTED_QUERY = "directed_query"


_TELEMETRY_PREFIXES = (
    (b"PARM.", MessageKind.TELEMETRY_PARM),
    (b"UNIT.", MessageKind.TELEMETRY_UNIT),
    (b"EQNS.", MessageKind.TELEMETRY_EQNS),
    (b"BITS.", MessageKind.TELEMETRY_BITS),
)


def _classify(
    addressee: bytes, text: bytes, message_id: bytes | None
) -> tuple[MessageKind, bytes | None]:
    if text.startswith(b"ack"):
        return MessageKind.ACK, text[3:]
    if text.startswith(b"rej"):
        return MessageKind.REJ, text[3:]
    if addressee.startswith(b"BLN"):
        return MessageKind.BULLETIN, None
    if addressee.startswith(_NWS_PREFIXES):
        return MessageKind.NWS_BULLETIN, None
    for prefix, kind in _TELEMETRY_PREFIXES:
        if text.startswith(prefix):
            return kind, None
    if text.startswith(b"?"):
        return MessageKind.DIRECTED_QUERY, None
    return MessageKind.DIRECTED, message_id


@dataclass(frozen=True)
class AprsMessage:
    """A message packet: ``:AAAAAAAAA:text{id`` with a space-padded addressee.

    ``message_id`` is the message number of a directed message, or the number
    being acknowledged or rejected for ``ACK`` and ``REJ``; otherwise None.
    """

    addressee: bytes
    text: bytes
    kind: MessageKind = MessageKind.DIRECTED
    message_id: bytes | None = None

    @classmethod
    def parse(cls, info: bytes) -> AprsMessage:
        """Decode an information field that starts with the ``:`` DTI."""
        raw = bytes(info)
        if len(raw) < _HEADER_LEN or raw[_HEADER_LEN - 1] != ord(":"):
            raise InvalidMessageError()
        addressee = raw[1 : 1 + _ADDRESSEE_LEN].rstrip(b" ")
        body = raw[_HEADER_LEN:]
        text, brace, id_part = body.partition(b"{")
        kind, message_id = _classify(addressee, text, id_part if brace else None)
        return cls(addressee=addressee, text=text, kind=kind, message_id=message_id)

    def encode(self) -> bytes:
        """The information field, starting with the ``:`` DTI."""
        head = b":" + self.addressee.ljust(_ADDRESSEE_LEN, b" ") + b":"
        if self.kind is MessageKind.ACK:
            return head + b"ack" + (self.message_id or b"")
        if self.kind is MessageKind.REJ:
            return head + b"rej" + (self.message_id or b"")
        if self.kind is MessageKind.DIRECTED and self.message_id is not None:
            return head + self.text + b"{" + self.message_id
        return head + self.text