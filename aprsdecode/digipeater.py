"""The digipeater path of an APRS packet, including APRS-IS Q-constructs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .callsign import Callsign
from .errors import InvalidCallsignError, InvalidViaError

_Q_PREFIX = b"qA"
_UNKNOWN_GATEWAY = b"UNKNOWN"


class QConstruct(str, Enum):
    """APRS-IS Q-construct tokens describing how a packet entered the network."""

    AC = "qAC"  # server login verified
    AX = "qAX"  # unverified login
    AO = "qAO"  # heard via RF, originated on internet
    AR = "qAR"  # via bidirectional internet gateway
    AS = "qAS"  # via server without verification
    AT = "qAT"  # traced via internet
    AI = "qAI"  # server-generated packet
    AO_RF = "qAo"  # heard directly via RF
    AR_RF = "qAr"  # received from RF to internet
    AZ = "qAZ"  # zero hop

    @classmethod
    def from_token(cls, token: bytes | str) -> QConstruct | str:
        """Return the known construct for ``token``, or the token text itself."""
        text = token.decode("utf-8", errors="replace") if isinstance(token, (bytes, bytearray)) else token
        try:
            return cls(text)
        except ValueError:
            return text

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DigipeaterCall:
    """A callsign in the path, with the has-been-repeated (``*``) flag."""

    callsign: Callsign
    heard: bool = False

    def encode_textual(self) -> bytes:
        return str(self).encode("ascii")

    def __str__(self) -> str:
        return f"{self.callsign}*" if self.heard else str(self.callsign)


@dataclass(frozen=True)
class QConstructHop:
    """A Q-construct together with the gateway callsign that follows it."""

    construct: QConstruct | str
    gateway: Callsign

    def encode_textual(self) -> bytes:
        return str(self.construct).encode("utf-8") + b"," + self.gateway.encode_textual()

    def __str__(self) -> str:
        return f"{self.construct},{self.gateway}"


Digipeater = Union[DigipeaterCall, QConstructHop]


def decode_digipeater(data: bytes) -> Digipeater:
    """Parse one path element (without surrounding commas)."""
    raw = bytes(data)
    if raw.startswith(_Q_PREFIX):
        return QConstructHop(
            QConstruct.from_token(raw), Callsign.decode_textual(_UNKNOWN_GATEWAY)
        )
    heard = raw.endswith(b"*")
    call_bytes = raw[:-1] if heard else raw
    try:
        callsign = Callsign.decode_textual(call_bytes)
    except InvalidCallsignError as exc:
        raise InvalidViaError(raw) from exc
    return DigipeaterCall(callsign, heard)


def parse_via(data: bytes) -> list[Digipeater]:
    """Parse the comma-separated path; a ``qA?`` token takes the next element as its gateway."""
    raw = bytes(data)
    if not raw:
        return []
    elements = iter(raw.split(b","))
    path: list[Digipeater] = []
    for element in elements:
        if not element.startswith(_Q_PREFIX):
            path.append(decode_digipeater(element))
            continue
        construct = QConstruct.from_token(element)
        gateway_raw = next(elements, None)
        if gateway_raw is None:
            gateway = Callsign.decode_textual(_UNKNOWN_GATEWAY)
        else:
            try:
                gateway = Callsign.decode_textual(gateway_raw)
            except InvalidCallsignError as exc:
                raise InvalidViaError(gateway_raw) from exc
        path.append(QConstructHop(construct, gateway))
    return path