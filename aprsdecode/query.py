"""APRS general queries (DTI ``?``), optionally with a geographic footprint."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from decimal import Decimal

# Characters with the Unicode White_Space property.
_WHITESPACE = (
    " \t\n\x0b\x0c\r\x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def _to_single(value: float) -> float:
    """Round a float to the nearest IEEE single-precision value."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _parse_float(raw: bytes) -> float | None:
    try:
        text = raw.decode("utf-8").strip(_WHITESPACE)
    except UnicodeDecodeError:
        return None
    if not text or "_" in text or text != text.strip():
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _format_float(value: float, single: bool = False) -> str:
    """Shortest decimal form that reads back to ``value``, never in exponent notation."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = repr(value)
    if single:
        for precision in range(1, 10):
            candidate = f"{value:.{precision}g}"
            if _to_single(float(candidate)) == value:
                text = candidate
                break
    plain = format(Decimal(text), "f")
    if "." in plain:
        plain = plain.rstrip("0").rstrip(".")
    return plain


@dataclass(frozen=True)
class QueryFootprint:
    """A circle of interest: centre in degrees and radius in kilometres."""

    latitude: float
    longitude: float
    radius_km: float


def _parse_footprint(data: bytes) -> tuple[QueryFootprint | None, bytes]:
    if not data:
        return None, b""
    parts = data.split(b",", 3)
    if len(parts) >= 3:
        lat = _parse_float(parts[0])
        lon = _parse_float(parts[1])
        radius = _parse_float(parts[2])
        if lat is not None and lon is not None and radius is not None:
            trailing = parts[3] if len(parts) > 3 else b""
            return QueryFootprint(lat, lon, _to_single(radius)), trailing
    return None, data


@dataclass(frozen=True)
class AprsQuery:
    """A query ``?TYPE?`` with an optional ``lat,lon,radius`` footprint."""

    query_type: bytes
    footprint: QueryFootprint | None = None
    trailing: bytes = b""

    @classmethod
    def parse(cls, info: bytes) -> AprsQuery:
        """Decode an information field that starts with the ``?`` DTI."""
        body = bytes(info)[1:]
        query_type, _, after_type = body.partition(b"?")
        footprint, trailing = _parse_footprint(after_type)
        return cls(query_type=query_type, footprint=footprint, trailing=trailing)

    def encode(self) -> bytes:
        """The information field, starting with the ``?`` DTI."""
        out = b"?" + self.query_type + b"?"
        if self.footprint is not None:
            fp = self.footprint
            out += ",".join(
                (
                    _format_float(fp.latitude),
                    _format_float(fp.longitude),
                    _format_float(fp.radius_km, single=True),
                )
            ).encode("ascii")
        return out + self.trailing