"""Parsing and encoding of APRS packets in APRS-IS text and AX.25 frame form.

Covers callsigns, digipeater paths, messages, queries, capabilities,
NMEA sentences and grid locators; other packet types are kept raw.
"""

__version__ = "0.1.2"

__all__ = [
    "callsign",
    "capabilities",
    "digipeater",
    "errors",
    "grid",
    "message",
    "nmea",
    "packet",
    "query",
]