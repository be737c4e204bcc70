# aprsdecode

Parse and encode APRS packets. Packets can arrive as text lines from an
APRS-IS feed or as raw AX.25 UI frames from a TNC.

Packets are handled as `bytes`, because APRS information fields may carry
arbitrary bytes. The textual decoders also accept a `str`.

## Installation

```
pip install aprsdecode
```

## Decoding a packet

```python
from aprsdecode.packet import AprsPacket

pkt = AprsPacket.decode_textual(b"KD9ABC>APDR15,qAR,KD9XYZ::W1AW-9   :Hello world{042")
print(pkt.source, pkt.destination)   # KD9ABC APDR15
print(pkt.data.addressee)            # b'W1AW-9'
print(pkt.data.text)                 # b'Hello world'
print(pkt.data.kind, pkt.data.message_id)  # MessageKind.DIRECTED b'042'
```

`AprsPacket` is a frozen dataclass with the fields `source`, `destination`,
`via` (a tuple of path hops) and `data`. `str(pkt)` gives the packet in
APRS-IS form.

The type of `data` depends on the data type indicator, which is the first
byte of the information field:

| Indicator | Class |
|-----------|-------|
| `:` | `aprsdecode.message.AprsMessage` (messages, bulletins, ACK/REJ, telemetry metadata, directed queries) |
| `?` | `aprsdecode.query.AprsQuery` (with an optional `QueryFootprint`) |
| `<` | `aprsdecode.capabilities.AprsCapabilities` |
| `$` | `aprsdecode.nmea.AprsNmea` |
| `[` | `aprsdecode.grid.AprsGridLocator` |
| anything else | `aprsdecode.packet.UnknownData`, which holds `dti` and the raw bytes |

Each of these classes has an `encode()` method that rebuilds the
information field. `aprsdecode.packet.decode_data(info, to)` decodes a bare
information field.

`AprsMessage.kind` is a `MessageKind`: `DIRECTED`, `ACK`, `REJ`, `BULLETIN`,
`NWS_BULLETIN`, `TELEMETRY_PARM`, `TELEMETRY_UNIT`, `TELEMETRY_EQNS`,
`TELEMETRY_BITS` or `DIRECTED_QUERY`.

## AX.25 frames

```python
from aprsdecode.packet import AprsPacket

pkt = AprsPacket.decode_textual(b"W1AW-9>APRS,WIDE1-1:?APRS?")
frame = pkt.encode_ax25()
again = AprsPacket.decode_ax25(frame)
assert again.encode_textual() == pkt.encode_textual()
```

The "has been repeated" flag of a digipeater (`RELAY*`) is kept when a
packet goes through AX.25 and back. AX.25 has no place for a Q-construct
hop, so only its gateway callsign is written.

## Callsigns and paths

```python
from aprsdecode.callsign import Callsign
from aprsdecode.digipeater import parse_via

call = Callsign.decode_textual(b"w1aw-9")
print(call, call.ssid_numeric())     # W1AW-9 9

for hop in parse_via(b"RELAY*,qAR,KD9ABC"):
    print(hop.encode_textual())      # b'RELAY*', then b'qAR,KD9ABC'
```

A path hop is either a `DigipeaterCall` (a callsign and its `heard` flag) or
a `QConstructHop` (a `QConstruct` and a gateway callsign).

Textual form accepts D-STAR style alphanumeric SSIDs such as `K0HRV-S`.
AX.25 writes them as SSID 0. An SSID of `-0` is read as no SSID.

## What it does not decode

This version does not decode position reports, MIC-E, objects, items,
status reports, weather, telemetry, third-party or user-defined packets.
Their information fields come back as `UnknownData`. The raw bytes are kept
unchanged, so these packets can still be re-encoded exactly. There is no
command-line tool.

## Errors

Every parse or encode failure raises a subclass of
`aprsdecode.errors.AprsError`, which is itself a `ValueError`. Examples are
`InvalidCallsignError`, `MissingInfoDelimiterError`,
`InvalidMessageError`, `UnsupportedPositionFormatError` and
`Ax25NotUiFrameError`.