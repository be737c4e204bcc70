import pytest

from aprsdecode.callsign import Callsign
from aprsdecode.capabilities import AprsCapabilities
from aprsdecode.digipeater import DigipeaterCall, QConstruct, QConstructHop
from aprsdecode.errors import (
    Ax25FrameTooShortError,
    Ax25MissingEoaError,
    Ax25NotAprsPidError,
    Ax25NotUiFrameError,
    EmptyPacketError,
    InvalidCallsignError,
    MissingDestinationDelimiterError,
    MissingInfoDelimiterError,
    TruncatedPacketError,
    UnsupportedPositionFormatError,
)
from aprsdecode.grid import AprsGridLocator
from aprsdecode.message import AprsMessage, MessageKind
from aprsdecode.nmea import AprsNmea
from aprsdecode.packet import AprsPacket, UnknownData, decode_data
from aprsdecode.query import AprsQuery

POSITION_PACKET = b"W1AW-9>APRS,WIDE1-1,WIDE2-2:!4903.50N/07201.75W-Test"
MSG_PACKET = b"KD9ABC>APDR15,qAR,KD9XYZ::W1AW-9   :Hello world{001"


def _call(text):
    return Callsign.decode_textual(text)


def test_decode_position_header():
    pkt = AprsPacket.decode_textual(POSITION_PACKET)
    assert str(pkt.source) == "W1AW-9"
    assert str(pkt.destination) == "APRS"
    assert len(pkt.via) == 2
    assert pkt.data == UnknownData(dti=ord("!"), data=b"!4903.50N/07201.75W-Test")


def test_decode_message_header():
    pkt = AprsPacket.decode_textual(MSG_PACKET)
    assert str(pkt.source) == "KD9ABC"
    assert str(pkt.destination) == "APDR15"
    assert len(pkt.via) == 1
    assert pkt.via[0] == QConstructHop(QConstruct.AR, _call("KD9XYZ"))
    assert isinstance(pkt.data, AprsMessage)
    assert pkt.data.addressee == b"W1AW-9"
    assert pkt.data.kind is MessageKind.DIRECTED
    assert pkt.data.message_id == b"001"


def test_decode_accepts_str():
    pkt = AprsPacket.decode_textual("W1AW>APRS:>Status text")
    assert pkt.encode_textual() == b"W1AW>APRS:>Status text"


def test_empty_input_error():
    with pytest.raises(EmptyPacketError):
        AprsPacket.decode_textual(b"")


def test_missing_arrow_error():
    with pytest.raises(MissingDestinationDelimiterError):
        AprsPacket.decode_textual(b"W1AW:!hello")


def test_missing_colon_error():
    with pytest.raises(MissingInfoDelimiterError):
        AprsPacket.decode_textual(b"W1AW>APRS,WIDE1")


def test_invalid_source_callsign():
    with pytest.raises(InvalidCallsignError):
        AprsPacket.decode_textual(b"W1AW-99>APRS:>hi")


def test_no_via_path():
    pkt = AprsPacket.decode_textual(b"W1AW>APRS:>Status text")
    assert pkt.via == ()


def test_unknown_dti_preserved():
    pkt = AprsPacket.decode_textual(b"W1AW>APRS:~custom data")
    assert pkt.data == UnknownData(dti=ord("~"), data=b"~custom data")


def test_t_without_hash_is_unknown():
    pkt = AprsPacket.decode_textual(b"W1AW>APRS:Tno hash here")
    assert isinstance(pkt.data, UnknownData)
    assert pkt.data.dti == ord("T")


def test_empty_info_field():
    pkt = AprsPacket.decode_textual(b"W1AW>APRS:")
    assert pkt.data == UnknownData(dti=0, data=b"")


@pytest.mark.parametrize(
    "info, kind",
    [
        (b"<IGATE,MSG_CNT=10", AprsCapabilities),
        (b"?APRS?", AprsQuery),
        (b"[IO91SX]hello", AprsGridLocator),
        (b"$GPGGA,123519", AprsNmea),
        (b":BLN3     :Net tonight", AprsMessage),
    ],
)
def test_decode_data_dispatch(info, kind):
    data = decode_data(info, _call("APRS"))
    assert isinstance(data, kind)
    assert data.encode() == info


def test_invalid_grid_propagates():
    with pytest.raises(UnsupportedPositionFormatError):
        AprsPacket.decode_textual(b"W1AW>APRS:[IO9]")


def test_encode_textual_round_trip():
    pkt = AprsPacket.decode_textual(POSITION_PACKET)
    assert pkt.encode_textual() == POSITION_PACKET


def test_encode_textual_round_trip_message():
    pkt = AprsPacket.decode_textual(MSG_PACKET)
    assert pkt.encode_textual() == MSG_PACKET


def test_encode_ax25_round_trip():
    pkt = AprsPacket.decode_textual(POSITION_PACKET)
    frame = pkt.encode_ax25()
    decoded = AprsPacket.decode_ax25(frame)
    assert str(decoded.source) == "W1AW-9"
    assert str(decoded.destination) == "APRS"
    assert decoded == pkt


def test_ax25_round_trip_preserves_heard_bit():
    pkt = AprsPacket.decode_textual(
        b"W1AW-9>APRS,W0OOD-2*,WIDE1-1:!4903.50N/07201.75W-Test"
    )
    redecoded = AprsPacket.decode_ax25(pkt.encode_ax25())
    assert redecoded == pkt
    assert redecoded.via[0] == DigipeaterCall(_call("W0OOD-2"), True)
    assert redecoded.via[1] == DigipeaterCall(_call("WIDE1-1"), False)


def test_ax25_frame_layout():
    pkt = AprsPacket.decode_textual(b"W1AW>APRS:>hi")
    frame = pkt.encode_ax25()
    assert len(frame) == 14 + 2 + 3
    assert frame[14:16] == b"\x03\xf0"
    assert frame[16:] == b">hi"
    assert frame[13] & 0x01 == 1
    assert frame[6] & 0x01 == 0


def test_ax25_q_construct_becomes_gateway():
    pkt = AprsPacket.decode_textual(MSG_PACKET)
    decoded = AprsPacket.decode_ax25(pkt.encode_ax25())
    assert decoded.via == (DigipeaterCall(_call("KD9XYZ"), False),)
    assert decoded.data == pkt.data


def _addr(text, eoa):
    return _call(text).encode_ax25(eoa)


def test_ax25_too_short():
    with pytest.raises(Ax25FrameTooShortError):
        AprsPacket.decode_ax25(b"\x00" * 15)


def test_ax25_not_ui_frame():
    frame = _addr("APRS", False) + _addr("W1AW", True) + b"\x01\xf0>hi"
    with pytest.raises(Ax25NotUiFrameError) as info:
        AprsPacket.decode_ax25(frame)
    assert info.value.byte == 0x01


def test_ax25_not_aprs_pid():
    frame = _addr("APRS", False) + _addr("W1AW", True) + b"\x03\xcf>hi"
    with pytest.raises(Ax25NotAprsPidError) as info:
        AprsPacket.decode_ax25(frame)
    assert info.value.byte == 0xCF


def test_ax25_missing_eoa():
    frame = _addr("APRS", False) + _addr("W1AW", False) + _addr("WIDE1-1", False)
    with pytest.raises(Ax25MissingEoaError):
        AprsPacket.decode_ax25(frame)


def test_ax25_truncated_after_addresses():
    frame = _addr("APRS", False) + _addr("W1AW", False) + _addr("WIDE1-1", True)
    with pytest.raises(TruncatedPacketError) as info:
        AprsPacket.decode_ax25(frame)
    assert (info.value.expected, info.value.got) == (23, 21)