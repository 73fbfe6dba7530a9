import pytest

from zinx.framedecoder import FrameDecoder, FrameDecoderError, frame_decoder_from_params
from zinx.interfaces import ByteOrder, LengthField

HELLO = b"HELLO, WORLD"


def test_case_one_no_strip():
    decoder = frame_decoder_from_params(1024, 0, 2, 0, 0)
    packet = b"\x00\x0c" + HELLO
    assert decoder.decode(packet) == [packet]


def test_case_two_strip_header():
    decoder = frame_decoder_from_params(1024, 0, 2, 0, 2)
    assert decoder.decode(b"\x00\x0c" + HELLO) == [HELLO]


def test_case_three_length_covers_whole_message():
    decoder = frame_decoder_from_params(1024, 0, 2, -2, 0)
    packet = b"\x00\x0e" + HELLO
    assert decoder.decode(packet) == [packet]


def test_case_four_length_after_header():
    decoder = frame_decoder_from_params(1024, 2, 3, 0, 0)
    packet = b"\xca\xfe" + b"\x00\x00\x0c" + HELLO
    assert decoder.decode(packet) == [packet]


def test_case_five_header_after_length():
    decoder = frame_decoder_from_params(1024, 0, 3, 2, 0)
    packet = b"\x00\x00\x0c" + b"\xca\xfe" + HELLO
    assert decoder.decode(packet) == [packet]


def test_case_six_strip_first_header_and_length():
    decoder = frame_decoder_from_params(1024, 1, 2, 1, 3)
    packet = b"\xca" + b"\x00\x0c" + b"\xfe" + HELLO
    assert decoder.decode(packet) == [b"\xfe" + HELLO]


def test_case_seven_whole_length_with_strip():
    decoder = frame_decoder_from_params(1024, 1, 2, -3, 3)
    packet = b"\xca" + b"\x00\x10" + b"\xfe" + HELLO
    assert decoder.decode(packet) == [b"\xfe" + HELLO]


def test_partial_frame_waits_for_rest():
    decoder = frame_decoder_from_params(1024, 0, 2, 0, 2)
    packet = b"\x00\x0c" + HELLO
    assert decoder.decode(packet[:1]) == []
    assert decoder.decode(packet[1:7]) == []
    assert decoder.decode(packet[7:]) == [HELLO]


def test_byte_by_byte_feeding_yields_all_frames():
    decoder = frame_decoder_from_params(1024, 0, 2, 0, 2)
    payloads = [b"a", b"bc", HELLO]
    stream = b"".join(len(p).to_bytes(2, "big") + p for p in payloads)
    frames = []
    for byte in stream:
        frames.extend(decoder.decode(bytes([byte])))
    assert frames == payloads


def test_multiple_frames_in_one_chunk_keep_order():
    decoder = frame_decoder_from_params(1024, 0, 2, 0, 2)
    payloads = [b"first", b"second", b"third"]
    stream = b"".join(len(p).to_bytes(2, "big") + p for p in payloads)
    assert decoder.decode(stream + b"\x00") == payloads
    assert decoder.decode(b"\x03xyz") == [b"xyz"]


def test_little_endian_four_byte_length():
    decoder = FrameDecoder(
        LengthField(
            order=ByteOrder.LITTLE,
            max_frame_length=1024,
            length_field_offset=0,
            length_field_length=4,
            initial_bytes_to_strip=4,
        )
    )
    assert decoder.decode(len(HELLO).to_bytes(4, "little") + HELLO) == [HELLO]


def test_little_endian_three_byte_length():
    decoder = FrameDecoder(
        LengthField(
            order=ByteOrder.LITTLE,
            max_frame_length=1024,
            length_field_length=3,
            initial_bytes_to_strip=3,
        )
    )
    assert decoder.decode(b"\x0c\x00\x00" + HELLO) == [HELLO]


def test_one_byte_length():
    decoder = frame_decoder_from_params(1024, 0, 1, 0, 1)
    assert decoder.decode(b"\x0c" + HELLO) == [HELLO]


def test_eight_byte_length_round_trip():
    decoder = frame_decoder_from_params(1024, 0, 8, 0, 8)
    assert decoder.decode(len(HELLO).to_bytes(8, "big") + HELLO) == [HELLO]


def test_negative_eight_byte_length_raises():
    decoder = frame_decoder_from_params(1024, 0, 8, 0, 8)
    with pytest.raises(FrameDecoderError, match="negative pre-adjustment length field"):
        decoder.decode(b"\xff" * 8 + HELLO)


def test_unsupported_length_field_length_raises():
    with pytest.raises(FrameDecoderError, match="unsupported LengthFieldLength"):
        frame_decoder_from_params(1024, 0, 5, 0, 0)


def test_strip_larger_than_frame_raises():
    decoder = frame_decoder_from_params(1024, 0, 2, 0, 20)
    with pytest.raises(FrameDecoderError, match="InitialBytesToStrip"):
        decoder.decode(b"\x00\x0c" + HELLO)


def test_strip_error_consumes_bad_frame():
    decoder = frame_decoder_from_params(1024, 0, 2, 0, 5)
    with pytest.raises(FrameDecoderError):
        decoder.decode(b"\x00\x01x")
    assert decoder.decode(b"\x00\x05abcde") == [b"de"]


def test_too_long_frame_in_buffer_is_skipped():
    decoder = frame_decoder_from_params(8, 0, 2, 0, 2)
    too_long = b"\x00\x0a" + b"0123456789"
    good = b"\x00\x02ok"
    assert decoder.decode(too_long + good) == [b"ok"]


def test_too_long_frame_across_calls_is_discarded():
    decoder = frame_decoder_from_params(8, 0, 2, 0, 2)
    body = b"0123456789"
    assert decoder.decode(b"\x00\x0a" + body[:4]) == []
    assert decoder.decode(body[4:7]) == []
    assert decoder.decode(body[7:] + b"\x00\x02ok") == [b"ok"]


def test_default_order_is_big_endian():
    decoder = FrameDecoder(
        LengthField(max_frame_length=1024, length_field_length=2, initial_bytes_to_strip=2)
    )
    assert decoder.length_field.order is ByteOrder.BIG
    assert decoder.decode(b"\x00\x0c" + HELLO) == [HELLO]


def test_adjusted_length_below_field_end_raises():
    decoder = frame_decoder_from_params(1024, 0, 2, -5, 0)
    with pytest.raises(FrameDecoderError):
        decoder.decode(b"\x00\x01x")