"""Splitting a byte stream into frames described by a length field."""

from __future__ import annotations

import threading
from typing import Optional

from zinx.interfaces import ByteOrder, IFrameDecoder, LengthField

_SUPPORTED_FIELD_LENGTHS = (1, 2, 3, 4, 8)


class FrameDecoderError(ValueError):
    """Raised when the stream holds a frame that cannot be decoded."""


class FrameDecoder(IFrameDecoder):
    """Decoder that cuts frames out of a stream by the value of a length field.

    The length field is read at ``length_field_offset`` and is
    ``length_field_length`` bytes wide. The whole frame is
    ``value + length_adjustment + length_field_offset + length_field_length``
    bytes long, and the first ``initial_bytes_to_strip`` of them are dropped
    from the frame that is returned.

    Frames longer than ``max_frame_length`` are discarded, including the part
    of them that has not arrived yet.
    """

    def __init__(self, length_field: LengthField):
        if length_field.length_field_length not in _SUPPORTED_FIELD_LENGTHS:
            raise FrameDecoderError(
                f"unsupported LengthFieldLength: {length_field.length_field_length} "
                "(expected: 1, 2, 3, 4, or 8)"
            )
        self.length_field = LengthField(
            order=length_field.order or ByteOrder.BIG,
            max_frame_length=length_field.max_frame_length,
            length_field_offset=length_field.length_field_offset,
            length_field_length=length_field.length_field_length,
            length_adjustment=length_field.length_adjustment,
            initial_bytes_to_strip=length_field.initial_bytes_to_strip,
        )
        self._end_offset = self.length_field.end_offset()
        self._buffer = bytearray()
        self._discarding = False
        self._too_long_frame_length = 0
        self._bytes_to_discard = 0
        self._lock = threading.Lock()

    def decode(self, data: bytes) -> list[bytes]:
        """Append ``data`` to the pending bytes and return every complete frame."""
        with self._lock:
            self._buffer += data
            frames: list[bytes] = []
            while True:
                frame = self._decode_one()
                if frame is None:
                    return frames
                if frame is not _CONSUMED:
                    frames.append(frame)

    def _decode_one(self) -> Optional[bytes]:
        """Take one frame off the buffer.

        Returns ``None`` when more data is needed and ``_CONSUMED`` when bytes
        were dropped without producing a frame.
        """
        if self._discarding:
            self._discard_pending()

        buf = self._buffer
        lf = self.length_field
        if len(buf) < self._end_offset:
            return None

        frame_length = self._unadjusted_frame_length()
        if frame_length < 0:
            del buf[: self._end_offset]
            raise FrameDecoderError(f"negative pre-adjustment length field: {frame_length}")

        frame_length += lf.length_adjustment + self._end_offset
        if frame_length < self._end_offset:
            del buf[: self._end_offset]
            raise FrameDecoderError(
                f"Adjusted frame length ({frame_length}) is less than "
                f"length field end offset: {self._end_offset}"
            )

        if frame_length > lf.max_frame_length:
            self._exceeded_frame_length(frame_length)
            return _CONSUMED

        if len(buf) < frame_length:
            return None

        if lf.initial_bytes_to_strip > frame_length:
            del buf[:frame_length]
            raise FrameDecoderError(
                f"Adjusted frame length ({frame_length}) is less  than "
                f"InitialBytesToStrip: {lf.initial_bytes_to_strip}"
            )

        frame = bytes(buf[lf.initial_bytes_to_strip : frame_length])
        del buf[:frame_length]
        return frame

    def _unadjusted_frame_length(self) -> int:
        lf = self.length_field
        start = lf.length_field_offset
        raw = bytes(self._buffer[start : start + lf.length_field_length])
        return int.from_bytes(raw, lf.order.value, signed=lf.length_field_length == 8)

    def _discard_pending(self) -> None:
        count = min(self._bytes_to_discard, len(self._buffer))
        del self._buffer[:count]
        self._bytes_to_discard -= count
        self._finish_discarding_if_done()

    def _exceeded_frame_length(self, frame_length: int) -> None:
        discard = frame_length - len(self._buffer)
        self._too_long_frame_length = frame_length
        if discard < 0:
            del self._buffer[:frame_length]
        else:
            self._discarding = True
            self._bytes_to_discard = discard
            self._buffer.clear()
        self._finish_discarding_if_done()

    def _finish_discarding_if_done(self) -> None:
        if self._bytes_to_discard == 0:
            self._too_long_frame_length = 0
            self._discarding = False


_CONSUMED = b""
# Identity marker: compared with "is", so an empty decoded frame is distinct.
_CONSUMED = bytes(bytearray())


def frame_decoder_from_params(
    max_frame_length: int,
    length_field_offset: int,
    length_field_length: int,
    length_adjustment: int,
    initial_bytes_to_strip: int,
) -> FrameDecoder:
    """Build a big-endian ``FrameDecoder`` from its individual parameters."""
    return FrameDecoder(
        LengthField(
            order=ByteOrder.BIG,
            max_frame_length=max_frame_length,
            length_field_offset=length_field_offset,
            length_field_length=length_field_length,
            length_adjustment=length_adjustment,
            initial_bytes_to_strip=initial_bytes_to_strip,
        )
    )