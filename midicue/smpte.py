"""SMPTE offset decoding.

An ``smpte_offset`` meta event carries five bytes: ``hr mn se fr ff``.  The hour
byte is bit-packed - its top two bits select the frame rate and its low five bits
hold the hour::

	hr = 0b01_0_00101   ->   25.0 fps, hour 5

Only the frame rate and hour are decoded here.  The offset is reported for
information and never feeds the tick-based clock.
"""

import typing

import midicue.constants
import midicue.exceptions


SMPTE_OFFSET_LENGTH = 5

_FRAME_RATE_SHIFT = 6
_FRAME_RATE_MASK = 0b0000_0011
_HOUR_MASK = 0b0001_1111


def decode_frame_rate_code (code: int) -> float:

	"""
	Map a two-bit frame-rate code to frames per second.

	Raises:
		InvalidFrameRateCodeError: If ``code`` is not 0, 1, 2 or 3.
	"""

	if code not in midicue.constants.SMPTE_FRAME_RATES:
		raise midicue.exceptions.InvalidFrameRateCodeError(f"Invalid SMPTE frame rate code: {code}")

	return midicue.constants.SMPTE_FRAME_RATES[code]


def extract_frame_rate_hours (data: typing.Sequence[int]) -> typing.Tuple[float, int]:

	"""
	Decode the frame rate and hour from a five byte SMPTE offset payload.

	Parameters:
		data: The raw ``hr mn se fr ff`` bytes.

	Returns:
		A tuple of ``(frame_rate, hour)``.
	"""

	if len(data) != SMPTE_OFFSET_LENGTH:
		raise ValueError(f"SMPTE offset must be {SMPTE_OFFSET_LENGTH} bytes, got {len(data)}")

	hr = data[0]

	frame_rate = decode_frame_rate_code((hr >> _FRAME_RATE_SHIFT) & _FRAME_RATE_MASK)
	hour = hr & _HOUR_MASK

	return frame_rate, hour
