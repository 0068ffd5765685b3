"""Reading Standard MIDI Files with mido.

mido parses the container: header, track chunks, variable-length delta times and
event bytes.  This module adds the few things the extractor needs on top of it -
a typed view of the header division and a single stream of
``(delta_ticks, message)`` pairs covering every track in file order.
"""

import dataclasses
import logging
import typing

import mido

import midicue.exceptions


logger = logging.getLogger(__name__)

TrackEvent = typing.Tuple[int, typing.Union[mido.Message, mido.MetaMessage]]


@dataclasses.dataclass (frozen=True)
class QuarterNoteDivision:

	"""Tick-based timing: ``ticks_per_beat`` ticks make one quarter note."""

	ticks_per_beat: int


@dataclasses.dataclass (frozen=True)
class SmpteDivision:

	"""Timecode-based timing: ``ticks_per_frame`` ticks per SMPTE frame."""

	frames_per_second: int
	ticks_per_frame: int


Division = typing.Union[QuarterNoteDivision, SmpteDivision]


def load (path: str) -> mido.MidiFile:

	"""
	Read a MIDI file from disk.

	A missing or unreadable file raises ``OSError`` as usual.  Contents that mido
	cannot decode raise ``MidiFileError``.  mido reads the SMPTE offset frame rate
	from bits 5-6 of the hour byte, so an offset with bit 7 set (frame-rate codes
	2 and 3 in the two-bit layout) is one such case.
	"""

	try:
		midi_file = mido.MidiFile(path)
	except (KeyError, ValueError, EOFError) as e:
		raise midicue.exceptions.MidiFileError(f"Could not decode MIDI file {path}: {e!r}") from e

	logger.info(f"Loaded {path}: type {midi_file.type}, {len(midi_file.tracks)} track(s)")

	return midi_file


def division_from_header (value: int) -> Division:

	"""
	Classify the 16-bit division word from a MIDI file header.

	mido reads the word as a signed short, so SMPTE divisions arrive as negative
	numbers.  Both the signed and unsigned forms are accepted.

	Examples: 480 -> ``QuarterNoteDivision(480)``,
	-6360 (0xE728) -> ``SmpteDivision(25, 40)``.
	"""

	word = value & 0xFFFF

	if word & 0x8000:
		# High byte is the frame rate as a negative two's complement number.
		frames_per_second = 0x100 - (word >> 8)
		ticks_per_frame = word & 0xFF
		return SmpteDivision(frames_per_second=frames_per_second, ticks_per_frame=ticks_per_frame)

	return QuarterNoteDivision(ticks_per_beat=word)


def file_division (midi_file: mido.MidiFile) -> Division:

	"""
	Return the header division of a loaded file.
	"""

	return division_from_header(midi_file.ticks_per_beat)


def track_events (midi_file: mido.MidiFile) -> typing.Iterator[TrackEvent]:

	"""
	Yield ``(delta_ticks, message)`` for every track, one track after another.

	Tracks are concatenated in file order, not merged by time.
	"""

	for index, track in enumerate(midi_file.tracks):

		logger.debug(f"Track {index}: {track.name!r}, {len(track)} message(s)")

		for message in track:
			yield message.time, message


def smpte_offset_bytes (message: mido.MetaMessage) -> bytes:

	"""
	Return the five raw data bytes (``hr mn se fr ff``) of an ``smpte_offset`` message.
	"""

	if message.type != 'smpte_offset':
		raise ValueError(f"Expected an smpte_offset message, got {message.type!r}")

	# bytes() is 0xFF, type byte, one-byte length, then the payload.
	return bytes(message.bytes()[3:])
