"""The timing and extraction engine.

Walks the ``(delta_ticks, message)`` stream of a MIDI file once, keeping a clock
that is split into tempo segments.  A segment runs from one tempo change to the
next at a constant number of microseconds per quarter note, so the time of any
event is::

	elapsed_sec + ticks_to_seconds(ticks - last_tempo_change_ticks, ppqn, tempo)

where ``elapsed_sec`` is the total length of every closed segment.  A tempo
change closes the open segment and starts a new one; it never moves an event
that has already been stamped.

Diagnostics (tempo changes, time signatures, SMPTE offsets, skipped messages)
are reported to a ``Diagnostics`` sink, which logs them.  They never change the
returned events.
"""

import logging
import typing

import mido

import midicue.classifier
import midicue.constants
import midicue.diagnostics
import midicue.exceptions
import midicue.midi_event
import midicue.smpte
import midicue.source


logger = logging.getLogger(__name__)


def ticks_to_seconds (ticks: int, pulses_per_quarter_note: int, tempo: int) -> float:

	"""
	Convert a tick count to seconds at a fixed tempo.

	Parameters:
		ticks: Number of ticks.
		pulses_per_quarter_note: Ticks per beat from the file header.
		tempo: Microseconds per quarter note.
	"""

	beats = ticks / pulses_per_quarter_note
	seconds_per_beat = tempo / midicue.constants.MICROS_PER_SECOND

	return beats * seconds_per_beat


class Extractor:

	"""
	Converts a MIDI event stream into time-stamped ``MidiEvent`` records.

	Example::

		midi_file = midicue.source.load("show.mid")
		extractor = Extractor(midicue.source.file_division(midi_file), override_channel=5)
		events = extractor.run(midicue.source.track_events(midi_file))
	"""

	def __init__ (
		self,
		division: midicue.source.Division,
		override_channel: typing.Optional[int] = None,
		diagnostics: typing.Optional[midicue.diagnostics.Diagnostics] = None
	) -> None:

		"""Prepare an extractor for a file with the given header division.

		Parameters:
			division: Header division of the file.  Only quarter-note division is
				supported.
			override_channel: When set (1-16), every event reports this channel
				instead of its own.
			diagnostics: Sink for diagnostic reports.  A private one is created
				when omitted, so reports are still logged.

		Raises:
			UnsupportedDivisionError: If the file uses SMPTE division.
		"""

		if isinstance(division, midicue.source.SmpteDivision):
			raise midicue.exceptions.UnsupportedDivisionError(
				f"SMPTE division is not supported ({division.frames_per_second} fps, "
				f"{division.ticks_per_frame} ticks per frame)"
			)

		if override_channel is not None and not (midicue.constants.MIDI_CHANNEL_MIN <= override_channel <= midicue.constants.MIDI_CHANNEL_MAX):
			raise ValueError(
				f"Override channel must be between {midicue.constants.MIDI_CHANNEL_MIN} "
				f"and {midicue.constants.MIDI_CHANNEL_MAX}, got {override_channel}"
			)

		logger.info(f"Quarter note division: {division.ticks_per_beat}")

		self.pulses_per_quarter_note = division.ticks_per_beat
		self.override_channel = override_channel
		self.diagnostics = diagnostics if diagnostics is not None else midicue.diagnostics.Diagnostics()

		self._reset()

	def _reset (self) -> None:

		"""Return the clock to the start of the piece at the default tempo."""

		self.ticks = 0
		self.last_tempo_change_ticks = 0
		self.elapsed_sec = 0.0
		self.current_tempo_micros_per_qn = midicue.constants.DEFAULT_TEMPO

	def elapsed_seconds (self) -> float:

		"""Seconds from the start of the piece to the current tick position."""

		ticks_since_last_tempo_change = self.ticks - self.last_tempo_change_ticks

		return self.elapsed_sec + ticks_to_seconds(
			ticks_since_last_tempo_change,
			self.pulses_per_quarter_note,
			self.current_tempo_micros_per_qn
		)

	def run (self, track_events: typing.Iterable[midicue.source.TrackEvent]) -> typing.List[midicue.midi_event.MidiEvent]:

		"""
		Process the whole event stream and return the classified events in input order.

		Each call starts again from tick 0 at the default tempo.
		"""

		self._reset()
		self.diagnostics.reset_counts()

		results: typing.List[midicue.midi_event.MidiEvent] = []

		for delta_ticks, message in track_events:

			event = self._process_event(delta_ticks, message)

			if event is not None:
				results.append(event)

		logger.info(f"Extracted {len(results)} event(s) over {self.elapsed_seconds():.3f}s")
		logger.debug(f"Diagnostics: {self.diagnostics.summary()}")

		return results

	def _process_event (
		self,
		delta_ticks: int,
		message: typing.Union[mido.Message, mido.MetaMessage]
	) -> typing.Optional[midicue.midi_event.MidiEvent]:

		# Delta time advances the clock for every message, including meta events.
		self.ticks += delta_ticks

		if message.type in midicue.classifier.CLASSIFIED_TYPES:
			return midicue.classifier.classify(message, self.elapsed_seconds(), self.override_channel)

		if message.type == 'set_tempo':
			self._handle_tempo_change(message.tempo)

		elif message.type == 'smpte_offset':
			self._handle_smpte_offset(message)

		elif message.type == 'time_signature':
			self.diagnostics.time_signature(message)

		else:
			self.diagnostics.unhandled(delta_ticks, message)

		return None

	def _handle_tempo_change (self, new_tempo_micros_per_qn: int) -> None:

		"""Close the open tempo segment and start a new one at this tick."""

		# Fold the finished segment at the tempo it was played at.
		self.elapsed_sec = self.elapsed_seconds()
		self.last_tempo_change_ticks = self.ticks
		self.current_tempo_micros_per_qn = new_tempo_micros_per_qn

		self.diagnostics.tempo_change(self.ticks, new_tempo_micros_per_qn)

	def _handle_smpte_offset (self, message: mido.MetaMessage) -> None:

		"""Decode an SMPTE offset for reporting.  The clock is not affected."""

		data = midicue.source.smpte_offset_bytes(message)
		frame_rate, hour = midicue.smpte.extract_frame_rate_hours(data)

		self.diagnostics.smpte_offset(frame_rate, hour, data)


def extract_events (
	midi_file: mido.MidiFile,
	override_channel: typing.Optional[int] = None,
	diagnostics: typing.Optional[midicue.diagnostics.Diagnostics] = None
) -> typing.List[midicue.midi_event.MidiEvent]:

	"""
	Extract every classified event from a loaded MIDI file.
	"""

	extractor = Extractor(midicue.source.file_division(midi_file), override_channel=override_channel, diagnostics=diagnostics)

	return extractor.run(midicue.source.track_events(midi_file))
