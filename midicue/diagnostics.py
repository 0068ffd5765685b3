"""Diagnostic reports from an extraction run.

Everything the extractor notices but does not turn into a ``MidiEvent`` is
reported here: tempo changes, time signatures, SMPTE offsets and skipped
messages.  Each report is logged, counted, and passed to any listeners
registered for it::

	diagnostics = Diagnostics()
	diagnostics.on("tempo_change", lambda ticks, tempo: print(ticks, tempo))

	events = midicue.extract_events(midi_file, diagnostics=diagnostics)
	print(diagnostics.counts["unhandled"])

Listener arguments per report:

- ``"tempo_change"`` - ``(ticks, micros_per_quarter_note)``
- ``"time_signature"`` - ``(message)``
- ``"smpte_offset"`` - ``(frame_rate, hour)``
- ``"unhandled"`` - ``(delta_ticks, message)``

Reports never feed back into the extracted events.
"""

import collections
import inspect
import logging
import typing

import mido


logger = logging.getLogger(__name__)

REPORT_NAMES = ("tempo_change", "time_signature", "smpte_offset", "unhandled")

Listener = typing.Callable[..., None]


class Diagnostics:

	"""
	Logs and fans out the diagnostic reports of one or more extraction runs.
	"""

	def __init__ (self) -> None:

		self._listeners: typing.Dict[str, typing.List[Listener]] = {name: [] for name in REPORT_NAMES}
		self.counts: typing.Counter[str] = collections.Counter()

	def on (self, report_name: str, listener: Listener) -> None:

		"""
		Register a listener for one of ``REPORT_NAMES``.

		Raises ``ValueError`` for an unknown report name or a coroutine function,
		since reports are delivered synchronously during the run.
		"""

		self._check_name(report_name)

		if inspect.iscoroutinefunction(listener):
			raise ValueError(f"Listener for {report_name!r} must be a plain function, not a coroutine function")

		self._listeners[report_name].append(listener)

	def off (self, report_name: str, listener: Listener) -> None:

		"""
		Unregister a listener.  Raises ``ValueError`` if it was not registered.
		"""

		self._check_name(report_name)

		if listener not in self._listeners[report_name]:
			raise ValueError(f"Listener not registered for {report_name!r}")

		self._listeners[report_name].remove(listener)

	def reset_counts (self) -> None:

		self.counts.clear()

	# ------------------------------------------------------------------
	# Reports
	# ------------------------------------------------------------------

	def tempo_change (self, ticks: int, micros_per_quarter_note: int) -> None:

		if micros_per_quarter_note > 0:
			logger.info(f"Tempo change at tick {ticks}: {mido.tempo2bpm(micros_per_quarter_note):.2f} BPM")
		else:
			logger.warning(f"Tempo change at tick {ticks} to {micros_per_quarter_note} us per quarter note")

		self._report("tempo_change", ticks, micros_per_quarter_note)

	def time_signature (self, message: mido.MetaMessage) -> None:

		logger.debug(f"Time signature: {message.numerator}/{message.denominator}")
		self._report("time_signature", message)

	def smpte_offset (self, frame_rate: float, hour: int, data: bytes) -> None:

		logger.info(f"SMPTE offset ({data.hex()}): frame rate {frame_rate}, hour {hour}")
		self._report("smpte_offset", frame_rate, hour)

	def unhandled (self, delta_ticks: int, message: typing.Union[mido.Message, mido.MetaMessage]) -> None:

		"""Report a message that produces no event.  Its delta time still counted."""

		logger.debug(f"Unhandled event: {delta_ticks} {message}")
		self._report("unhandled", delta_ticks, message)

	def summary (self) -> str:

		"""One line describing how many of each report were seen."""

		return ", ".join(f"{name}={self.counts[name]}" for name in REPORT_NAMES)

	def _report (self, report_name: str, *args: typing.Any) -> None:

		self.counts[report_name] += 1

		for listener in self._listeners[report_name]:
			listener(*args)

	@staticmethod
	def _check_name (report_name: str) -> None:

		if report_name not in REPORT_NAMES:
			raise ValueError(f"Unknown diagnostic report {report_name!r}. Available: {list(REPORT_NAMES)}")
