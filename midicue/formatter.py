"""Text rendering of extracted events.

``StageTraxxFormatter`` writes one cue per line in the form read by StageTraxx
and similar cue-triggering tools::

	[midi@01:46.704: N60.100@3]
	[midi@00:46.700: CC1.62@4]

The time field is ``MM:SS.mmm``.  Milliseconds are truncated, never rounded up.
"""

import typing

import midicue.constants
import midicue.midi_event


@typing.runtime_checkable
class MidiFormatter (typing.Protocol):

	"""
	Protocol for objects that render a ``MidiEvent`` as a line of text.
	"""

	def format (self, event: midicue.midi_event.MidiEvent) -> str:
		...


def format_midi_time (seconds: float) -> str:

	"""
	Format seconds as ``MM:SS.mmm``.

	The value is taken to the nearest nanosecond first and then truncated to the
	millisecond, so ``106.704`` (stored as ``106.70399999...``) gives ``01:46.704``.
	"""

	nanos = round(seconds * midicue.constants.NANOS_PER_SECOND)
	whole_seconds, sub_nanos = divmod(nanos, midicue.constants.NANOS_PER_SECOND)
	minutes, secs = divmod(whole_seconds, 60)
	millis = sub_nanos // 1_000_000

	return f"{minutes:02d}:{secs:02d}.{millis:03d}"


class StageTraxxFormatter:

	"""Render events as ``[midi@MM:SS.mmm: <TAG><arg1>.<arg2>@<channel>]``."""

	def format (self, event: midicue.midi_event.MidiEvent) -> str:

		arg1, arg2 = event.message.args

		return f"[midi@{format_midi_time(event.timestamp)}: {event.message.tag}{arg1}.{arg2}@{event.channel}]"
