import typing

import midicue.midi_event


def skip_off_note_collisions (events: typing.Sequence[midicue.midi_event.MidiEvent]) -> typing.List[midicue.midi_event.MidiEvent]:

	"""
	Drop note-offs that land at exactly the same time as the following event.

	When a cue is retriggered, its note-off and the next note-on often share a
	timestamp.  Lighting scenes that are mutually exclusive can then flicker off
	after the new scene starts.  Only ``NoteOff`` events are dropped, and the last
	event is always kept.
	"""

	kept: typing.List[midicue.midi_event.MidiEvent] = []

	for index, event in enumerate(events):

		next_event = events[index + 1] if index + 1 < len(events) else None

		if (
			next_event is not None
			and isinstance(event.message, midicue.midi_event.NoteOff)
			and event.timestamp == next_event.timestamp
		):
			continue

		kept.append(event)

	return kept
