import midicue.filters
import midicue.midi_event


NoteOn = midicue.midi_event.NoteOn
NoteOff = midicue.midi_event.NoteOff
ControlChange = midicue.midi_event.ControlChange


def _event (timestamp: float, message: midicue.midi_event.Message) -> midicue.midi_event.MidiEvent:

	return midicue.midi_event.MidiEvent(timestamp=timestamp, message=message, channel=1)


def test_note_off_colliding_with_note_on_is_dropped () -> None:

	"""A note off at the same time as the following note on is skipped."""

	events = [_event(5.0, NoteOff(60)), _event(5.0, NoteOn(62, 100))]

	assert midicue.filters.skip_off_note_collisions(events) == [events[1]]


def test_note_off_at_different_time_is_kept () -> None:

	"""Only exact timestamp matches count as collisions."""

	events = [_event(4.999, NoteOff(60)), _event(5.0, NoteOn(62, 100))]

	assert midicue.filters.skip_off_note_collisions(events) == events


def test_only_note_offs_are_dropped () -> None:

	"""Note on and control change are never dropped, even when they collide."""

	events = [
		_event(1.0, NoteOn(60, 100)),
		_event(1.0, ControlChange(7, 90)),
		_event(1.0, NoteOn(64, 100)),
	]

	assert midicue.filters.skip_off_note_collisions(events) == events


def test_last_event_is_kept () -> None:

	"""A trailing note off has nothing to collide with."""

	events = [_event(1.0, NoteOn(60, 100)), _event(2.0, NoteOff(60))]

	assert midicue.filters.skip_off_note_collisions(events) == events


def test_run_of_note_offs_keeps_the_last () -> None:

	"""Of several note offs at one instant, only the final one survives."""

	events = [_event(3.0, NoteOff(60)), _event(3.0, NoteOff(62)), _event(3.0, NoteOff(64))]

	assert midicue.filters.skip_off_note_collisions(events) == [events[2]]


def test_empty_input () -> None:

	"""No events in, no events out."""

	assert midicue.filters.skip_off_note_collisions([]) == []
