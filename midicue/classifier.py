import typing

import mido

import midicue.midi_event


CLASSIFIED_TYPES = frozenset({'note_on', 'note_off', 'control_change'})


def resolve_channel (raw_channel: int, override_channel: typing.Optional[int] = None) -> int:

	"""
	Return the 1-based output channel for a 0-based source channel.

	When ``override_channel`` is set it wins over the source channel.
	"""

	if override_channel is not None:
		return override_channel

	return raw_channel + 1


def classify (
	message: mido.Message,
	timestamp: float,
	override_channel: typing.Optional[int] = None
) -> typing.Optional[midicue.midi_event.MidiEvent]:

	"""
	Turn a mido channel message into a ``MidiEvent``.

	Note-on, note-off and control change are classified.  Note-off velocity is
	always reported as 0.  Any other message type returns ``None``; reporting it
	is left to the caller.
	"""

	if message.type == 'note_on':
		event_message: midicue.midi_event.Message = midicue.midi_event.NoteOn(message.note, message.velocity)

	elif message.type == 'note_off':
		event_message = midicue.midi_event.NoteOff(message.note, 0)

	elif message.type == 'control_change':
		event_message = midicue.midi_event.ControlChange(message.control, message.value)

	else:
		return None

	return midicue.midi_event.MidiEvent(
		timestamp = timestamp,
		message = event_message,
		channel = resolve_channel(message.channel, override_channel)
	)
