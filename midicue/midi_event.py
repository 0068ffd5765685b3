import dataclasses
import typing


@dataclasses.dataclass (frozen=True)
class NoteOn:

	"""
	A note starting to sound.
	"""

	note: int
	velocity: int

	tag: typing.ClassVar[str] = "N"

	@property
	def args (self) -> typing.Tuple[int, int]:
		return (self.note, self.velocity)


@dataclasses.dataclass (frozen=True)
class NoteOff:

	"""
	A note being released.

	The release velocity carried by the source message is discarded, so
	``velocity`` is always 0 for events produced by the extractor.
	"""

	note: int
	velocity: int = 0

	tag: typing.ClassVar[str] = "N"

	@property
	def args (self) -> typing.Tuple[int, int]:
		return (self.note, 0)


@dataclasses.dataclass (frozen=True)
class ControlChange:

	"""
	A controller moving to a new value.
	"""

	controller: int
	value: int

	tag: typing.ClassVar[str] = "CC"

	@property
	def args (self) -> typing.Tuple[int, int]:
		return (self.controller, self.value)


Message = typing.Union[NoteOn, NoteOff, ControlChange]


@dataclasses.dataclass (frozen=True)
class MidiEvent:

	"""
	A classified MIDI message stamped with absolute time.

	Attributes:
		timestamp: Seconds since the start of the piece.
		message: ``NoteOn``, ``NoteOff`` or ``ControlChange``.
		channel: Output channel, 1-16.
	"""

	timestamp: float
	message: Message
	channel: int
