"""Exceptions raised while extracting cue events from a MIDI file."""


class MidiCueError (Exception):

	"""Base class for midicue errors."""

	pass


class UnsupportedDivisionError (MidiCueError):

	"""The file header uses a division kind the extractor cannot time."""

	pass


class InvalidFrameRateCodeError (MidiCueError):

	"""An SMPTE offset carries a frame-rate code outside 0-3."""

	pass


class MidiFileError (MidiCueError):

	"""mido could not decode the contents of a MIDI file."""

	pass


class ConfigError (MidiCueError):

	"""A config file value has the wrong type or is out of range."""

	pass
