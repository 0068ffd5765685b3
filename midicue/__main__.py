"""Command line entry point.

Usage::

    python -m midicue --midi-file show.mid
    python -m midicue -m show.mid --override-midi-channel 5 --skip-off-note-collisions
    python -m midicue -m show.mid --config midicue.yaml

Prints one cue line per event to stdout.  Log messages go to stderr.

An optional YAML config file supplies defaults; command line flags win::

    output:
      override_midi_channel: 5
      skip_off_note_collisions: true
    logging:
      level: INFO
"""

import argparse
import logging
import os
import sys
import typing

import yaml

import midicue.constants
import midicue.exceptions
import midicue.extractor
import midicue.filters
import midicue.formatter
import midicue.source


logger = logging.getLogger(__name__)


def load_config (config_path: typing.Optional[str] = None) -> dict:

	"""
	Load configuration from a YAML file.

	Raises:
		ConfigError: If the file is not valid YAML or is not a mapping.
	"""

	if config_path is None:
		return {}

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		try:
			config = yaml.safe_load(f) or {}
		except yaml.YAMLError as e:
			raise midicue.exceptions.ConfigError(f"Config file {config_path} is not valid YAML: {e}") from e

	if not isinstance(config, dict):
		raise midicue.exceptions.ConfigError(f"Config file {config_path} must contain a mapping, got {type(config).__name__}")

	return config


def _config_section (config: dict, name: str) -> dict:

	section = config.get(name) or {}

	if not isinstance(section, dict):
		raise midicue.exceptions.ConfigError(f"Config section {name!r} must be a mapping, got {type(section).__name__}")

	return section


def config_override_channel (output_config: dict) -> typing.Optional[int]:

	"""Return ``output.override_midi_channel`` as a checked channel number, or None."""

	value = output_config.get('override_midi_channel')

	if value is None:
		return None

	# bool is an int subclass; YAML true must not become channel 1.
	if isinstance(value, bool) or not isinstance(value, int):
		raise midicue.exceptions.ConfigError(
			f"override_midi_channel must be an integer, got {value!r}"
		)

	try:
		return _midi_channel(str(value))
	except argparse.ArgumentTypeError as e:
		raise midicue.exceptions.ConfigError(f"override_midi_channel: {e}") from e


def config_skip_collisions (output_config: dict) -> bool:

	"""Return ``output.skip_off_note_collisions``, which must be a YAML boolean."""

	value = output_config.get('skip_off_note_collisions', False)

	if not isinstance(value, bool):
		raise midicue.exceptions.ConfigError(
			f"skip_off_note_collisions must be true or false, got {value!r}"
		)

	return value


def config_log_level (logging_config: dict) -> typing.Optional[int]:

	"""Return ``logging.level`` as a numeric level.  Names are case-insensitive."""

	name = logging_config.get('level')

	if name is None:
		return None

	level = logging.getLevelName(str(name).upper())

	if not isinstance(level, int):
		raise midicue.exceptions.ConfigError(f"Unknown logging level {name!r}")

	return level


def _midi_channel (value: str) -> int:

	"""Parse an output channel argument (1-16)."""

	try:
		channel = int(value)
	except ValueError:
		raise argparse.ArgumentTypeError(f"invalid channel: {value!r}")

	if not midicue.constants.MIDI_CHANNEL_MIN <= channel <= midicue.constants.MIDI_CHANNEL_MAX:
		raise argparse.ArgumentTypeError(
			f"channel must be between {midicue.constants.MIDI_CHANNEL_MIN} and {midicue.constants.MIDI_CHANNEL_MAX}"
		)

	return channel


def build_parser () -> argparse.ArgumentParser:

	"""Create the argument parser."""

	parser = argparse.ArgumentParser(prog="midicue", description="Convert a MIDI file into timed cue lines")
	parser.add_argument("-m", "--midi-file", required=True, help="MIDI file to read")
	parser.add_argument(
		"-o", "--override-midi-channel",
		type=_midi_channel,
		default=None,
		help="Override the MIDI channel for all notes and CC changes"
	)
	parser.add_argument(
		"--skip-off-note-collisions",
		action="store_true",
		default=None,
		help="Skip off notes that arrive at the same time as the next event (this can help with timing issues when controlling mutually exclusive scenes with lights)"
	)
	parser.add_argument("-c", "--config", default=None, help="Optional YAML config file")
	parser.add_argument("-v", "--verbose", action="store_true", help="Log debug diagnostics")

	return parser


def main (argv: typing.Optional[typing.List[str]] = None) -> None:

	"""
	Main entry point for the midicue command.
	"""

	args = build_parser().parse_args(argv)

	logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

	try:
		config = load_config(args.config)
		output_config = _config_section(config, 'output')
		config_channel = config_override_channel(output_config)
		config_skip = config_skip_collisions(output_config)
		level = config_log_level(_config_section(config, 'logging'))
	except midicue.exceptions.ConfigError as e:
		logger.error(f"Invalid config: {e}")
		sys.exit(1)

	if level is not None and not args.verbose:
		logging.getLogger().setLevel(level)

	override_channel = args.override_midi_channel
	if override_channel is None:
		override_channel = config_channel

	skip_collisions = args.skip_off_note_collisions
	if skip_collisions is None:
		skip_collisions = config_skip

	try:
		midi_file = midicue.source.load(args.midi_file)
		events = midicue.extractor.extract_events(midi_file, override_channel=override_channel)
	except (midicue.exceptions.MidiCueError, OSError) as e:
		logger.error(f"Failed to extract events from {args.midi_file}: {e}")
		sys.exit(1)

	if skip_collisions:
		events = midicue.filters.skip_off_note_collisions(events)

	formatter = midicue.formatter.StageTraxxFormatter()

	for event in events:
		print(formatter.format(event))


if __name__ == "__main__":
	main()
