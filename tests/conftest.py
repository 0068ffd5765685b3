import pathlib
import typing

import mido
import pytest

import midicue.source


def make_track (*messages: typing.Union[mido.Message, mido.MetaMessage]) -> mido.MidiTrack:

	"""Build a track from messages whose ``time`` is already the delta in ticks."""

	track = mido.MidiTrack()
	track.extend(messages)
	return track


def make_midi_file (*tracks: mido.MidiTrack, ticks_per_beat: int = 480) -> mido.MidiFile:

	"""Build an in-memory Type 1 MIDI file from tracks."""

	mid = mido.MidiFile(type=1, ticks_per_beat=ticks_per_beat)
	mid.tracks.extend(tracks)
	return mid


def stream (*messages: typing.Union[mido.Message, mido.MetaMessage]) -> typing.List[midicue.source.TrackEvent]:

	"""Turn messages into the ``(delta_ticks, message)`` pairs the extractor consumes."""

	return [(message.time, message) for message in messages]


def write_raw_midi_file (path: pathlib.Path, track_data: bytes, ticks_per_beat: int = 480) -> pathlib.Path:

	"""Write a Type 0 file with one track whose event bytes are given verbatim.

	Used for byte sequences that mido itself will not encode.  An end of track
	event is appended to ``track_data``.
	"""

	track_data = track_data + bytes([0x00, 0xFF, 0x2F, 0x00])

	header = b"MThd" + (6).to_bytes(4, "big") + (0).to_bytes(2, "big") + (1).to_bytes(2, "big") + ticks_per_beat.to_bytes(2, "big")
	track = b"MTrk" + len(track_data).to_bytes(4, "big") + track_data

	path.write_bytes(header + track)
	return path


def smpte_offset_event (hour_byte: int) -> bytes:

	"""A delta-0 SMPTE offset meta event with the given raw hour byte."""

	return bytes([0x00, 0xFF, 0x54, 0x05, hour_byte, 0x00, 0x00, 0x00, 0x00])


@pytest.fixture
def tempo_change_file () -> mido.MidiFile:

	"""One track at 480 PPQN: two beats at 120 BPM, then 60 BPM.

	Note on at 0s, tempo change at tick 960 (1.0s), note off at tick 1440 (2.0s).
	"""

	return make_midi_file(make_track(
		mido.MetaMessage('track_name', name='cues', time=0),
		mido.Message('note_on', channel=0, note=60, velocity=100, time=0),
		mido.MetaMessage('set_tempo', tempo=1_000_000, time=960),
		mido.Message('note_off', channel=0, note=60, velocity=64, time=480),
		mido.MetaMessage('end_of_track', time=0),
	))


@pytest.fixture
def tempo_change_path (tmp_path: pathlib.Path, tempo_change_file: mido.MidiFile) -> pathlib.Path:

	"""The tempo change file saved to disk."""

	path = tmp_path / "tempo_change.mid"
	tempo_change_file.save(str(path))
	return path
