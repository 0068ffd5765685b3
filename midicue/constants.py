"""Timing and channel constants.

Standard MIDI tempo is expressed in **microseconds per quarter note**.  Until a
file sets its own tempo, playback runs at 120 BPM:

- `DEFAULT_BPM = 120`
- `DEFAULT_TEMPO = 500000` - microseconds per quarter note at 120 BPM
"""

MICROS_PER_SECOND = 1_000_000
NANOS_PER_SECOND = 1_000_000_000

DEFAULT_BPM = 120
DEFAULT_TEMPO = int(MICROS_PER_SECOND / (DEFAULT_BPM / 60))

# Output channels are 1-based, source channels are 0-based.
MIDI_CHANNEL_MIN = 1
MIDI_CHANNEL_MAX = 16

# SMPTE offset frame-rate codes (two bits of the hour byte).
SMPTE_FRAME_RATES = {
	0: 24.0,
	1: 25.0,
	2: 29.97,
	3: 30.0,
}
