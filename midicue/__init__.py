"""
midicue - turn a Standard MIDI File into timed cue lines.

midicue walks the events of a MIDI file once, converts delta ticks into
absolute seconds across every tempo change, and reports note-on, note-off and
control change messages as compact text lines for cue-triggering tools such as
StageTraxx::

	[midi@00:02.000: N60.100@1]
	[midi@00:02.500: N60.0@1]
	[midi@00:03.000: CC7.90@1]

What it does:

- **Tempo-aware timing.** The 120 BPM default applies until the first tempo
  change; each tempo change closes the current segment and starts a new one,
  so later events are timed at the new rate without moving earlier ones.
- **Small event vocabulary.** Note-on, note-off (release velocity dropped) and
  control change.  Everything else is skipped and reported as a diagnostic.
- **Channel override.** Report every event on one fixed channel, or use the
  file's channels renumbered 1-16.
- **Collision skipping.** Optionally drop note-offs that coincide with the
  next event, to avoid off/on flicker when retriggering a cue.
- **Diagnostics without side effects.** Tempo changes, time signatures and
  SMPTE offsets are logged and can be observed through a ``Diagnostics`` sink.

Minimal example:

    ```python
    import midicue

    midi_file = midicue.load("show.mid")
    formatter = midicue.StageTraxxFormatter()

    for event in midicue.extract_events(midi_file, override_channel=5):
        print(formatter.format(event))
    ```

From the command line::

	python -m midicue --midi-file show.mid --skip-off-note-collisions

Package-level exports: ``Diagnostics``, ``Extractor``, ``extract_events``, ``load``,
``MidiEvent``, ``StageTraxxFormatter``, ``skip_off_note_collisions``.
"""

import midicue.diagnostics
import midicue.extractor
import midicue.filters
import midicue.formatter
import midicue.midi_event
import midicue.source


Diagnostics = midicue.diagnostics.Diagnostics
Extractor = midicue.extractor.Extractor
extract_events = midicue.extractor.extract_events
load = midicue.source.load
MidiEvent = midicue.midi_event.MidiEvent
StageTraxxFormatter = midicue.formatter.StageTraxxFormatter
skip_off_note_collisions = midicue.filters.skip_off_note_collisions
