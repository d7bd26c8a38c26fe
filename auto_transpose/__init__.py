"""
Auto Transpose - note name transposition between instruments.

Give it a note name and the instruments involved, and it tells you what to
play. Works on pitch classes (no octaves), understands enharmonic spellings,
and wraps correctly in both directions.

- **Spelling in, spelling out.** Accepts naturals, sharps, flats and the
  awkward ones (``B#``, ``E#``, ``Cb``, ``Fb``). Output is sharp-spelled by
  default, or flat-spelled with ``prefer_flats=True``.
- **Any offset.** Semitone offsets can be any integer, positive or negative.
  Chained offsets compose: ``+5`` then ``-2`` is the same as ``+3``.
- **Instrument table.** Built-in offsets for common orchestral and band
  instruments, extendable from a YAML config file.
- **MIDI keyboard input.** ``auto-transpose --listen`` prints the
  transposed name of each key you play.

Minimal example:

    ```python
    import auto_transpose

    auto_transpose.transpose_note("C", -2, 5, prefer_flats=True)  # "Eb"

    t = auto_transpose.Transposition.between("Alto Saxophone in E♭", "Piano")
    t.apply("G")  # "A#"
    ```

Package-level exports: ``PitchClass``, ``InvalidNoteName``, ``normalize``,
``transpose``, ``to_display``, ``transpose_note``, ``Transposition``,
``INSTRUMENTS``.
"""

import auto_transpose.instruments
import auto_transpose.pitch
import auto_transpose.spelling
import auto_transpose.transposer


PitchClass = auto_transpose.pitch.PitchClass
InvalidNoteName = auto_transpose.spelling.InvalidNoteName
normalize = auto_transpose.spelling.normalize
transpose = auto_transpose.pitch.transpose
to_display = auto_transpose.spelling.to_display
transpose_note = auto_transpose.transposer.transpose_note
Transposition = auto_transpose.transposer.Transposition
INSTRUMENTS = auto_transpose.instruments.INSTRUMENTS
