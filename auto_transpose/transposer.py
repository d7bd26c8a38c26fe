"""Chained note transposition.

Ties the pieces together: a note name is normalized, moved by each offset in
turn, then spelled for display. This is the typical "written for instrument
A, show it for instrument B" flow:

	```python
	import auto_transpose.transposer

	# C on a B♭ instrument, read by a horn in F, shown with flats
	auto_transpose.transposer.transpose_note("C", -2, 5, prefer_flats=True)  # → "Eb"

	t = auto_transpose.transposer.Transposition.between("Clarinet in B♭", "French Horn in F")
	t.apply("C")  # → "D#"
	```
"""

import dataclasses
import logging
import typing

import auto_transpose.instruments
import auto_transpose.pitch
import auto_transpose.spelling


logger = logging.getLogger(__name__)

OffsetSource = typing.Union[int, str]


def resolve_offset (value: OffsetSource, table: typing.Optional[auto_transpose.instruments.InstrumentTable] = None) -> int:

	"""Turn an instrument name or a number into a semitone offset.

	Integers are returned unchanged. Strings are tried as integers first
	(``"-2"``, ``"+5"``), then as an exact instrument name. An unknown
	instrument resolves to 0 with a warning, the same as leaving the
	semitone field empty.

	Parameters:
		value: Semitone count, numeric string, or instrument name.
		table: Instrument table to search (defaults to the built-in table).

	Returns:
		Semitone offset (not reduced; reduction happens when transposing).
	"""

	if isinstance(value, int) and not isinstance(value, bool):
		return value

	if not isinstance(value, str):
		raise TypeError(f"Expected an int or str offset, got {value!r}")

	if table is None:
		table = auto_transpose.instruments.DEFAULT_TABLE

	text = value.strip()

	try:
		return int(text)
	except ValueError:
		pass

	offset = table.lookup(text)

	if offset is None:
		logger.warning(f"Unknown instrument {text!r}, using 0 semitones")
		return 0

	return offset


def transpose_note (note_name: str, *offsets: int, prefer_flats: bool = False) -> str:

	"""Transpose a note name by one or more offsets and spell the result.

	Offsets are applied in order. Because transposition composes, the
	result equals a single transposition by their sum.

	Parameters:
		note_name: Any accepted spelling (``"C"``, ``"Db"``, ``"B#"``...).
		offsets: Semitone offsets, applied left to right.
		prefer_flats: Spell black-key results as flats.

	Returns:
		The transposed note name.

	Raises:
		auto_transpose.spelling.InvalidNoteName: If ``note_name`` is not recognised.
	"""

	pitch = auto_transpose.spelling.normalize(note_name)

	for offset in offsets:
		pitch = auto_transpose.pitch.transpose(pitch, offset)

	result = auto_transpose.spelling.to_display(pitch, prefer_flats=prefer_flats)

	logger.debug(f"{note_name!r} {list(offsets)} -> {result}")

	return result


@dataclasses.dataclass(frozen=True)
class Transposition:

	"""
	A reusable two-step transposition with a display preference.
	"""

	from_offset: int = 0
	to_offset: int = 0
	prefer_flats: bool = False


	@classmethod
	def between (
		cls,
		from_value: OffsetSource = 0,
		to_value: OffsetSource = 0,
		prefer_flats: bool = False,
		table: typing.Optional[auto_transpose.instruments.InstrumentTable] = None
	) -> "Transposition":

		"""Build a transposition from instrument names and/or semitone counts.

		Example:
			```python
			t = Transposition.between("Alto Saxophone in E♭", -2, prefer_flats=True)
			t.apply("C")  # → "Db"
			```
		"""

		return cls(
			from_offset = resolve_offset(from_value, table),
			to_offset = resolve_offset(to_value, table),
			prefer_flats = prefer_flats
		)


	def apply_pitch (self, pitch: auto_transpose.pitch.PitchClass) -> str:

		"""
		Transpose an already-normalized pitch class and spell the result.
		"""

		result = pitch.transpose(self.from_offset).transpose(self.to_offset)

		return auto_transpose.spelling.to_display(result, prefer_flats=self.prefer_flats)


	def apply (self, note_name: str) -> str:

		"""
		Transpose a note name and spell the result.
		"""

		return self.apply_pitch(auto_transpose.spelling.normalize(note_name))
