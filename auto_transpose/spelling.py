"""Note name spellings.

Converts between the textual note names people type (``"Db"``, ``"F#"``,
``"B#"``) and `PitchClass` values, in both directions.

Accepted input is a closed vocabulary held in `ACCEPTED_SPELLINGS`:

- the seven naturals ``C D E F G A B``
- the five canonical sharps ``C# D# F# G# A#``
- the flats ``Db Eb Gb Ab Bb`` plus ``Cb`` (= B) and ``Fb`` (= E)
- the uncommon sharps ``E#`` (= F) and ``B#`` (= C)

Double accidentals (``C##``, ``Fbb``) are not part of the vocabulary and are
rejected, as is anything else not listed.
"""

import types
import typing

import auto_transpose.pitch


# Enharmonic spellings outside the canonical cycle, mapped to their cycle name.
ENHARMONIC_EQUIVALENTS: typing.Mapping[str, str] = types.MappingProxyType({
	"Db": "C#",
	"Eb": "D#",
	"Gb": "F#",
	"Ab": "G#",
	"Bb": "A#",
	"Cb": "B",
	"Fb": "E",
	"E#": "F",
	"B#": "C",
})

SHARP_TO_FLAT: typing.Mapping[str, str] = types.MappingProxyType({
	"C#": "Db",
	"D#": "Eb",
	"F#": "Gb",
	"G#": "Ab",
	"A#": "Bb",
})


def _build_accepted_spellings () -> typing.Mapping[str, int]:

	"""Combine the canonical cycle and the enharmonic table into one token map."""

	table: typing.Dict[str, int] = {name: index for index, name in enumerate(auto_transpose.pitch.PITCH_CYCLE)}

	for spelling, canonical in ENHARMONIC_EQUIVALENTS.items():
		table[spelling] = auto_transpose.pitch.PITCH_CYCLE.index(canonical)

	return types.MappingProxyType(table)


ACCEPTED_SPELLINGS: typing.Mapping[str, int] = _build_accepted_spellings()


class InvalidNoteName (ValueError):

	"""
	Raised when a note name cannot be resolved to a pitch class.

	Attributes:
		token: The rejected input, exactly as given.
		vocabulary: The canonical cycle names, for diagnostics.
	"""

	def __init__ (self, token: typing.Any) -> None:

		self.token = token
		self.vocabulary: typing.Tuple[str, ...] = auto_transpose.pitch.PITCH_CYCLE

		super().__init__(
			f"Invalid or unsupported note name: {token!r}. "
			f"Could not normalize to one of {', '.join(self.vocabulary)}."
		)


def normalize (spelling: str) -> auto_transpose.pitch.PitchClass:

	"""Resolve a note name to its pitch class.

	Surrounding whitespace is ignored. The letter must be uppercase and the
	accidental is ``#`` or ``b``.

	Parameters:
		spelling: Note name (e.g. ``"C"``, ``"F#"``, ``"Bb"``, ``"E#"``).

	Returns:
		The matching `PitchClass`.

	Raises:
		InvalidNoteName: If the name is not in `ACCEPTED_SPELLINGS`.

	Example:
		```python
		normalize("Db") == normalize("C#")  # True
		normalize(" B# ").name              # → "C"
		normalize("C##")                    # raises InvalidNoteName
		```
	"""

	if not isinstance(spelling, str):
		raise InvalidNoteName(spelling)

	index = ACCEPTED_SPELLINGS.get(spelling.strip())

	if index is None:
		raise InvalidNoteName(spelling)

	return auto_transpose.pitch.ALL_PITCH_CLASSES[index]


def to_display (pitch: auto_transpose.pitch.PitchClass, prefer_flats: bool = False) -> str:

	"""Spell a pitch class for display.

	With ``prefer_flats`` the five black-key pitch classes come out as flats
	(``Db Eb Gb Ab Bb``). Naturals are the same either way.

	Example:
		```python
		to_display(normalize("C#"), prefer_flats=True)   # → "Db"
		to_display(normalize("C#"), prefer_flats=False)  # → "C#"
		```
	"""

	name = pitch.name

	if prefer_flats:
		return SHARP_TO_FLAT.get(name, name)

	return name


def is_valid (spelling: str) -> bool:

	"""
	Return True when `normalize()` would accept the spelling.
	"""

	return isinstance(spelling, str) and spelling.strip() in ACCEPTED_SPELLINGS
