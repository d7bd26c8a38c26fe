"""Pitch classes and transposition.

This module owns the canonical 12-tone cycle and the arithmetic used to move
around it. Everything works on pitch classes only: there is no octave number,
so transposing B up a semitone gives C, not C one octave higher.

Module-level constants:
- `PITCH_CYCLE`: The 12 canonical pitch class names in sharp spelling, C first.
- `SEMITONES_PER_OCTAVE`: Size of the cycle (12).

Module-level helpers:
- `wrap_semitones(value)`: Reduce any integer into 0–11. This is the only place
  signed modulo arithmetic is done; every index or offset goes through it.
- `transpose(pitch, semitones)`: Rotate a `PitchClass` around the cycle.
"""

import dataclasses
import typing


SEMITONES_PER_OCTAVE: int = 12

PITCH_CYCLE: typing.Tuple[str, ...] = (
	"C",
	"C#",
	"D",
	"D#",
	"E",
	"F",
	"F#",
	"G",
	"G#",
	"A",
	"A#",
	"B",
)


def wrap_semitones (value: int) -> int:

	"""Reduce a signed semitone count to a cycle index (0–11).

	Parameters:
		value: Any integer, positive or negative.

	Returns:
		An integer in the range 0–11.

	Example:
		```python
		wrap_semitones(14)   # → 2
		wrap_semitones(-2)   # → 10
		wrap_semitones(-12)  # → 0
		```
	"""

	return ((value % SEMITONES_PER_OCTAVE) + SEMITONES_PER_OCTAVE) % SEMITONES_PER_OCTAVE


@dataclasses.dataclass(frozen=True)
class PitchClass:

	"""
	One of the 12 pitch classes, identified by its index in `PITCH_CYCLE`.
	"""

	index: int


	def __post_init__ (self) -> None:

		"""Reject indices outside the cycle."""

		if not isinstance(self.index, int) or isinstance(self.index, bool):
			raise ValueError(f"Pitch class index must be an int, got {self.index!r}")

		if not 0 <= self.index < SEMITONES_PER_OCTAVE:
			raise ValueError(f"Pitch class index must be 0-11, got {self.index}")


	@classmethod
	def from_name (cls, name: str) -> "PitchClass":

		"""Build a pitch class from a canonical (sharp) cycle name.

		Only the 12 names in `PITCH_CYCLE` are accepted here. Use
		`auto_transpose.spelling.normalize()` for flats and other spellings.
		"""

		if name not in PITCH_CYCLE:
			raise ValueError(f"Not a canonical pitch class name: {name!r}. Expected one of {', '.join(PITCH_CYCLE)}")

		return cls(PITCH_CYCLE.index(name))


	@property
	def name (self) -> str:

		"""
		Canonical sharp-spelled name of this pitch class.
		"""

		return PITCH_CYCLE[self.index]


	def transpose (self, semitones: int) -> "PitchClass":

		"""
		Return the pitch class `semitones` away from this one.
		"""

		return transpose(self, semitones)


	def __str__ (self) -> str:

		return self.name


ALL_PITCH_CLASSES: typing.Tuple[PitchClass, ...] = tuple(PitchClass(i) for i in range(SEMITONES_PER_OCTAVE))


def transpose (pitch: PitchClass, semitones: int) -> PitchClass:

	"""Rotate a pitch class by a signed number of semitones.

	The offset may be any integer; it is reduced modulo 12 first, so
	transposing by 14 is the same as transposing by 2, and -2 is the same
	as 10. Transposing by ``a`` then ``b`` always equals transposing once by
	``a + b``.

	Parameters:
		pitch: The starting pitch class.
		semitones: Interval in semitones (negative moves down).

	Returns:
		The resulting pitch class.

	Example:
		```python
		c = PitchClass.from_name("C")
		transpose(c, -2).name  # → "A#"
		transpose(c, 5).name   # → "F"
		```
	"""

	return ALL_PITCH_CLASSES[wrap_semitones(pitch.index + wrap_semitones(semitones))]
