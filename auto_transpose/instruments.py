"""Instrument transpositions.

Each instrument has a fixed semitone offset between written and concert
pitch. Because the engine only deals in pitch classes, offsets are stored as
the simplest equivalent interval within one octave rather than the full
interval the instrument actually sounds. An alto saxophone sounds a major
sixth lower (-9), which lands on the same pitch class as a minor third higher,
so it is recorded as +3. Octave-displacing instruments (piccolo, double bass,
guitar) are recorded as 0.

Usage:
	```python
	import auto_transpose.instruments as instruments

	instruments.lookup("Clarinet in B♭")   # → -2
	instruments.lookup("Kazoo")            # → None

	table = instruments.DEFAULT_TABLE.with_extra({"Horn in E♭": 3})
	table.lookup("Horn in E♭")             # → 3
	```
"""

import dataclasses
import typing


@dataclasses.dataclass(frozen=True)
class Instrument:

	"""
	An instrument name and its transposition in semitones relative to concert pitch.
	"""

	name: str
	transposition: int


INSTRUMENTS: typing.Tuple[Instrument, ...] = (
	Instrument("Piccolo", 0),                     # sounds an octave higher
	Instrument("Flute", 0),
	Instrument("Alto Flute in G", -4),
	Instrument("Oboe", 0),
	Instrument("English Horn in F", 5),           # P5 lower (-7)
	Instrument("Clarinet in E♭", 3),
	Instrument("Clarinet in B♭", -2),
	Instrument("Clarinet in A", -3),
	Instrument("Bass Clarinet in B♭", -2),        # M9 lower (-14)
	Instrument("Bassoon", 0),
	Instrument("Contrabassoon", 0),               # sounds an octave lower
	Instrument("Soprano Saxophone in B♭", -2),
	Instrument("Alto Saxophone in E♭", 3),        # M6 lower (-9)
	Instrument("Tenor Saxophone in B♭", -2),      # M9 lower (-14)
	Instrument("Baritone Saxophone in E♭", 3),    # M13 lower (-21)
	Instrument("French Horn in F", 5),            # P5 lower (-7)
	Instrument("Trumpet in B♭", -2),
	Instrument("Cornet in B♭", -2),
	Instrument("Flugelhorn in B♭", -2),
	Instrument("Trombone", 0),
	Instrument("Bass Trombone", 0),
	Instrument("Euphonium", 0),
	Instrument("Tuba", 0),
	Instrument("Timpani", 0),
	Instrument("Glockenspiel", 0),
	Instrument("Xylophone", 0),
	Instrument("Celesta", 0),
	Instrument("Harp", 0),
	Instrument("Piano", 0),
	Instrument("Violin", 0),
	Instrument("Viola", 0),
	Instrument("Cello", 0),
	Instrument("Double Bass", 0),
	Instrument("Guitar", 0),
)


class InstrumentTable:

	"""Read-only, ordered collection of instruments.

	Tables are never mutated after construction. `with_extra()` returns a new
	table, leaving the original untouched.
	"""

	def __init__ (self, instruments: typing.Iterable[Instrument]) -> None:

		"""Store the instruments in order and index them by name."""

		self._instruments: typing.Tuple[Instrument, ...] = tuple(instruments)
		self._by_name: typing.Dict[str, int] = {instrument.name: instrument.transposition for instrument in self._instruments}


	def lookup (self, name: str) -> typing.Optional[int]:

		"""Return the transposition for an exact instrument name, or None if unknown.

		An unknown name is not an error: callers fall back to a numeric
		semitone value (usually 0).
		"""

		return self._by_name.get(name)


	def names (self) -> typing.List[str]:

		"""
		Instrument names in table order.
		"""

		return [instrument.name for instrument in self._instruments]


	def with_extra (self, extra: typing.Mapping[str, int]) -> "InstrumentTable":

		"""Return a new table with additional or overriding instruments.

		Names already in the table keep their position and take the new
		offset. New names are appended in the order given.

		Parameters:
			extra: Mapping of instrument name to semitone offset.

		Returns:
			A new `InstrumentTable`.
		"""

		merged: typing.List[Instrument] = []
		seen: typing.Set[str] = set()

		for instrument in self._instruments:
			if instrument.name in extra:
				merged.append(Instrument(instrument.name, int(extra[instrument.name])))
			else:
				merged.append(instrument)
			seen.add(instrument.name)

		for name, transposition in extra.items():
			if name not in seen:
				merged.append(Instrument(name, int(transposition)))

		return InstrumentTable(merged)


	def __iter__ (self) -> typing.Iterator[Instrument]:

		return iter(self._instruments)


	def __len__ (self) -> int:

		return len(self._instruments)


	def __contains__ (self, name: object) -> bool:

		return name in self._by_name


DEFAULT_TABLE = InstrumentTable(INSTRUMENTS)


def lookup (name: str) -> typing.Optional[int]:

	"""
	Return the transposition of a built-in instrument, or None if the name is unknown.
	"""

	return DEFAULT_TABLE.lookup(name)


def instrument_names () -> typing.List[str]:

	"""
	Names of the built-in instruments, in table order.
	"""

	return DEFAULT_TABLE.names()
