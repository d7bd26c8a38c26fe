import auto_transpose.instruments


def test_lookup_known_instruments () -> None:

	"""Offsets are stored octave-reduced."""

	assert auto_transpose.instruments.lookup("Clarinet in B♭") == -2
	assert auto_transpose.instruments.lookup("Alto Saxophone in E♭") == 3
	assert auto_transpose.instruments.lookup("French Horn in F") == 5
	assert auto_transpose.instruments.lookup("Alto Flute in G") == -4
	assert auto_transpose.instruments.lookup("Piano") == 0


def test_lookup_unknown_returns_none () -> None:

	assert auto_transpose.instruments.lookup("Kazoo") is None


def test_lookup_is_exact_match () -> None:

	"""No case folding or trimming on instrument names."""

	assert auto_transpose.instruments.lookup("piano") is None
	assert auto_transpose.instruments.lookup("Piano ") is None


def test_table_order_and_size () -> None:

	names = auto_transpose.instruments.instrument_names()

	assert len(names) == 34
	assert names[0] == "Piccolo"
	assert names[-1] == "Guitar"
	assert len(set(names)) == len(names)


def test_all_offsets_within_one_octave () -> None:

	for instrument in auto_transpose.instruments.INSTRUMENTS:
		assert -11 <= instrument.transposition <= 11, instrument.name


def test_with_extra_appends_and_overrides () -> None:

	"""with_extra() should return a new table and leave the defaults alone."""

	table = auto_transpose.instruments.DEFAULT_TABLE.with_extra({"Horn in E♭": 3, "Piano": 7})

	assert table.lookup("Horn in E♭") == 3
	assert table.lookup("Piano") == 7
	assert table.names()[-1] == "Horn in E♭"
	assert table.names().index("Piano") == auto_transpose.instruments.instrument_names().index("Piano")
	assert len(table) == 35

	assert auto_transpose.instruments.lookup("Piano") == 0
	assert "Horn in E♭" not in auto_transpose.instruments.DEFAULT_TABLE


def test_table_iterates_instruments () -> None:

	table = auto_transpose.instruments.InstrumentTable([
		auto_transpose.instruments.Instrument("A", 1),
		auto_transpose.instruments.Instrument("B", -1),
	])

	assert [i.name for i in table] == ["A", "B"]
	assert "A" in table
	assert table.lookup("B") == -1
