import pytest

import auto_transpose.pitch
import auto_transpose.spelling


def test_naturals_and_sharps_resolve_to_themselves () -> None:

	"""Every canonical cycle name should normalize to its own pitch class."""

	for index, name in enumerate(auto_transpose.pitch.PITCH_CYCLE):
		assert auto_transpose.spelling.normalize(name).index == index


@pytest.mark.parametrize("spelling, canonical", [
	("Db", "C#"),
	("Eb", "D#"),
	("Gb", "F#"),
	("Ab", "G#"),
	("Bb", "A#"),
	("B#", "C"),
	("E#", "F"),
	("Cb", "B"),
	("Fb", "E"),
])
def test_enharmonic_equivalents (spelling: str, canonical: str) -> None:

	"""Alternative spellings should land on the same pitch class as the canonical name."""

	assert auto_transpose.spelling.normalize(spelling) == auto_transpose.spelling.normalize(canonical)


def test_whitespace_is_trimmed () -> None:

	assert auto_transpose.spelling.normalize("  Ab\n").name == "G#"


@pytest.mark.parametrize("token", ["H", "C##", "Fbb", "", "   ", "c", "CB", "C#b", "Csharp", "Esharp", "#"])
def test_invalid_names_raise (token: str) -> None:

	"""Anything outside the accepted vocabulary should be rejected, not truncated."""

	with pytest.raises(auto_transpose.spelling.InvalidNoteName):
		auto_transpose.spelling.normalize(token)


def test_non_string_raises () -> None:

	with pytest.raises(auto_transpose.spelling.InvalidNoteName):
		auto_transpose.spelling.normalize(None)  # type: ignore[arg-type]


def test_error_carries_token_and_vocabulary () -> None:

	"""The error should name the rejected token and list the canonical cycle."""

	with pytest.raises(auto_transpose.spelling.InvalidNoteName) as excinfo:
		auto_transpose.spelling.normalize("C##")

	err = excinfo.value

	assert err.token == "C##"
	assert err.vocabulary == auto_transpose.pitch.PITCH_CYCLE
	assert "'C##'" in str(err)
	assert "C, C#, D" in str(err)
	assert isinstance(err, ValueError)


def test_accepted_spellings_table_is_complete_and_read_only () -> None:

	table = auto_transpose.spelling.ACCEPTED_SPELLINGS

	assert len(table) == 21
	assert set(table.values()) == set(range(12))

	with pytest.raises(TypeError):
		table["H"] = 11  # type: ignore[index]


def test_is_valid () -> None:

	assert auto_transpose.spelling.is_valid("Bb")
	assert auto_transpose.spelling.is_valid(" E# ")
	assert not auto_transpose.spelling.is_valid("C##")


def test_to_display_sharps_and_flats () -> None:

	c_sharp = auto_transpose.spelling.normalize("C#")
	c = auto_transpose.spelling.normalize("C")

	assert auto_transpose.spelling.to_display(c_sharp, prefer_flats=True) == "Db"
	assert auto_transpose.spelling.to_display(c_sharp, prefer_flats=False) == "C#"
	assert auto_transpose.spelling.to_display(c, prefer_flats=True) == "C"


def test_to_display_flats_cover_all_black_keys () -> None:

	"""With flats preferred, no output should contain a sharp."""

	names = [auto_transpose.spelling.to_display(pc, prefer_flats=True) for pc in auto_transpose.pitch.ALL_PITCH_CLASSES]

	assert names == ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]


def test_display_of_normalized_flat_defaults_to_sharp () -> None:

	assert auto_transpose.spelling.to_display(auto_transpose.spelling.normalize("Bb")) == "A#"
