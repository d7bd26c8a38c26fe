"""YAML configuration.

Example ``auto_transpose.yaml``:

	```yaml
	transpose:
	  from: "Clarinet in B♭"
	  to: 0
	  prefer_flats: true
	instruments:
	  "Horn in E♭": 3
	midi:
	  input_device: "My Keyboard"
	```

Every section and key is optional.
"""

import dataclasses
import logging
import os
import types
import typing

import yaml

import auto_transpose.instruments
import auto_transpose.transposer


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "auto_transpose.yaml"


@dataclasses.dataclass(frozen=True)
class Config:

	"""
	Settings loaded from a config file. Defaults match running with no file at all.
	"""

	from_value: auto_transpose.transposer.OffsetSource = 0
	to_value: auto_transpose.transposer.OffsetSource = 0
	prefer_flats: bool = False
	extra_instruments: typing.Mapping[str, int] = dataclasses.field(default_factory=lambda: types.MappingProxyType({}), hash=False)
	midi_input_device: typing.Optional[str] = None


	def instrument_table (self) -> auto_transpose.instruments.InstrumentTable:

		"""
		The built-in instrument table plus any instruments from the config.
		"""

		if not self.extra_instruments:
			return auto_transpose.instruments.DEFAULT_TABLE

		return auto_transpose.instruments.DEFAULT_TABLE.with_extra(self.extra_instruments)


def _section (data: typing.Dict[str, typing.Any], key: str, config_path: str) -> typing.Dict[str, typing.Any]:

	"""Return a mapping section, treating a missing or empty one as {}."""

	section = data.get(key) or {}

	if not isinstance(section, dict):
		raise ValueError(f"{config_path}: '{key}' must be a mapping")

	return section


def _offset_value (value: typing.Any, key: str, config_path: str) -> auto_transpose.transposer.OffsetSource:

	if isinstance(value, bool) or not isinstance(value, (int, str)):
		raise ValueError(f"{config_path}: 'transpose.{key}' must be an instrument name or a number of semitones")

	return value


def _flag_value (value: typing.Any, key: str, config_path: str) -> bool:

	if not isinstance(value, bool):
		raise ValueError(f"{config_path}: 'transpose.{key}' must be true or false, got {value!r}")

	return value


def load_config (config_path: str = DEFAULT_CONFIG_PATH) -> Config:

	"""Load configuration from a YAML file.

	A missing file is not an error: a warning is logged and defaults are
	returned.

	Parameters:
		config_path: Path to the YAML file.

	Returns:
		A `Config`.

	Raises:
		ValueError: If the file exists but its contents are malformed.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return Config()

	with open(config_path, 'r', encoding='utf-8') as f:
		data = yaml.safe_load(f)

	if data is None:
		return Config()

	if not isinstance(data, dict):
		raise ValueError(f"{config_path}: top level must be a mapping")

	transpose = _section(data, "transpose", config_path)
	midi = _section(data, "midi", config_path)
	instruments = _section(data, "instruments", config_path)

	extra: typing.Dict[str, int] = {}

	for name, offset in instruments.items():
		if isinstance(offset, bool) or not isinstance(offset, int):
			raise ValueError(f"{config_path}: instrument {name!r} offset must be an integer, got {offset!r}")
		extra[str(name)] = offset

	input_device = midi.get("input_device")

	config = Config(
		from_value = _offset_value(transpose.get("from", 0), "from", config_path),
		to_value = _offset_value(transpose.get("to", 0), "to", config_path),
		prefer_flats = _flag_value(transpose.get("prefer_flats", False), "prefer_flats", config_path),
		extra_instruments = types.MappingProxyType(extra),
		midi_input_device = str(input_device) if input_device is not None else None
	)

	logger.info(f"Loaded config from {config_path}")

	return config
