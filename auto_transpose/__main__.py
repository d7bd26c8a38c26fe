import argparse
import logging
import os
import sys
import time
import typing

import auto_transpose.config
import auto_transpose.midi_input
import auto_transpose.spelling
import auto_transpose.transposer


logger = logging.getLogger(__name__)


def build_parser () -> argparse.ArgumentParser:

	"""
	Command-line arguments. Anything given here overrides the config file.
	"""

	parser = argparse.ArgumentParser(prog="auto-transpose", description="Transpose note names between instruments")
	parser.add_argument("note", nargs="?", help="Note name to transpose, e.g. C, F#, Bb")
	parser.add_argument("--from", dest="from_value", help="Source instrument name or semitones (e.g. 'Clarinet in B♭' or -2)")
	parser.add_argument("--to", dest="to_value", help="Target instrument name or semitones")
	parser.add_argument("--flats", action="store_true", default=None, help="Spell black keys as flats")
	parser.add_argument("--sharps", dest="flats", action="store_false", default=None, help="Spell black keys as sharps")
	parser.add_argument("--config", help=f"YAML config file (default: {auto_transpose.config.DEFAULT_CONFIG_PATH} if present)")
	parser.add_argument("--list-instruments", action="store_true", help="Print instruments and their offsets, then exit")
	parser.add_argument("--listen", action="store_true", help="Transpose keys played on a MIDI input device until Ctrl-C")
	parser.add_argument("--device", help="MIDI input device name for --listen")
	parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

	return parser


def _load_config (path: typing.Optional[str]) -> auto_transpose.config.Config:

	if path is None:
		if not os.path.exists(auto_transpose.config.DEFAULT_CONFIG_PATH):
			return auto_transpose.config.Config()
		path = auto_transpose.config.DEFAULT_CONFIG_PATH

	return auto_transpose.config.load_config(path)


def _listen (listener: auto_transpose.midi_input.NoteListener, device_name: typing.Optional[str]) -> int:

	if not listener.start(device_name):
		print("No MIDI input device could be opened.", file=sys.stderr)
		return 1

	print(f"Listening on {listener.device_name}. Press Ctrl-C to stop.")

	try:
		while True:
			time.sleep(1)
	except KeyboardInterrupt:
		logger.info("Stopping...")
	finally:
		listener.stop()

	return 0


def main (argv: typing.Optional[typing.Sequence[str]] = None) -> int:

	"""
	Main entry point for the auto-transpose command.
	"""

	parser = build_parser()
	args = parser.parse_args(argv)

	logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

	try:
		config = _load_config(args.config)
	except (OSError, ValueError) as e:
		print(f"Could not load config: {e}", file=sys.stderr)
		return 2

	table = config.instrument_table()

	if args.list_instruments:
		for instrument in table:
			print(f"{instrument.name}\t{instrument.transposition:+d}")
		return 0

	transposition = auto_transpose.transposer.Transposition.between(
		from_value = args.from_value if args.from_value is not None else config.from_value,
		to_value = args.to_value if args.to_value is not None else config.to_value,
		prefer_flats = args.flats if args.flats is not None else config.prefer_flats,
		table = table
	)

	if args.listen:
		listener = auto_transpose.midi_input.NoteListener(transposition)
		return _listen(listener, args.device if args.device is not None else config.midi_input_device)

	if args.note is None:
		parser.error("a note name is required unless --list-instruments or --listen is given")

	try:
		print(transposition.apply(args.note))
	except auto_transpose.spelling.InvalidNoteName as e:
		print(str(e), file=sys.stderr)
		return 2

	return 0


if __name__ == "__main__":
	sys.exit(main())
