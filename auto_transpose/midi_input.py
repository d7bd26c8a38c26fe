"""Live transposition from a MIDI keyboard.

Each key pressed on the input device is printed alongside its transposed
name, so a player can read a part written for one instrument on another:

	```python
	import auto_transpose.midi_input
	import auto_transpose.transposer

	t = auto_transpose.transposer.Transposition.between("Clarinet in B♭", 0, prefer_flats=True)
	listener = auto_transpose.midi_input.NoteListener(t)
	listener.start("My Keyboard")
	```
"""

import logging
import typing

import auto_transpose.midi_utils
import auto_transpose.spelling
import auto_transpose.transposer


logger = logging.getLogger(__name__)


class NoteListener:

	"""Transposes incoming MIDI note-on messages and hands the result to an output function."""

	def __init__ (
		self,
		transposition: auto_transpose.transposer.Transposition,
		output: typing.Callable[[str], typing.Any] = print
	) -> None:

		"""
		Parameters:
			transposition: Offsets and display preference to apply.
			output: Called with one formatted line per key press.
		"""

		self.transposition = transposition
		self.output = output
		self.device_name: typing.Optional[str] = None
		self.midi_in: typing.Any = None


	def on_message (self, message: typing.Any) -> typing.Optional[str]:

		"""Handle one incoming MIDI message.

		This runs on mido's callback thread. Only the pure transposition
		functions are called, so no locking is needed.

		Returns:
			The line sent to ``output``, or None if the message was not a key press.
		"""

		pitch = auto_transpose.midi_utils.pitch_class_from_message(message)

		if pitch is None:
			return None

		pressed = auto_transpose.spelling.to_display(pitch, prefer_flats=self.transposition.prefer_flats)
		result = self.transposition.apply_pitch(pitch)
		line = f"{pressed} -> {result}"

		self.output(line)

		return line


	def start (self, device_name: typing.Optional[str] = None) -> bool:

		"""Open the MIDI input port. Returns False if no port could be opened."""

		self.device_name, self.midi_in = auto_transpose.midi_utils.select_input_device(device_name, self.on_message)

		if self.midi_in is None:
			return False

		logger.info(f"Listening on {self.device_name}")

		return True


	def stop (self) -> None:

		"""
		Close the MIDI input port if open.
		"""

		if self.midi_in is not None:
			self.midi_in.close()
			self.midi_in = None
			logger.info("MIDI input closed")
