import logging
import typing
import mido

import auto_transpose.pitch

logger = logging.getLogger(__name__)


def list_input_devices() -> typing.List[str]:
    """Return the names of the available MIDI input ports."""
    return list(mido.get_input_names())


def select_input_device(device_name: typing.Optional[str] = None, callback: typing.Optional[typing.Callable] = None) -> typing.Tuple[typing.Optional[str], typing.Optional[typing.Any]]:
    """
    Select and open a MIDI input device.

    If `device_name` is provided and exists, that port is opened.
    If `device_name` is None, the first available input is used.
    If `device_name` is not found, falls back to the first available input
    and logs a warning, which keeps a config file usable across machines.

    Returns:
        A tuple of (device_name, midi_in_object) or (None, None) on failure.
    """
    try:
        inputs = mido.get_input_names()
        logger.info(f"Available MIDI inputs: {inputs}")

        if not inputs:
            logger.error("No MIDI input devices found.")
            return None, None

        target = device_name

        if target is None:
            target = inputs[0]
            logger.info(f"No MIDI input requested - using '{target}'")

        elif target not in inputs:
            logger.warning(f"MIDI input device '{target}' not found.")
            target = inputs[0]
            logger.warning(f"Fallback to: {target}")

        midi_in = mido.open_input(target, callback=callback)
        logger.info(f"Opened MIDI input: {target}")
        return target, midi_in

    except Exception as e:
        logger.error(f"Failed to open MIDI input: {e}")
        return None, None


def pitch_class_from_message(message: typing.Any) -> typing.Optional[auto_transpose.pitch.PitchClass]:
    """
    Return the pitch class of a key press, or None for any other message.

    A note_on with velocity 0 is a note-off by MIDI convention and is ignored.
    """
    if getattr(message, "type", None) != "note_on" or message.velocity == 0:
        return None

    return auto_transpose.pitch.ALL_PITCH_CLASSES[auto_transpose.pitch.wrap_semitones(message.note)]
