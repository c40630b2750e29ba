"""Keep ALSA and JACK from printing device-probing noise over the spinner.

PortAudio probes every host API when sounddevice loads; on Linux that makes
libasound and libjack write warnings straight to stderr. Installing no-op error
handlers and telling JACK not to spawn a server keeps the terminal readable.
"""

import ctypes
import ctypes.util
import logging
import os

logger = logging.getLogger(__name__)

# snd_lib_error_handler_t: (file, line, function, err, fmt, ...)
_ALSA_HANDLER_TYPE = ctypes.CFUNCTYPE(
    None, ctypes.c_char_p, ctypes.c_int, ctypes.c_char_p, ctypes.c_int, ctypes.c_char_p
)
_JACK_HANDLER_TYPE = ctypes.CFUNCTYPE(None, ctypes.c_char_p)

# ctypes callbacks must outlive the libraries holding them.
_installed_handlers = []


def _alsa_noop(_file, _line, _function, _err, _fmt):
    pass


def _jack_noop(_msg):
    pass


def _load(name: str):
    path = ctypes.util.find_library(name)
    if not path:
        return None
    try:
        return ctypes.cdll.LoadLibrary(path)
    except OSError:
        return None


def _install(lib_name: str, symbol: str, handler_type, func) -> bool:
    lib = _load(lib_name)
    if lib is None:
        return False
    try:
        setter = getattr(lib, symbol)
    except AttributeError:
        return False
    handler = handler_type(func)
    setter(handler)
    _installed_handlers.append(handler)
    return True


def quiet_native_audio() -> dict:
    """Force JACK_NO_START_SERVER=1 and mute ALSA/JACK error output where present.

    Returns which handlers were installed; missing libraries are skipped.
    """
    os.environ["JACK_NO_START_SERVER"] = "1"
    installed = {
        "alsa": _install("asound", "snd_lib_error_set_handler", _ALSA_HANDLER_TYPE, _alsa_noop),
        "jack": _install("jack", "jack_set_error_function", _JACK_HANDLER_TYPE, _jack_noop),
    }
    logger.debug("Native audio error handlers: %s", installed)
    return installed
