"""
Lightweight logging facade used across QHam.

The logger wraps the standard :mod:`logging` module and adds two things the
numerical code relies on:

- an integer *verbosity level* ``lvl`` attached to every message. Messages
  with ``lvl`` larger than the logger's ``verbose`` threshold are dropped
  before they reach :mod:`logging`, so hot loops can log freely at high
  levels,
- optional ANSI coloring and indentation proportional to ``lvl``.

Usage
-----
    from QHam.common.flog import get_global_logger

    log = get_global_logger()
    log.info("Building the matrix...", lvl=2, color="green")
    log.say("Done", log="debug", lvl=3)

---------------------------------------------------
File    : QHam/common/flog.py
Author  : Maksymilian Kliczkowski
---------------------------------------------------
"""

from __future__ import annotations

import logging
import sys
import threading
from typing import Optional, Union

####################################################################################################

class Logger:
    """
    Logger with verbosity levels and colors.

    Parameters
    ----------
    name : str
        Name of the underlying :class:`logging.Logger`.
    verbose : int
        Verbosity threshold. A message logged with ``lvl > verbose`` is skipped.
    level : int or str
        Minimal severity forwarded to the handlers.
    logfile : str, optional
        If given, messages are also written to this file.
    use_colors : bool
        Whether ``colorize`` wraps messages in ANSI escape codes.
    """

    LEVELS      = {
        logging.DEBUG   : 'debug',
        logging.INFO    : 'info',
        logging.WARNING : 'warning',
        logging.ERROR   : 'error',
    }
    LEVELS_R    = {v: k for k, v in LEVELS.items()}

    COLORS      = {
        'white'     : '\033[97m',
        'red'       : '\033[91m',
        'green'     : '\033[92m',
        'yellow'    : '\033[93m',
        'blue'      : '\033[94m',
        'cyan'      : '\033[96m',
        'reset'     : '\033[0m',
    }
    _INDENT     = "  "

    def __init__(self,
                name        : str                   = "QHam",
                verbose     : int                   = 3,
                level       : Union[int, str]       = logging.INFO,
                logfile     : Optional[str]         = None,
                use_colors  : bool                  = False,
                stream                              = None):
        self.name           = name
        self.verbose        = verbose
        self.use_colors     = use_colors
        self._logger        = logging.getLogger(name)
        self._logger.setLevel(self._to_level(level))
        self._logger.propagate = False

        if not self._logger.handlers:
            handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
            handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s", "%H:%M:%S"))
            self._logger.addHandler(handler)
        if logfile is not None:
            fhandler = logging.FileHandler(logfile)
            fhandler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
            self._logger.addHandler(fhandler)

    # ----------------------------------------------------------------------------------------------

    @staticmethod
    def _to_level(log: Union[int, str]) -> int:
        if isinstance(log, str):
            return Logger.LEVELS_R.get(log.lower(), logging.INFO)
        return int(log)

    def set_level(self, level: Union[int, str]) -> None:
        self._logger.setLevel(self._to_level(level))

    def set_verbose(self, verbose: int) -> None:
        self.verbose = verbose

    @property
    def logger(self) -> logging.Logger:
        """The underlying standard library logger."""
        return self._logger

    # ----------------------------------------------------------------------------------------------

    def colorize(self, msg: str, color: Optional[str] = None) -> str:
        """Wrap the message in ANSI codes when colors are enabled."""
        if not self.use_colors or color is None or color not in self.COLORS:
            return msg
        return f"{self.COLORS[color]}{msg}{self.COLORS['reset']}"

    def say(self, msg: str, log: Union[int, str] = logging.INFO, lvl: int = 0, verbose: bool = True) -> None:
        """
        Emit the message with severity ``log`` at verbosity level ``lvl``.

        Handler failures are reported by :mod:`logging` itself and never
        propagate to the caller.
        """
        if not verbose or lvl > self.verbose:
            return
        self._logger.log(self._to_level(log), f"{self._INDENT * max(lvl, 0)}{msg}")

    def debug(self, msg: str, lvl: int = 0, color: Optional[str] = None) -> None:
        self.say(self.colorize(msg, color), log=logging.DEBUG, lvl=lvl)

    def info(self, msg: str, lvl: int = 0, color: Optional[str] = None) -> None:
        self.say(self.colorize(msg, color), log=logging.INFO, lvl=lvl)

    def warning(self, msg: str, lvl: int = 0, color: Optional[str] = 'yellow') -> None:
        self.say(self.colorize(msg, color), log=logging.WARNING, lvl=lvl)

    def error(self, msg: str, lvl: int = 0, color: Optional[str] = 'red') -> None:
        self.say(self.colorize(msg, color), log=logging.ERROR, lvl=lvl)

    def breakline(self, n: int = 1, lvl: int = 0) -> None:
        for _ in range(n):
            self.say("-" * 60, lvl=lvl)

    def __repr__(self) -> str:
        return f"Logger(name={self.name},verbose={self.verbose},level={logging.getLevelName(self._logger.level)})"

####################################################################################################

_GLOBAL_LOGGER  : Optional[Logger]  = None
_GLOBAL_LOCK                        = threading.Lock()

def get_global_logger(**kwargs) -> Logger:
    """
    Return the process-wide logger, creating it on first call.

    Keyword arguments are forwarded to :class:`Logger` only when the logger is
    created.
    """
    global _GLOBAL_LOGGER
    if _GLOBAL_LOGGER is None:
        with _GLOBAL_LOCK:
            if _GLOBAL_LOGGER is None:
                _GLOBAL_LOGGER = Logger(**kwargs)
    return _GLOBAL_LOGGER

# ------------------------------------------------------------------------------------------------
#! EOF
# ------------------------------------------------------------------------------------------------
