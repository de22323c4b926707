"""lace - small helpers for dicts and result values.

Two independent toolkits:

- ``lace.maps``: move keys around and insert conditionally without mutating.
- ``lace.result``: normalize loosely shaped outcomes (``"ok"``,
  ``("error", reason, details)``, exception objects, plain values) into
  ``Ok``/``Err`` and compose fallible steps with ``collect``, ``collapse``
  and ``chain``.

Quick Start:
    >>> from lace import chain, collapse, from_, move, put_if
    >>> collapse([from_(("ok", 1)), from_(2), from_("ok")])
    Ok([1, 2, None])
    >>> chain(from_(ValueError("bad id")), lambda v: from_(("ok", v)))
    Err(ValueError('bad id'))
    >>> put_if(move({"id": 7}, "id", "user_id"), "name", None)
    {'user_id': 7}
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import LaceSettings, LoggingSettings, clear_settings_cache, get_settings
from .errors import LaceError, UnsupportedShapeError
from .log import configure_logging, get_logger
from .maps import move, move_new, put_if
from .result import (
    MAX_PAYLOAD,
    Err,
    Ok,
    Result,
    Tag,
    chain,
    collapse,
    collect,
    error,
    from_,
    is_errorish,
    is_okish,
    is_valish,
    ok,
    traverse,
)

__all__ = [
    "__version__",
    # Result values
    "Result", "Ok", "Err", "Tag", "ok", "error", "MAX_PAYLOAD",
    # Normalization
    "from_", "is_okish", "is_errorish", "is_valish",
    # Combinators
    "collect", "collapse", "chain", "traverse",
    # Maps
    "move", "move_new", "put_if",
    # Errors
    "LaceError", "UnsupportedShapeError",
    # Configuration & logging
    "LaceSettings", "LoggingSettings", "get_settings", "clear_settings_cache",
    "configure_logging", "get_logger",
]
