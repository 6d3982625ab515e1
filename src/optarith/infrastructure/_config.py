"""
Environment-driven configuration for the arithmetic layer.

Toggles are read from the environment at call time, so they can be flipped
by a test harness or a consumer process without re-importing the package.

Variables
---------
OPTARITH_STRICT_KINDS
    Enables strict element-kind validation before any arithmetic runs.
    Accepts "1"/"true"/"yes"/"on" (enable) and "0"/"false"/"no"/"off"/""
    (disable), case-insensitively. Default OFF.
"""

import os
import warnings

STRICT_KINDS_ENV = "OPTARITH_STRICT_KINDS"

_ENABLED_VALUES = ("1", "true", "yes", "on")
_DISABLED_VALUES = ("0", "false", "no", "off", "")


def strict_kinds_enabled() -> bool:
    """
    Return whether strict element-kind validation is enabled.

    Unrecognised values emit a ``RuntimeWarning`` and are treated as OFF.

    Returns
    -------
    bool
        True if ``OPTARITH_STRICT_KINDS`` holds an enabling value.
    """
    raw = os.environ.get(STRICT_KINDS_ENV, "0").strip().lower()
    if raw in _ENABLED_VALUES:
        return True
    if raw not in _DISABLED_VALUES:
        warnings.warn(
            f"Ignoring unrecognised value {raw!r} for {STRICT_KINDS_ENV}; "
            "strict element-kind validation stays disabled.",
            RuntimeWarning,
            stacklevel=2,
        )
    return False
