"""Exception types raised by the maze core, and the numeric checks that raise them."""

import math


class MazeConfigError(ValueError):
    """Rejected maze settings. Raised before anything is built."""


class MazeIntegrityError(RuntimeError):
    """A broken grid, graph or carving invariant."""


def require_positive_float(value, label):
    if isinstance(value, bool):
        raise MazeConfigError(f"{label} must be a number, got {value!r}")
    try:
        value = float(value)
    except (TypeError, ValueError) as exc:
        raise MazeConfigError(f"{label} must be a number, got {value!r}") from exc
    if not math.isfinite(value) or value <= 0:
        raise MazeConfigError(f"{label} must be positive, got {value}")
    return value


def require_non_negative_int(value, label):
    if isinstance(value, bool):
        raise MazeConfigError(f"{label} must be an integer, got {value!r}")
    if isinstance(value, float):
        # is_integer() is False for NaN and infinity.
        if not value.is_integer():
            raise MazeConfigError(f"{label} must be an integer, got {value}")
        value = int(value)
    try:
        value = int(value)
    except (TypeError, ValueError) as exc:
        raise MazeConfigError(f"{label} must be an integer, got {value!r}") from exc
    if value < 0:
        raise MazeConfigError(f"{label} cannot be negative")
    return value


__all__ = [
    "MazeConfigError",
    "MazeIntegrityError",
    "require_positive_float",
    "require_non_negative_int",
]
