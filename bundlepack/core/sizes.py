"""Human-readable byte sizes using IEC (base-2) units."""

from __future__ import annotations

_IEC_UNITS: tuple[str, ...] = ("B", "KiB", "MiB", "GiB", "TiB", "PiB")


def format_size(size: int | float | None) -> str:
    """Format the magnitude of ``size`` bytes, e.g. ``1536 -> "1.5 KiB"``.

    The sign is dropped; callers that render deltas prefix their own sign.
    ``None`` renders as ``"0 B"``.
    """
    if size is None:
        return "0 B"

    value = float(abs(size))
    exponent = 0
    while value >= 1024 and exponent < len(_IEC_UNITS) - 1:
        value /= 1024
        exponent += 1

    if exponent == 0:
        return f"{int(value)} B"

    if round(value, 2) >= 1024 and exponent < len(_IEC_UNITS) - 1:
        value /= 1024
        exponent += 1

    rendered = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{rendered} {_IEC_UNITS[exponent]}"
