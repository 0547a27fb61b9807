"""Hex color parsing and brighten/darken transforms.

Channels are blended as floats and truncated toward zero before being
clamped to ``[0, 255]``, so ``brighten("#000000", 50)`` gives ``#808080`` and
``darken("#ffffff", 50)`` gives ``#7f7f7f``.
"""
from __future__ import annotations

import logging
import math
import re
from numbers import Real
from typing import Sequence, Tuple, Union

import numpy as np

from .errors import InvalidColorFormat

logger = logging.getLogger(__name__)

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")

# Brightening blends toward 256 rather than 255; the clamp below pins the top.
_BRIGHTEN_CEILING = 256.0

RGB = Tuple[int, int, int]


def normalize_hex(value: str) -> str:
    """Return ``value`` as six lowercase hex digits without the leading ``#``."""

    if not isinstance(value, str):
        raise InvalidColorFormat(value)
    digits = value.strip()
    if digits.startswith("#"):
        digits = digits[1:]
    if not _HEX_DIGITS.fullmatch(digits):
        raise InvalidColorFormat(value)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6:
        raise InvalidColorFormat(value)
    return digits.lower()


def parse_hex(value: str) -> RGB:
    digits = normalize_hex(value)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def format_hex(rgb: Union[Sequence[float], np.ndarray]) -> str:
    """Format three channels as ``#rrggbb``; channels are clamped to a byte."""

    raw = np.asarray(rgb, dtype=np.float64)
    if raw.shape != (3,):
        raise ValueError(f"Expected three channels, got {raw.shape}")
    if not np.isfinite(raw).all():
        raise ValueError(f"Channels must be finite, got {raw.tolist()}")
    channels = np.clip(np.trunc(raw), 0, 255).astype(int)
    return "#" + "".join(f"{int(channel):02x}" for channel in channels)


def _check_percent(percent: float) -> float:
    if isinstance(percent, bool) or not isinstance(percent, Real):
        raise TypeError(f"percent must be a real number, got {percent!r}")
    amount = float(percent)
    if not math.isfinite(amount):
        raise ValueError(f"percent must be finite, got {percent!r}")
    return amount


def brighten(value: str, percent: float) -> str:
    """Blend ``value`` toward white by ``percent``."""

    amount = _check_percent(percent)
    channels = np.array(parse_hex(value), dtype=np.float64)
    blended = channels + (_BRIGHTEN_CEILING - channels) * amount / 100
    result = format_hex(blended)
    logger.debug("brighten %s by %s%% -> %s", value, amount, result)
    return result


def darken(value: str, percent: float) -> str:
    """Scale ``value`` toward black by ``percent``."""

    amount = _check_percent(percent)
    channels = np.array(parse_hex(value), dtype=np.float64)
    scaled = channels * (100 - amount) / 100
    result = format_hex(scaled)
    logger.debug("darken %s by %s%% -> %s", value, amount, result)
    return result


__all__ = ["RGB", "normalize_hex", "parse_hex", "format_hex", "brighten", "darken"]
