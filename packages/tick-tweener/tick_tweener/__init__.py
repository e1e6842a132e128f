"""tick-tweener - Eased value interpolation over time."""
from __future__ import annotations

from tick_tweener.config import TweenOptions
from tick_tweener.curves import CurveFn, EaseSet, in_out, reverse
from tick_tweener.easing import (
    BACK,
    BOUNCE,
    CIRC,
    CUBIC,
    EASINGS,
    ELASTIC,
    EXPO,
    LINEAR,
    QUAD,
    QUART,
    QUINT,
    SINE,
    linear,
    resolve,
)
from tick_tweener.lerp import Arithmetic, LerpFn, lerp, lerp_vec
from tick_tweener.tweener import Tweener

__all__ = [
    "Tweener",
    "TweenOptions",
    "EaseSet",
    "CurveFn",
    "LerpFn",
    "Arithmetic",
    "reverse",
    "in_out",
    "lerp",
    "lerp_vec",
    "linear",
    "resolve",
    "EASINGS",
    "LINEAR",
    "QUAD",
    "CUBIC",
    "QUART",
    "QUINT",
    "SINE",
    "EXPO",
    "CIRC",
    "BACK",
    "ELASTIC",
    "BOUNCE",
]
