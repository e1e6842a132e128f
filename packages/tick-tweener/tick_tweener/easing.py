"""Named ease curve catalog.

Each family is written as its simplest orientation and the rest of the set
is derived by :class:`~tick_tweener.curves.EaseSet`.
"""
from __future__ import annotations

import math

from tick_tweener.curves import CurveFn, EaseSet

BACK_OVERSHOOT = 1.70158
BOUNCE_SCALE = 7.5625
BOUNCE_DIVISOR = 2.75


def linear(t: float) -> float:
    return t


def quad_in(t: float) -> float:
    return t ** 2


def cubic_in(t: float) -> float:
    return t ** 3


def quart_in(t: float) -> float:
    return t ** 4


def quint_in(t: float) -> float:
    return t ** 5


def sine_out(t: float) -> float:
    return math.sin(t * (math.pi / 2))


def expo_out(t: float) -> float:
    return 2 ** (10 * (t - 1))


def circ_out(t: float) -> float:
    return math.sqrt(1 - (t - 1) ** 2)


def back_in(t: float) -> float:
    s = BACK_OVERSHOOT
    return t ** 2 * ((s + 1) * t - s)


def elastic_out(t: float) -> float:
    return 1 + 2 ** (-10 * t) * math.sin((t - 0.075) * (2 * math.pi) / 0.3)


def bounce_out(t: float) -> float:
    s = BOUNCE_SCALE
    p = BOUNCE_DIVISOR

    if t < 1 / p:
        return s * t ** 2

    if t < 2 / p:
        t -= 1.5 / p
        return s * t ** 2 + 0.75

    if t < 2.5 / p:
        t -= 2.25 / p
        return s * t ** 2 + 0.9375

    t -= 2.625 / p
    return s * t ** 2 + 0.984375


LINEAR = EaseSet.create(linear, linear, linear)
QUAD = EaseSet.from_in(quad_in)
CUBIC = EaseSet.from_in(cubic_in)
QUART = EaseSet.from_in(quart_in)
QUINT = EaseSet.from_in(quint_in)
SINE = EaseSet.from_out(sine_out)
EXPO = EaseSet.from_out(expo_out)
CIRC = EaseSet.from_out(circ_out)
BACK = EaseSet.from_in(back_in)
ELASTIC = EaseSet.from_out(elastic_out)
BOUNCE = EaseSet.from_out(bounce_out)

EASINGS: dict[str, EaseSet] = {
    "linear": LINEAR,
    "quad": QUAD,
    "cubic": CUBIC,
    "quart": QUART,
    "quint": QUINT,
    "sine": SINE,
    "expo": EXPO,
    "circ": CIRC,
    "back": BACK,
    "elastic": ELASTIC,
    "bounce": BOUNCE,
}


def resolve(name: str) -> CurveFn:
    """Return the curve named ``linear`` or ``<family>_<in|out|in_out>``.

    Raises KeyError for unknown families or orientations.
    """
    if name == "linear":
        return linear
    family, sep, kind = name.partition("_")
    ease_set = EASINGS.get(family)
    if not sep or ease_set is None:
        raise KeyError(f"unknown easing {name!r}")
    return ease_set.curve(kind)
