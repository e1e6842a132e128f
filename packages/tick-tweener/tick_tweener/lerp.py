"""Interpolation functions used by Tweener."""
from __future__ import annotations

from typing import Callable, Protocol, TypeVar

T = TypeVar("T")
A = TypeVar("A", bound="Arithmetic")

Vec = tuple[float, ...]
LerpFn = Callable[[T, T, float], T]


class Arithmetic(Protocol):
    """Value types that can be added, subtracted and scaled by a float.

    float, int, numpy arrays and most vector or colour classes qualify.
    Anything else needs an explicit interpolation function.
    """

    def __add__(self: A, other: A, /) -> A: ...
    def __sub__(self: A, other: A, /) -> A: ...
    def __mul__(self: A, scalar: float, /) -> A: ...


def lerp(start: A, end: A, t: float) -> A:
    """start + (end - start) * t."""
    return start + (end - start) * t


def lerp_vec(start: Vec, end: Vec, t: float) -> Vec:
    """Component-wise lerp for plain tuple vectors."""
    if len(start) != len(end):
        raise ValueError(
            f"vector dimensions differ: {len(start)} != {len(end)}"
        )
    return tuple(s + (e - s) * t for s, e in zip(start, end))
