"""Ease curve sets and the transforms that derive missing curves.

A curve maps normalized progress in [0, 1] to scaled progress. Results may
leave [0, 1] for overshooting curves; inputs are never clamped here.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

CurveFn = Callable[[float], float]


def reverse(percent: float, curve: CurveFn) -> float:
    """Mirror a curve: turns an out curve into an in curve and vice versa."""
    return 1 - curve(1 - percent)


def in_out(percent: float, out: CurveFn) -> float:
    """Join a mirrored ``out`` (first half) to a scaled ``out`` (second half)."""
    if percent < 0.5:
        return reverse(percent * 2, out) / 2
    return out(percent * 2 - 1) / 2 + 0.5


@dataclass(frozen=True)
class EaseSet:
    """In, out and in-out orientations of one curve family.

    Build with :meth:`from_in`, :meth:`from_out` or :meth:`create`; the
    members that are not supplied are derived from the ones that are.
    """

    ease_in: CurveFn
    ease_out: CurveFn
    ease_in_out: CurveFn

    def __post_init__(self) -> None:
        if self.ease_in is None and self.ease_out is None:
            raise ValueError("EaseSet requires ease_in or ease_out")
        for name in ("ease_in", "ease_out", "ease_in_out"):
            if not callable(getattr(self, name)):
                raise TypeError(
                    f"EaseSet.{name} must be callable; "
                    "use from_in, from_out or create to derive missing curves"
                )

    @classmethod
    def create(
        cls,
        ease_in: CurveFn | None,
        ease_out: CurveFn | None,
        ease_in_out: CurveFn | None = None,
    ) -> EaseSet:
        if ease_in is None and ease_out is None:
            raise ValueError("EaseSet requires ease_in or ease_out")

        if ease_out is None:
            ease_out = _mirrored(ease_in)
        if ease_in is None:
            ease_in = _mirrored(ease_out)
        if ease_in_out is None:
            ease_in_out = _joined(ease_out)

        return cls(ease_in=ease_in, ease_out=ease_out, ease_in_out=ease_in_out)

    @classmethod
    def from_in(cls, ease_in: CurveFn, ease_in_out: CurveFn | None = None) -> EaseSet:
        return cls.create(ease_in, None, ease_in_out)

    @classmethod
    def from_out(cls, ease_out: CurveFn, ease_in_out: CurveFn | None = None) -> EaseSet:
        return cls.create(None, ease_out, ease_in_out)

    def curve(self, kind: str) -> CurveFn:
        """Look up a member by orientation name: ``in``, ``out`` or ``in_out``."""
        members = {
            "in": self.ease_in,
            "out": self.ease_out,
            "in_out": self.ease_in_out,
        }
        try:
            return members[kind]
        except KeyError:
            raise KeyError(f"unknown ease orientation {kind!r}") from None


def _mirrored(curve: CurveFn) -> CurveFn:
    def mirrored(percent: float) -> float:
        return reverse(percent, curve)

    return mirrored


def _joined(out: CurveFn) -> CurveFn:
    def joined(percent: float) -> float:
        return in_out(percent, out)

    return joined
