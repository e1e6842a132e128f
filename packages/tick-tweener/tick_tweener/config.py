"""Optional construction overrides for Tweener."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tick_tweener.curves import CurveFn
from tick_tweener.easing import linear
from tick_tweener.lerp import LerpFn, lerp


@dataclass(frozen=True)
class TweenOptions:
    """Immutable set of overrides shared by any number of tweens.

    Attributes:
        curve: Maps raw progress to eased progress. Defaults to linear.
        interpolate: Builds a value from (start, end, eased progress).
            Defaults to ``start + (end - start) * t``.
    """

    curve: CurveFn = linear
    interpolate: LerpFn[Any] = lerp
