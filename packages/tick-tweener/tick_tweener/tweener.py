"""Tweener: drives one value from start to end over a fixed duration."""
from __future__ import annotations

import logging
from typing import Callable, Generic, TypeVar

from tick_tweener.config import TweenOptions
from tick_tweener.curves import CurveFn
from tick_tweener.lerp import LerpFn

logger = logging.getLogger(__name__)

T = TypeVar("T")

_DEFAULT_OPTIONS = TweenOptions()


class Tweener(Generic[T]):
    """Time-driven interpolation between two values.

    A tweener starts running as soon as it is built. Each :meth:`advance`
    moves it forward by a time step in seconds; once the full duration has
    elapsed the value is pinned to the eased end point, the tweener stops and
    completion listeners fire once, in the order they were registered.

    Tweeners are not thread-safe. Only the owner that calls :meth:`advance`
    may mutate one.

    Example::

        tweener = Tweener(0.0, 10.0, 2.0, curve=BOUNCE.ease_out)
        tweener.on_complete(lambda tw: print("done"))
        tweener.advance(dt)
        tweener.value
    """

    def __init__(
        self,
        start: T,
        end: T,
        duration: float,
        curve: CurveFn | None = None,
        interpolate: LerpFn[T] | None = None,
        *,
        options: TweenOptions | None = None,
    ) -> None:
        if not duration > 0:
            raise ValueError(f"duration must be > 0, got {duration}")
        opts = options if options is not None else _DEFAULT_OPTIONS
        self._start = start
        self._end = end
        self._duration = float(duration)
        self._elapsed = 0.0
        self._curve: CurveFn = curve if curve is not None else opts.curve
        self._interpolate: LerpFn[T] = (
            interpolate if interpolate is not None else opts.interpolate
        )
        self._listeners: list[Callable[[Tweener[T]], None]] = []
        self._value = start
        self._running = True

    @property
    def value(self) -> T:
        return self._value

    @property
    def running(self) -> bool:
        return self._running

    @property
    def start_value(self) -> T:
        return self._start

    @property
    def end_value(self) -> T:
        return self._end

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def progress(self) -> float:
        """Un-eased fraction of the duration that has elapsed."""
        return self._elapsed / self._duration

    def advance(self, dt: float) -> None:
        """Move forward by ``dt`` seconds. Does nothing while stopped."""
        if not dt >= 0:
            raise ValueError(f"dt must be >= 0, got {dt}")
        if not self._running:
            return

        self._elapsed += dt

        if self._elapsed >= self._duration:
            self._elapsed = self._duration
            self._value = self._calculate(1.0)
            self.stop()
            self._ended()
            return

        self._value = self._calculate(self._elapsed / self._duration)

    def start(self) -> None:
        """Resume advancing from the current elapsed time."""
        self._running = True

    def stop(self) -> None:
        """Pause without firing completion listeners."""
        self._running = False

    def reset(self) -> None:
        """Rewind to the start value. Running state is unchanged."""
        self._elapsed = 0.0
        self._value = self._start

    def reset_to(self, end: T) -> None:
        """Re-target: the current value becomes the new start."""
        logger.debug("Tweener re-targeted from %r to %r", self._value, end)
        self._elapsed = 0.0
        self._start = self._value
        self._end = end

    def reverse(self) -> None:
        """Swap start and end and rewind. Curve and running state are kept."""
        self._elapsed = 0.0
        self._start, self._end = self._end, self._start
        logger.debug("Tweener reversed, now %r -> %r", self._start, self._end)

    def on_complete(self, listener: Callable[[Tweener[T]], None]) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Callable[[Tweener[T]], None]) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def _calculate(self, percent: float) -> T:
        return self._interpolate(self._start, self._end, self._curve(percent))

    def _ended(self) -> None:
        logger.debug(
            "Tweener finished at %r after %.3fs (%d listeners)",
            self._value,
            self._duration,
            len(self._listeners),
        )
        for listener in list(self._listeners):
            listener(self)

    def __repr__(self) -> str:
        return (
            f"Tweener({self._start!r} -> {self._end!r} in {self._duration}s, "
            f"elapsed={self._elapsed:.2f}s, curve={_name_of(self._curve)}, "
            f"interpolate={_name_of(self._interpolate)}, running={self._running})"
        )


def _name_of(fn: Callable[..., object]) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)
