"""
Spring motion presets for Kivy animations.

A spring is described by a damping ratio and a stiffness, the same two knobs
Material motion exposes. Kivy's ``Animation`` only knows durations and
transition curves, so each spring is turned into:

- a duration: the time the spring needs to settle within the visibility
  threshold of its target
- a transition: the analytic step response of a unit-mass spring, sampled
  at ``progress * duration``

Kivy's clock still drives every frame.
"""

import math
from dataclasses import dataclass
from typing import Callable

from kivy.animation import Animation

VISIBILITY_THRESHOLD = 0.001


class DampingRatio:
    """Named damping ratios"""

    HIGH_BOUNCY = 0.2
    MEDIUM_BOUNCY = 0.5
    LOW_BOUNCY = 0.75
    NO_BOUNCY = 1.0


class Stiffness:
    """Named stiffness values"""

    HIGH = 10_000.0
    MEDIUM = 1_500.0
    MEDIUM_LOW = 400.0
    LOW = 200.0
    VERY_LOW = 50.0


@dataclass(frozen=True)
class SpringSpec:
    damping_ratio: float = DampingRatio.NO_BOUNCY
    stiffness: float = Stiffness.MEDIUM

    def __post_init__(self):
        if self.damping_ratio <= 0:
            raise ValueError(f'damping_ratio must be positive: {self.damping_ratio}')
        if self.stiffness <= 0:
            raise ValueError(f'stiffness must be positive: {self.stiffness}')

    @property
    def natural_frequency(self) -> float:
        return math.sqrt(self.stiffness)

    def position(self, t: float) -> float:
        """
        Step response at time ``t`` (seconds): 0 at rest, 1 at the target.

        Under-damped springs overshoot 1 before settling.
        """
        if t <= 0:
            return 0.0

        w0 = self.natural_frequency
        zeta = self.damping_ratio

        if zeta < 1:
            wd = w0 * math.sqrt(1 - zeta * zeta)
            envelope = math.exp(-zeta * w0 * t)
            return 1 - envelope * (
                math.cos(wd * t) + (zeta * w0 / wd) * math.sin(wd * t)
            )

        if zeta == 1:
            return 1 - (1 + w0 * t) * math.exp(-w0 * t)

        root = math.sqrt(zeta * zeta - 1)
        r1 = -w0 * (zeta - root)
        r2 = -w0 * (zeta + root)
        return 1 - (r2 * math.exp(r1 * t) - r1 * math.exp(r2 * t)) / (r2 - r1)

    @property
    def duration(self) -> float:
        """Seconds until the motion stays within the visibility threshold."""
        w0 = self.natural_frequency
        zeta = self.damping_ratio
        eps = VISIBILITY_THRESHOLD

        if zeta < 1:
            amplitude = 1 / math.sqrt(1 - zeta * zeta)
            return math.log(amplitude / eps) / (zeta * w0)

        if zeta == 1:
            # Solve (1 + u) * exp(-u) = eps for u = w0 * t
            low, high = 0.0, 100.0
            for _ in range(60):
                mid = (low + high) / 2
                if (1 + mid) * math.exp(-mid) > eps:
                    low = mid
                else:
                    high = mid
            return high / w0

        root = math.sqrt(zeta * zeta - 1)
        r1 = -w0 * (zeta - root)
        r2 = -w0 * (zeta + root)
        amplitude = abs(r2 / (r2 - r1))
        return math.log(amplitude / eps) / abs(r1)

    def transition(self, clamp: bool = False) -> Callable[[float], float]:
        """
        Kivy transition function for this spring.

        Args:
            clamp: Keep values within [0, 1], for properties such as opacity
                that must not overshoot.
        """
        duration = self.duration

        def spring_transition(progress):
            if progress >= 1:
                return 1.0
            value = self.position(progress * duration)
            if clamp:
                return min(1.0, max(0.0, value))
            return value

        return spring_transition

    def animation(self, clamp: bool = False, **props) -> Animation:
        """Build an ``Animation`` of ``props`` driven by this spring."""
        return Animation(duration=self.duration, t=self.transition(clamp), **props)


# Card height follows its content without bouncing.
CONTENT_SIZE = SpringSpec(DampingRatio.NO_BOUNCY, Stiffness.MEDIUM)

# Whole-list fade when the list first appears.
LIST_FADE_IN = SpringSpec(DampingRatio.LOW_BOUNCY)

# Per-card slide from below, slower than the fade.
CARD_SLIDE_IN = SpringSpec(DampingRatio.LOW_BOUNCY, Stiffness.VERY_LOW)
