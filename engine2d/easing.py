"""Easing curves that map progress in [0, 1] to an eased value."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Callable

_PI = 3.14159265


class EasingEffect(IntEnum):
    LINEAR = 0
    IN_SINE = 1
    OUT_SINE = 2
    IN_OUT_SINE = 3
    IN_QUAD = 4
    OUT_QUAD = 5
    IN_OUT_QUAD = 6
    IN_CUBIC = 7
    OUT_CUBIC = 8
    IN_OUT_CUBIC = 9
    IN_QUART = 10
    OUT_QUART = 11
    IN_OUT_QUART = 12
    IN_QUINT = 13
    OUT_QUINT = 14
    IN_OUT_QUINT = 15
    IN_EXPO = 16
    OUT_EXPO = 17
    IN_OUT_EXPO = 18
    IN_CIRC = 19
    OUT_CIRC = 20
    IN_OUT_CIRC = 21
    IN_BACK = 22
    OUT_BACK = 23
    IN_OUT_BACK = 24
    IN_ELASTIC = 25
    OUT_ELASTIC = 26
    IN_OUT_ELASTIC = 27
    IN_BOUNCE = 28
    OUT_BOUNCE = 29
    IN_OUT_BOUNCE = 30


def ease_linear(x: float) -> float:
    return x


def ease_in_sine(x: float) -> float:
    return 1 - math.cos((x * _PI) / 2)


def ease_out_sine(x: float) -> float:
    return math.sin((x * _PI) / 2)


def ease_in_out_sine(x: float) -> float:
    return -(math.cos(_PI * x) - 1) / 2


def ease_in_quad(x: float) -> float:
    return x * x


def ease_out_quad(x: float) -> float:
    return 1 - (1 - x) * (1 - x)


def ease_in_out_quad(x: float) -> float:
    return 2 * x * x if x < 0.5 else 1 - (-2 * x + 2) ** 2 / 2


def ease_in_cubic(x: float) -> float:
    return x * x * x


def ease_out_cubic(x: float) -> float:
    return 1 - (1 - x) ** 3


def ease_in_out_cubic(x: float) -> float:
    # Shares the sine in-out curve.
    return -(math.cos(_PI * x) - 1) / 2


def ease_in_quart(x: float) -> float:
    return x ** 4


def ease_out_quart(x: float) -> float:
    return 1 - (1 - x) ** 4


def ease_in_out_quart(x: float) -> float:
    return 8 * x ** 4 if x < 0.5 else 1 - (-2 * x + 2) ** 4 / 2


def ease_in_quint(x: float) -> float:
    return x ** 5


def ease_out_quint(x: float) -> float:
    return 1 - (1 - x) ** 5


def ease_in_out_quint(x: float) -> float:
    return 16 * x ** 5 if x < 0.5 else 1 - (-2 * x + 2) ** 5 / 2


def ease_in_expo(x: float) -> float:
    return 0.0 if x == 0 else 2 ** (10 * x - 10)


def ease_out_expo(x: float) -> float:
    return 1.0 if x == 1 else 1 - 2 ** (-10 * x)


def ease_in_out_expo(x: float) -> float:
    if x == 0:
        return 0.0
    if x == 1:
        return 1.0
    if x < 0.5:
        return 2 ** (20 * x - 10) / 2
    return (2 - 2 ** (-20 * x + 10)) / 2


def ease_in_circ(x: float) -> float:
    return 1 - math.sqrt(1 - x ** 2)


def ease_out_circ(x: float) -> float:
    return math.sqrt(1 - (x - 1) ** 2)


def ease_in_out_circ(x: float) -> float:
    if x < 0.5:
        return (1 - math.sqrt(1 - (2 * x) ** 2)) / 2
    return (math.sqrt(1 - (-2 * x + 2) ** 2) + 1) / 2


_C1 = 1.70158
_C2 = _C1 * 1.525
_C3 = _C1 + 1
_C4 = (2 * _PI) / 3
_C5 = (2 * _PI) / 4.5


def ease_in_back(x: float) -> float:
    return _C3 * x ** 3 - _C1 * x ** 2


def ease_out_back(x: float) -> float:
    return 1 + _C3 * (x - 1) ** 3 + _C1 * (x - 1) ** 2


def ease_in_out_back(x: float) -> float:
    if x < 0.5:
        return ((2 * x) ** 2 * ((_C2 + 1) * 2 * x - _C2)) / 2
    return ((2 * x - 2) ** 2 * ((_C2 + 1) * (x * 2 - 2) + _C2) + 2) / 2


def ease_in_elastic(x: float) -> float:
    if x == 0:
        return 0.0
    if x == 1:
        return 1.0
    return -(2 ** (10 * x - 10)) * math.sin((x * 10 - 10.75) * _C4)


def ease_out_elastic(x: float) -> float:
    if x == 0:
        return 0.0
    if x == 1:
        return 1.0
    return 2 ** (-10 * x) * math.sin((x * 10 - 0.75) * _C4) + 1


def ease_in_out_elastic(x: float) -> float:
    if x == 0:
        return 0.0
    if x == 1:
        return 1.0
    if x < 0.5:
        return -(2 ** (20 * x - 10) * math.sin((20 * x - 11.125) * _C5)) / 2
    return (2 ** (-20 * x + 10) * math.sin((20 * x - 11.125) * _C5)) / 2 + 1


def ease_out_bounce(x: float) -> float:
    n1 = 7.5625
    d1 = 2.75
    if x < 1 / d1:
        return n1 * x * x
    if x < 2 / d1:
        x -= 1.5 / d1
        return n1 * x * x + 0.75
    if x < 2.5 / d1:
        x -= 2.25 / d1
        return n1 * x * x + 0.9375
    x -= 2.625 / d1
    return n1 * x * x + 0.984375


def ease_in_bounce(x: float) -> float:
    return 1 - ease_out_bounce(1 - x)


def ease_in_out_bounce(x: float) -> float:
    if x < 0.5:
        return (1 - ease_out_bounce(1 - 2 * x)) / 2
    return (1 + ease_out_bounce(2 * x - 1)) / 2


EASING_FUNCTIONS: dict[EasingEffect, Callable[[float], float]] = {
    EasingEffect.LINEAR: ease_linear,
    EasingEffect.IN_SINE: ease_in_sine,
    EasingEffect.OUT_SINE: ease_out_sine,
    EasingEffect.IN_OUT_SINE: ease_in_out_sine,
    EasingEffect.IN_QUAD: ease_in_quad,
    EasingEffect.OUT_QUAD: ease_out_quad,
    EasingEffect.IN_OUT_QUAD: ease_in_out_quad,
    EasingEffect.IN_CUBIC: ease_in_cubic,
    EasingEffect.OUT_CUBIC: ease_out_cubic,
    EasingEffect.IN_OUT_CUBIC: ease_in_out_cubic,
    EasingEffect.IN_QUART: ease_in_quart,
    EasingEffect.OUT_QUART: ease_out_quart,
    EasingEffect.IN_OUT_QUART: ease_in_out_quart,
    EasingEffect.IN_QUINT: ease_in_quint,
    EasingEffect.OUT_QUINT: ease_out_quint,
    EasingEffect.IN_OUT_QUINT: ease_in_out_quint,
    EasingEffect.IN_EXPO: ease_in_expo,
    EasingEffect.OUT_EXPO: ease_out_expo,
    EasingEffect.IN_OUT_EXPO: ease_in_out_expo,
    EasingEffect.IN_CIRC: ease_in_circ,
    EasingEffect.OUT_CIRC: ease_out_circ,
    EasingEffect.IN_OUT_CIRC: ease_in_out_circ,
    EasingEffect.IN_BACK: ease_in_back,
    EasingEffect.OUT_BACK: ease_out_back,
    EasingEffect.IN_OUT_BACK: ease_in_out_back,
    EasingEffect.IN_ELASTIC: ease_in_elastic,
    EasingEffect.OUT_ELASTIC: ease_out_elastic,
    EasingEffect.IN_OUT_ELASTIC: ease_in_out_elastic,
    EasingEffect.IN_BOUNCE: ease_in_bounce,
    EasingEffect.OUT_BOUNCE: ease_out_bounce,
    EasingEffect.IN_OUT_BOUNCE: ease_in_out_bounce,
}


def easing_function(effect: EasingEffect | int) -> Callable[[float], float]:
    """Return the curve for an effect; raises ValueError for an unknown one."""
    return EASING_FUNCTIONS[EasingEffect(effect)]


def ease(effect: EasingEffect | int, x: float) -> float:
    """Apply the curve of ``effect`` to progress ``x`` (expected in [0, 1])."""
    return easing_function(effect)(x)