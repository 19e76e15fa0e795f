"""Raw transition curve functions."""

from tweenr.core.transitions.functions.basic import linear
from tweenr.core.transitions.functions.dynamics import back, bounce, elastic
from tweenr.core.transitions.functions.power import cubic, expo, pow_curve, quad, quart, quint
from tweenr.core.transitions.functions.trig import circ, sine

__all__ = [
    "back",
    "bounce",
    "circ",
    "cubic",
    "elastic",
    "expo",
    "linear",
    "pow_curve",
    "quad",
    "quart",
    "quint",
    "sine",
]
