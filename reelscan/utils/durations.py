"""
Parsing des durees d'intervalle des taches planifiees.

Format accepte : une suite de <nombre><unite>, sans espace, ou le nombre
peut etre decimal. Unites : ns, us (ou µs), ms, s, m, h et d (jours).

Exemples : "24h", "1h30m", "1.5h", "90s", "5d".
"""

import re
from datetime import timedelta

from reelscan.core.errors import InvalidIntervalError

# Ordre important : "ms" doit etre essaye avant "m" et "s"
_UNIT_PATTERN = r"(?:ns|us|µs|μs|ms|s|m|h|d)"
_NUMBER_PATTERN = r"(?:\d+(?:\.\d*)?|\.\d+)"

_TOKEN_RE = re.compile(rf"({_NUMBER_PATTERN})({_UNIT_PATTERN})")
_DURATION_RE = re.compile(rf"(?:{_NUMBER_PATTERN}{_UNIT_PATTERN})+")

_UNIT_SECONDS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
    "d": 86400.0,
}


def parse_interval(value: str) -> timedelta:
    """
    Convertit une chaine de duree en timedelta.

    Args:
        value: Chaine de duree (ex: "24h", "1h30m")

    Returns:
        Duree strictement positive

    Raises:
        InvalidIntervalError: Chaine vide, malformee, nulle ou negative
    """
    if value is None:
        raise InvalidIntervalError("", "empty duration")

    text = value.strip()
    if not text:
        raise InvalidIntervalError(value, "empty duration")

    if text[0] == "-":
        raise InvalidIntervalError(value, "negative duration")
    if text[0] == "+":
        text = text[1:]

    if not _DURATION_RE.fullmatch(text):
        raise InvalidIntervalError(value)

    seconds = 0.0
    for number, unit in _TOKEN_RE.findall(text):
        seconds += float(number) * _UNIT_SECONDS[unit]

    if seconds <= 0:
        raise InvalidIntervalError(value, "duration must be positive")

    return timedelta(seconds=seconds)


def is_valid_interval(value: str) -> bool:
    """Indique si la chaine est une duree d'intervalle acceptable."""
    try:
        parse_interval(value)
    except InvalidIntervalError:
        return False
    return True
