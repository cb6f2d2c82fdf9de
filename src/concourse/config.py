"""Configuration for CONCOURSE.

All settings have defaults; environment variables override them when the
application is started from the command line:

- ``CONCOURSE_DEFAULT_BAGGAGE_KG``: allowance recorded with each seat selection.
- ``CONCOURSE_FEE_PER_KG``: baggage price per kilogram.
- ``CONCOURSE_SEAT_MAP``: comma/space separated seat ids.
- ``CONCOURSE_FLIGHTS``: comma/space separated flight ids.
- ``CONCOURSE_ID_GENERATOR``: ``ulid`` (default) or ``sequential``.
"""

from __future__ import annotations

import math
import os
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal

from concourse.baggage.service import DEFAULT_FEE_PER_KG
from concourse.flightlist.manager import DEFAULT_FLIGHTS
from concourse.seat.manager import DEFAULT_BAGGAGE_KG, DEFAULT_SEAT_MAP

IdGeneratorKind = Literal["ulid", "sequential"]

ENV_PREFIX = "CONCOURSE_"  # pragma: no mutate
ID_GENERATOR_KINDS: tuple[IdGeneratorKind, ...] = ("ulid", "sequential")


class InvalidSettingError(ValueError):
    """Raised when an environment variable holds a value that cannot be used.

    Attributes:
        name (str): The environment variable.
        value (str): Its raw value.
    """

    def __init__(self, name: str, value: str, expected: str) -> None:
        super().__init__(f"{name}={value!r} is invalid: expected {expected}.")
        self.name = name
        self.value = value


@dataclass(frozen=True, slots=True)
class Settings:
    """Application settings consumed by the composition root."""

    default_baggage_kg: float = DEFAULT_BAGGAGE_KG
    fee_per_kg: float = DEFAULT_FEE_PER_KG
    seat_map: tuple[str, ...] = DEFAULT_SEAT_MAP
    flights: tuple[str, ...] = DEFAULT_FLIGHTS
    id_generator: IdGeneratorKind = "ulid"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``CONCOURSE_*`` environment variables.

        Args:
            environ: Mapping to read instead of `os.environ` (used by tests).

        Raises:
            InvalidSettingError: If a variable is set to an unusable value.
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            default_baggage_kg=_get_weight(env, "DEFAULT_BAGGAGE_KG", defaults.default_baggage_kg),
            fee_per_kg=_get_weight(env, "FEE_PER_KG", defaults.fee_per_kg),
            seat_map=_get_list(env, "SEAT_MAP", defaults.seat_map),
            flights=_get_list(env, "FLIGHTS", defaults.flights),
            id_generator=_get_id_generator(env, defaults.id_generator),
        )


def _get_weight(env: Mapping[str, str], key: str, default: float) -> float:
    name = ENV_PREFIX + key
    if not (raw := env.get(name)):
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise InvalidSettingError(name, raw, "a number") from e
    if not math.isfinite(value) or value < 0:
        raise InvalidSettingError(name, raw, "a finite, non-negative number")
    return value


def _get_list(env: Mapping[str, str], key: str, default: tuple[str, ...]) -> tuple[str, ...]:
    name = ENV_PREFIX + key
    if not (raw := env.get(name)):
        return default
    if not (items := tuple(s for s in re.split(r"[,\s]+", raw) if s)):
        raise InvalidSettingError(name, raw, "at least one id")
    return items


def _get_id_generator(env: Mapping[str, str], default: IdGeneratorKind) -> IdGeneratorKind:
    name = ENV_PREFIX + "ID_GENERATOR"
    if not (raw := env.get(name)):
        return default
    kind = raw.strip().lower()
    if kind not in ID_GENERATOR_KINDS:
        raise InvalidSettingError(name, raw, " or ".join(ID_GENERATOR_KINDS))
    return kind  # type: ignore[return-value]
