"""Configuration helpers for textual vector rendering."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Dict, Optional

LOGGER = logging.getLogger(__name__)

DEFAULT_PRECISION = 6


# //1.- Coerce precision values and reject the ones string formatting cannot honour.
def coerce_precision(value: object) -> int:
    try:
        precision = int(str(value).strip())
    except ValueError as exc:
        raise ValueError(f"Vector precision must be an integer, got {value!r}") from exc
    if precision < 0:
        raise ValueError(f"Vector precision must be non-negative, got {precision}")
    return precision


# //2.- Define dataclass to encapsulate how vector components are rendered.
@dataclass(frozen=True)
class RenderSettings:
    """Settings controlling ``Vector.to_string`` output."""

    precision: int = DEFAULT_PRECISION

    # //3.- Build settings from a mapping, keeping defaults for absent keys.
    @classmethod
    def from_mapping(cls, payload: Optional[Dict[str, object]] = None) -> "RenderSettings":
        if not payload:
            return cls()
        return cls(precision=coerce_precision(payload.get("precision", DEFAULT_PRECISION)))

    # //4.- Allow overriding settings through environment variables, ignoring malformed values.
    @classmethod
    def from_environment(cls, prefix: str = "TANKGAME") -> "RenderSettings":
        name = f"{prefix}_VECTOR_PRECISION"
        precision = os.getenv(name)
        if precision is None:
            return cls()
        try:
            settings = cls(precision=coerce_precision(precision))
        except ValueError as exc:
            LOGGER.warning("Ignoring %s: %s; using %d digits", name, exc, DEFAULT_PRECISION)
            return cls()
        LOGGER.debug("Vector precision overridden from environment: %s", settings.precision)
        return settings


# //5.- Provide canonical configuration accessor used by the vector module.
def load_render_settings(
    mapping: Optional[Dict[str, object]] = None,
    *,
    env_prefix: str = "TANKGAME",
) -> RenderSettings:
    if mapping is not None:
        return RenderSettings.from_mapping(mapping)
    return RenderSettings.from_environment(prefix=env_prefix)
