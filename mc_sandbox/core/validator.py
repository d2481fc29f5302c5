"""Configuration validation utilities."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from ..models.simulation import SimulationConfig


class ConfigurationError(ValueError):
    """Raised when a simulation configuration is rejected."""


def _describe(exc: PydanticValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ())) or "config"
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)


def validate_config(value: Union[SimulationConfig, Mapping[str, Any]]) -> SimulationConfig:
    """Return a validated configuration or raise ``ConfigurationError``.

    Already-built configs are re-validated so values produced with
    ``model_construct`` or similar cannot slip through.
    """
    if isinstance(value, SimulationConfig):
        payload: Mapping[str, Any] = value.model_dump()
    elif isinstance(value, Mapping):
        payload = value
    else:
        raise ConfigurationError(
            f"Expected SimulationConfig or mapping, got {type(value).__name__}"
        )
    try:
        return SimulationConfig.model_validate(dict(payload))
    except PydanticValidationError as exc:
        raise ConfigurationError(f"Invalid simulation configuration: {_describe(exc)}") from exc


def _parse_int(label: str, text: Any) -> int:
    raw = str(text).strip()
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{label} must be a whole number, got {raw!r}") from None


def _parse_float(label: str, text: Any) -> float:
    raw = str(text).strip()
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{label} must be a number, got {raw!r}") from None


def parse_form_inputs(
    num_dice: Any,
    num_trials: Any,
    trial_rate: Any,
    random_seed: Optional[Any] = None,
) -> SimulationConfig:
    """Parse raw form/CLI values into a validated configuration."""
    seed: Optional[int] = None
    if random_seed is not None and str(random_seed).strip():
        seed = _parse_int("Random seed", random_seed)
    return validate_config(
        {
            "num_dice": _parse_int("Number of dice", num_dice),
            "num_trials": _parse_int("Number of iterations", num_trials),
            "trial_rate": _parse_float("Simulations per second", trial_rate),
            "random_seed": seed,
        }
    )


__all__ = ["ConfigurationError", "validate_config", "parse_form_inputs"]
