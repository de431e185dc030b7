from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from decidemodel.errors import ConfigError

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "model.yaml"

QUESTION_COUNT = 5


class Thresholds(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    yes_above: float = 8.0
    confused_above: float = 3.0

    @model_validator(mode="after")
    def _ordered(self) -> "Thresholds":
        if self.yes_above < self.confused_above:
            raise ValueError(
                f"yes_above ({self.yes_above}) must not be below confused_above ({self.confused_above})"
            )
        return self


class LIFParams(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    threshold: float = 1.0
    leak_rate: float = 0.1
    reset_v: float = 0.0


class ModelConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    weights: Tuple[float, ...] = (1.0, 1.2, 1.5, 1.1, 1.0)
    thresholds: Thresholds = Thresholds()
    neuron: LIFParams = LIFParams()

    @field_validator("weights")
    @classmethod
    def _five_weights(cls, v: Tuple[float, ...]) -> Tuple[float, ...]:
        if len(v) != QUESTION_COUNT:
            raise ValueError(f"expected {QUESTION_COUNT} weights, got {len(v)}")
        return v


DEFAULT_CONFIG = ModelConfig()


def config_from_dict(raw: Optional[Dict[str, Any]]) -> ModelConfig:
    try:
        return ModelConfig(**(raw or {}))
    except (ValidationError, TypeError) as e:
        raise ConfigError(f"invalid model config: {e}") from e


def load_config(path: Optional[str | Path] = None) -> ModelConfig:
    """
    Read weights/thresholds from YAML. Keys left out fall back to the
    built-in defaults; no path means the packaged model.yaml.
    """
    p = Path(path) if path else DEFAULT_CONFIG_PATH
    try:
        raw = yaml.safe_load(p.read_text())
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"cannot read config {p}: {e}") from e

    if raw is not None and not isinstance(raw, dict):
        raise ConfigError(f"config {p} must be a mapping, got {type(raw).__name__}")
    return config_from_dict(raw)
