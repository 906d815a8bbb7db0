"""Engine configuration via environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

from transference_core.models.enums import DimensionPolicy, NanPolicy


class EngineConfig(BaseSettings):
    """Scoring and ranking settings, loaded from TRANSFERENCE_* env vars.

    Defaults reproduce the reference weighting: 70% content, 30% sentiment,
    a bond saturating at five interactions and shared meaning capped at ten.
    """

    model_config = {"env_prefix": "TRANSFERENCE_"}

    eligibility_threshold: float = 0.5
    content_weight: float = Field(default=0.7, ge=0.0)
    sentiment_weight: float = Field(default=0.3, ge=0.0)
    bond_cap: int = Field(default=5, gt=0)
    meaning_cap: int = Field(default=10, gt=0)
    epsilon: float = Field(default=1e-9, gt=0.0)

    dimension_policy: DimensionPolicy = DimensionPolicy.STRICT
    nan_policy: NanPolicy = NanPolicy.LAST


@lru_cache(maxsize=1)
def default_config() -> EngineConfig:
    """Process-wide config read from the environment on first use."""
    return EngineConfig()
