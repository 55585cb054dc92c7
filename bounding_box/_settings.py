import sys
import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class ToleranceSettings(BaseSettings):
    """Default tolerances used by the ``approx_*`` predicates."""

    model_config = SettingsConfigDict(env_prefix="BOUNDING_BOX_")

    EPSILON: float = Field(default=sys.float_info.epsilon, ge=0.0)  # absolute tolerance
    MAX_ULPS: int = Field(default=4, ge=0)


@lru_cache
def get_settings() -> ToleranceSettings:
    settings = ToleranceSettings()
    logger.debug("Loaded tolerance settings: epsilon=%r max_ulps=%r", settings.EPSILON, settings.MAX_ULPS)
    return settings
