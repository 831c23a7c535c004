"""
Auction configuration for GDA.

Parameters come from a JSON file when one is given, otherwise from
environment variables (a local .env file is loaded first):

    GDA_INITIAL_PRICE    price of the first unit, decimal (default 1000)
    GDA_SCALE_FACTOR     per-unit growth, decimal > 1 (default 1.1)
    GDA_DECAY_CONSTANT   decay per second, decimal > 0 (default 0.5)
    GDA_START_TIME       unix seconds (default: creation time)
    GDA_LOG_LEVEL        DEBUG/INFO/WARNING/ERROR (default WARNING)
"""

import json
import os
from decimal import Decimal
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

from gda.core.parameters import AuctionParameters

ENV_PREFIX = "GDA_"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AuctionConfig(BaseModel):
    """Auction configuration parameters"""

    initial_price: Decimal = Field(default=Decimal("1000"), gt=0)
    scale_factor: Decimal = Field(default=Decimal("1.1"), gt=1)
    decay_constant: Decimal = Field(default=Decimal("0.5"), gt=0)
    start_time: Optional[int] = Field(default=None, ge=0)
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {v}")
        return level

    def to_parameters(self, now: int) -> AuctionParameters:
        """
        Build auction parameters.

        Args:
            now: Start time to use when none is configured

        Returns:
            AuctionParameters instance
        """
        start = self.start_time if self.start_time is not None else now
        return AuctionParameters.from_values(
            self.initial_price,
            self.scale_factor,
            self.decay_constant,
            start_time=start,
        )


def config_from_env() -> AuctionConfig:
    """Read GDA_* environment variables, loading .env from the working directory first."""
    load_dotenv(find_dotenv(usecwd=True))
    fields = {}
    for name in AuctionConfig.model_fields:
        value = os.environ.get(ENV_PREFIX + name.upper())
        if value not in (None, ""):
            fields[name] = value
    return AuctionConfig.model_validate(fields)


def load_config(config_path: Optional[str] = None) -> AuctionConfig:
    """
    Load configuration from file or environment.

    Args:
        config_path: Optional path to a JSON config file

    Returns:
        AuctionConfig instance
    """
    if config_path:
        data = json.loads(Path(config_path).read_text(), parse_float=Decimal)
        return AuctionConfig.model_validate(data)

    return config_from_env()
