"""
Unit tests for configuration loading and input validation.
"""

import json
import os

import pytest
from pydantic import ValidationError

from gda.core import InvalidParameters
from gda.core.config import ENV_PREFIX, AuctionConfig, load_config
from gda.math.fixed_point import UNIT
from gda.utils.validation import (
    MAX_QUANTITY,
    require,
    validate_amount,
    validate_integer,
    validate_quantity,
    validate_timestamp,
)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def clean_env(tmp_path, monkeypatch):
    """Run with no GDA_* variables and an empty working directory."""
    monkeypatch.chdir(tmp_path)

    def clear():
        for name in list(os.environ):
            if name.startswith(ENV_PREFIX):
                del os.environ[name]

    clear()
    yield tmp_path
    clear()


# =============================================================================
# Config Tests
# =============================================================================


class TestAuctionConfig:
    """Tests for the pydantic config model."""

    def test_defaults(self, clean_env):
        config = load_config()
        assert str(config.initial_price) == "1000"
        assert str(config.scale_factor) == "1.1"
        assert str(config.decay_constant) == "0.5"
        assert config.start_time is None
        assert config.log_level == "WARNING"

    def test_from_environment(self, clean_env, monkeypatch):
        monkeypatch.setenv("GDA_INITIAL_PRICE", "250")
        monkeypatch.setenv("GDA_SCALE_FACTOR", "1.05")
        monkeypatch.setenv("GDA_START_TIME", "99")

        params = load_config().to_parameters(now=0)
        assert params.initial_price == 250 * UNIT
        assert params.scale_factor == 1_050000000000000000
        assert params.start_time == 99

    def test_from_dotenv_file(self, clean_env):
        (clean_env / ".env").write_text("GDA_DECAY_CONSTANT=0.25\nGDA_LOG_LEVEL=debug\n")

        config = load_config()
        assert str(config.decay_constant) == "0.25"
        assert config.log_level == "DEBUG"

    def test_from_json_file(self, tmp_path):
        path = tmp_path / "auction.json"
        path.write_text(json.dumps({
            "initial_price": "500",
            "scale_factor": 1.25,
            "decay_constant": "0.1",
            "start_time": 42,
        }))

        params = load_config(str(path)).to_parameters(now=0)
        assert params.initial_price == 500 * UNIT
        assert params.scale_factor == 1_250000000000000000
        assert params.decay_constant == UNIT // 10
        assert params.start_time == 42

    def test_start_time_defaults_to_now(self):
        params = AuctionConfig().to_parameters(now=1234)
        assert params.start_time == 1234

    @pytest.mark.parametrize(
        "field,value",
        [("scale_factor", "1"), ("decay_constant", "0"), ("initial_price", "-5"), ("log_level", "loud")],
    )
    def test_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            AuctionConfig(**{field: value})

    def test_parameters_revalidated(self):
        """Values pydantic accepts still go through parameter validation."""
        config = AuctionConfig(scale_factor="1.0000000000000000001")
        with pytest.raises(InvalidParameters):
            config.to_parameters(now=0)


# =============================================================================
# Validation Tests
# =============================================================================


class TestValidation:
    """Tests for input validators."""

    def test_validate_integer(self):
        assert validate_integer(5, "x") == (True, "")
        valid, err = validate_integer(-1, "x")
        assert not valid
        assert "x must be >= 0" in err

    def test_bool_is_not_an_integer(self):
        valid, err = validate_integer(True, "x")
        assert not valid
        assert "must be int" in err

    def test_validate_quantity_bounds(self):
        assert validate_quantity(MAX_QUANTITY)[0]
        assert not validate_quantity(MAX_QUANTITY + 1)[0]

    def test_validate_amount_and_timestamp(self):
        assert validate_amount(0)[0]
        assert not validate_amount("10")[0]
        assert not validate_timestamp(-1)[0]

    def test_require_raises(self):
        require((True, ""))
        with pytest.raises(ValueError, match="boom"):
            require((False, "boom"))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
