"""Tests for configuration loading."""

import json
import logging

import pytest

from sitescore.config import Config, WeightTable, default_weights
from sitescore.constants import DEFAULT_USER_AGENT


class TestConfig:
    """Test cases for Config."""

    def test_defaults(self):
        """Defaults bound the fetch to 10s and 5 redirects."""
        config = Config()

        assert config.timeout == 10.0
        assert config.max_redirects == 5
        assert config.domain_lookup_timeout == 10.0
        assert config.user_agent == DEFAULT_USER_AGENT

    def test_from_env(self, monkeypatch):
        """Environment variables override the defaults."""
        monkeypatch.setenv("SITESCORE_USER_AGENT", "TestBot/2.0")
        monkeypatch.setenv("SITESCORE_TIMEOUT", "4.5")
        monkeypatch.setenv("SITESCORE_MAX_REDIRECTS", "2")
        monkeypatch.setenv("SITESCORE_DOMAIN_LOOKUP_TIMEOUT", "3")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        config = Config.from_env()

        assert config.user_agent == "TestBot/2.0"
        assert config.timeout == 4.5
        assert config.max_redirects == 2
        assert config.domain_lookup_timeout == 3.0
        assert config.log_level == "DEBUG"


class TestWeightTable:
    """Test cases for WeightTable."""

    def test_stock_weights(self):
        """The stock weights add up to 1.20 and normalise to 1.0."""
        assert default_weights.total == pytest.approx(1.2)
        normalized = default_weights.normalized()

        assert sum(normalized.values()) == pytest.approx(1.0)
        assert normalized["seo"] == pytest.approx(0.25 / 1.2)

    def test_negative_weight_rejected(self):
        """Negative weights are invalid."""
        with pytest.raises(ValueError):
            WeightTable(seo=-0.1)

    def test_zero_total_rejected(self):
        """At least one weight must be positive."""
        zeros = {name: 0 for name in WeightTable().to_dict()}
        with pytest.raises(ValueError):
            WeightTable(**zeros)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_weight_rejected(self, value):
        """NaN and infinite weights are invalid."""
        with pytest.raises(ValueError, match="finite"):
            WeightTable(seo=value)

    def test_from_env(self, monkeypatch):
        """Weights are read from SITESCORE_WEIGHT_* variables."""
        monkeypatch.setenv("SITESCORE_WEIGHT_SEO", "0.5")
        monkeypatch.setenv("SITESCORE_WEIGHT_DOMAIN_AGE", "not-a-number")

        weights = WeightTable.from_env()

        assert weights.seo == 0.5
        assert weights.domain_age == 0.10

    def test_from_env_skips_non_finite(self, monkeypatch):
        """Non-finite values from the environment keep the default weight."""
        monkeypatch.setenv("SITESCORE_WEIGHT_SEO", "nan")
        monkeypatch.setenv("SITESCORE_WEIGHT_CONTENT", "inf")

        weights = WeightTable.from_env()

        assert weights.seo == 0.25
        assert weights.content == 0.15

    def test_from_file(self, tmp_path):
        """Weights are read from the 'weights' key of a JSON file."""
        path = tmp_path / "weights.json"
        path.write_text(json.dumps({"weights": {"security": 0.3}}))

        assert WeightTable.from_file(str(path)) == WeightTable(security=0.3)

    def test_from_file_rejects_nan(self, tmp_path):
        """A NaN literal in the file is rejected, not silently scored."""
        path = tmp_path / "weights.json"
        path.write_text('{"weights": {"seo": NaN}}')

        with pytest.raises(ValueError):
            WeightTable.from_file(str(path))

    def test_from_file_ignores_unknown_keys(self, tmp_path):
        """Unknown keys are ignored and a bare mapping is accepted."""
        path = tmp_path / "weights.json"
        path.write_text(json.dumps({"meta": 0.2, "bogus": 9}))

        weights = WeightTable.from_file(str(path))

        assert weights.meta == 0.2
        assert weights.seo == 0.25

    def test_missing_file(self, tmp_path, caplog):
        """A missing file gives the stock weights and a warning."""
        with caplog.at_level(logging.WARNING, logger="sitescore.config"):
            weights = WeightTable.from_file(str(tmp_path / "nope.json"))

        assert weights == WeightTable()
        assert "nope.json" in caplog.text
