"""Tests for PathFinderConfig."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from pathfinder.config import DEFAULT_CONFIG, PathFinderConfig
from pathfinder.models.route import ImpactReference


class TestDefaults:
    """Default configuration values."""

    def test_default_options(self):
        options = DEFAULT_CONFIG.default_options()
        assert options.max_hops == 3
        assert options.max_paths == 5
        assert options.slippage_tolerance == Decimal("0.5")

    def test_default_deadline_is_twenty_minutes(self):
        assert DEFAULT_CONFIG.deadline_seconds == 1200

    def test_default_impact_reference(self):
        assert DEFAULT_CONFIG.impact_reference is ImpactReference.DIRECT


class TestValidation:
    """Invalid configurations are rejected at construction."""

    def test_zero_concurrency(self):
        with pytest.raises(ValueError, match="max_concurrency"):
            PathFinderConfig(max_concurrency=0)

    def test_non_positive_timeout(self):
        with pytest.raises(ValueError, match="timeout_seconds"):
            PathFinderConfig(timeout_seconds=0)

    def test_none_timeout_allowed(self):
        assert PathFinderConfig(timeout_seconds=None).timeout_seconds is None

    def test_hop_bounds(self):
        with pytest.raises(ValidationError):
            PathFinderConfig(max_hops=0)
        with pytest.raises(ValidationError):
            PathFinderConfig(max_hops=7)

    def test_slippage_bounds(self):
        with pytest.raises(ValidationError):
            PathFinderConfig(slippage_tolerance=Decimal(0))
        with pytest.raises(ValidationError):
            PathFinderConfig(slippage_tolerance=Decimal("50.1"))


class TestFromEnv:
    """Loading configuration from PATHFINDER_* variables."""

    def test_empty_environment_gives_defaults(self):
        assert PathFinderConfig.from_env({}) == PathFinderConfig()

    def test_all_variables(self):
        config = PathFinderConfig.from_env(
            {
                "PATHFINDER_MAX_HOPS": "2",
                "PATHFINDER_MAX_PATHS": "10",
                "PATHFINDER_SLIPPAGE_TOLERANCE": "1.25",
                "PATHFINDER_MAX_CONCURRENCY": "4",
                "PATHFINDER_TIMEOUT_SECONDS": "2.5",
                "PATHFINDER_DEADLINE_SECONDS": "600",
                "PATHFINDER_IMPACT_REFERENCE": "PATH",
                "PATHFINDER_RPC_URL": "http://localhost:8545",
                "PATHFINDER_FACTORY_ADDRESS": "0x5c69bee701ef814a2b6a3edd4b1652cb9cc5aa6f",
                "PATHFINDER_ROUTER_ADDRESS": "0x7a250d5630b4cf539739df2c5dacb4c659f2488d",
            }
        )
        assert config.max_hops == 2
        assert config.max_paths == 10
        assert config.slippage_tolerance == Decimal("1.25")
        assert config.max_concurrency == 4
        assert config.timeout_seconds == 2.5
        assert config.deadline_seconds == 600
        assert config.impact_reference is ImpactReference.PATH
        assert config.rpc_url == "http://localhost:8545"
        assert config.router_address == "0x7a250d5630b4cf539739df2c5dacb4c659f2488d"

    def test_timeout_none(self):
        config = PathFinderConfig.from_env({"PATHFINDER_TIMEOUT_SECONDS": "none"})
        assert config.timeout_seconds is None

    def test_blank_values_ignored(self):
        config = PathFinderConfig.from_env({"PATHFINDER_MAX_HOPS": "", "PATHFINDER_RPC_URL": ""})
        assert config.max_hops == 3
        assert config.rpc_url is None

    def test_invalid_impact_reference(self):
        with pytest.raises(ValueError):
            PathFinderConfig.from_env({"PATHFINDER_IMPACT_REFERENCE": "spot"})

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("PATHFINDER_MAX_PATHS", "7")
        assert PathFinderConfig.from_env().max_paths == 7
