"""
Tests for the configuration system.
"""

import json
import tempfile
from pathlib import Path

import pytest
from pydantic import ValidationError

from config import (
    ChatConfig,
    CheckoutConfig,
    Config,
    SimulationConfig,
    load_config,
    merge_configs,
    strip_jsonc_comments,
)


class TestStripJSONComments:
    """Test JSONC comment stripping."""

    def test_single_line_comments(self):
        jsonc = """
        {
            // This is a comment
            "key": "value"
        }
        """
        result = strip_jsonc_comments(jsonc)
        assert "//" not in result
        assert json.loads(result) == {"key": "value"}

    def test_multi_line_comments(self):
        jsonc = """
        {
            /* This is a
               multi-line comment */
            "key": "value"
        }
        """
        result = strip_jsonc_comments(jsonc)
        assert json.loads(result) == {"key": "value"}


class TestConfigModels:
    """Test Pydantic config models."""

    def test_simulation_defaults(self):
        simulation = SimulationConfig()
        assert simulation.mutation_delay_seconds == 2.0
        assert simulation.cooldown_seconds == 10.0
        assert simulation.price_min == 50.0
        assert simulation.price_span == 100.0
        assert simulation.price_change_probability == 0.6

    def test_chat_defaults(self):
        chat = ChatConfig()
        assert chat.thinking_delay_seconds == 2.5
        assert chat.token_interval_seconds == 0.1
        assert chat.max_message_length == 500
        assert chat.default_session_id == "default"

    def test_checkout_defaults(self):
        checkout = CheckoutConfig()
        assert checkout.processing_delay_seconds == 1.5
        assert checkout.failure_rate == 0.2
        assert checkout.shipping == 10.0
        assert checkout.tax_rate == 0.08

    def test_probability_bounds(self):
        with pytest.raises(ValidationError):
            SimulationConfig(price_change_probability=1.5)

    def test_config_defaults(self):
        config = Config()
        assert isinstance(config.simulation, SimulationConfig)
        assert isinstance(config.chat, ChatConfig)
        assert isinstance(config.checkout, CheckoutConfig)
        assert config.seed_products is True


class TestMergeConfigs:
    """Test deep merging."""

    def test_nested_override(self):
        base = {"simulation": {"cooldown_seconds": 10, "price_min": 50}}
        override = {"simulation": {"cooldown_seconds": 5}}
        assert merge_configs(base, override) == {
            "simulation": {"cooldown_seconds": 5, "price_min": 50}
        }


class TestConfigLoading:
    """Test configuration file loading."""

    def test_load_empty_config(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config = load_config(Path(tmpdir), home=Path(tmpdir))
            assert config == Config()

    def test_load_json_config(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / "storefront.json").write_text(json.dumps({
                "simulation": {"mutation_delay_seconds": 0.5},
                "seed_products": False,
            }))

            config = load_config(Path(tmpdir), home=Path(tmpdir))
            assert config.simulation.mutation_delay_seconds == 0.5
            assert config.seed_products is False

    def test_load_jsonc_config(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / "storefront.jsonc").write_text("""
            {
                // Faster chat for demos
                "chat": {
                    "thinking_delay_seconds": 0.5  /* seconds */
                }
            }
            """)

            config = load_config(Path(tmpdir), home=Path(tmpdir))
            assert config.chat.thinking_delay_seconds == 0.5

    def test_project_overrides_global(self):
        with tempfile.TemporaryDirectory() as home, tempfile.TemporaryDirectory() as project:
            global_dir = Path(home) / ".storefront"
            global_dir.mkdir()
            (global_dir / "storefront.jsonc").write_text(json.dumps({
                "checkout": {"failure_rate": 0.5, "shipping": 5.0},
            }))
            (Path(project) / "storefront.json").write_text(json.dumps({
                "checkout": {"failure_rate": 0.0},
            }))

            config = load_config(Path(project), home=Path(home))
            assert config.checkout.failure_rate == 0.0
            assert config.checkout.shipping == 5.0

    def test_invalid_json_is_ignored(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / "storefront.json").write_text("{not json")

            config = load_config(Path(tmpdir), home=Path(tmpdir))
            assert config == Config()
