"""Tests for AtoZConfig configuration class."""

import pytest
from fastapi_atoz.config import AtoZConfig, AtoZPresets


class TestAtoZConfig:
    """Tests for AtoZConfig class."""

    def test_default_config(self):
        """Test default configuration values."""
        config = AtoZConfig()

        assert config.param_name == "alpha_filter"
        assert config.legacy_param_names == ("alpha",)
        assert config.title_field == "title"
        assert config.tie_breakers == ("id",)
        assert config.symbols_token == "sym"
        assert config.all_label == "All"
        assert config.symbols_label == "#"
        assert config.strict_mode is False
        assert config.include_links is True

    def test_param_names_order(self):
        config = AtoZConfig(param_name="letter", legacy_param_names=["alpha", "alpha_filter"])
        assert config.param_names() == ("letter", "alpha", "alpha_filter")

    def test_sequences_become_tuples(self):
        config = AtoZConfig(tie_breakers=["menu_order", "id"])
        assert config.tie_breakers == ("menu_order", "id")

    def test_empty_param_name(self):
        with pytest.raises(ValueError, match="param_name must not be empty"):
            AtoZConfig(param_name="")

    def test_legacy_repeats_param_name(self):
        with pytest.raises(ValueError, match="legacy_param_names cannot repeat param_name"):
            AtoZConfig(legacy_param_names=("alpha_filter",))

    def test_empty_title_field(self):
        with pytest.raises(ValueError, match="title_field must not be empty"):
            AtoZConfig(title_field="")

    def test_empty_symbols_token(self):
        with pytest.raises(ValueError, match="symbols_token must not be empty"):
            AtoZConfig(symbols_token="")

    @pytest.mark.parametrize("token", ["s", "S"])
    def test_single_letter_symbols_token(self, token):
        with pytest.raises(ValueError, match="symbols_token cannot be a single letter"):
            AtoZConfig(symbols_token=token)


class TestAtoZPresets:
    """Tests for AtoZPresets class."""

    def test_default_preset(self):
        assert AtoZPresets.default() == AtoZConfig()

    def test_strict_preset(self):
        assert AtoZPresets.strict().strict_mode is True

    def test_legacy_numeric_sentinel_preset(self):
        assert AtoZPresets.legacy_numeric_sentinel().symbols_token == "9"
