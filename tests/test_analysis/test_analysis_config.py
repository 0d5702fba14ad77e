"""
Tests for AnalysisConfig validation and YAML loading.
"""
import dataclasses

import pytest

from paircorr.analysis.config import AnalysisConfig, normalize_windows
from paircorr.analysis.config_loader import load_config_from_yaml
from paircorr.shared.defaults import CORRELATION_WINDOWS


class TestAnalysisConfig:
    """Test AnalysisConfig construction."""

    def test_defaults(self):
        config = AnalysisConfig()
        assert config.windows == CORRELATION_WINDOWS
        assert config.include_moving_averages
        assert not config.ratio_mode
        assert config.gregorian_range() == (None, None)

    def test_windows_sorted_and_deduplicated(self):
        assert AnalysisConfig(windows=(90, 7, 30, 7)).windows == (7, 30, 90)

    @pytest.mark.parametrize("windows", [(), (0,), (-5,), (2.5,), (True,)])
    def test_invalid_windows(self, windows):
        with pytest.raises(ValueError):
            AnalysisConfig(windows=windows)

    def test_exit_threshold_must_be_below_entry(self):
        with pytest.raises(ValueError, match="exit threshold"):
            AnalysisConfig(regime_entry_threshold=5, regime_exit_threshold=6)

    def test_confirm_days_positive(self):
        with pytest.raises(ValueError):
            AnalysisConfig(regime_confirm_days=0)

    def test_gregorian_range(self):
        config = AnalysisConfig(start_date="1403/01/01", end_date="1403/01/02")
        assert config.gregorian_range() == ("20240320", "20240321")

    def test_start_after_end(self):
        with pytest.raises(ValueError, match="after"):
            AnalysisConfig(start_date="1403/02/01", end_date="1403/01/01")

    def test_invalid_date(self):
        with pytest.raises(ValueError, match="invalid date range"):
            AnalysisConfig(start_date="1403/15/01")

    def test_replace_revalidates(self):
        with pytest.raises(ValueError):
            dataclasses.replace(AnalysisConfig(), windows=(0,))

    def test_normalize_windows(self):
        assert normalize_windows([3, 1, 3]) == (1, 3)


class TestLoadConfigFromYaml:
    """Test load_config_from_yaml."""

    def test_full_config(self, tmp_path):
        path = tmp_path / "analysis.yaml"
        path.write_text(
            "correlation:\n"
            "  windows: [60, 30]\n"
            "moving_averages:\n"
            "  enabled: false\n"
            "ratio:\n"
            "  enabled: true\n"
            "date_range:\n"
            "  start: '1402/01/01'\n"
            "  end: '1402/12/29'\n"
            "display:\n"
            "  persian_digits: true\n"
            "regime:\n"
            "  entry_threshold: 12\n"
            "  exit_threshold: 8\n"
            "  confirm_days: 2\n",
            encoding="utf-8",
        )
        config = load_config_from_yaml(path)
        assert config.windows == (30, 60)
        assert not config.include_moving_averages
        assert config.ratio_mode
        assert config.start_date == "1402/01/01"
        assert config.persian_digits
        assert config.regime_entry_threshold == 12.0
        assert config.regime_exit_threshold == 8.0
        assert config.regime_confirm_days == 2

    def test_partial_config_uses_defaults(self, tmp_path):
        path = tmp_path / "analysis.yaml"
        path.write_text("ratio:\n  enabled: true\n", encoding="utf-8")
        config = load_config_from_yaml(path)
        assert config.ratio_mode
        assert config.windows == CORRELATION_WINDOWS

    def test_single_window_scalar(self, tmp_path):
        path = tmp_path / "analysis.yaml"
        path.write_text("correlation:\n  windows: 45\n", encoding="utf-8")
        assert load_config_from_yaml(path).windows == (45,)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config_from_yaml(tmp_path / "missing.yaml")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ValueError, match="Empty config"):
            load_config_from_yaml(path)
