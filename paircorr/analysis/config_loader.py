"""
YAML configuration loader for pair analysis.

Example:

    correlation:
      windows: [30, 60, 90]
    moving_averages:
      enabled: true
    ratio:
      enabled: false
    date_range:
      start: "1400/01/01"
      end: "1403/12/29"
    display:
      persian_digits: false
    regime:
      entry_threshold: 10
      exit_threshold: 7
      confirm_days: 3
"""
import yaml
from pathlib import Path
from typing import Union

from .config import AnalysisConfig
from ..shared.defaults import (
    CORRELATION_WINDOWS,
    REGIME_ENTRY_THRESHOLD,
    REGIME_EXIT_THRESHOLD,
    REGIME_CONFIRM_DAYS,
)


def load_config_from_yaml(yaml_path: Union[str, Path]) -> AnalysisConfig:
    """
    Load analysis configuration from YAML file.

    Args:
        yaml_path: Path to YAML configuration file

    Returns:
        AnalysisConfig object

    Raises:
        FileNotFoundError: If YAML file doesn't exist
        ValueError: If YAML is empty or values are invalid
    """
    yaml_path = Path(yaml_path)

    if not yaml_path.exists():
        raise FileNotFoundError(f"Config file not found: {yaml_path}")

    with open(yaml_path, 'r', encoding='utf-8') as f:
        config_dict = yaml.safe_load(f)

    if not config_dict:
        raise ValueError(f"Empty config file: {yaml_path}")

    correlation = config_dict.get('correlation') or {}
    moving_averages = config_dict.get('moving_averages') or {}
    ratio = config_dict.get('ratio') or {}
    date_range = config_dict.get('date_range') or {}
    display = config_dict.get('display') or {}
    regime = config_dict.get('regime') or {}

    windows = correlation.get('windows', list(CORRELATION_WINDOWS))
    if not isinstance(windows, list):
        windows = [windows]

    start = date_range.get('start')
    end = date_range.get('end')

    return AnalysisConfig(
        windows=tuple(windows),
        include_moving_averages=moving_averages.get('enabled', True),
        ratio_mode=ratio.get('enabled', False),
        start_date=str(start) if start is not None else None,
        end_date=str(end) if end is not None else None,
        persian_digits=display.get('persian_digits', False),
        regime_entry_threshold=float(regime.get('entry_threshold', REGIME_ENTRY_THRESHOLD)),
        regime_exit_threshold=float(regime.get('exit_threshold', REGIME_EXIT_THRESHOLD)),
        regime_confirm_days=int(regime.get('confirm_days', REGIME_CONFIRM_DAYS)),
    )
