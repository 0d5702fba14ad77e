"""
Conversion of analysis records to tabular output.

Records become a pandas DataFrame with one ``corr_<window>`` column per
requested window; the frame is written as CSV or JSON by file suffix.
"""
from dataclasses import asdict
from pathlib import Path
from typing import Sequence, Union

import pandas as pd

from ..shared.types import AnalysisRecord


def records_to_frame(records: Sequence[AnalysisRecord]) -> pd.DataFrame:
    """
    Flatten records into a DataFrame.

    Missing values (warm-up) are NaN in the frame.
    """
    rows = []
    for record in records:
        row = asdict(record)
        correlations = row.pop("correlations")
        for window in sorted(correlations):
            row[f"corr_{window}"] = correlations[window]
        rows.append(row)
    return pd.DataFrame(rows)


def write_records(records: Sequence[AnalysisRecord], output_path: Union[str, Path]) -> Path:
    """
    Write records to .csv or .json (records orientation).

    Raises:
        ValueError: If the suffix is not .csv or .json
    """
    output_path = Path(output_path)
    suffix = output_path.suffix.lower()
    if suffix not in (".csv", ".json"):
        raise ValueError(f"Unsupported output format '{suffix}' (use .csv or .json)")

    frame = records_to_frame(records)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if suffix == ".csv":
        frame.to_csv(output_path, index=False, encoding="utf-8")
    else:
        frame.to_json(output_path, orient="records", force_ascii=False, indent=2)
    return output_path
