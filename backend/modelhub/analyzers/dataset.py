"""Summary statistics of an uploaded dataset."""

from typing import Any, Dict, List, Optional

import pandas as pd

TARGET_HINTS = ("target", "label", "class")


class DatasetAnalyzer:
    """Infer column types, guess the target column and count missing/unique values."""

    def analyze(self, frame: pd.DataFrame) -> Dict[str, Any]:
        columns = [str(column) for column in frame.columns]
        frame = frame.set_axis(columns, axis=1)
        return {
            "columns": columns,
            "shape": [int(frame.shape[0]), len(columns)],
            "columnTypes": {column: self.column_type(frame[column]) for column in columns},
            "targetColumn": self.guess_target(columns),
            "summary": {
                "missingValues": {column: int(frame[column].isna().sum()) for column in columns},
                "uniqueValues": {column: int(frame[column].nunique(dropna=False)) for column in columns},
            },
        }

    @staticmethod
    def column_type(series: pd.Series) -> str:
        """``numeric`` when every non-missing value reads as a number."""
        converted = pd.to_numeric(series.dropna(), errors="coerce")
        return "numeric" if converted.notna().all() else "categorical"

    @staticmethod
    def guess_target(columns: List[str]) -> Optional[str]:
        for column in columns:
            lowered = column.lower()
            if any(hint in lowered for hint in TARGET_HINTS):
                return column
        return columns[-1] if columns else None
