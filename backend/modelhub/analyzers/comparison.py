"""Compare stored model metrics."""

from statistics import mean
from typing import Any, Dict, Iterable, List, Optional

METRICS = ("accuracy", "precision", "recall", "f1Score")


class MetricsComparison:
    """Rank and summarise model metric records."""

    def __init__(self, records: Iterable[Dict[str, Any]]) -> None:
        self.records = list(records)

    @staticmethod
    def _check_metric(metric: str) -> None:
        if metric not in METRICS:
            raise ValueError(f"Unknown metric '{metric}'. Valid options: {', '.join(METRICS)}")

    def _scored(self, metric: str) -> List[Dict[str, Any]]:
        return [
            record
            for record in self.records
            if isinstance(record.get(metric), (int, float)) and not isinstance(record.get(metric), bool)
        ]

    def chart_data(self, metric: str) -> List[Dict[str, Any]]:
        """``[{name, value}]`` for one metric, best first."""
        self._check_metric(metric)
        rows = [{"name": record.get("name"), "value": float(record[metric])} for record in self._scored(metric)]
        rows.sort(key=lambda row: row["value"], reverse=True)
        return rows

    def best_model(self, metric: str) -> Optional[Dict[str, Any]]:
        self._check_metric(metric)
        scored = self._scored(metric)
        if not scored:
            return None
        return max(scored, key=lambda record: record[metric])

    def averages(self) -> Dict[str, Optional[float]]:
        """Mean of each metric over the records that report it."""
        result: Dict[str, Optional[float]] = {}
        for metric in METRICS:
            values = [float(record[metric]) for record in self._scored(metric)]
            result[metric] = mean(values) if values else None
        return result
