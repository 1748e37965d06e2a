from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {
    Priority.CRITICAL: 0,
    Priority.HIGH: 1,
    Priority.MEDIUM: 2,
    Priority.LOW: 3,
}


@dataclass(frozen=True)
class Issue:
    priority: Priority
    category: str
    issue: str
    recommendation: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "priority": self.priority.value,
            "category": self.category,
            "issue": self.issue,
            "recommendation": self.recommendation,
        }


@dataclass
class AnalysisResult:
    """
    Uniform output of every analyzer.

    `details` holds the analyzer-specific top-level fields (grade, openGraph,
    imageDetails, ...) which are rendered next to the score.
    """

    score: int
    metrics: Dict[str, Any] = field(default_factory=dict)
    issues: List[Issue] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"score": self.score}
        out.update(self.details)
        out["metrics"] = dict(self.metrics)
        out["issues"] = [i.to_dict() for i in self.issues]
        out["recommendations"] = list(self.recommendations)
        return out


def clamp_score(value: float, low: int = 0, high: int = 100) -> int:
    return int(max(low, min(high, value)))


def sort_issues(issues: Iterable[Issue]) -> List[Issue]:
    """Most severe first; issues of equal priority keep their check order."""
    return sorted(issues, key=lambda i: i.priority.rank)


def categorize_issues(issues: Iterable[Issue]) -> Dict[str, List[Issue]]:
    grouped: Dict[str, List[Issue]] = {p.value: [] for p in sorted(Priority, key=lambda p: p.rank)}
    for issue in issues:
        grouped[issue.priority.value].append(issue)
    return grouped
