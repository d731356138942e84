from slider.engine.heuristics.audit import AuditReport, Overestimate, audit, ground_truth
from slider.engine.heuristics.estimators import (
    Heuristic,
    corner_penalty,
    edge_penalty,
    enhanced,
    linear_conflicts,
    manhattan,
    score,
    shortest_path,
)

__all__ = [
    "AuditReport",
    "Heuristic",
    "Overestimate",
    "audit",
    "corner_penalty",
    "edge_penalty",
    "enhanced",
    "ground_truth",
    "linear_conflicts",
    "manhattan",
    "score",
    "shortest_path",
]
