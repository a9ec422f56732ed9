"""
Rubric weight table.

Holds the ten partnership parameters and their 0–40 weights. The table only
reports whether the weights add up to 100; an unbalanced table is still a
valid input to an analysis.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Union

from config.settings import settings
from models.schemas import ScoringParameter


DEFAULT_PARAMETERS = [
    ("positioning", "Brand Positioning & Fit", 20),
    ("audience", "Audience Overlap & Targeting", 15),
    ("commercial", "Commercial Viability (Scale Parity)", 15),
    ("cultural", "Cultural / Value Alignment", 12),
    ("history", "Historical Collaboration", 8),
    ("legal", "Legal & Compliance Risk", 8),
    ("geo", "Geographic Compatibility", 7),
    ("operational", "Operational Feasibility", 6),
    ("brand_love", "Brand Love & Perception", 6),
    ("upside", "Upside / Strategic Optionality", 3),
]


def default_parameters() -> List[ScoringParameter]:
    return [ScoringParameter(id=pid, name=name, weight=weight) for pid, name, weight in DEFAULT_PARAMETERS]


class WeightTable:
    """Ordered parameter-id → ScoringParameter mapping."""

    def __init__(self, parameters: Optional[Iterable[ScoringParameter]] = None):
        self._params: Dict[str, ScoringParameter] = {}
        for p in parameters if parameters is not None else default_parameters():
            self._params[p.id] = p

    @classmethod
    def from_weights(cls, weights: Dict[str, Union[int, float]]) -> "WeightTable":
        """Default table with the given weights applied on top."""
        table = cls()
        for pid, weight in weights.items():
            table.set_weight(pid, weight)
        return table

    def __iter__(self) -> Iterator[ScoringParameter]:
        return iter(self._params.values())

    def __len__(self) -> int:
        return len(self._params)

    def __contains__(self, pid: str) -> bool:
        return pid in self._params

    def get(self, pid: str) -> ScoringParameter:
        return self._params[pid]

    def set_weight(self, pid: str, weight: Union[int, float]) -> None:
        if pid not in self._params:
            raise KeyError(f"Unknown rubric parameter: {pid}")
        self._params[pid].weight = weight

    def reset(self) -> None:
        self._params = {p.id: p for p in default_parameters()}

    @property
    def total(self) -> Union[int, float]:
        return sum(p.weight for p in self._params.values())

    @property
    def is_balanced(self) -> bool:
        return self.total == settings.TARGET_WEIGHT_TOTAL

    def weight_map(self) -> Dict[str, Union[int, float]]:
        return {p.id: p.weight for p in self._params.values()}

    def __repr__(self):
        return f"<WeightTable: {len(self)} params, total={self.total}>"
