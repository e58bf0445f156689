# -*- coding: utf-8 -*-
from collections import Counter
from typing import Any, Dict, Iterable, Optional

from hireloop.config import PipelineConfig


def stage_counts(stages: Iterable[Optional[str]]) -> Dict[str, int]:
    """
    Counts candidates per pipeline stage. Every known stage is present (0 if
    empty); stages outside the enum only show up in the total.
    """
    stages = list(stages)
    counter = Counter(stages)
    out = {stage: counter.get(stage, 0) for stage in PipelineConfig.STAGES}
    out["total"] = len(stages)
    return out


def health_score(total_candidates: int, target: int = PipelineConfig.TARGET_CANDIDATES) -> int:
    if target <= 0:
        return 100
    return int(round(min(100.0, (total_candidates / target) * 100.0)))


def health_status(score: float) -> str:
    if score >= PipelineConfig.HEALTHY_AT:
        return "healthy"
    if score >= PipelineConfig.AT_RISK_AT:
        return "at-risk"
    return "critical"


def health_metrics(total_candidates: int) -> Dict[str, Any]:
    score = health_score(total_candidates)
    return {
        "score": score,
        "status": health_status(score),
        "totalCandidates": total_candidates,
        "targetCandidates": PipelineConfig.TARGET_CANDIDATES,
    }
