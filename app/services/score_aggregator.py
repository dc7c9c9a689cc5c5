# -*- coding: utf-8 -*-
"""
Reduces violation signals and the authenticity score to the two values used to
rank the officer review queue.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple

from app import config
from app.enums import ViolationTypeEnum
from app.pydantic_models import ViolationSignal


@dataclass(frozen=True)
class ScoringPolicy:
    severity_weights: Mapping[ViolationTypeEnum, float] = field(
        default_factory=lambda: MappingProxyType({})
    )
    failure_baseline: float = 0.2

    @classmethod
    def from_config(cls) -> "ScoringPolicy":
        weights = {
            ViolationTypeEnum(kind): float(weight)
            for kind, weight in config.VIOLATION_SEVERITY_WEIGHTS.items()
        }
        return cls(
            severity_weights=MappingProxyType(weights),
            failure_baseline=config.FAILED_ANALYSIS_PRIORITY_BASELINE,
        )


def _clamp(value: float) -> float:
    return min(1.0, max(0.0, value))


def aggregate_scores(
    signals: Mapping[ViolationTypeEnum, ViolationSignal],
    authenticity_score: float,
    policy: ScoringPolicy,
) -> Tuple[float, float]:
    """
    Compute the validity and priority scores.

    Validity is the highest confidence among detected violations. Priority adds
    up severity-weighted confidences of every detected violation, caps the sum
    at 1 and scales it by authenticity, so suspected fakes sink in the queue
    without disappearing from it.

    Returns:
        Tuple[float, float]: (validity_score, priority_score)
    """
    validity_score = 0.0
    raw_priority = 0.0
    for kind, signal in signals.items():
        if not signal.detected:
            continue
        confidence = _clamp(signal.confidence)
        validity_score = max(validity_score, confidence)
        raw_priority += policy.severity_weights.get(kind, 0.0) * confidence

    priority_score = round(_clamp(raw_priority) * _clamp(authenticity_score), 2)
    return validity_score, priority_score


def failure_scores(
    authenticity_score: float, policy: ScoringPolicy
) -> Tuple[float, float]:
    """
    Scores for an analysis whose classifier failed: no validity and a low but
    non-zero priority, so the report stays triageable.
    """
    return 0.0, round(policy.failure_baseline * _clamp(authenticity_score), 2)
