# -*- coding: utf-8 -*-
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator

from app.enums import ViolationTypeEnum


class HealthCheck(BaseModel):
    status: str


class AnalysisRequest(BaseModel):
    """A single evidence analysis job. Never mutated while the pipeline runs."""

    model_config = ConfigDict(frozen=True)

    media_url: str = Field(..., min_length=1)
    report_id: Optional[Union[str, int]] = None
    user_comment: Optional[str] = None


class ViolationSignal(BaseModel):
    detected: StrictBool
    confidence: float = 0.0

    @field_validator("confidence", mode="before")
    def clamp_confidence(cls, value):
        if value is None:
            return 0.0
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("confidence must be a number")
        return min(1.0, max(0.0, float(value)))


class ExtractedData(BaseModel):
    """Classifier reply. Every violation flag is required."""

    no_helmet: ViolationSignal
    signal_jumping: ViolationSignal
    wrong_side_driving: ViolationSignal
    zebra_crossing_violation: ViolationSignal
    illegal_parking: ViolationSignal
    license_plate: Optional[str] = None
    comment: Optional[str] = None

    @field_validator("license_plate", "comment", mode="before")
    def blank_to_none(cls, value):
        if value is None:
            return None
        if not isinstance(value, str):
            raise ValueError("must be a string or null")
        value = value.strip()
        return value or None

    def signals(self) -> dict[ViolationTypeEnum, ViolationSignal]:
        return {kind: getattr(self, kind.value) for kind in ViolationTypeEnum}

    @classmethod
    def empty(cls, comment: Optional[str] = None) -> "ExtractedData":
        return cls(
            **{
                kind.value: ViolationSignal(detected=False, confidence=0.0)
                for kind in ViolationTypeEnum
            },
            license_plate=None,
            comment=comment,
        )


class AnalysisResult(BaseModel):
    authenticity_score: float = Field(..., ge=0.0, le=1.0)
    plate_number: Optional[str] = None
    extracted_data: ExtractedData
    validity_score: float = Field(..., ge=0.0, le=1.0)
    priority_score: float = Field(..., ge=0.0, le=1.0)
    ai_explanation: Optional[str] = None


class AnalyzeIn(BaseModel):
    media_url: Optional[str] = None
    report_id: Optional[Union[str, int]] = None
    user_comment: Optional[str] = None


class AnalyzeOut(BaseModel):
    success: bool = True
    report_id: Optional[Union[str, int]] = None
    analysis: AnalysisResult


class ErrorOut(BaseModel):
    success: bool = False
    report_id: Optional[Union[str, int]] = None
    error: str
