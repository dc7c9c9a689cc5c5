# -*- coding: utf-8 -*-
"""
Evidence analysis orchestration.

Runs the authenticity check, the plate reader and the media download
concurrently, classifies the media once it's available, then reconciles plates
and computes the ranking scores. Only a failed media download aborts the run;
every other dependency degrades to its default.
"""
import asyncio
from typing import Optional

import httpx
from loguru import logger

from app.enums import PipelineStageEnum
from app.pydantic_models import AnalysisRequest, AnalysisResult
from app.services.authenticity_service import AuthenticityService
from app.services.media_service import MediaService
from app.services.plate_reader_service import PlateReaderService
from app.services.plate_reconciler import reconcile_plates
from app.services.score_aggregator import (
    ScoringPolicy,
    aggregate_scores,
    failure_scores,
)
from app.services.violation_classifier_service import ViolationClassifierService


class AnalysisService:
    """Service that turns one piece of evidence into an `AnalysisResult`."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        policy: Optional[ScoringPolicy] = None,
        authenticity: Optional[AuthenticityService] = None,
        plate_reader: Optional[PlateReaderService] = None,
        classifier: Optional[ViolationClassifierService] = None,
        media: Optional[MediaService] = None,
    ):
        self.policy = policy or ScoringPolicy.from_config()
        self.authenticity = authenticity or AuthenticityService(client)
        self.plate_reader = plate_reader or PlateReaderService(client)
        self.classifier = classifier or ViolationClassifierService(client)
        self.media = media or MediaService(client)

    async def analyze(self, request: AnalysisRequest) -> AnalysisResult:
        """
        Analyze a single piece of evidence.

        Args:
            request: Media location, report id and optional reporter comment

        Returns:
            The composed analysis, always with scores in [0, 1]

        Raises:
            MediaFetchError: If the media itself can't be downloaded
        """
        log = logger.bind(report_id=request.report_id)
        log.info(f"Analyzing evidence for report {request.report_id}...")
        self._stage(log, PipelineStageEnum.START)

        async def check_authenticity() -> float:
            score = await self.authenticity.check(request.media_url)
            self._stage(log, PipelineStageEnum.AUTHENTICITY_DONE)
            return score

        async def fetch_media():
            media = await self.media.fetch(request.media_url)
            self._stage(log, PipelineStageEnum.MEDIA_FETCHED)
            return media

        async def read_plate() -> Optional[str]:
            plate = await self.plate_reader.read(request.media_url)
            self._stage(log, PipelineStageEnum.PLATE_READ_DONE)
            return plate

        async def classify(media):
            outcome = await self.classifier.classify(media, request.user_comment)
            self._stage(log, PipelineStageEnum.CLASSIFIED)
            return outcome

        authenticity_task = asyncio.create_task(check_authenticity())
        plate_task = asyncio.create_task(read_plate())
        try:
            media = await fetch_media()
        except BaseException:
            authenticity_task.cancel()
            plate_task.cancel()
            raise

        authenticity_score, reader_plate, outcome = await asyncio.gather(
            authenticity_task, plate_task, classify(media)
        )
        extracted_data = outcome.extracted_data

        plate_number = reconcile_plates(reader_plate, extracted_data.license_plate)
        self._stage(log, PipelineStageEnum.RECONCILED)

        if outcome.failed:
            validity_score, priority_score = failure_scores(
                authenticity_score, self.policy
            )
        else:
            validity_score, priority_score = aggregate_scores(
                extracted_data.signals(), authenticity_score, self.policy
            )
        self._stage(log, PipelineStageEnum.SCORED)

        result = AnalysisResult(
            authenticity_score=authenticity_score,
            plate_number=plate_number,
            extracted_data=extracted_data,
            validity_score=validity_score,
            priority_score=priority_score,
            ai_explanation=extracted_data.comment,
        )
        self._stage(log, PipelineStageEnum.DONE)
        log.info(
            f"Report {request.report_id} analyzed: validity={validity_score} "
            f"priority={priority_score} plate={plate_number}"
        )
        return result

    @staticmethod
    def _stage(log, stage: PipelineStageEnum) -> None:
        log.debug(f"Analysis stage: {stage.value}")
