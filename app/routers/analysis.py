# -*- coding: utf-8 -*-
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from app import config
from app.dependencies import get_analysis_service
from app.pydantic_models import (
    AnalysisRequest,
    AnalyzeIn,
    AnalyzeOut,
    ErrorOut,
)
from app.rate_limiter import limiter
from app.services import AnalysisService, MediaFetchError

router = APIRouter(
    prefix="/api",
    tags=["Analysis"],
    responses={
        400: {"model": ErrorOut, "description": "Missing media_url"},
        429: {"error": "Rate limit exceeded"},
        500: {"model": ErrorOut, "description": "Unexpected failure"},
        502: {"model": ErrorOut, "description": "Media could not be fetched"},
    },
)


def error_response(status_code: int, error: str, report_id=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorOut(report_id=report_id, error=error).model_dump(),
    )


@router.post("/analyze", response_model=AnalyzeOut)
@limiter.limit(config.RATE_LIMIT_DEFAULT)
async def analyze(
    request: Request,
    data: AnalyzeIn,
    service: Annotated[AnalysisService, Depends(get_analysis_service)],
):
    if not data.media_url or not data.media_url.strip():
        return error_response(
            status.HTTP_400_BAD_REQUEST, "Missing media_url", data.report_id
        )

    analysis_request = AnalysisRequest(
        media_url=data.media_url.strip(),
        report_id=data.report_id,
        user_comment=data.user_comment,
    )
    try:
        analysis = await service.analyze(analysis_request)
    except MediaFetchError as exc:
        logger.error(f"Analysis of report {data.report_id} aborted: {exc}")
        return error_response(status.HTTP_502_BAD_GATEWAY, str(exc), data.report_id)
    except Exception as exc:
        logger.exception(f"Analysis of report {data.report_id} failed")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            str(exc) or "Internal server error",
            data.report_id,
        )

    return AnalyzeOut(report_id=data.report_id, analysis=analysis)
