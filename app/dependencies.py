# -*- coding: utf-8 -*-
import httpx
from fastapi import Request

from app.services import AnalysisService


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client


def get_analysis_service(request: Request) -> AnalysisService:
    return AnalysisService(
        client=get_http_client(request),
        policy=request.app.state.scoring_policy,
    )
