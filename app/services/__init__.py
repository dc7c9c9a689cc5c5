# -*- coding: utf-8 -*-
"""
Service layer for business logic.

This module contains the evidence analysis services and the clients for the
external analysis APIs they depend on.
"""

from .analysis_service import AnalysisService
from .authenticity_service import AuthenticityService
from .media_service import Media, MediaFetchError, MediaService
from .plate_reader_service import PlateReaderService
from .violation_classifier_service import (
    ClassificationOutcome,
    ViolationClassifierService,
)

__all__ = [
    "AnalysisService",
    "AuthenticityService",
    "ClassificationOutcome",
    "Media",
    "MediaFetchError",
    "MediaService",
    "PlateReaderService",
    "ViolationClassifierService",
]
