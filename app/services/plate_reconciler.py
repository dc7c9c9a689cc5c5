# -*- coding: utf-8 -*-
from typing import Optional

from loguru import logger

from app.utils import is_plausible_plate, normalize_plate


def reconcile_plates(
    reader_plate: Optional[str], classifier_plate: Optional[str]
) -> Optional[str]:
    """
    Pick one plate out of the ANPR reader's and the vision model's candidates.

    The first matching rule wins:
        1. a plausible reader plate is kept;
        2. otherwise a plausible classifier plate is normalized and used;
        3. if the reader found nothing at all, any classifier plate is
           normalized and used as a last resort;
        4. otherwise there is no plate.

    An implausible reader plate is dropped even when the classifier found
    nothing, while an implausible classifier plate is kept when the reader was
    silent. Candidates are never combined.
    """
    if is_plausible_plate(reader_plate):
        logger.debug(f"Prioritizing Roboflow plate detection: {reader_plate}")
        return reader_plate

    if is_plausible_plate(classifier_plate):
        logger.debug("Using Gemini plate detection as fallback")
        return normalize_plate(classifier_plate) or None

    if not reader_plate and classifier_plate:
        logger.debug("Using unverified Gemini plate, Roboflow found nothing")
        return normalize_plate(classifier_plate) or None

    return None
