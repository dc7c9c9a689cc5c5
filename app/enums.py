# -*- coding: utf-8 -*-
from enum import Enum


class ViolationTypeEnum(str, Enum):
    NO_HELMET = "no_helmet"
    SIGNAL_JUMPING = "signal_jumping"
    WRONG_SIDE_DRIVING = "wrong_side_driving"
    ZEBRA_CROSSING_VIOLATION = "zebra_crossing_violation"
    ILLEGAL_PARKING = "illegal_parking"


class PipelineStageEnum(str, Enum):
    START = "start"
    AUTHENTICITY_DONE = "authenticity_done"
    MEDIA_FETCHED = "media_fetched"
    PLATE_READ_DONE = "plate_read_done"
    CLASSIFIED = "classified"
    RECONCILED = "reconciled"
    SCORED = "scored"
    DONE = "done"
