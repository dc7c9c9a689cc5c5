# -*- coding: utf-8 -*-
import os
from typing import List

from loguru import logger


def getenv_or_action(
    env_name: str, *, action: str = "raise", default: str = None
) -> str:
    """
    Get an environment variable or take an action if it's not set.

    Args:
        env_name (str): The name of the environment variable.
        action (str): One of "raise", "warn" or "ignore".
        default (str): Value returned when the variable is not set.

    Returns:
        str: The value of the environment variable (or the default).
    """
    if action not in ("raise", "warn", "ignore"):
        raise ValueError(f"Invalid action: {action}")
    value = os.getenv(env_name, default)
    if value is None:
        if action == "raise":
            raise EnvironmentError(f"Environment variable {env_name} is not set.")
        elif action == "warn":
            logger.warning(f"Environment variable {env_name} is not set.")
    return value


def getenv_list_or_action(
    env_name: str, *, action: str = "raise", default: str = None
) -> List[str]:
    """
    Get a comma-separated environment variable as a list.
    """
    value = getenv_or_action(env_name, action=action, default=default)
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


ENVIRONMENT = getenv_or_action("ENVIRONMENT", action="ignore", default="dev")

if ENVIRONMENT == "test":
    from app.config.test import *  # noqa: F401, F403
elif ENVIRONMENT == "prod":
    from app.config.prod import *  # noqa: F401, F403
else:
    from app.config.base import *  # noqa: F401, F403
