# -*- coding: utf-8 -*-
import asyncio
import re
from dataclasses import dataclass
from typing import Any, Awaitable, Generic, Optional, TypeVar

import orjson as json
from loguru import logger

from app import config

T = TypeVar("T")

NON_ALPHANUMERIC = re.compile(r"[^A-Z0-9]", re.IGNORECASE)
WHITESPACE = re.compile(r"\s+")
CODE_FENCE_OPEN = re.compile(r"```json", re.IGNORECASE)
CODE_FENCE = "```"


class DependencyError(Exception):
    """Raised inside a dependency call when the service reports its own failure."""

    def __init__(self, service: str, message: str):
        self.service = service
        self.message = message
        super().__init__(f"{service}: {message}")


@dataclass(frozen=True)
class DependencyResult(Generic[T]):
    """Outcome of a single external call: either a value or the error that replaced it."""

    value: Optional[T] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def value_or(self, default: T) -> T:
        return self.value if self.ok else default


async def call_dependency(
    service: str, awaitable: Awaitable[T], timeout: float
) -> DependencyResult[T]:
    """
    Await an external call with a bounded wait, turning any failure into a result.

    Args:
        service (str): Name used in the logs.
        awaitable (Awaitable[T]): The call to await.
        timeout (float): Seconds to wait before giving up.

    Returns:
        DependencyResult[T]: The value, or the error that prevented it.
    """
    try:
        value = await asyncio.wait_for(awaitable, timeout=timeout)
    except asyncio.TimeoutError as exc:
        logger.error(f"{service} timed out after {timeout}s")
        return DependencyResult(error=exc)
    except DependencyError as exc:
        logger.error(f"{service} returned error: {exc.message}")
        return DependencyResult(error=exc)
    except Exception as exc:
        logger.error(f"{service} call failed: {exc!r}")
        return DependencyResult(error=exc)
    return DependencyResult(value=value)


def normalize_plate(plate: Any) -> str:
    """
    Strip every non-alphanumeric character and uppercase the result.
    """
    if plate is None:
        return ""
    return NON_ALPHANUMERIC.sub("", str(plate)).upper()


def is_plausible_plate(plate: Any) -> bool:
    """
    Coarse plate shape check: 7 to 11 characters containing two letters
    followed by a digit. Not a legal plate validator.
    """
    if not isinstance(plate, str):
        return False
    if not config.PLATE_MIN_LENGTH <= len(plate) <= config.PLATE_MAX_LENGTH:
        return False
    return re.search(config.PLATE_PLAUSIBLE_PATTERN, plate) is not None


def find_regional_plate(payload: Any) -> Optional[str]:
    """
    Serialize a payload, drop all whitespace and search it for a regional plate.

    Args:
        payload (Any): Any JSON-serializable value.

    Returns:
        Optional[str]: The first match, uppercased, or None.
    """
    text = json.dumps(payload).decode("utf-8")
    text = WHITESPACE.sub("", text)
    match = re.search(config.PLATE_REGIONAL_PATTERN, text, re.IGNORECASE)
    if match:
        return match.group(0).upper()
    return None


def find_text_field(
    payload: Any,
    field: str = None,
    min_length: int = None,
    max_depth: int = None,
    max_nodes: int = None,
) -> Optional[str]:
    """
    Depth-first search for the first string value stored under `field` whose
    length is at least `min_length`. Depth and number of visited nodes are
    bounded so huge or hostile payloads can't blow up the search.
    """
    field = field or config.PLATE_TEXT_FIELD
    min_length = min_length or config.PLATE_TEXT_MIN_LENGTH
    max_depth = max_depth or config.PLATE_SEARCH_MAX_DEPTH
    max_nodes = max_nodes or config.PLATE_SEARCH_MAX_NODES

    visited = 0
    stack = [(payload, 0)]
    while stack:
        node, depth = stack.pop()
        visited += 1
        if visited > max_nodes:
            logger.debug(f"Stopped text search after {max_nodes} nodes")
            return None
        if isinstance(node, dict):
            value = node.get(field)
            if isinstance(value, str) and len(value) >= min_length:
                return value
            children = list(node.values())
        elif isinstance(node, (list, tuple)):
            children = list(node)
        else:
            continue
        if depth >= max_depth:
            continue
        # Reversed so the first child is popped first
        for child in reversed(children):
            if isinstance(child, (dict, list, tuple)):
                stack.append((child, depth + 1))
    return None


def strip_code_fences(text: str) -> str:
    """
    Remove markdown code-fence markup a model may wrap its JSON reply in.
    """
    text = CODE_FENCE_OPEN.sub("", text)
    return text.replace(CODE_FENCE, "").strip()
