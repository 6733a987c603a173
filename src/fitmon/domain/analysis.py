"""Request and result types for a single analysis call."""

from dataclasses import dataclass, field
from enum import Enum


class AnalysisType(str, Enum):
    """Kind of description the caller submitted."""

    WORKOUT = "workout"
    FOOD = "food"


@dataclass(frozen=True)
class AnalysisRequest:
    """Validated inbound request."""

    input: str
    type: AnalysisType


@dataclass(frozen=True)
class AnalysisSuccess:
    """Payload to return with 200, already validated and clamped."""

    payload: dict[str, object] = field(default_factory=dict)
    calories: float = 0


@dataclass(frozen=True)
class AnalysisFailure:
    """Error message to return as ``{"error": message}``."""

    message: str
    status_code: int = 500


AnalysisResult = AnalysisSuccess | AnalysisFailure
