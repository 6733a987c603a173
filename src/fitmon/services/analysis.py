"""Food and workout analysis backed by a language model."""

import json
import logging
from dataclasses import dataclass, field

from pydantic import ValidationError

from fitmon.adapters.anthropic_client import ModelClient
from fitmon.domain.analysis import (
    AnalysisFailure,
    AnalysisRequest,
    AnalysisResult,
    AnalysisSuccess,
    AnalysisType,
)
from fitmon.domain.estimates import FoodEstimate, WorkoutEstimate
from fitmon.services.prompts import SYSTEM_PROMPT, build_prompt
from fitmon.services.sanitizer import (
    MAX_INPUT_LENGTH,
    BlocklistClassifier,
    InputClassifier,
    sanitize_input,
)

_logger = logging.getLogger(__name__)


_INVALID_DATA_MESSAGES = {
    AnalysisType.WORKOUT: "Invalid workout data",
    AnalysisType.FOOD: "Invalid food data",
}


def parse_analysis_request(body: object) -> AnalysisRequest | AnalysisFailure:
    """Validate a decoded JSON body into an analysis request."""
    payload = body if isinstance(body, dict) else {}
    text = payload.get("input")
    if not text or not isinstance(text, str):
        return AnalysisFailure("Invalid input", status_code=400)
    if len(text) > MAX_INPUT_LENGTH:
        return AnalysisFailure(
            f"Input too long (max {MAX_INPUT_LENGTH} characters)", status_code=400
        )
    try:
        analysis_type = AnalysisType(payload.get("type"))
    except ValueError:
        return AnalysisFailure("Invalid type", status_code=400)
    return AnalysisRequest(input=text, type=analysis_type)


@dataclass
class AnalysisService:
    """Builds prompts, calls the model and validates its estimates."""

    client: ModelClient
    model: str
    max_tokens: int
    temperature: float
    classifier: InputClassifier = field(default_factory=BlocklistClassifier)

    async def analyze(self, request: AnalysisRequest) -> AnalysisResult:
        """Return a clamped estimate, a pass-through model error, or a failure.

        Transport errors from the client propagate to the caller.
        """
        sanitized = sanitize_input(request.input, self.classifier)
        reply = await self.client.complete(
            model=self.model,
            system=SYSTEM_PROMPT,
            prompt=build_prompt(request.type, sanitized),
            max_tokens=self.max_tokens,
            temperature=self.temperature,
        )
        if not reply.ok:
            _logger.error("Model API error: status=%s", reply.status_code)
            return AnalysisFailure("Analysis service unavailable")

        parsed = _parse_reply(reply.text)
        if parsed is None:
            _logger.error("Failed to parse model response: %r", reply.text)
            return AnalysisFailure("Invalid response format")

        if isinstance(parsed, dict) and parsed.get("error"):
            result = AnalysisSuccess(payload={"error": str(parsed["error"])})
        else:
            result = _validate_estimate(request.type, parsed)

        if isinstance(result, AnalysisSuccess):
            _logger.info(
                '%s: "%s..." -> %s cal',
                request.type.value,
                sanitized[:50],
                result.calories,
            )
        return result


def _reject_constant(name: str) -> object:
    raise ValueError(f"Unsupported JSON constant: {name}")


def _parse_reply(text: str | None) -> object | None:
    """Decode the model's text as JSON; ``None`` when it is not JSON."""
    if text is None:
        return None
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError:
        return None


def _validate_estimate(analysis_type: AnalysisType, parsed: object) -> AnalysisResult:
    """Validate the model's estimate and clamp its calorie field."""
    try:
        if analysis_type is AnalysisType.WORKOUT:
            workout = WorkoutEstimate.model_validate(parsed).clamped()
            return AnalysisSuccess(
                payload=workout.model_dump(exclude_none=True),
                calories=workout.calories_burned,
            )
        food = FoodEstimate.model_validate(parsed).clamped()
        return AnalysisSuccess(
            payload=food.model_dump(exclude_none=True),
            calories=food.calories,
        )
    except ValidationError as exc:
        _logger.warning(
            "Model returned malformed %s estimate: %s",
            analysis_type.value,
            exc.errors(include_input=False),
        )
        return AnalysisFailure(_INVALID_DATA_MESSAGES[analysis_type])
