"""Prompt-injection screening for user descriptions."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

SANITIZED_FALLBACK = "food item"
MAX_INPUT_LENGTH = 200

SUSPICIOUS_PATTERNS: tuple[str, ...] = (
    "ignore previous",
    "ignore above",
    "disregard",
    "forget",
    "system:",
    "assistant:",
    "user:",
    "```",
    "instructions:",
    "new rules",
)

_STRUCTURAL_CHARS = re.compile(r"[<>{}\[\]\\]")


class InputVerdict(Enum):
    """Outcome of screening a description."""

    CLEAN = "clean"
    SUSPICIOUS = "suspicious"


class InputClassifier(Protocol):
    """Interface for deciding whether a description is safe to embed."""

    def classify(self, text: str) -> InputVerdict:
        """Return the verdict for the raw text."""


@dataclass(frozen=True)
class BlocklistClassifier(InputClassifier):
    """Flags text containing any blocklisted substring, ignoring case."""

    patterns: tuple[str, ...] = SUSPICIOUS_PATTERNS

    def classify(self, text: str) -> InputVerdict:
        lowered = text.lower()
        if any(pattern in lowered for pattern in self.patterns):
            return InputVerdict.SUSPICIOUS
        return InputVerdict.CLEAN


def sanitize_input(
    text: str, classifier: InputClassifier | None = None
) -> str:
    """Return text that is safe to embed in a prompt.

    Suspicious text is replaced wholesale with ``SANITIZED_FALLBACK``; it is
    never partially cleaned. Clean text loses structural characters and is
    cut to ``MAX_INPUT_LENGTH``.
    """
    resolved = classifier or BlocklistClassifier()
    if resolved.classify(text) is InputVerdict.SUSPICIOUS:
        return SANITIZED_FALLBACK
    return _STRUCTURAL_CHARS.sub("", text)[:MAX_INPUT_LENGTH].strip()
