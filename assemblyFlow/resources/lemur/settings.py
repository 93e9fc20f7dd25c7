# ABOUTME: Parameter schemas for the LeMUR resource with form metadata.
# ABOUTME: Generation operations share transcript selection and model settings.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from assemblyFlow.base_params import OperationParams
from assemblyFlow.exceptions import ValidationError

LEMUR_MODELS = [
    "anthropic/claude-3-haiku",
    "anthropic/claude-3-opus",
    "anthropic/claude-3-5-haiku-20241022",
    "anthropic/claude-opus-4-20250514",
    "anthropic/claude-sonnet-4-20250514",
]
DEFAULT_LEMUR_MODEL = "anthropic/claude-sonnet-4-20250514"


@dataclass
class LemurGenerateParams(OperationParams):
    """Settings shared by the LeMUR generation operations."""

    transcript_ids: str = field(
        default="",
        metadata={
            "label": "Transcript IDs",
            "widget": "text",
            "required": True,
            "validate": "assemblyFlow.validators:validate_comma_list",
            "tooltip": "Comma-separated list of transcript IDs to use as context",
        }
    )
    final_model: str = field(
        default=DEFAULT_LEMUR_MODEL,
        metadata={"label": "Final Model", "widget": "dropdown", "options": LEMUR_MODELS},
    )
    temperature: float = field(
        default=0,
        metadata={"label": "Temperature", "widget": "number", "tooltip": "Temperature for response generation (0-1)"},
    )
    max_output_size: int = field(
        default=2000,
        metadata={"label": "Max Output Size", "widget": "number", "tooltip": "Maximum number of tokens in the response"},
    )

    def __post_init__(self):
        """Validate temperature is between 0 and 1."""
        if not 0.0 <= self.temperature <= 1.0:
            raise ValidationError(f"Temperature must be between 0 and 1, got {self.temperature}")
        if self.max_output_size < 1:
            raise ValidationError(f"Max output size must be positive, got {self.max_output_size}")


@dataclass
class SummaryParams(LemurGenerateParams):
    context: str = field(
        default="",
        metadata={"label": "Context", "widget": "text", "tooltip": "Extra context about the transcripts"},
    )


@dataclass
class QuestionAnswerParams(LemurGenerateParams):
    context: str = field(
        default="",
        metadata={"label": "Context", "widget": "text", "tooltip": "Extra context about the transcripts"},
    )
    questions: Dict[str, Any] = field(
        default_factory=dict,
        metadata={
            "label": "Questions",
            "widget": "collection",
            "tooltip": (
                "Collection {\"question\": [{question, answer_type: format|options, "
                "answer_format, answer_options: {\"option\": [{\"value\": ...}]}}]}"
            ),
        }
    )


@dataclass
class TaskParams(LemurGenerateParams):
    prompt: str = field(
        default="",
        metadata={
            "label": "Prompt",
            "widget": "text",
            "required": True,
            "tooltip": "Custom prompt for LeMUR to execute",
        }
    )


@dataclass
class LemurRequestParams(OperationParams):
    """Operations addressing a previous LeMUR request."""

    request_id: str = field(
        default="",
        metadata={"label": "LeMUR Request ID", "widget": "text", "required": True},
    )
