# ABOUTME: Parameter schemas for the LLM gateway resource with form metadata.
# ABOUTME: Speech understanding fields are shown per selected task type.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from assemblyFlow.base_params import OperationParams
from assemblyFlow.exceptions import ValidationError
from assemblyFlow.resources.common import collection_entries

GATEWAY_MODELS = [
    "claude-3-haiku-20240307",
    "claude-3-5-haiku-20241022",
    "claude-opus-4-20250514",
    "claude-sonnet-4-20250514",
    "claude-haiku-4-5-20251001",
    "claude-sonnet-4-5-20250929",
    "gemini-2.5-flash",
    "gemini-2.5-flash-lite",
    "gemini-2.5-pro",
    "gemini-3-flash-preview",
    "gemini-3-pro-preview",
    "gpt-oss-120b",
    "gpt-oss-20b",
    "gpt-4.1",
    "gpt-5",
    "gpt-5-mini",
    "gpt-5-nano",
    "gpt-5.1",
    "gpt-5.2",
]
DEFAULT_GATEWAY_MODEL = "claude-sonnet-4-5-20250929"
MESSAGE_ROLES = ["system", "user", "assistant"]
TASK_TYPES = ["translation", "speaker_identification", "custom_formatting"]


@dataclass
class ChatOptions(OperationParams):
    """Optional generation settings; None means not sent."""

    max_tokens: Optional[int] = field(
        default=None,
        metadata={"label": "Max Tokens", "widget": "number", "tooltip": "Maximum number of tokens to generate"},
    )
    temperature: Optional[float] = field(
        default=None,
        metadata={"label": "Temperature", "widget": "number", "tooltip": "Temperature for response generation (0-2)"},
    )
    tool_choice: Optional[str] = field(
        default=None,
        metadata={"label": "Tool Choice", "widget": "dropdown", "options": ["auto", "none"]},
    )
    tools: Optional[str] = field(
        default=None,
        metadata={
            "label": "Tools",
            "widget": "json",
            "validate": "assemblyFlow.validators:validate_json",
            "tooltip": "JSON array of tool definitions the model may call",
        }
    )

    def __post_init__(self):
        """Validate temperature is between 0 and 2."""
        if self.temperature is not None and not 0.0 <= self.temperature <= 2.0:
            raise ValidationError(f"Temperature must be between 0 and 2, got {self.temperature}")


@dataclass
class ChatCompletionParams(OperationParams):
    """Send a prompt and/or messages to a model behind the LLM gateway."""

    model: str = field(
        default=DEFAULT_GATEWAY_MODEL,
        metadata={"label": "Model", "widget": "dropdown", "options": GATEWAY_MODELS},
    )
    prompt: str = field(
        default="",
        metadata={"label": "Prompt", "widget": "text", "tooltip": "Single user prompt"},
    )
    messages: Dict[str, Any] = field(
        default_factory=dict,
        metadata={
            "label": "Messages",
            "widget": "collection",
            "tooltip": "Collection {\"message\": [{\"role\": ..., \"content\": ...}]}",
        }
    )
    additional_options: Dict[str, Any] = field(
        default_factory=dict,
        metadata={"label": "Additional Options", "widget": "collection"},
    )
    options: ChatOptions = field(init=False, repr=False)

    def __post_init__(self):
        """Validate additional options and message roles."""
        if not isinstance(self.additional_options, dict):
            raise ValidationError("Parameter 'Additional Options' must be a mapping")
        self.options = ChatOptions.from_mapping(self.additional_options)
        for message in self.message_list():
            if message.get("role") not in MESSAGE_ROLES:
                raise ValidationError(
                    f"Invalid message role {message.get('role')!r}. "
                    f"Expected one of: {', '.join(MESSAGE_ROLES)}"
                )

    def message_list(self) -> List[Dict[str, Any]]:
        return [dict(entry) for entry in collection_entries(self.messages, "message", "Messages")]

    def warnings(self) -> List[str]:
        return super().warnings() + self.options.warnings()


_TRANSLATION = {"task_type": ["translation"]}
_SPEAKER_ID = {"task_type": ["speaker_identification"]}
_FORMATTING = {"task_type": ["custom_formatting"]}


@dataclass
class SpeechUnderstandingParams(OperationParams):
    """Run one speech understanding task on an existing transcript."""

    transcript_id: str = field(
        default="",
        metadata={"label": "Transcript ID", "widget": "text", "required": True},
    )
    task_type: str = field(
        default="translation",
        metadata={"label": "Task Type", "widget": "dropdown", "options": TASK_TYPES},
    )
    target_languages: str = field(
        default="",
        metadata={
            "label": "Target Languages",
            "widget": "text",
            "required": True,
            "show": _TRANSLATION,
            "validate": "assemblyFlow.validators:validate_comma_list",
            "tooltip": "Comma-separated list of target language codes (e.g., \"es,de,fr\")",
        }
    )
    formal: bool = field(
        default=True,
        metadata={"label": "Use Formal Language", "widget": "checkbox", "show": _TRANSLATION},
    )
    match_original_utterance: bool = field(
        default=False,
        metadata={
            "label": "Match Original Utterance",
            "widget": "checkbox",
            "show": _TRANSLATION,
            "tooltip": "Return translations inside the utterances array (needs Speaker Labels)",
        }
    )
    speaker_type: str = field(
        default="role",
        metadata={"label": "Speaker Type", "widget": "dropdown", "options": ["role", "name"], "show": _SPEAKER_ID},
    )
    known_values: str = field(
        default="",
        metadata={
            "label": "Known Speaker Values",
            "widget": "text",
            "show": _SPEAKER_ID,
            "tooltip": "Comma-separated roles or names; required when Speaker Type is role",
        }
    )
    date_format: str = field(
        default="",
        metadata={"label": "Date Format", "widget": "text", "show": _FORMATTING, "tooltip": "e.g. \"mm/dd/yyyy\""},
    )
    phone_number_format: str = field(
        default="",
        metadata={"label": "Phone Number Format", "widget": "text", "show": _FORMATTING, "tooltip": "e.g. \"(xxx)xxx-xxxx\""},
    )
    email_format: str = field(
        default="",
        metadata={"label": "Email Format", "widget": "text", "show": _FORMATTING, "tooltip": "e.g. \"username@domain.com\""},
    )
