# ABOUTME: Parameter schemas for the Transcript resource with form metadata.
# ABOUTME: Additional transcription options default to None, meaning "not set by the user".

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from assemblyFlow.base_params import OperationParams
from assemblyFlow.exceptions import ValidationError

SPEECH_MODELS = ["universal", "slam-1", "best"]
SUMMARY_MODELS = ["informative", "conversational", "catchy"]
SUMMARY_TYPES = ["bullets", "bullets_verbose", "gist", "headline", "paragraph"]
TRANSCRIPT_STATUSES = ["", "queued", "processing", "completed", "error"]
SUBTITLE_FORMATS = ["srt", "vtt"]
DEFAULT_CHARS_PER_CAPTION = 32

PII_POLICIES = [
    "account_number", "banking_information", "blood_type", "credit_card_cvv",
    "credit_card_expiration", "credit_card_number", "date", "date_interval",
    "date_of_birth", "drivers_license", "drug", "duration", "email_address",
    "event", "filename", "gender_sexuality", "healthcare_number", "injury",
    "ip_address", "language", "location", "marital_status", "medical_condition",
    "medical_process", "money_amount", "nationality", "number_sequence",
    "occupation", "organization", "passport_number", "password", "person_age",
    "person_name", "phone_number", "physical_attribute", "political_affiliation",
    "religion", "statistics", "time", "url", "us_driver_license",
    "us_healthcare_number", "us_social_security_number", "username",
    "vehicle_id", "zodiac_sign",
]


def _flag(label: str, tooltip: str) -> Any:
    return field(default=None, metadata={"label": label, "widget": "checkbox", "tooltip": tooltip})


def _number(label: str, tooltip: str) -> Any:
    return field(default=None, metadata={"label": label, "widget": "number", "tooltip": tooltip})


def _text(label: str, tooltip: str, **extra: Any) -> Any:
    return field(default=None, metadata={"label": label, "widget": "text", "tooltip": tooltip, **extra})


def _collection(label: str, tooltip: str) -> Any:
    return field(default=None, metadata={"label": label, "widget": "collection", "tooltip": tooltip})


@dataclass
class TranscriptOptions(OperationParams):
    """Optional transcription settings sent in the create request body."""

    # Speech recognition
    speech_model: Optional[str] = field(
        default=None,
        metadata={"label": "Speech Model", "widget": "dropdown", "options": SPEECH_MODELS},
    )
    speech_models: Optional[str] = _text(
        "Speech Models (Priority Order)",
        "Comma-separated models tried in order, e.g. \"slam-1,universal\"",
        validate="assemblyFlow.validators:validate_comma_list",
    )
    language_code: Optional[str] = _text("Language Code", "Language of the audio, e.g. \"en\"")
    language_codes: Optional[str] = _text(
        "Language Codes (Code Switching)",
        "Comma-separated language codes spoken in the audio",
        validate="assemblyFlow.validators:validate_comma_list",
    )
    language_detection: Optional[bool] = _flag(
        "Language Detection", "Whether to detect the dominant language automatically"
    )
    language_detection_options: Optional[Dict[str, Any]] = _collection(
        "Language Detection Options",
        "Wrapper {\"options\": {expected_languages, fallback_language, code_switching, "
        "code_switching_confidence_threshold}}",
    )
    language_confidence_threshold: Optional[float] = _number(
        "Language Confidence Threshold", "Minimum language confidence (0-1) to accept the transcript"
    )
    punctuate: Optional[bool] = _flag("Punctuate", "Whether to add punctuation")
    format_text: Optional[bool] = _flag("Format Text", "Whether to apply casing and number formatting")
    disfluencies: Optional[bool] = _flag("Disfluencies", "Whether to keep filler words such as \"um\"")
    multichannel: Optional[bool] = _flag("Multichannel", "Whether to transcribe each channel separately")
    dual_channel: Optional[bool] = _flag("Dual Channel", "Deprecated, use Multichannel")
    audio_start_from: Optional[int] = _number("Audio Start From (Ms)", "Start transcribing at this offset")
    audio_end_at: Optional[int] = _number("Audio End At (Ms)", "Stop transcribing at this offset")
    speech_threshold: Optional[float] = _number(
        "Speech Threshold", "Reject audio with less than this fraction (0-1) of speech"
    )

    # Speaker diarization
    speaker_labels: Optional[bool] = _flag("Speaker Labels", "Whether to detect speakers")
    speakers_expected: Optional[int] = _number("Speakers Expected", "Exact number of speakers")
    speaker_options: Optional[Dict[str, Any]] = _collection(
        "Speaker Options",
        "Wrapper {\"options\": {min_speakers_expected, max_speakers_expected}}",
    )

    # Audio intelligence
    auto_highlights: Optional[bool] = _flag("Auto Highlights", "Whether to extract key phrases")
    content_safety: Optional[bool] = _flag("Content Safety", "Whether to detect sensitive content")
    content_safety_confidence: Optional[int] = _number(
        "Content Safety Confidence Threshold", "Confidence (25-100) required to flag content"
    )
    iab_categories: Optional[bool] = _flag("IAB Categories", "Whether to detect topics")
    sentiment_analysis: Optional[bool] = _flag("Sentiment Analysis", "Whether to score sentence sentiment")
    entity_detection: Optional[bool] = _flag("Entity Detection", "Whether to detect named entities")
    auto_chapters: Optional[bool] = _flag("Auto Chapters", "Whether to summarize chapters")
    summarization: Optional[bool] = _flag("Summarization", "Whether to summarize the transcript")
    summary_model: Optional[str] = field(
        default=None,
        metadata={"label": "Summary Model", "widget": "dropdown", "options": SUMMARY_MODELS},
    )
    summary_type: Optional[str] = field(
        default=None,
        metadata={"label": "Summary Type", "widget": "dropdown", "options": SUMMARY_TYPES},
    )

    # PII and profanity
    filter_profanity: Optional[bool] = _flag("Filter Profanity", "Whether to mask profanity")
    redact_pii: Optional[bool] = _flag("Redact PII", "Whether to redact personal information")
    redact_pii_sub: Optional[str] = field(
        default=None,
        metadata={"label": "Redact PII Substitution", "widget": "dropdown", "options": ["hash", "entity_name"]},
    )
    redact_pii_audio: Optional[bool] = _flag("Redact PII Audio", "Whether to produce redacted audio")
    redact_pii_audio_quality: Optional[str] = field(
        default=None,
        metadata={"label": "Redact PII Audio Quality", "widget": "dropdown", "options": ["mp3", "wav"]},
    )
    redact_pii_audio_options: Optional[Dict[str, Any]] = _collection(
        "Redact PII Audio Options",
        "Wrapper {\"options\": {return_redacted_no_speech_audio}}",
    )
    redact_pii_policies: Optional[List[str]] = field(
        default=None,
        metadata={"label": "Redact PII Policies", "widget": "multi", "options": PII_POLICIES},
    )

    # Webhooks
    webhook_url: Optional[str] = _text(
        "Webhook URL",
        "URL notified when the transcript is ready",
        validate="assemblyFlow.validators:validate_url",
    )
    webhook_auth_header_name: Optional[str] = _text("Webhook Auth Header", "Header sent with the webhook")
    webhook_auth_header_value: Optional[str] = _text("Webhook Auth Value", "Value of the webhook header")

    # Custom vocabulary
    keyterms_prompt: Optional[Dict[str, Any]] = _collection(
        "Key Terms", "Collection {\"term\": [{\"value\": ...}]} of terms to boost"
    )
    custom_spelling: Optional[Dict[str, Any]] = _collection(
        "Custom Spelling", "Collection {\"spelling\": [{\"from\": ..., \"to\": ...}]}"
    )

    # Speech understanding
    speech_understanding_translation: Optional[Dict[str, Any]] = _collection(
        "Speech Understanding - Translation",
        "Wrapper {\"translation\": {target_languages, formal, match_original_utterance}}",
    )
    speech_understanding_speaker_id: Optional[Dict[str, Any]] = _collection(
        "Speech Understanding - Speaker Identification",
        "Wrapper {\"speaker_identification\": {speaker_type, known_values}}",
    )
    speech_understanding_formatting: Optional[Dict[str, Any]] = _collection(
        "Speech Understanding - Custom Formatting",
        "Wrapper {\"custom_formatting\": {date_format, phone_number_format, email_format}}",
    )


@dataclass
class CreateTranscriptParams(OperationParams):
    """Submit an audio URL for transcription."""

    audio_url: str = field(
        default="",
        metadata={
            "label": "Audio URL",
            "widget": "text",
            "required": True,
            "validate": "assemblyFlow.validators:validate_url",
            "tooltip": "Public URL of the media, or the upload_url returned by File > Upload",
        }
    )
    additional_fields: Dict[str, Any] = field(
        default_factory=dict,
        metadata={
            "label": "Additional Fields",
            "widget": "collection",
            "tooltip": "Optional transcription settings",
        }
    )
    wait_for_completion: bool = field(
        default=False,
        metadata={
            "label": "Wait for Completion",
            "widget": "checkbox",
            "tooltip": "Poll every few seconds until the transcript is completed or failed",
        }
    )
    options: TranscriptOptions = field(init=False, repr=False)

    def __post_init__(self):
        """Validate the additional fields against TranscriptOptions."""
        if not isinstance(self.additional_fields, dict):
            raise ValidationError("Parameter 'Additional Fields' must be a mapping")
        self.options = TranscriptOptions.from_mapping(self.additional_fields)

    def warnings(self) -> List[str]:
        return super().warnings() + self.options.warnings()


@dataclass
class TranscriptIdParams(OperationParams):
    """Operations addressing a single transcript."""

    transcript_id: str = field(
        default="",
        metadata={
            "label": "Transcript ID",
            "widget": "text",
            "required": True,
            "tooltip": "ID of the transcript",
        }
    )


@dataclass
class ListFilters(OperationParams):
    status: str = field(
        default="",
        metadata={"label": "Status", "widget": "dropdown", "options": TRANSCRIPT_STATUSES},
    )
    created_on: str = field(
        default="",
        metadata={"label": "Created On (After)", "widget": "text", "tooltip": "Date in YYYY-MM-DD format"},
    )
    before_id: str = field(
        default="",
        metadata={"label": "Before ID", "widget": "text", "tooltip": "Return transcripts created before this one"},
    )
    after_id: str = field(
        default="",
        metadata={"label": "After ID", "widget": "text", "tooltip": "Return transcripts created after this one"},
    )


@dataclass
class ListTranscriptsParams(OperationParams):
    """List transcripts, newest first."""

    limit: int = field(
        default=50,
        metadata={"label": "Limit", "widget": "number", "tooltip": "Max number of results to return"},
    )
    list_additional_fields: Dict[str, Any] = field(
        default_factory=dict,
        metadata={"label": "Additional Fields", "widget": "collection"},
    )
    filters: ListFilters = field(init=False, repr=False)

    def __post_init__(self):
        """Validate limit is positive and filters are known."""
        if self.limit < 1:
            raise ValidationError(f"Limit must be at least 1, got {self.limit}")
        if not isinstance(self.list_additional_fields, dict):
            raise ValidationError("Parameter 'Additional Fields' must be a mapping")
        self.filters = ListFilters.from_mapping(self.list_additional_fields)


@dataclass
class SubtitlesParams(OperationParams):
    """Export a completed transcript as SRT or VTT captions."""

    transcript_id: str = field(
        default="",
        metadata={"label": "Transcript ID", "widget": "text", "required": True},
    )
    subtitles_format: str = field(
        default="srt",
        metadata={"label": "Format", "widget": "dropdown", "options": SUBTITLE_FORMATS},
    )
    chars_per_caption: int = field(
        default=DEFAULT_CHARS_PER_CAPTION,
        metadata={
            "label": "Characters Per Caption",
            "widget": "number",
            "tooltip": "Maximum number of characters per caption",
        }
    )

    def __post_init__(self):
        """Validate characters per caption is positive."""
        if self.chars_per_caption < 1:
            raise ValidationError(f"Characters per caption must be positive, got {self.chars_per_caption}")


@dataclass
class WordSearchParams(OperationParams):
    """Search a transcript for words or phrases."""

    transcript_id: str = field(
        default="",
        metadata={"label": "Transcript ID", "widget": "text", "required": True},
    )
    words_input_type: str = field(
        default="list",
        metadata={"label": "Input Type", "widget": "dropdown", "options": ["list", "collection"]},
    )
    words_list: str = field(
        default="",
        metadata={
            "label": "Words to Search",
            "widget": "text",
            "required": True,
            "show": {"words_input_type": ["list"]},
            "tooltip": "Comma-separated words or phrases",
        }
    )
    words_collection: Dict[str, Any] = field(
        default_factory=dict,
        metadata={
            "label": "Words to Search",
            "widget": "collection",
            "show": {"words_input_type": ["collection"]},
            "tooltip": "Collection {\"word\": [{\"term\": ...}]}",
        }
    )
