# ABOUTME: Request builders for the Transcript resource.
# ABOUTME: Turns typed parameters into descriptors for the /v2/transcript endpoints.

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from assemblyFlow.client_config import ClientConfig
from assemblyFlow.request import HttpRequestDescriptor
from assemblyFlow.resources.common import (
    collection_entries,
    flatten_collection,
    has_text,
    is_set,
    require_mapping,
    speaker_identification,
    split_csv,
    unwrap_options,
)
from .settings import (
    DEFAULT_CHARS_PER_CAPTION,
    CreateTranscriptParams,
    ListTranscriptsParams,
    SubtitlesParams,
    TranscriptIdParams,
    TranscriptOptions,
    WordSearchParams,
)

# Options needing a transform before they go into the body.
_SPECIAL_OPTIONS = frozenset(
    {
        "keyterms_prompt",
        "custom_spelling",
        "language_detection_options",
        "language_codes",
        "speech_models",
        "speaker_options",
        "redact_pii_audio_options",
        "speech_understanding_translation",
        "speech_understanding_speaker_id",
        "speech_understanding_formatting",
    }
)

JSON_HEADERS = {"Content-Type": "application/json"}


def _transcript_url(config: ClientConfig, transcript_id: str, suffix: str = "") -> str:
    return config.api_url(f"/v2/transcript/{transcript_id}{suffix}")


def build_transcript_body(audio_url: str, options: TranscriptOptions) -> Dict[str, Any]:
    """Assemble the create request body, keeping only values the user set."""
    body: Dict[str, Any] = {"audio_url": audio_url}

    for name, value in options.to_dict().items():
        if name in _SPECIAL_OPTIONS or value is None:
            continue
        body[name] = value

    if options.keyterms_prompt is not None:
        body["keyterms_prompt"] = flatten_collection(options.keyterms_prompt, "term", "value", "Key Terms")

    if options.custom_spelling is not None:
        # The API expects "from" as a list even though one string is entered.
        body["custom_spelling"] = [
            {"from": [entry.get("from")], "to": entry.get("to")}
            for entry in collection_entries(options.custom_spelling, "spelling", "Custom Spelling")
        ]

    if has_text(options.language_codes):
        body["language_codes"] = split_csv(options.language_codes)
    if has_text(options.speech_models):
        body["speech_models"] = split_csv(options.speech_models)

    detection = unwrap_options(
        options.language_detection_options,
        ("expected_languages", "fallback_language", "code_switching", "code_switching_confidence_threshold"),
        label="Language Detection Options",
    )
    if isinstance(detection.get("expected_languages"), str):
        detection["expected_languages"] = split_csv(detection["expected_languages"])
    if detection:
        body["language_detection_options"] = detection

    speakers = unwrap_options(
        options.speaker_options,
        ("min_speakers_expected", "max_speakers_expected"),
        label="Speaker Options",
    )
    if speakers:
        body["speaker_options"] = speakers

    redaction = unwrap_options(
        options.redact_pii_audio_options,
        ("return_redacted_no_speech_audio",),
        label="Redact PII Audio Options",
    )
    if redaction:
        body["redact_pii_audio_options"] = redaction

    understanding = build_speech_understanding(options)
    if understanding is not None:
        body["speech_understanding"] = understanding

    return body


def _task_settings(wrapper: Optional[Mapping[str, Any]], task: str, label: str) -> Mapping[str, Any]:
    return require_mapping(require_mapping(wrapper, label).get(task), label)


def build_speech_understanding(options: TranscriptOptions) -> Optional[Dict[str, Any]]:
    """Build the speech_understanding block, or None when no task is configured."""
    translation = _task_settings(
        options.speech_understanding_translation, "translation", "Speech Understanding - Translation"
    )
    speaker_id = _task_settings(
        options.speech_understanding_speaker_id,
        "speaker_identification",
        "Speech Understanding - Speaker Identification",
    )
    formatting = _task_settings(
        options.speech_understanding_formatting, "custom_formatting", "Speech Understanding - Custom Formatting"
    )

    has_translation = has_text(translation.get("target_languages"))
    has_speaker_id = has_text(speaker_id.get("speaker_type"))
    formatting_fields = {
        "date": formatting.get("date_format"),
        "phone_number": formatting.get("phone_number_format"),
        "email": formatting.get("email_format"),
    }
    has_formatting = any(is_set(value) for value in formatting_fields.values())

    if not (has_translation or has_speaker_id or has_formatting):
        return None

    request: Dict[str, Any] = {}
    if has_translation:
        request["translation"] = {"target_languages": split_csv(translation["target_languages"])}
        for key in ("formal", "match_original_utterance"):
            if translation.get(key) is not None:
                request["translation"][key] = translation[key]

    if has_speaker_id:
        request["speaker_identification"] = speaker_identification(
            speaker_id["speaker_type"], speaker_id.get("known_values")
        )

    if has_formatting:
        request["custom_formatting"] = {
            key: value for key, value in formatting_fields.items() if is_set(value)
        }

    return {"request": request}


def build_create(
    params: CreateTranscriptParams, config: ClientConfig, binary: Mapping[str, Any]
) -> HttpRequestDescriptor:
    return HttpRequestDescriptor(
        method="POST",
        url=config.api_url("/v2/transcript"),
        headers=dict(JSON_HEADERS),
        body=build_transcript_body(params.audio_url, params.options),
    )


def build_get(params: TranscriptIdParams, config: ClientConfig, binary: Mapping[str, Any]) -> HttpRequestDescriptor:
    return HttpRequestDescriptor(method="GET", url=_transcript_url(config, params.transcript_id))


def build_delete(
    params: TranscriptIdParams, config: ClientConfig, binary: Mapping[str, Any]
) -> HttpRequestDescriptor:
    return HttpRequestDescriptor(method="DELETE", url=_transcript_url(config, params.transcript_id))


def build_list(
    params: ListTranscriptsParams, config: ClientConfig, binary: Mapping[str, Any]
) -> HttpRequestDescriptor:
    query: Dict[str, Any] = {"limit": params.limit}
    for name, value in params.filters.to_dict().items():
        if value:
            query[name] = value
    return HttpRequestDescriptor(method="GET", url=config.api_url("/v2/transcript"), query=query)


def build_get_sentences(
    params: TranscriptIdParams, config: ClientConfig, binary: Mapping[str, Any]
) -> HttpRequestDescriptor:
    return HttpRequestDescriptor(method="GET", url=_transcript_url(config, params.transcript_id, "/sentences"))


def build_get_paragraphs(
    params: TranscriptIdParams, config: ClientConfig, binary: Mapping[str, Any]
) -> HttpRequestDescriptor:
    return HttpRequestDescriptor(method="GET", url=_transcript_url(config, params.transcript_id, "/paragraphs"))


def build_get_redacted_audio(
    params: TranscriptIdParams, config: ClientConfig, binary: Mapping[str, Any]
) -> HttpRequestDescriptor:
    return HttpRequestDescriptor(
        method="GET", url=_transcript_url(config, params.transcript_id, "/redacted-audio")
    )


def build_get_subtitles(
    params: SubtitlesParams, config: ClientConfig, binary: Mapping[str, Any]
) -> HttpRequestDescriptor:
    query: Dict[str, Any] = {}
    # 32 is the API default; only send the value when it differs.
    if params.chars_per_caption != DEFAULT_CHARS_PER_CAPTION:
        query["chars_per_caption"] = params.chars_per_caption
    return HttpRequestDescriptor(
        method="GET",
        url=_transcript_url(config, params.transcript_id, f"/{params.subtitles_format}"),
        query=query,
    )


def build_word_search(
    params: WordSearchParams, config: ClientConfig, binary: Mapping[str, Any]
) -> HttpRequestDescriptor:
    if params.words_input_type == "list":
        words = params.words_list
    else:
        terms = flatten_collection(params.words_collection, "word", "term", "Words to Search")
        words = ",".join(term for term in terms if term is not None)
    return HttpRequestDescriptor(
        method="GET",
        url=_transcript_url(config, params.transcript_id, "/word-search"),
        query={"words": words},
    )
