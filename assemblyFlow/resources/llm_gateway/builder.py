"""Request builders for the LLM gateway resource."""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping

from assemblyFlow.client_config import ClientConfig
from assemblyFlow.exceptions import InvalidToolsJson
from assemblyFlow.request import HttpRequestDescriptor
from assemblyFlow.resources.common import has_text, speaker_identification, split_csv
from .settings import ChatCompletionParams, SpeechUnderstandingParams

JSON_HEADERS = {"Content-Type": "application/json"}


def parse_tools(raw: Any) -> Any:
    """Parse the Tools field, which must be JSON text."""
    try:
        return json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise InvalidToolsJson(raw) from exc


def build_chat_completion(
    params: ChatCompletionParams, config: ClientConfig, binary: Mapping[str, Any]
) -> HttpRequestDescriptor:
    body: Dict[str, Any] = {"model": params.model}

    if params.prompt:
        body["prompt"] = params.prompt

    messages = [
        {"role": message.get("role"), "content": message.get("content")}
        for message in params.message_list()
    ]
    if messages:
        body["messages"] = messages

    options = params.options
    if options.temperature is not None:
        body["temperature"] = options.temperature
    if options.max_tokens is not None:
        body["max_tokens"] = options.max_tokens
    if options.tools:
        body["tools"] = parse_tools(options.tools)
    if options.tool_choice is not None:
        body["tool_choice"] = options.tool_choice

    return HttpRequestDescriptor(
        method="POST",
        url=config.llm_gateway("/v1/chat/completions"),
        headers=dict(JSON_HEADERS),
        body=body,
    )


def build_understanding_request(params: SpeechUnderstandingParams) -> Dict[str, Any]:
    request: Dict[str, Any] = {}
    if params.task_type == "translation":
        request["translation"] = {
            "target_languages": split_csv(params.target_languages),
            "formal": params.formal,
            "match_original_utterance": params.match_original_utterance,
        }
    elif params.task_type == "speaker_identification":
        request["speaker_identification"] = speaker_identification(params.speaker_type, params.known_values)
    elif params.task_type == "custom_formatting":
        formats = {
            "date": params.date_format,
            "phone_number": params.phone_number_format,
            "email": params.email_format,
        }
        request["custom_formatting"] = {key: value for key, value in formats.items() if has_text(value)}
    return request


def build_speech_understanding(
    params: SpeechUnderstandingParams, config: ClientConfig, binary: Mapping[str, Any]
) -> HttpRequestDescriptor:
    body = {
        "transcript_id": params.transcript_id,
        "speech_understanding": {"request": build_understanding_request(params)},
    }
    return HttpRequestDescriptor(
        method="POST",
        url=config.llm_gateway("/v1/understanding"),
        headers=dict(JSON_HEADERS),
        body=body,
    )
