"""Request builders for the LeMUR resource."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

from assemblyFlow.client_config import ClientConfig
from assemblyFlow.request import HttpRequestDescriptor
from assemblyFlow.resources.common import collection_entries, flatten_collection, has_text, split_csv
from .settings import (
    LemurGenerateParams,
    LemurRequestParams,
    QuestionAnswerParams,
    SummaryParams,
    TaskParams,
)

JSON_HEADERS = {"Content-Type": "application/json"}


def lemur_base_body(params: LemurGenerateParams) -> Dict[str, Any]:
    body: Dict[str, Any] = {
        "transcript_ids": split_csv(params.transcript_ids),
        "final_model": params.final_model,
        "temperature": params.temperature,
        "max_output_size": params.max_output_size,
    }
    context = getattr(params, "context", None)
    if has_text(context):
        body["context"] = context
    return body


def build_questions(questions: Mapping[str, Any]) -> List[Dict[str, Any]]:
    """Map question entries so each carries answer_format or answer_options, never both."""
    processed = []
    for entry in collection_entries(questions, "question", "Questions"):
        question: Dict[str, Any] = {"question": entry.get("question")}
        answer_type = entry.get("answer_type", "format")
        if answer_type == "format" and entry.get("answer_format"):
            question["answer_format"] = entry["answer_format"]
        elif answer_type == "options" and entry.get("answer_options"):
            question["answer_options"] = flatten_collection(
                entry["answer_options"], "option", "value", "Answer Options"
            )
        processed.append(question)
    return processed


def _generate(config: ClientConfig, endpoint: str, body: Dict[str, Any]) -> HttpRequestDescriptor:
    return HttpRequestDescriptor(
        method="POST",
        url=config.api_url(f"/lemur/v3/generate/{endpoint}"),
        headers=dict(JSON_HEADERS),
        body=body,
    )


def build_summary(params: SummaryParams, config: ClientConfig, binary: Mapping[str, Any]) -> HttpRequestDescriptor:
    return _generate(config, "summary", lemur_base_body(params))


def build_question_answer(
    params: QuestionAnswerParams, config: ClientConfig, binary: Mapping[str, Any]
) -> HttpRequestDescriptor:
    body = lemur_base_body(params)
    body["questions"] = build_questions(params.questions)
    return _generate(config, "question-answer", body)


def build_task(params: TaskParams, config: ClientConfig, binary: Mapping[str, Any]) -> HttpRequestDescriptor:
    body = lemur_base_body(params)
    body["prompt"] = params.prompt
    return _generate(config, "task", body)


def build_get_response(
    params: LemurRequestParams, config: ClientConfig, binary: Mapping[str, Any]
) -> HttpRequestDescriptor:
    return HttpRequestDescriptor(method="GET", url=config.api_url(f"/lemur/v3/{params.request_id}"))


def build_purge_data(
    params: LemurRequestParams, config: ClientConfig, binary: Mapping[str, Any]
) -> HttpRequestDescriptor:
    return HttpRequestDescriptor(method="DELETE", url=config.api_url(f"/lemur/v3/{params.request_id}"))
