import pytest

from assemblyFlow.client_config import ClientConfig
from assemblyFlow.resources.lemur import builder
from assemblyFlow.resources.lemur.settings import (
    DEFAULT_LEMUR_MODEL,
    LemurRequestParams,
    QuestionAnswerParams,
    SummaryParams,
    TaskParams,
)


def test_lemur_defaults():
    params = SummaryParams(transcript_ids="t1")
    assert params.final_model == DEFAULT_LEMUR_MODEL
    assert params.temperature == 0
    assert params.max_output_size == 2000


def test_lemur_validates_temperature():
    with pytest.raises(ValueError, match="Temperature must be between 0 and 1"):
        SummaryParams(transcript_ids="t1", temperature=1.5)


def test_lemur_requires_transcript_ids():
    with pytest.raises(ValueError, match="Transcript IDs"):
        SummaryParams.from_mapping({"transcript_ids": " "})


def test_summary_body():
    params = SummaryParams(transcript_ids="t1, t2", context="  ")
    descriptor = builder.build_summary(params, ClientConfig(), {})

    assert descriptor.method == "POST"
    assert descriptor.url == "https://api.assemblyai.com/lemur/v3/generate/summary"
    assert descriptor.body == {
        "transcript_ids": ["t1", "t2"],
        "final_model": DEFAULT_LEMUR_MODEL,
        "temperature": 0,
        "max_output_size": 2000,
    }


def test_summary_includes_context_when_set():
    params = SummaryParams(transcript_ids="t1", context="Sales call")
    body = builder.build_summary(params, ClientConfig(), {}).body
    assert body["context"] == "Sales call"


def test_task_carries_prompt():
    params = TaskParams.from_mapping({"transcript_ids": "t1", "prompt": "List action items"})
    descriptor = builder.build_task(params, ClientConfig(), {})

    assert descriptor.path == "/lemur/v3/generate/task"
    assert descriptor.body["prompt"] == "List action items"
    assert "context" not in descriptor.body


def test_task_requires_prompt():
    with pytest.raises(ValueError, match="Prompt"):
        TaskParams.from_mapping({"transcript_ids": "t1"})


def test_question_answer_format_and_options():
    params = QuestionAnswerParams(
        transcript_ids="t1",
        questions={
            "question": [
                {"question": "Was the customer happy?", "answer_type": "format", "answer_format": "yes or no"},
                {
                    "question": "Which plan?",
                    "answer_type": "options",
                    "answer_format": "ignored",
                    "answer_options": {"option": [{"value": "basic"}, {"value": "pro"}]},
                },
            ]
        },
    )
    descriptor = builder.build_question_answer(params, ClientConfig(), {})

    assert descriptor.path == "/lemur/v3/generate/question-answer"
    assert descriptor.body["questions"] == [
        {"question": "Was the customer happy?", "answer_format": "yes or no"},
        {"question": "Which plan?", "answer_options": ["basic", "pro"]},
    ]


def test_get_response_and_purge_data():
    params = LemurRequestParams(request_id="req-9")
    get = builder.build_get_response(params, ClientConfig(), {})
    purge = builder.build_purge_data(params, ClientConfig(), {})

    assert (get.method, get.path, get.body) == ("GET", "/lemur/v3/req-9", None)
    assert (purge.method, purge.path, purge.body) == ("DELETE", "/lemur/v3/req-9", None)


def test_question_entries_must_be_mappings():
    params = QuestionAnswerParams(transcript_ids="t1", questions={"question": ["Was the customer happy?"]})

    with pytest.raises(ValueError, match="Parameter 'Questions' entries must be mappings"):
        builder.build_question_answer(params, ClientConfig(), {})


def test_answer_options_must_be_a_collection():
    params = QuestionAnswerParams(
        transcript_ids="t1",
        questions={"question": [{"question": "Which plan?", "answer_type": "options", "answer_options": "basic"}]},
    )

    with pytest.raises(ValueError, match="Answer Options"):
        builder.build_question_answer(params, ClientConfig(), {})
