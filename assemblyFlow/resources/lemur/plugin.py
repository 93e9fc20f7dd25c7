"""Plugin definition for the LeMUR resource."""

from __future__ import annotations

from typing import Dict

from assemblyFlow.request import Resource
from assemblyFlow.resource_plugin import (
    OperationSpec,
    ResourcePlugin,
    register_plugin,
    register_plugin_alias,
)
from . import builder
from .settings import LemurRequestParams, QuestionAnswerParams, SummaryParams, TaskParams


class LemurPlugin(ResourcePlugin):
    """Built-in plugin for LeMUR (deprecated by AssemblyAI in favour of the LLM gateway)."""

    @property
    def name(self) -> str:
        return Resource.LEMUR.value

    @property
    def display_name(self) -> str:
        return "LeMUR (Deprecated)"

    def get_operations(self) -> Dict[str, OperationSpec]:
        specs = [
            OperationSpec("getResponse", "Get Response", LemurRequestParams, builder.build_get_response,
                          "Get the response of a previous LeMUR request"),
            OperationSpec("purgeData", "Purge Data", LemurRequestParams, builder.build_purge_data,
                          "Delete the data of a previous LeMUR request"),
            OperationSpec("questionAnswer", "Question & Answer", QuestionAnswerParams,
                          builder.build_question_answer, "Ask questions about transcripts"),
            OperationSpec("summary", "Summary", SummaryParams, builder.build_summary,
                          "Summarize transcripts"),
            OperationSpec("task", "Custom Task", TaskParams, builder.build_task,
                          "Run a custom prompt over transcripts"),
        ]
        return {spec.name: spec for spec in specs}


register_plugin(LemurPlugin())
register_plugin_alias("LeMUR", Resource.LEMUR.value)
