"""Plugin definition for the Transcript resource."""

from __future__ import annotations

from typing import Dict

from assemblyFlow.request import Resource
from assemblyFlow.resource_plugin import OperationSpec, ResourcePlugin, register_plugin
from . import builder
from .settings import (
    CreateTranscriptParams,
    ListTranscriptsParams,
    SubtitlesParams,
    TranscriptIdParams,
    WordSearchParams,
)


class TranscriptPlugin(ResourcePlugin):
    """Built-in plugin for transcripts."""

    @property
    def name(self) -> str:
        return Resource.TRANSCRIPT.value

    @property
    def display_name(self) -> str:
        return "Transcript"

    def get_operations(self) -> Dict[str, OperationSpec]:
        specs = [
            OperationSpec("create", "Create", CreateTranscriptParams, builder.build_create,
                          "Transcribe an audio or video file"),
            OperationSpec("delete", "Delete", TranscriptIdParams, builder.build_delete,
                          "Delete a transcript"),
            OperationSpec("get", "Get", TranscriptIdParams, builder.build_get,
                          "Get a transcript"),
            OperationSpec("getParagraphs", "Get Paragraphs", TranscriptIdParams,
                          builder.build_get_paragraphs, "Get a transcript split by paragraphs"),
            OperationSpec("getRedactedAudio", "Get Redacted Audio", TranscriptIdParams,
                          builder.build_get_redacted_audio, "Get the PII-redacted audio file"),
            OperationSpec("getSentences", "Get Sentences", TranscriptIdParams,
                          builder.build_get_sentences, "Get a transcript split by sentences"),
            OperationSpec("getSubtitles", "Get Subtitles", SubtitlesParams,
                          builder.build_get_subtitles, "Export a transcript as SRT or VTT subtitles"),
            OperationSpec("list", "List", ListTranscriptsParams, builder.build_list,
                          "List transcripts"),
            OperationSpec("wordSearch", "Word Search", WordSearchParams, builder.build_word_search,
                          "Search a transcript for words or phrases"),
        ]
        return {spec.name: spec for spec in specs}


register_plugin(TranscriptPlugin())
