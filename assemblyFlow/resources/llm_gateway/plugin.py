"""Plugin definition for the LLM gateway resource."""

from __future__ import annotations

from typing import Dict

from assemblyFlow.request import Resource
from assemblyFlow.resource_plugin import (
    OperationSpec,
    ResourcePlugin,
    register_plugin,
    register_plugin_alias,
)
from .builder import build_chat_completion, build_speech_understanding
from .settings import ChatCompletionParams, SpeechUnderstandingParams


class LlmGatewayPlugin(ResourcePlugin):
    """Built-in plugin for the AssemblyAI LLM gateway."""

    @property
    def name(self) -> str:
        return Resource.LLM_GATEWAY.value

    @property
    def display_name(self) -> str:
        return "LLM Gateway"

    def get_operations(self) -> Dict[str, OperationSpec]:
        return {
            "chatCompletion": OperationSpec(
                name="chatCompletion",
                display_name="Chat Completion",
                params_class=ChatCompletionParams,
                builder=build_chat_completion,
                description="Generate a response with a large language model",
            ),
            "speechUnderstanding": OperationSpec(
                name="speechUnderstanding",
                display_name="Speech Understanding",
                params_class=SpeechUnderstandingParams,
                builder=build_speech_understanding,
                description="Translate, identify speakers or format an existing transcript",
            ),
        }


register_plugin(LlmGatewayPlugin())
register_plugin_alias("llmGateway", Resource.LLM_GATEWAY.value)
register_plugin_alias("llm-gateway", Resource.LLM_GATEWAY.value)
