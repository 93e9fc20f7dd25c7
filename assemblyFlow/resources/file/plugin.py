"""Plugin definition for the File resource."""

from __future__ import annotations

from typing import Dict

from assemblyFlow.request import Resource
from assemblyFlow.resource_plugin import OperationSpec, ResourcePlugin, register_plugin
from .builder import build_upload
from .settings import UploadParams


class FilePlugin(ResourcePlugin):
    """Built-in plugin for file uploads."""

    @property
    def name(self) -> str:
        return Resource.FILE.value

    @property
    def display_name(self) -> str:
        return "File"

    def get_operations(self) -> Dict[str, OperationSpec]:
        return {
            "upload": OperationSpec(
                name="upload",
                display_name="Upload",
                params_class=UploadParams,
                builder=build_upload,
                description="Upload a media file for transcription",
            ),
        }


register_plugin(FilePlugin())
