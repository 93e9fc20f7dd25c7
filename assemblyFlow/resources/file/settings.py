# ABOUTME: Parameter schema for the File resource.
# ABOUTME: Defines UploadParams with field metadata for form generation.

from __future__ import annotations

from dataclasses import dataclass, field

from assemblyFlow.base_params import OperationParams


@dataclass
class UploadParams(OperationParams):
    """Upload a local audio or video file to AssemblyAI."""

    file_input: str = field(
        default="data",
        metadata={
            "label": "Binary Property",
            "widget": "text",
            "required": True,
            "tooltip": "Name of the binary property of the input item holding the file",
        }
    )
