"""Request builders for the File resource."""

from __future__ import annotations

from typing import Any, Mapping

from assemblyFlow.binary import as_binary_source
from assemblyFlow.client_config import ClientConfig
from assemblyFlow.exceptions import MissingBinaryData
from assemblyFlow.request import HttpRequestDescriptor
from .settings import UploadParams


def build_upload(
    params: UploadParams, config: ClientConfig, binary: Mapping[str, Any]
) -> HttpRequestDescriptor:
    source = as_binary_source(binary.get(params.file_input))
    if source is None or not source.has_data():
        raise MissingBinaryData(params.file_input)

    return HttpRequestDescriptor(
        method="POST",
        url=config.api_url("/v2/upload"),
        headers={"Content-Type": "application/octet-stream"},
        body=source.upload_body(),
    )
