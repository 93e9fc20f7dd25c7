import base64

import pytest

from assemblyFlow.binary import FileBinary, InlineBinary
from assemblyFlow.client_config import ClientConfig
from assemblyFlow.exceptions import MissingBinaryData
from assemblyFlow.resources.file.builder import build_upload
from assemblyFlow.resources.file.settings import UploadParams


def test_upload_params_defaults_to_data_property():
    params = UploadParams()
    assert params.file_input == "data"


def test_upload_params_requires_property_name():
    with pytest.raises(ValueError, match="Binary Property"):
        UploadParams.from_mapping({"file_input": "  "})


def test_upload_inline_bytes():
    config = ClientConfig()
    descriptor = build_upload(UploadParams(), config, {"data": b"RIFF1234"})

    assert descriptor.method == "POST"
    assert descriptor.url == "https://api.assemblyai.com/v2/upload"
    assert descriptor.headers["Content-Type"] == "application/octet-stream"
    assert descriptor.body == b"RIFF1234"
    assert not descriptor.has_json_body


def test_upload_base64_string_is_decoded():
    encoded = base64.b64encode(b"audio-bytes").decode()
    descriptor = build_upload(UploadParams(), ClientConfig(), {"data": {"data": encoded}})
    assert descriptor.body == b"audio-bytes"


def test_upload_uses_named_property():
    params = UploadParams(file_input="recording")
    descriptor = build_upload(params, ClientConfig(), {"recording": InlineBinary(b"x")})
    assert descriptor.body == b"x"


def test_upload_streams_file_backed_payload(tmp_path):
    audio = tmp_path / "call.wav"
    audio.write_bytes(b"a" * 10)

    descriptor = build_upload(UploadParams(), ClientConfig(), {"data": FileBinary(audio, chunk_size=4)})

    assert not isinstance(descriptor.body, bytes)
    assert list(descriptor.body) == [b"aaaa", b"aaaa", b"aa"]


def test_upload_missing_property_raises():
    with pytest.raises(MissingBinaryData) as excinfo:
        build_upload(UploadParams(), ClientConfig(), {})
    assert excinfo.value.property_name == "data"
    assert "'data'" in excinfo.value.message


def test_upload_empty_payload_raises(tmp_path):
    empty = tmp_path / "empty.wav"
    empty.write_bytes(b"")

    with pytest.raises(MissingBinaryData):
        build_upload(UploadParams(), ClientConfig(), {"data": b""})
    with pytest.raises(MissingBinaryData):
        build_upload(UploadParams(), ClientConfig(), {"data": FileBinary(empty)})
    with pytest.raises(MissingBinaryData):
        build_upload(UploadParams(), ClientConfig(), {"data": FileBinary(tmp_path / "missing.wav")})
