import pytest

from assemblyFlow import USER_AGENT, __version__
from assemblyFlow.client_config import ClientConfig
from assemblyFlow.credentials import StaticCredentials, build_credential_test_request


def test_client_config_defaults():
    config = ClientConfig()
    assert config.api_base_url == "https://api.assemblyai.com"
    assert config.llm_gateway_url == "https://llm-gateway.assemblyai.com"
    assert config.timeout == 60.0
    assert config.poll_interval == 3.0
    assert config.poll_max_attempts == 600
    assert config.user_agent == USER_AGENT
    assert USER_AGENT == f"assemblyflow/{__version__}"


def test_client_config_strips_trailing_slash():
    config = ClientConfig(api_base_url="https://eu.api.assemblyai.com/")
    assert config.api_url("/v2/transcript") == "https://eu.api.assemblyai.com/v2/transcript"


def test_client_config_validates_urls():
    with pytest.raises(ValueError, match="Invalid api_base_url"):
        ClientConfig(api_base_url="api.assemblyai.com")
    with pytest.raises(ValueError, match="Invalid llm_gateway_url"):
        ClientConfig(llm_gateway_url="ftp://gateway")


def test_client_config_validates_timings():
    with pytest.raises(ValueError, match="Timeout must be positive"):
        ClientConfig(timeout=0)
    with pytest.raises(ValueError, match="Polling interval"):
        ClientConfig(poll_interval=-1)
    with pytest.raises(ValueError, match="Polling attempts"):
        ClientConfig(poll_max_attempts=0)


def test_static_credentials_headers_use_raw_key():
    credentials = StaticCredentials("secret-key")
    assert credentials.auth_headers() == {"Authorization": "secret-key"}
    assert "secret-key" not in repr(credentials)


def test_credential_test_request():
    descriptor = build_credential_test_request(ClientConfig())
    assert descriptor.method == "GET"
    assert descriptor.url == "https://api.assemblyai.com/v2/transcript"
    assert "Authorization" not in descriptor.headers
