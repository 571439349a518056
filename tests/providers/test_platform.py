from unittest.mock import Mock

import httpx
import pytest

from providers.anthropic import AnthropicRequestShaper, ClaudeModelCatalog
from providers.base import ModelDescriptor, ModelFamily, ModelRole
from providers.catalog import FallbackModelCatalog
from providers.exceptions import InvalidPayloadError, UnsupportedModelError
from providers.generic import CompletionsRequestShaper, EmbeddingsRequestShaper
from providers.platform import Platform


@pytest.fixture
def transport():
    transport = Mock()
    transport.send.return_value = httpx.Response(200, json={"ok": True})
    return transport


@pytest.fixture
def generic_platform(transport):
    return Platform(
        FallbackModelCatalog(),
        [
            CompletionsRequestShaper("http://localhost:4000"),
            EmbeddingsRequestShaper("http://localhost:4000"),
        ],
        transport,
    )


@pytest.fixture
def anthropic_platform(transport):
    return Platform(
        FallbackModelCatalog(ClaudeModelCatalog(), family=ModelFamily.claude),
        [AnthropicRequestShaper("test-api-key", "long")],
        transport,
    )


def test_resolve_name(generic_platform):
    model = generic_platform.resolve("text-embedding-3-small")
    assert model.role is ModelRole.embeddings


def test_resolve_descriptor_passthrough(generic_platform):
    descriptor = ModelDescriptor(name="x", role=ModelRole.completions)
    assert generic_platform.resolve(descriptor) is descriptor


def test_model_options_merged_under_caller_options(generic_platform):
    request = generic_platform.build_request(
        "gpt-4o?temperature=0.7&max_tokens=1000",
        {"messages": [{"role": "user", "content": "hi"}]},
        {"max_tokens": 50},
    )
    assert request.body["model"] == "gpt-4o"
    assert request.body["temperature"] == 0.7
    assert request.body["max_tokens"] == 50


def test_caller_model_option_wins(generic_platform):
    request = generic_platform.build_request(
        "gpt-4o", {"messages": []}, {"model": "gpt-4o-2024-08-06"}
    )
    assert request.body["model"] == "gpt-4o-2024-08-06"


def test_shaper_selected_by_role(generic_platform):
    request = generic_platform.build_request("text-embedding-3-small", "some text")
    assert request.url == "http://localhost:4000/v1/embeddings"
    assert request.body["input"] == "some text"


def test_anthropic_platform_end_to_end(anthropic_platform, transport):
    response = anthropic_platform.invoke(
        "claude-sonnet-4-5?max_tokens=1024",
        {"messages": [{"role": "user", "content": "hi"}]},
    )

    assert response.status_code == 200
    request = transport.send.call_args[0][0]
    assert request.url == "https://api.anthropic.com/v1/messages"
    assert request.body["model"] == "claude-sonnet-4-5"
    assert request.body["max_tokens"] == 1024
    assert request.body["messages"][0]["content"] == [
        {
            "type": "text",
            "text": "hi",
            "cache_control": {"type": "ephemeral", "ttl": "1h"},
        }
    ]


def test_unknown_claude_name_resolves_through_fallback(anthropic_platform):
    request = anthropic_platform.build_request("claude-unreleased", {"messages": []})
    assert request.body["model"] == "claude-unreleased"


def test_no_supporting_shaper_raises(anthropic_platform, transport):
    with pytest.raises(UnsupportedModelError, match="voyage-embed-3"):
        anthropic_platform.invoke("voyage-embed-3", {"input": "x"})
    transport.send.assert_not_called()


def test_shaper_errors_skip_transport(generic_platform, transport):
    with pytest.raises(InvalidPayloadError):
        generic_platform.invoke("gpt-4o", "raw string")
    transport.send.assert_not_called()


def test_close_closes_transport(generic_platform, transport):
    generic_platform.close()
    transport.close.assert_called_once_with()
