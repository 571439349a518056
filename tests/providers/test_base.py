import dataclasses

import pytest

from providers.base import (
    ALL_CAPABILITIES,
    CAPABILITIES_VERSION,
    Capability,
    ModelDescriptor,
    ModelFamily,
    ModelRole,
)


def test_all_capabilities_is_every_member():
    assert ALL_CAPABILITIES == frozenset(Capability)
    assert len(ALL_CAPABILITIES) == len(list(Capability))
    assert CAPABILITIES_VERSION == 1


def test_capabilities_version_exported_from_package():
    import providers

    assert providers.CAPABILITIES_VERSION == CAPABILITIES_VERSION
    assert "CAPABILITIES_VERSION" in providers.__all__


def test_descriptor_defaults():
    model = ModelDescriptor(name="m", role=ModelRole.completions)
    assert model.capabilities == frozenset()
    assert model.options == {}
    assert model.family is ModelFamily.generic
    assert not model.is_embeddings


def test_descriptor_capabilities_collapse_duplicates():
    model = ModelDescriptor(
        name="m",
        role=ModelRole.completions,
        capabilities=[Capability.TOOL_CALLING, Capability.TOOL_CALLING],
    )
    assert model.capabilities == frozenset({Capability.TOOL_CALLING})
    assert model.supports(Capability.TOOL_CALLING)
    assert not model.supports(Capability.THINKING)


def test_descriptor_is_immutable():
    model = ModelDescriptor(name="m", role=ModelRole.embeddings)
    with pytest.raises(dataclasses.FrozenInstanceError):
        model.role = ModelRole.completions  # type: ignore[misc]


def test_descriptor_options_are_read_only_copy():
    options = {"temperature": 0.5}
    model = ModelDescriptor(name="m", role=ModelRole.completions, options=options)

    options["temperature"] = 1.0
    assert model.options == {"temperature": 0.5}
    with pytest.raises(TypeError):
        model.options["temperature"] = 2.0  # type: ignore[index]


@pytest.mark.parametrize(
    "role,family,expected_role,expected_family",
    [
        ("embeddings", "generic", ModelRole.embeddings, ModelFamily.generic),
        ("completions", "claude", ModelRole.completions, ModelFamily.claude),
        ("completions", "llama", ModelRole.completions, ModelFamily.llama),
    ],
    ids=["embeddings_generic", "completions_claude", "completions_llama"],
)
def test_descriptor_coerces_string_role_and_family(
    role, family, expected_role, expected_family
):
    model = ModelDescriptor(name="m", role=role, family=family)

    assert model.role is expected_role
    assert model.family is expected_family


def test_string_role_descriptor_reaches_matching_shaper():
    from providers.anthropic import AnthropicRequestShaper
    from providers.generic import CompletionsRequestShaper, EmbeddingsRequestShaper

    embeddings = ModelDescriptor(name="text-embedding-3-small", role="embeddings")
    claude = ModelDescriptor(
        name="claude-sonnet-4-5", role="completions", family="claude"
    )

    assert embeddings.is_embeddings
    assert EmbeddingsRequestShaper("http://localhost:4000").supports(embeddings)
    assert not CompletionsRequestShaper("http://localhost:4000").supports(embeddings)
    assert AnthropicRequestShaper("k").supports(claude)


def test_descriptor_coerces_string_capabilities():
    model = ModelDescriptor(
        name="m", role=ModelRole.completions, capabilities=["tool-calling"]
    )
    assert model.supports(Capability.TOOL_CALLING)


@pytest.mark.parametrize(
    "overrides",
    [{"role": "chat"}, {"family": "gemini"}, {"capabilities": ["telepathy"]}],
    ids=["unknown_role", "unknown_family", "unknown_capability"],
)
def test_descriptor_rejects_unknown_values(overrides):
    values = {"name": "m", "role": ModelRole.completions, **overrides}
    with pytest.raises(ValueError):
        ModelDescriptor(**values)


def test_descriptor_is_hashable():
    first = ModelDescriptor(
        name="m", role=ModelRole.completions, options={"temperature": 0.5}
    )
    second = ModelDescriptor(
        name="m", role=ModelRole.completions, options={"temperature": 0.9}
    )

    assert hash(first) == hash(second)
    assert first != second
    assert len({first, second}) == 2
