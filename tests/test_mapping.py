import pytest

from openinference_telemetry.semantic_conventions import (
    DEFAULT_MAPPING_PAIRS,
    DEFAULT_NAMESPACE_MAPPER,
    GenAIAttributes,
    LLMAttributes,
    NamespaceMapper,
    map_gen_ai_to_openinference,
    map_openinference_to_gen_ai,
)


def test_static_keys_map_both_ways():
    assert map_openinference_to_gen_ai(LLMAttributes.MODEL_NAME) == GenAIAttributes.REQUEST_MODEL
    assert map_gen_ai_to_openinference(GenAIAttributes.REQUEST_MODEL) == LLMAttributes.MODEL_NAME
    assert map_openinference_to_gen_ai(LLMAttributes.PROVIDER) == "gen_ai.provider.name"
    assert map_openinference_to_gen_ai(LLMAttributes.TEMPERATURE) == "gen_ai.request.temperature"
    assert map_openinference_to_gen_ai(LLMAttributes.TOKEN_COUNT_PROMPT) == "gen_ai.usage.input_tokens"
    assert map_openinference_to_gen_ai("exception.type") == "error.type"


@pytest.mark.parametrize("domain_template, generic_template", DEFAULT_MAPPING_PAIRS)
def test_every_registered_pair_round_trips(domain_template, generic_template):
    indices = tuple(range(3, 3 + domain_template.count("{}")))
    domain_key = domain_template.format(*indices)
    generic_key = generic_template.format(*indices)

    assert DEFAULT_NAMESPACE_MAPPER.map_forward(domain_key) == generic_key
    assert DEFAULT_NAMESPACE_MAPPER.map_backward(generic_key) == domain_key


def test_indexed_keys_preserve_index():
    assert (
        map_openinference_to_gen_ai("llm.input_messages.0.message.role")
        == "gen_ai.prompt.0.role"
    )
    assert (
        map_openinference_to_gen_ai("llm.input_messages.17.message.content")
        == "gen_ai.prompt.17.content"
    )
    assert (
        map_gen_ai_to_openinference("gen_ai.completion.2.role")
        == "llm.output_messages.2.message.role"
    )


def test_nested_indices_keep_their_order():
    domain_key = "llm.output_messages.1.message.tool_calls.4.tool_call.function.name"
    generic_key = map_openinference_to_gen_ai(domain_key)
    assert generic_key == "gen_ai.completion.1.tool_calls.4.name"
    assert map_gen_ai_to_openinference(generic_key) == domain_key


def test_unmapped_keys_return_none():
    assert map_openinference_to_gen_ai("llm.token_count.prompt_details.audio") is None
    assert map_openinference_to_gen_ai("retrieval.documents.0.document.content") is None
    assert map_gen_ai_to_openinference("gen_ai.response.id") is None
    assert map_openinference_to_gen_ai("not.a.known.key") is None


@pytest.mark.parametrize(
    "key",
    [
        "",
        "llm.input_messages.01.message.role",
        "llm.input_messages..message.role",
        "llm.input_messages.{}.message.role",
        "llm.input_messages.-1.message.role",
        ".llm.model_name",
        "llm.model_name.",
    ],
)
def test_malformed_keys_return_none(key):
    assert map_openinference_to_gen_ai(key) is None


def test_non_string_key_returns_none():
    assert DEFAULT_NAMESPACE_MAPPER.map_forward(None) is None
    assert DEFAULT_NAMESPACE_MAPPER.map_backward(42) is None


def test_duplicate_domain_key_is_rejected():
    with pytest.raises(ValueError, match="Duplicate domain key"):
        NamespaceMapper([("a.b", "x.y"), ("a.b", "x.z")])


def test_duplicate_generic_key_is_rejected():
    with pytest.raises(ValueError, match="Duplicate generic key"):
        NamespaceMapper([("a.b", "x.y"), ("a.c", "x.y")])


def test_arity_mismatch_is_rejected():
    with pytest.raises(ValueError, match="arity"):
        NamespaceMapper([("a.{}.b", "x.y")])


def test_custom_mapper():
    mapper = NamespaceMapper([("my.items.{}.name", "other.{}.label")])
    assert len(mapper) == 1
    assert "my.items.5.name" in mapper
    assert mapper.map_forward("my.items.5.name") == "other.5.label"
    assert mapper.map_backward("other.0.label") == "my.items.0.name"
    assert mapper.map_forward(LLMAttributes.MODEL_NAME) is None


def test_very_long_index_is_carried_as_text():
    digits = "1" * 5000
    domain_key = f"llm.input_messages.{digits}.message.role"

    generic_key = map_openinference_to_gen_ai(domain_key)

    assert generic_key == f"gen_ai.prompt.{digits}.role"
    assert map_gen_ai_to_openinference(generic_key) == domain_key


def test_very_long_index_with_leading_zero_returns_none():
    key = "llm.input_messages.0" + "1" * 5000 + ".message.role"
    assert map_openinference_to_gen_ai(key) is None
