import sys

import pytest

from openinference_telemetry.semantic_conventions import (
    DocumentAttributes,
    EmbeddingAttributes,
    LLMAttributes,
    MessageAttributes,
    MessageContentAttributes,
    RetrievalAttributes,
    SpanAttributes,
    ToolCallAttributes,
    choice_key,
    document_key,
    embedding_key,
    indexed_key,
    input_message_key,
    message_content_key,
    output_message_key,
    prompt_key,
    static_key,
    tool_call_key,
    tool_definition_key,
)


def test_static_keys():
    assert SpanAttributes.OPENINFERENCE_SPAN_KIND == "openinference.span.kind"
    assert LLMAttributes.MODEL_NAME == "llm.model_name"
    assert LLMAttributes.TOKEN_COUNT_PROMPT == "llm.token_count.prompt"
    assert static_key("llm.token_count", "total") == LLMAttributes.TOKEN_COUNT_TOTAL


def test_indexed_key_shape():
    assert (
        indexed_key(LLMAttributes.INPUT_MESSAGES, 0, MessageAttributes.ROLE)
        == "llm.input_messages.0.message.role"
    )
    assert (
        indexed_key(LLMAttributes.OUTPUT_MESSAGES, 12, MessageAttributes.CONTENT)
        == "llm.output_messages.12.message.content"
    )


def test_indexed_key_is_reused():
    first = indexed_key(LLMAttributes.INPUT_MESSAGES, 3, MessageAttributes.CONTENT)
    second = indexed_key(LLMAttributes.INPUT_MESSAGES, 3, MessageAttributes.CONTENT)
    assert first is second


def test_indexed_key_distinct_indices():
    keys = {indexed_key(LLMAttributes.INPUT_MESSAGES, i, MessageAttributes.ROLE) for i in range(5)}
    assert len(keys) == 5


def test_indexed_key_rejects_negative_index():
    with pytest.raises(ValueError):
        indexed_key(LLMAttributes.INPUT_MESSAGES, -1, MessageAttributes.ROLE)


def test_message_helpers():
    assert input_message_key(1, MessageAttributes.ROLE) == "llm.input_messages.1.message.role"
    assert (
        output_message_key(0, MessageAttributes.CONTENT)
        == "llm.output_messages.0.message.content"
    )
    assert (
        message_content_key(LLMAttributes.INPUT_MESSAGES, 0, 2, MessageContentAttributes.TEXT)
        == "llm.input_messages.0.message.contents.2.message_content.text"
    )


def test_tool_call_key_is_nested_under_output_message():
    assert (
        tool_call_key(0, 1, ToolCallAttributes.FUNCTION_NAME)
        == "llm.output_messages.0.message.tool_calls.1.tool_call.function.name"
    )


def test_list_helpers():
    assert tool_definition_key(2) == "llm.tools.2.tool.json_schema"
    assert prompt_key(0) == "llm.prompts.0.prompt.text"
    assert choice_key(1) == "llm.choices.1.completion.text"
    assert embedding_key(0, EmbeddingAttributes.VECTOR) == "embedding.embeddings.0.embedding.vector"
    assert (
        document_key(RetrievalAttributes.DOCUMENTS, 4, DocumentAttributes.SCORE)
        == "retrieval.documents.4.document.score"
    )


@pytest.mark.skipif(
    not getattr(sys, "get_int_max_str_digits", lambda: 0)(),
    reason="interpreter has no integer string conversion limit",
)
def test_indexed_key_rejects_index_beyond_conversion_limit():
    index = 10 ** sys.get_int_max_str_digits()
    with pytest.raises(ValueError):
        indexed_key(LLMAttributes.INPUT_MESSAGES, index, MessageAttributes.ROLE)
