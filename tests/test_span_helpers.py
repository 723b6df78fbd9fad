import json

import pytest
from opentelemetry.trace import StatusCode

from openinference_telemetry import (
    REDACTED,
    LlmSpanBuilder,
    RetrieverSpanBuilder,
    SpanConfig,
    record_documents,
    record_error,
    record_output,
    record_output_message,
    record_token_usage,
    resolve_attributes,
)
from openinference_telemetry.span_helpers import AttributeEntry, to_json


def _open_llm_span(tracer, config=None):
    return LlmSpanBuilder("gpt-4").config(config or SpanConfig()).tracer(tracer).build()


def _finished_attributes(exporter):
    finished = exporter.get_finished_spans()
    assert len(finished) == 1
    return finished[0].attributes


def test_resolve_attributes_skips_none_and_mirrors():
    entries = [
        AttributeEntry("llm.model_name", "gpt-4"),
        AttributeEntry("llm.provider", None),
        AttributeEntry("metadata", "{}"),
    ]

    attributes = resolve_attributes(entries, SpanConfig())

    assert attributes == {
        "llm.model_name": "gpt-4",
        "metadata": "{}",
        "gen_ai.request.model": "gpt-4",
    }


def test_resolve_attributes_content_and_redaction():
    entries = [
        AttributeEntry("llm.input_messages.0.message.content", "hi", content=True),
        AttributeEntry("llm.input_messages.0.message.role", "user", redact=True),
    ]

    assert resolve_attributes(entries, SpanConfig(record_content=False)) == {
        "llm.input_messages.0.message.role": REDACTED,
        "gen_ai.prompt.0.role": REDACTED,
    }


def test_to_json():
    assert to_json("already text") == "already text"
    assert to_json(None) is None
    assert json.loads(to_json({"a": [1, 2]})) == {"a": [1, 2]}
    assert to_json({"emoji": "✓"}) == '{"emoji": "✓"}'


def test_record_token_usage(tracer, exporter):
    span = _open_llm_span(tracer)
    record_token_usage(span, prompt_tokens=10, completion_tokens=4, cache_read=2)
    span.end()

    attributes = _finished_attributes(exporter)
    assert attributes["llm.token_count.prompt"] == 10
    assert attributes["llm.token_count.completion"] == 4
    assert attributes["llm.token_count.total"] == 14
    assert attributes["llm.token_count.prompt_details.cache_read"] == 2
    assert attributes["gen_ai.usage.input_tokens"] == 10
    assert attributes["gen_ai.usage.output_tokens"] == 4


def test_record_token_usage_twice_is_not_an_error(tracer, exporter):
    span = _open_llm_span(tracer)
    first = record_token_usage(span, prompt_tokens=10, completion_tokens=4)
    second = record_token_usage(span, prompt_tokens=20, completion_tokens=8, total_tokens=30)
    span.end()

    assert first["llm.token_count.prompt"] == 10
    assert second["llm.token_count.total"] == 30
    attributes = _finished_attributes(exporter)
    assert attributes["llm.token_count.prompt"] == 20
    assert attributes["llm.token_count.total"] == 30


def test_record_token_usage_skips_unknown_counts(tracer, exporter):
    span = _open_llm_span(tracer)
    written = record_token_usage(span, prompt_tokens=10)
    span.end()

    assert "llm.token_count.completion" not in written
    assert "llm.token_count.total" not in written


def test_record_output_message(tracer, exporter):
    span = _open_llm_span(tracer)
    record_output_message(span, 0, "assistant", "hello")
    record_output_message(
        span,
        1,
        "assistant",
        tool_calls=[{"id": "call_1", "function_name": "search", "function_arguments": "{}"}],
    )
    span.end()

    attributes = _finished_attributes(exporter)
    assert attributes["llm.output_messages.0.message.role"] == "assistant"
    assert attributes["llm.output_messages.0.message.content"] == "hello"
    assert attributes["gen_ai.completion.0.content"] == "hello"
    assert (
        attributes["llm.output_messages.1.message.tool_calls.0.tool_call.function.name"]
        == "search"
    )
    assert attributes["gen_ai.completion.1.tool_calls.0.arguments"] == "{}"


def test_record_output_message_rejects_negative_index(tracer):
    span = _open_llm_span(tracer)
    with pytest.raises(ValueError):
        record_output_message(span, -1, "assistant", "hello")
    span.end()


def test_record_output_message_respects_privacy(tracer, exporter):
    span = _open_llm_span(tracer, SpanConfig(hide_output_text=True))
    record_output_message(span, 0, "assistant", "secret", config=SpanConfig(hide_output_text=True))
    span.end()

    attributes = _finished_attributes(exporter)
    assert attributes["llm.output_messages.0.message.role"] == "assistant"
    assert attributes["llm.output_messages.0.message.content"] == REDACTED
    assert attributes["gen_ai.completion.0.content"] == REDACTED


def test_record_output(tracer, exporter):
    span = _open_llm_span(tracer)
    record_output(span, {"answer": 42})
    span.end()

    attributes = _finished_attributes(exporter)
    assert json.loads(attributes["output.value"]) == {"answer": 42}
    assert attributes["output.mime_type"] == "application/json"


def test_record_output_hidden(tracer, exporter):
    config = SpanConfig(hide_outputs=True)
    span = _open_llm_span(tracer, config)
    record_output(span, "the answer", config=config)
    span.end()

    assert _finished_attributes(exporter)["output.value"] == REDACTED


def test_record_documents(tracer, exporter):
    span = RetrieverSpanBuilder("store").config(SpanConfig()).tracer(tracer).build()
    record_documents(span, [{"id": "d1", "content": "text", "score": 0.5, "metadata": {"page": 3}}])
    span.end()

    attributes = _finished_attributes(exporter)
    assert attributes["retrieval.documents.0.document.id"] == "d1"
    assert attributes["retrieval.documents.0.document.content"] == "text"
    assert json.loads(attributes["retrieval.documents.0.document.metadata"]) == {"page": 3}


def test_record_output_message_without_content(tracer, exporter):
    config = SpanConfig(record_content=False)
    span = _open_llm_span(tracer, config)
    record_output_message(
        span,
        0,
        "assistant",
        "hello",
        config=config,
        tool_calls=[{"id": "call_1", "name": "search", "arguments": {"q": "otel"}}],
    )
    span.end()

    attributes = _finished_attributes(exporter)
    prefix = "llm.output_messages.0.message.tool_calls.0.tool_call"
    assert attributes["llm.output_messages.0.message.role"] == "assistant"
    assert attributes["gen_ai.completion.0.role"] == "assistant"
    assert attributes[f"{prefix}.function.name"] == "search"
    assert "llm.output_messages.0.message.content" not in attributes
    assert "gen_ai.completion.0.content" not in attributes
    assert f"{prefix}.function.arguments" not in attributes
    assert "gen_ai.completion.0.tool_calls.0.arguments" not in attributes


def test_record_documents_without_content(tracer, exporter):
    config = SpanConfig(record_content=False)
    span = RetrieverSpanBuilder("store").config(config).tracer(tracer).build()
    record_documents(span, [{"id": "d1", "content": "text", "score": 0.5}], config=config)
    span.end()

    attributes = _finished_attributes(exporter)
    assert attributes["retrieval.documents.0.document.id"] == "d1"
    assert attributes["retrieval.documents.0.document.score"] == 0.5
    assert "retrieval.documents.0.document.content" not in attributes


def test_record_error_with_exception(tracer, exporter):
    span = _open_llm_span(tracer)
    record_error(span, TimeoutError("model timed out"))
    span.end()

    finished = exporter.get_finished_spans()[0]
    assert finished.status.status_code == StatusCode.ERROR
    assert finished.status.description == "model timed out"
    assert finished.attributes["exception.type"] == "TimeoutError"
    assert finished.attributes["error.type"] == "TimeoutError"
    assert [event.name for event in finished.events] == ["exception"]


def test_record_error_with_type_name(tracer, exporter):
    span = _open_llm_span(tracer)
    record_error(span, "RateLimitError", "quota exceeded", config=SpanConfig(emit_gen_ai_attributes=False))
    span.end()

    finished = exporter.get_finished_spans()[0]
    assert finished.status.status_code == StatusCode.ERROR
    assert finished.attributes["exception.type"] == "RateLimitError"
    assert finished.attributes["exception.message"] == "quota exceeded"
    assert "error.type" not in finished.attributes
    assert not finished.events
