#!/usr/bin/env python3
"""
OpenInference Telemetry - Basic Usage Example

This example walks through a small retrieval-augmented answer:
1. Provider setup with a console exporter
2. A chain span wrapping the whole request
3. Retriever and LLM spans built with the fluent builders
4. Recording the response and token usage after the call

Requires opentelemetry-sdk (pip install "openinference-telemetry[test]").
"""

import time

from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import ConsoleSpanExporter, SimpleSpanProcessor

import openinference_telemetry as oit


def fake_search(query: str):
    """Stand-in for a vector store lookup."""
    time.sleep(0.05)
    return [
        {"id": "doc-1", "content": "OpenInference defines LLM span attributes.", "score": 0.92},
        {"id": "doc-2", "content": "GenAI conventions come from OpenTelemetry.", "score": 0.81},
    ]


def fake_completion(messages):
    """Stand-in for a chat completion call."""
    time.sleep(0.1)
    return {
        "content": "OpenInference and GenAI are two attribute conventions for LLM spans.",
        "usage": {"prompt_tokens": 42, "completion_tokens": 14},
    }


def answer(question: str) -> str:
    with oit.ChainSpanBuilder("answer_question").input(question).start_as_current_span() as chain:
        # Retrieval
        with oit.RetrieverSpanBuilder("docs").query(question).start_as_current_span() as span:
            documents = fake_search(question)
            oit.record_documents(span, documents)

        # Generation
        context = "\n".join(doc["content"] for doc in documents)
        messages = [
            {"role": "system", "content": f"Answer using this context:\n{context}"},
            {"role": "user", "content": question},
        ]
        builder = (
            oit.LlmSpanBuilder("gpt-4")
            .provider("openai")
            .temperature(0.2)
            .max_tokens(256)
            .input_messages(messages)
        )
        with builder.start_as_current_span() as span:
            response = fake_completion(messages)
            oit.record_output_message(span, 0, "assistant", response["content"])
            oit.record_token_usage(
                span,
                prompt_tokens=response["usage"]["prompt_tokens"],
                completion_tokens=response["usage"]["completion_tokens"],
            )

        oit.record_output(chain, response["content"])
        return response["content"]


def main():
    print("=" * 60)
    print("OpenInference Telemetry - Basic Usage Example")
    print("=" * 60)

    # 1. Configure a provider; exporting is up to the application
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))
    trace.set_tracer_provider(provider)

    # 2. Hide prompt text but keep roles, counts and model names
    oit.set_default_config(oit.SpanConfig.from_env(hide_input_text=True))

    # 3. Inspect attributes without opening a span
    print("\nAttributes for a single LLM call:")
    attributes = (
        oit.LlmSpanBuilder("gpt-4")
        .provider("openai")
        .temperature(0.7)
        .input_message("user", "hi")
        .attributes()
    )
    for key, value in attributes.items():
        print(f"  {key} = {value!r}")

    # 4. Trace a full request
    print("\nTracing a request (spans are printed by the console exporter):")
    print(answer("What is OpenInference?"))

    provider.shutdown()


if __name__ == "__main__":
    main()
