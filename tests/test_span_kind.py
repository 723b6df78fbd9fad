import pytest

from openinference_telemetry.semantic_conventions import (
    InvalidSpanKindError,
    OpenInferenceSpanKind,
)


def test_all_kinds_have_canonical_values():
    assert [kind.value for kind in OpenInferenceSpanKind] == [
        "llm",
        "embedding",
        "chain",
        "tool",
        "agent",
        "retriever",
        "reranker",
        "guardrail",
        "evaluator",
    ]


@pytest.mark.parametrize("kind", list(OpenInferenceSpanKind))
def test_round_trip(kind):
    assert OpenInferenceSpanKind.from_string(kind.to_string()) is kind
    assert str(kind) == kind.value


@pytest.mark.parametrize("value", ["LLM", "Llm", " llm", "llm ", "", "retrievers", "unknown"])
def test_near_misses_are_rejected(value):
    with pytest.raises(InvalidSpanKindError) as exc_info:
        OpenInferenceSpanKind.from_string(value)
    assert exc_info.value.value == value


def test_invalid_kind_is_a_value_error():
    with pytest.raises(ValueError, match="expected one of"):
        OpenInferenceSpanKind.from_string("workflow")
