"""OpenInference span kinds.

The kind is written under ``openinference.span.kind`` on every span. Its
string values are a wire format shared with other OpenInference
implementations, so renaming one is a breaking change.
"""

from enum import Enum


class InvalidSpanKindError(ValueError):
    """Raised when a string is not one of the canonical span kind values."""

    def __init__(self, value: object):
        self.value = value
        valid = ", ".join(kind.value for kind in OpenInferenceSpanKind)
        super().__init__(f"Invalid span kind {value!r}, expected one of: {valid}")


class OpenInferenceSpanKind(Enum):
    """Category of operation a span represents."""

    LLM = "llm"  # Call to a large language model
    EMBEDDING = "embedding"  # Call to an embedding model
    CHAIN = "chain"  # Pipeline step or glue between steps
    TOOL = "tool"  # Execution of an external tool or function
    AGENT = "agent"  # Reasoning block that drives LLM and tool calls
    RETRIEVER = "retriever"  # Fetch from a vector store or database
    RERANKER = "reranker"  # Rescoring of candidate documents
    GUARDRAIL = "guardrail"  # Check on inputs or outputs
    EVALUATOR = "evaluator"  # Evaluation of model outputs

    def __str__(self) -> str:
        return self.value

    def to_string(self) -> str:
        """Return the wire value of this kind."""
        return self.value

    @classmethod
    def from_string(cls, value: str) -> "OpenInferenceSpanKind":
        """Parse a wire value back into a span kind.

        Matching is exact and case-sensitive: ``"LLM"`` or ``"llm "`` are
        rejected rather than guessed.

        Args:
            value: Canonical wire value, e.g. ``"retriever"``

        Returns:
            The matching span kind

        Raises:
            InvalidSpanKindError: If ``value`` is not a canonical wire value
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidSpanKindError(value) from None
