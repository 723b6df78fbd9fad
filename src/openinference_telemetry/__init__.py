"""OpenInference telemetry helpers for LLM applications."""

# Attribute keys, span kinds and namespace mapping
from openinference_telemetry.semantic_conventions import (
    DEFAULT_NAMESPACE_MAPPER,
    GenAIAttributes,
    InvalidSpanKindError,
    LLMAttributes,
    NamespaceMapper,
    OpenInferenceSpanKind,
    SpanAttributes,
    map_gen_ai_to_openinference,
    map_openinference_to_gen_ai,
)

# Configuration
from openinference_telemetry.configuration import (
    REDACTED,
    SpanConfig,
    get_default_config,
    set_default_config,
)

# Typed inputs
from openinference_telemetry.schemas import Document, Message, ToolCall

# Span builders
from openinference_telemetry.span_builders import (
    AgentSpanBuilder,
    ChainSpanBuilder,
    EmbeddingSpanBuilder,
    EvaluatorSpanBuilder,
    GuardrailSpanBuilder,
    LlmSpanBuilder,
    RerankerSpanBuilder,
    RetrieverSpanBuilder,
    SpanBuilder,
    ToolSpanBuilder,
)

# Post-creation helpers
from openinference_telemetry.span_helpers import (
    record_documents,
    record_error,
    record_output,
    record_output_message,
    record_token_usage,
    resolve_attributes,
)
from openinference_telemetry.tracing import get_tracer
from openinference_telemetry.version import __version__

__all__ = [
    # Builders
    "LlmSpanBuilder",
    "EmbeddingSpanBuilder",
    "ChainSpanBuilder",
    "ToolSpanBuilder",
    "AgentSpanBuilder",
    "RetrieverSpanBuilder",
    "RerankerSpanBuilder",
    "GuardrailSpanBuilder",
    "EvaluatorSpanBuilder",
    "SpanBuilder",
    # Helpers
    "record_token_usage",
    "record_output_message",
    "record_output",
    "record_documents",
    "record_error",
    "resolve_attributes",
    "get_tracer",
    # Configuration
    "SpanConfig",
    "REDACTED",
    "get_default_config",
    "set_default_config",
    # Inputs
    "Message",
    "ToolCall",
    "Document",
    # Conventions
    "SpanAttributes",
    "LLMAttributes",
    "GenAIAttributes",
    "OpenInferenceSpanKind",
    "InvalidSpanKindError",
    "NamespaceMapper",
    "DEFAULT_NAMESPACE_MAPPER",
    "map_openinference_to_gen_ai",
    "map_gen_ai_to_openinference",
    "__version__",
]
