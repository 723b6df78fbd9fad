"""
OpenInference Semantic Conventions

Attribute keys for describing LLM application behavior on OpenTelemetry
spans, in two naming conventions:

- OpenInference keys (``llm.model_name``, ``llm.input_messages.0.message.role``)
- OTel GenAI keys (``gen_ai.request.model``, ``gen_ai.prompt.0.role``)

and a fixed mapping between the two for dual emission.
"""

from .attributes import (
    AgentAttributes,
    AudioAttributes,
    ChoiceAttributes,
    DocumentAttributes,
    EmbeddingAttributes,
    EvaluationAttributes,
    ExceptionAttributes,
    GraphAttributes,
    ImageAttributes,
    LLMAttributes,
    MessageAttributes,
    MessageContentAttributes,
    PromptAttributes,
    RerankerAttributes,
    RetrievalAttributes,
    SpanAttributes,
    ToolAttributes,
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
from .gen_ai import (
    GenAIAttributes,
    GenAIEvents,
    GenAIMessageAttributes,
    GenAIMetrics,
    GenAIOperationName,
    GenAITokenType,
)
from .mapping import (
    DEFAULT_MAPPING_PAIRS,
    DEFAULT_NAMESPACE_MAPPER,
    NamespaceMapper,
    map_gen_ai_to_openinference,
    map_openinference_to_gen_ai,
)
from .span_kind import InvalidSpanKindError, OpenInferenceSpanKind

__all__ = [
    # OpenInference namespace
    "SpanAttributes",
    "LLMAttributes",
    "MessageAttributes",
    "MessageContentAttributes",
    "ToolCallAttributes",
    "ToolAttributes",
    "PromptAttributes",
    "ChoiceAttributes",
    "EmbeddingAttributes",
    "DocumentAttributes",
    "RetrievalAttributes",
    "RerankerAttributes",
    "AgentAttributes",
    "GraphAttributes",
    "EvaluationAttributes",
    "ExceptionAttributes",
    "ImageAttributes",
    "AudioAttributes",
    "static_key",
    "indexed_key",
    "input_message_key",
    "output_message_key",
    "message_content_key",
    "tool_call_key",
    "tool_definition_key",
    "prompt_key",
    "choice_key",
    "embedding_key",
    "document_key",
    # GenAI namespace
    "GenAIAttributes",
    "GenAIMessageAttributes",
    "GenAIOperationName",
    "GenAITokenType",
    "GenAIEvents",
    "GenAIMetrics",
    # Mapping
    "NamespaceMapper",
    "DEFAULT_MAPPING_PAIRS",
    "DEFAULT_NAMESPACE_MAPPER",
    "map_openinference_to_gen_ai",
    "map_gen_ai_to_openinference",
    # Span kinds
    "OpenInferenceSpanKind",
    "InvalidSpanKindError",
]
