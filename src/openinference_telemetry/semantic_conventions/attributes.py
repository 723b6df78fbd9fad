"""OpenInference attribute keys for LLM application spans.

Keys are flat, dot-segmented strings. Fields that describe an element of an
ordered list (input messages, tool calls, retrieved documents, ...) use an
indexed shape ``<group>.<index>.<field>`` where ``index`` is the element's
zero-based position, e.g. ``llm.input_messages.0.message.role``.

See https://github.com/Arize-ai/openinference/blob/main/spec/semantic_conventions.md
"""

import sys
from functools import lru_cache


@lru_cache(maxsize=None)
def static_key(group: str, field: str) -> str:
    """Join a group and a field into a static attribute key.

    Args:
        group: Dotted group prefix, e.g. ``"llm.token_count"``
        field: Field name within the group, e.g. ``"prompt"``

    Returns:
        The interned key ``"<group>.<field>"``
    """
    return sys.intern(f"{group}.{field}")


@lru_cache(maxsize=None)
def indexed_key(group: str, index: int, field: str) -> str:
    """Build the key for a field of the ``index``-th element of a list group.

    Keys are memoized and interned: the first request for a given
    ``(group, index, field)`` allocates the string once, every later request
    returns the identical object. The cache is unbounded, so every distinct
    triple ever requested stays alive for the life of the process. Message and
    tool lists are short in practice, which keeps the retained set small.

    Nested lists are addressed by passing an indexed key as ``group``::

        indexed_key(output_message_key(0, MessageAttributes.TOOL_CALLS), 1, ToolCallAttributes.ID)
        # "llm.output_messages.0.message.tool_calls.1.tool_call.id"

    Args:
        group: List group prefix, e.g. ``"llm.input_messages"``
        index: Zero-based position of the element
        field: Field name of the element, e.g. ``"message.role"``

    Returns:
        The interned key ``"<group>.<index>.<field>"``

    Raises:
        ValueError: If ``index`` is negative, or has more decimal digits than
            the interpreter converts to text (``sys.get_int_max_str_digits()``,
            4300 by default)
    """
    if index < 0:
        raise ValueError(f"Attribute index must be non-negative, got {index}")
    return sys.intern(f"{group}.{int(index)}.{field}")


class SpanAttributes:
    """Attributes shared by every OpenInference span kind."""

    OPENINFERENCE_SPAN_KIND = "openinference.span.kind"

    INPUT_VALUE = "input.value"
    INPUT_MIME_TYPE = "input.mime_type"
    OUTPUT_VALUE = "output.value"
    OUTPUT_MIME_TYPE = "output.mime_type"

    METADATA = "metadata"
    TAG_TAGS = "tag.tags"
    SESSION_ID = "session.id"
    USER_ID = "user.id"


class LLMAttributes:
    """Attributes for calls to a large language model."""

    MODEL_NAME = "llm.model_name"
    SYSTEM = "llm.system"
    PROVIDER = "llm.provider"

    # JSON string of all invocation parameters
    INVOCATION_PARAMETERS = "llm.invocation_parameters"

    # Individual invocation parameters
    TEMPERATURE = "llm.invocation_parameters.temperature"
    TOP_P = "llm.invocation_parameters.top_p"
    TOP_K = "llm.invocation_parameters.top_k"
    MAX_TOKENS = "llm.invocation_parameters.max_tokens"
    FREQUENCY_PENALTY = "llm.invocation_parameters.frequency_penalty"
    PRESENCE_PENALTY = "llm.invocation_parameters.presence_penalty"
    STOP_SEQUENCES = "llm.invocation_parameters.stop_sequences"

    # Deprecated, superseded by tool calls on output messages
    FUNCTION_CALL = "llm.function_call"

    # Indexed list groups
    INPUT_MESSAGES = "llm.input_messages"
    OUTPUT_MESSAGES = "llm.output_messages"
    PROMPTS = "llm.prompts"
    CHOICES = "llm.choices"
    TOOLS = "llm.tools"

    PROMPT_TEMPLATE_TEMPLATE = "llm.prompt_template.template"
    PROMPT_TEMPLATE_VARIABLES = "llm.prompt_template.variables"
    PROMPT_TEMPLATE_VERSION = "llm.prompt_template.version"

    TOKEN_COUNT_PROMPT = "llm.token_count.prompt"
    TOKEN_COUNT_COMPLETION = "llm.token_count.completion"
    TOKEN_COUNT_TOTAL = "llm.token_count.total"
    TOKEN_COUNT_PROMPT_DETAILS_CACHE_READ = "llm.token_count.prompt_details.cache_read"
    TOKEN_COUNT_PROMPT_DETAILS_CACHE_WRITE = "llm.token_count.prompt_details.cache_write"
    TOKEN_COUNT_PROMPT_DETAILS_AUDIO = "llm.token_count.prompt_details.audio"
    TOKEN_COUNT_COMPLETION_DETAILS_REASONING = (
        "llm.token_count.completion_details.reasoning"
    )
    TOKEN_COUNT_COMPLETION_DETAILS_AUDIO = "llm.token_count.completion_details.audio"

    COST_PROMPT = "llm.cost.prompt"
    COST_COMPLETION = "llm.cost.completion"
    COST_TOTAL = "llm.cost.total"
    COST_PROMPT_DETAILS_INPUT = "llm.cost.prompt_details.input"
    COST_PROMPT_DETAILS_CACHE_WRITE = "llm.cost.prompt_details.cache_write"
    COST_PROMPT_DETAILS_CACHE_READ = "llm.cost.prompt_details.cache_read"
    COST_PROMPT_DETAILS_CACHE_INPUT = "llm.cost.prompt_details.cache_input"
    COST_PROMPT_DETAILS_AUDIO = "llm.cost.prompt_details.audio"
    COST_COMPLETION_DETAILS_OUTPUT = "llm.cost.completion_details.output"
    COST_COMPLETION_DETAILS_REASONING = "llm.cost.completion_details.reasoning"
    COST_COMPLETION_DETAILS_AUDIO = "llm.cost.completion_details.audio"


class MessageAttributes:
    """Fields of an element of ``llm.input_messages`` / ``llm.output_messages``."""

    ROLE = "message.role"
    CONTENT = "message.content"
    CONTENTS = "message.contents"
    TOOL_CALLS = "message.tool_calls"
    TOOL_CALL_ID = "message.tool_call_id"
    FUNCTION_CALL_NAME = "message.function_call_name"
    FUNCTION_CALL_ARGUMENTS_JSON = "message.function_call_arguments_json"


class MessageContentAttributes:
    """Fields of an element of ``message.contents`` (multi-part content)."""

    TYPE = "message_content.type"
    TEXT = "message_content.text"
    IMAGE = "message_content.image"  # Followed by an ImageAttributes field


class ToolCallAttributes:
    """Fields of an element of ``message.tool_calls``."""

    ID = "tool_call.id"
    FUNCTION_NAME = "tool_call.function.name"
    FUNCTION_ARGUMENTS = "tool_call.function.arguments"


class ToolAttributes:
    """Attributes for tool spans and tool definitions (``llm.tools``)."""

    NAME = "tool.name"
    DESCRIPTION = "tool.description"
    JSON_SCHEMA = "tool.json_schema"
    PARAMETERS = "tool.parameters"
    ID = "tool.id"


class PromptAttributes:
    """Prompt management attributes and the field of ``llm.prompts`` elements."""

    VENDOR = "prompt.vendor"
    ID = "prompt.id"
    URL = "prompt.url"
    TEXT = "prompt.text"


class ChoiceAttributes:
    """Field of ``llm.choices`` elements (text completion API)."""

    TEXT = "completion.text"


class EmbeddingAttributes:
    """Attributes for embedding spans."""

    MODEL_NAME = "embedding.model_name"
    INVOCATION_PARAMETERS = "embedding.invocation_parameters"

    # Single embedding, also the field names of ``embedding.embeddings`` elements
    TEXT = "embedding.text"
    VECTOR = "embedding.vector"

    EMBEDDINGS = "embedding.embeddings"


class DocumentAttributes:
    """Fields of a document in a retrieval or reranker list."""

    ID = "document.id"
    CONTENT = "document.content"
    SCORE = "document.score"
    METADATA = "document.metadata"


class RetrievalAttributes:
    """Attributes for retriever spans."""

    DOCUMENTS = "retrieval.documents"


class RerankerAttributes:
    """Attributes for reranker spans."""

    MODEL_NAME = "reranker.model_name"
    QUERY = "reranker.query"
    TOP_K = "reranker.top_k"
    INPUT_DOCUMENTS = "reranker.input_documents"
    OUTPUT_DOCUMENTS = "reranker.output_documents"


class AgentAttributes:
    """Attributes for agent spans."""

    NAME = "agent.name"


class GraphAttributes:
    """Attributes locating a span in an agent graph."""

    NODE_ID = "graph.node.id"
    NODE_NAME = "graph.node.name"
    NODE_PARENT_ID = "graph.node.parent_id"


class EvaluationAttributes:
    """Attributes for evaluator spans."""

    NAME = "eval.name"
    SCORE = "eval.score"
    LABEL = "eval.label"
    EXPLANATION = "eval.explanation"


class ExceptionAttributes:
    """Exception attributes, shared with the OpenTelemetry exception conventions."""

    TYPE = "exception.type"
    MESSAGE = "exception.message"
    STACKTRACE = "exception.stacktrace"
    ESCAPED = "exception.escaped"


class ImageAttributes:
    URL = "image.url"


class AudioAttributes:
    URL = "audio.url"
    MIME_TYPE = "audio.mime_type"
    TRANSCRIPT = "audio.transcript"


def input_message_key(index: int, field: str) -> str:
    """Key for ``field`` of input message ``index``."""
    return indexed_key(LLMAttributes.INPUT_MESSAGES, index, field)


def output_message_key(index: int, field: str) -> str:
    """Key for ``field`` of output message ``index``."""
    return indexed_key(LLMAttributes.OUTPUT_MESSAGES, index, field)


def message_content_key(
    message_group: str, message_index: int, content_index: int, field: str
) -> str:
    """Key for ``field`` of content part ``content_index`` of a message."""
    contents = indexed_key(message_group, message_index, MessageAttributes.CONTENTS)
    return indexed_key(contents, content_index, field)


def tool_call_key(message_index: int, call_index: int, field: str) -> str:
    """Key for ``field`` of tool call ``call_index`` on output message ``message_index``."""
    tool_calls = output_message_key(message_index, MessageAttributes.TOOL_CALLS)
    return indexed_key(tool_calls, call_index, field)


def tool_definition_key(index: int) -> str:
    """Key for the JSON schema of the ``index``-th tool offered to the model."""
    return indexed_key(LLMAttributes.TOOLS, index, ToolAttributes.JSON_SCHEMA)


def prompt_key(index: int) -> str:
    return indexed_key(LLMAttributes.PROMPTS, index, PromptAttributes.TEXT)


def choice_key(index: int) -> str:
    return indexed_key(LLMAttributes.CHOICES, index, ChoiceAttributes.TEXT)


def embedding_key(index: int, field: str) -> str:
    """Key for ``field`` (text or vector) of embedding ``index``."""
    return indexed_key(EmbeddingAttributes.EMBEDDINGS, index, field)


def document_key(group: str, index: int, field: str) -> str:
    """Key for ``field`` of document ``index`` in ``group``.

    ``group`` is one of ``RetrievalAttributes.DOCUMENTS``,
    ``RerankerAttributes.INPUT_DOCUMENTS`` or ``RerankerAttributes.OUTPUT_DOCUMENTS``.
    """
    return indexed_key(group, index, field)
