"""
Fluent builders for OpenInference spans.

Each builder collects the fields of one kind of operation, then either
returns the resolved attributes or opens a span carrying them::

    span = (
        LlmSpanBuilder("gpt-4")
        .provider("openai")
        .temperature(0.7)
        .input_message("user", "hi")
        .build()
    )
    try:
        ...
        record_output_message(span, 0, "assistant", "hello")
        record_token_usage(span, prompt_tokens=3, completion_tokens=1)
    finally:
        span.end()

Privacy settings are applied when attributes are resolved, not when setters
are called, so the order of ``config()`` and the other setters does not
matter.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, TypeVar

from opentelemetry import trace
from opentelemetry.util.types import AttributeValue

from .configuration import SpanConfig, get_default_config
from .schemas import (
    Document,
    DocumentLike,
    Message,
    MessageLike,
    ToolCall,
    ToolCallLike,
)
from .semantic_conventions import (
    AgentAttributes,
    EmbeddingAttributes,
    EvaluationAttributes,
    GenAIAttributes,
    GenAIOperationName,
    GraphAttributes,
    LLMAttributes,
    OpenInferenceSpanKind,
    RerankerAttributes,
    RetrievalAttributes,
    SpanAttributes,
    ToolAttributes,
    ToolCallAttributes,
    choice_key,
    embedding_key,
    prompt_key,
    tool_definition_key,
)
from .span_helpers import (
    AttributeEntry,
    document_entries,
    message_entries,
    output_entries,
    record_error,
    resolve_attributes,
    to_json,
    token_count_entries,
)
from .tracing import get_tracer

logger = logging.getLogger(__name__)

_B = TypeVar("_B", bound="SpanBuilder")


class SpanBuilder:
    """Base class for span builders.

    Subclasses set ``span_kind`` and add their own fields by overriding
    ``_kind_entries``. The fields shared by every kind (input, output,
    metadata, tags, session and user) live here.
    """

    span_kind: OpenInferenceSpanKind = OpenInferenceSpanKind.CHAIN
    # Value for gen_ai.operation.name, for kinds the GenAI convention covers
    operation_name: Optional[str] = None

    def __init__(self, name: str):
        self._name = name
        self._config: Optional[SpanConfig] = None
        self._tracer: Optional[trace.Tracer] = None

        self._input_value: Any = None
        self._input_mime_type: Optional[str] = None
        self._output_value: Any = None
        self._output_mime_type: Optional[str] = None
        self._metadata: Optional[Dict[str, Any]] = None
        self._tags: List[str] = []
        self._session_id: Optional[str] = None
        self._user_id: Optional[str] = None

    @property
    def span_name(self) -> str:
        """Name given to the span when it is opened."""
        return f"{self.span_kind.value} {self._name}"

    def config(self: _B, config: SpanConfig) -> _B:
        """Use a specific configuration instead of the process-wide one.

        Args:
            config: Privacy and dual emission settings for this span

        Returns:
            Self for method chaining
        """
        self._config = config
        return self

    def tracer(self: _B, tracer: trace.Tracer) -> _B:
        """Open the span with a specific tracer.

        Args:
            tracer: Tracer to use (defaults to the package tracer)

        Returns:
            Self for method chaining
        """
        self._tracer = tracer
        return self

    def input(self: _B, value: Any, mime_type: Optional[str] = None) -> _B:
        """Set the input of the operation.

        Non-string values are serialized to JSON.

        Args:
            value: Input value
            mime_type: MIME type of the value (defaults to JSON for non-strings)

        Returns:
            Self for method chaining
        """
        self._input_value = value
        self._input_mime_type = mime_type
        return self

    def output(self: _B, value: Any, mime_type: Optional[str] = None) -> _B:
        """Set the output of the operation, if known before the span opens."""
        self._output_value = value
        self._output_mime_type = mime_type
        return self

    def metadata(self: _B, metadata: Mapping[str, Any]) -> _B:
        """Merge metadata into the span's ``metadata`` attribute.

        Args:
            metadata: Key/value pairs, serialized to a JSON object

        Returns:
            Self for method chaining
        """
        if self._metadata is None:
            self._metadata = {}
        self._metadata.update(metadata)
        return self

    def tags(self: _B, *tags: str) -> _B:
        self._tags.extend(tags)
        return self

    def session_id(self: _B, session_id: str) -> _B:
        self._session_id = session_id
        return self

    def user_id(self: _B, user_id: str) -> _B:
        self._user_id = user_id
        return self

    def _resolve_config(self) -> SpanConfig:
        return self._config or get_default_config()

    def _common_entries(self, config: SpanConfig) -> Iterator[AttributeEntry]:
        yield AttributeEntry(SpanAttributes.OPENINFERENCE_SPAN_KIND, self.span_kind.value)

        input_mime_type = self._input_mime_type
        if (
            self._input_value is not None
            and not isinstance(self._input_value, str)
            and input_mime_type is None
        ):
            input_mime_type = "application/json"
        yield AttributeEntry(
            SpanAttributes.INPUT_VALUE,
            to_json(self._input_value),
            content=True,
            redact=config.hide_inputs,
        )
        yield AttributeEntry(SpanAttributes.INPUT_MIME_TYPE, input_mime_type)

        yield from output_entries(self._output_value, self._output_mime_type, config)

        yield AttributeEntry(SpanAttributes.METADATA, to_json(self._metadata))
        if self._tags:
            yield AttributeEntry(SpanAttributes.TAG_TAGS, list(self._tags))
        yield AttributeEntry(SpanAttributes.SESSION_ID, self._session_id)
        yield AttributeEntry(SpanAttributes.USER_ID, self._user_id)

    def _kind_entries(self, config: SpanConfig) -> Iterable[AttributeEntry]:
        return ()

    def attributes(self) -> Dict[str, AttributeValue]:
        """Resolve the attributes this builder would put on its span.

        No span is opened. Useful for inspecting what a configuration emits,
        or for passing attributes to a span opened elsewhere.

        Returns:
            Attribute dictionary, OpenInference keys first, then GenAI mirrors
        """
        config = self._resolve_config()
        entries: List[AttributeEntry] = list(self._common_entries(config))
        entries.extend(self._kind_entries(config))

        attributes = resolve_attributes(entries, config)
        if config.emit_gen_ai_attributes and self.operation_name:
            attributes[GenAIAttributes.OPERATION_NAME] = self.operation_name
        return attributes

    def build(self) -> trace.Span:
        """Open a span with the resolved attributes.

        The span is not made current, and the caller is responsible for
        ending it.

        Returns:
            The open span
        """
        tracer = self._tracer or get_tracer()
        logger.debug(f"Opening {self.span_kind.value} span {self.span_name!r}")
        return tracer.start_span(
            self.span_name,
            kind=trace.SpanKind.INTERNAL,
            attributes=self.attributes(),
        )

    @contextmanager
    def start_as_current_span(self) -> Iterator[trace.Span]:
        """Open the span, make it current, and end it on exit.

        An exception escaping the block is recorded on the span with
        ``record_error`` and then re-raised.

        Yields:
            The open span

        Example:
            ```python
            with ToolSpanBuilder("search").parameters({"q": "otel"}).start_as_current_span() as span:
                record_output(span, run_search("otel"))
            ```
        """
        span = self.build()
        try:
            with trace.use_span(
                span,
                end_on_exit=False,
                record_exception=False,
                set_status_on_exception=False,
            ):
                yield span
        except Exception as e:
            record_error(span, e, config=self._resolve_config())
            raise
        finally:
            span.end()


class LlmSpanBuilder(SpanBuilder):
    """Builder for a call to a large language model."""

    span_kind = OpenInferenceSpanKind.LLM
    operation_name = GenAIOperationName.CHAT

    def __init__(self, model_name: str):
        super().__init__(model_name)
        self._model_name = model_name
        self._provider: Optional[str] = None
        self._system: Optional[str] = None
        self._parameters: Dict[str, Any] = {}
        self._input_messages: List[Message] = []
        self._output_messages: List[Message] = []
        self._tools: List[Any] = []
        self._prompts: List[str] = []
        self._choices: List[str] = []
        self._prompt_template: Optional[str] = None
        self._prompt_template_variables: Optional[Dict[str, Any]] = None
        self._prompt_template_version: Optional[str] = None
        self._token_counts: Dict[str, Optional[int]] = {}

    def provider(self, provider: str) -> "LlmSpanBuilder":
        """Set the hosting provider, e.g. ``"openai"`` or ``"azure"``.

        Returns:
            Self for method chaining
        """
        self._provider = provider
        return self

    def system(self, system: str) -> "LlmSpanBuilder":
        """Set the model family vendor, e.g. ``"openai"`` or ``"anthropic"``."""
        self._system = system
        return self

    # Invocation parameters

    def temperature(self, value: float) -> "LlmSpanBuilder":
        self._parameters["temperature"] = value
        return self

    def top_p(self, value: float) -> "LlmSpanBuilder":
        self._parameters["top_p"] = value
        return self

    def top_k(self, value: int) -> "LlmSpanBuilder":
        self._parameters["top_k"] = value
        return self

    def max_tokens(self, value: int) -> "LlmSpanBuilder":
        self._parameters["max_tokens"] = value
        return self

    def frequency_penalty(self, value: float) -> "LlmSpanBuilder":
        self._parameters["frequency_penalty"] = value
        return self

    def presence_penalty(self, value: float) -> "LlmSpanBuilder":
        self._parameters["presence_penalty"] = value
        return self

    def stop_sequences(self, sequences: Iterable[str]) -> "LlmSpanBuilder":
        self._parameters["stop_sequences"] = list(sequences)
        return self

    def invocation_parameters(self, parameters: Mapping[str, Any]) -> "LlmSpanBuilder":
        """Merge raw invocation parameters.

        All parameters, typed or not, are written together as a JSON object
        under ``llm.invocation_parameters``. The typed ones are also written
        under their own keys.

        Args:
            parameters: Parameters as sent to the model API

        Returns:
            Self for method chaining
        """
        self._parameters.update(parameters)
        return self

    # Messages

    def input_message(
        self,
        role: str,
        content: Optional[str] = None,
        tool_calls: Optional[Iterable[ToolCallLike]] = None,
        tool_call_id: Optional[str] = None,
        images: Optional[Iterable[str]] = None,
    ) -> "LlmSpanBuilder":
        """Append a message to the prompt sent to the model.

        Messages are indexed in the order they are appended.

        Args:
            role: Message role, e.g. ``"system"``, ``"user"``, ``"tool"``
            content: Message text
            tool_calls: Tool calls made by an earlier assistant turn
            tool_call_id: Call answered by a tool result message
            images: Image URLs or base64 data URIs attached to the message

        Returns:
            Self for method chaining
        """
        self._input_messages.append(
            Message(
                role=role,
                content=content,
                tool_calls=[ToolCall.from_value(call) for call in tool_calls or []],
                tool_call_id=tool_call_id,
                images=list(images or []),
            )
        )
        return self

    def input_messages(self, messages: Iterable[MessageLike]) -> "LlmSpanBuilder":
        """Append several input messages, as Message objects or dicts."""
        self._input_messages.extend(Message.from_value(m) for m in messages)
        return self

    def output_message(
        self,
        role: str,
        content: Optional[str] = None,
        tool_calls: Optional[Iterable[ToolCallLike]] = None,
    ) -> "LlmSpanBuilder":
        """Append a message generated by the model.

        Use ``record_output_message`` instead when the response arrives
        after the span is opened.
        """
        self._output_messages.append(
            Message(
                role=role,
                content=content,
                tool_calls=[ToolCall.from_value(call) for call in tool_calls or []],
            )
        )
        return self

    def tool_definition(self, json_schema: Any) -> "LlmSpanBuilder":
        """Append a tool offered to the model, as its JSON schema."""
        self._tools.append(json_schema)
        return self

    # Completion-style prompts

    def prompt(self, text: str) -> "LlmSpanBuilder":
        self._prompts.append(text)
        return self

    def choice(self, text: str) -> "LlmSpanBuilder":
        self._choices.append(text)
        return self

    def prompt_template(
        self,
        template: str,
        variables: Optional[Mapping[str, Any]] = None,
        version: Optional[str] = None,
    ) -> "LlmSpanBuilder":
        """Describe the template the prompt was rendered from.

        Args:
            template: Template text
            variables: Values substituted into the template
            version: Template version identifier

        Returns:
            Self for method chaining
        """
        self._prompt_template = template
        self._prompt_template_variables = dict(variables) if variables is not None else None
        self._prompt_template_version = version
        return self

    def token_counts(
        self,
        prompt: Optional[int] = None,
        completion: Optional[int] = None,
        total: Optional[int] = None,
        cache_read: Optional[int] = None,
        cache_write: Optional[int] = None,
        reasoning: Optional[int] = None,
    ) -> "LlmSpanBuilder":
        """Set token usage, when it is known before the span opens."""
        self._token_counts = {
            "prompt_tokens": prompt,
            "completion_tokens": completion,
            "total_tokens": total,
            "cache_read": cache_read,
            "cache_write": cache_write,
            "reasoning": reasoning,
        }
        return self

    def _parameter_entries(self, config: SpanConfig) -> Iterator[AttributeEntry]:
        if config.hide_llm_invocation_parameters or not self._parameters:
            return

        params = self._parameters
        yield AttributeEntry(LLMAttributes.TEMPERATURE, params.get("temperature"))
        yield AttributeEntry(LLMAttributes.TOP_P, params.get("top_p"))
        yield AttributeEntry(LLMAttributes.TOP_K, params.get("top_k"))
        yield AttributeEntry(LLMAttributes.MAX_TOKENS, params.get("max_tokens"))
        yield AttributeEntry(
            LLMAttributes.FREQUENCY_PENALTY, params.get("frequency_penalty")
        )
        yield AttributeEntry(
            LLMAttributes.PRESENCE_PENALTY, params.get("presence_penalty")
        )
        yield AttributeEntry(LLMAttributes.STOP_SEQUENCES, params.get("stop_sequences"))
        yield AttributeEntry(LLMAttributes.INVOCATION_PARAMETERS, to_json(params))

    def _kind_entries(self, config: SpanConfig) -> Iterator[AttributeEntry]:
        yield AttributeEntry(LLMAttributes.MODEL_NAME, self._model_name)
        yield AttributeEntry(LLMAttributes.PROVIDER, self._provider)
        yield AttributeEntry(LLMAttributes.SYSTEM, self._system)
        yield from self._parameter_entries(config)

        for index, message in enumerate(self._input_messages):
            yield from message_entries(
                LLMAttributes.INPUT_MESSAGES,
                index,
                message,
                hide_message=config.should_hide_input_messages(),
                hide_text=config.should_hide_input_text(),
                hide_images=config.should_hide_input_images(),
                image_max_length=config.base64_image_max_length,
            )
        for index, message in enumerate(self._output_messages):
            yield from message_entries(
                LLMAttributes.OUTPUT_MESSAGES,
                index,
                message,
                hide_message=config.should_hide_output_messages(),
                hide_text=config.should_hide_output_text(),
            )

        for index, schema in enumerate(self._tools):
            yield AttributeEntry(tool_definition_key(index), to_json(schema))

        for index, text in enumerate(self._prompts):
            yield AttributeEntry(
                prompt_key(index), text, content=True, redact=config.should_hide_prompts()
            )
        for index, text in enumerate(self._choices):
            yield AttributeEntry(
                choice_key(index), text, content=True, redact=config.should_hide_choices()
            )

        yield AttributeEntry(LLMAttributes.PROMPT_TEMPLATE_TEMPLATE, self._prompt_template)
        yield AttributeEntry(
            LLMAttributes.PROMPT_TEMPLATE_VARIABLES,
            to_json(self._prompt_template_variables),
            content=True,
            redact=config.should_hide_input_text(),
        )
        yield AttributeEntry(
            LLMAttributes.PROMPT_TEMPLATE_VERSION, self._prompt_template_version
        )

        if self._token_counts:
            yield from token_count_entries(**self._token_counts)

    @property
    def span_name(self) -> str:
        return f"llm {self._model_name}"


class EmbeddingSpanBuilder(SpanBuilder):
    """Builder for a call to an embedding model."""

    span_kind = OpenInferenceSpanKind.EMBEDDING
    operation_name = GenAIOperationName.EMBEDDINGS

    def __init__(self, model_name: str):
        super().__init__(model_name)
        self._model_name = model_name
        self._embeddings: List[Dict[str, Any]] = []
        self._parameters: Optional[Dict[str, Any]] = None

    def text(self, text: str) -> "EmbeddingSpanBuilder":
        """Append one text to embed.

        Returns:
            Self for method chaining
        """
        self._embeddings.append({"text": text, "vector": None})
        return self

    def texts(self, texts: Iterable[str]) -> "EmbeddingSpanBuilder":
        for text in texts:
            self.text(text)
        return self

    def embedding(
        self, text: Optional[str], vector: Optional[Iterable[float]] = None
    ) -> "EmbeddingSpanBuilder":
        """Append an embedded text together with its vector."""
        self._embeddings.append(
            {"text": text, "vector": list(vector) if vector is not None else None}
        )
        return self

    def invocation_parameters(
        self, parameters: Mapping[str, Any]
    ) -> "EmbeddingSpanBuilder":
        if self._parameters is None:
            self._parameters = {}
        self._parameters.update(parameters)
        return self

    def _kind_entries(self, config: SpanConfig) -> Iterator[AttributeEntry]:
        yield AttributeEntry(EmbeddingAttributes.MODEL_NAME, self._model_name)
        if not config.hide_llm_invocation_parameters:
            yield AttributeEntry(
                EmbeddingAttributes.INVOCATION_PARAMETERS, to_json(self._parameters)
            )

        hide_text = config.should_hide_embedding_text()
        hide_vectors = config.should_hide_embedding_vectors()
        for index, item in enumerate(self._embeddings):
            yield AttributeEntry(
                embedding_key(index, EmbeddingAttributes.TEXT),
                item["text"],
                content=True,
                redact=hide_text,
            )
            if not hide_vectors:
                yield AttributeEntry(
                    embedding_key(index, EmbeddingAttributes.VECTOR),
                    item["vector"],
                    content=True,
                )

    @property
    def span_name(self) -> str:
        return f"embedding {self._model_name}"


class ChainSpanBuilder(SpanBuilder):
    """Builder for a pipeline step or other glue code."""

    span_kind = OpenInferenceSpanKind.CHAIN

    @property
    def span_name(self) -> str:
        return self._name


class ToolSpanBuilder(SpanBuilder):
    """Builder for the execution of a tool or function."""

    span_kind = OpenInferenceSpanKind.TOOL
    operation_name = GenAIOperationName.EXECUTE_TOOL

    def __init__(self, name: str):
        super().__init__(name)
        self._description: Optional[str] = None
        self._parameters: Any = None
        self._json_schema: Any = None
        self._tool_call_id: Optional[str] = None

    def description(self, description: str) -> "ToolSpanBuilder":
        self._description = description
        return self

    def parameters(self, parameters: Any) -> "ToolSpanBuilder":
        """Set the arguments the tool was called with.

        Args:
            parameters: Arguments, as a dict or a JSON string

        Returns:
            Self for method chaining
        """
        self._parameters = parameters
        return self

    def json_schema(self, schema: Any) -> "ToolSpanBuilder":
        self._json_schema = schema
        return self

    def tool_call_id(self, tool_call_id: str) -> "ToolSpanBuilder":
        """Link the execution to the model's tool call that requested it."""
        self._tool_call_id = tool_call_id
        return self

    def _kind_entries(self, config: SpanConfig) -> Iterator[AttributeEntry]:
        yield AttributeEntry(ToolAttributes.NAME, self._name)
        yield AttributeEntry(ToolAttributes.DESCRIPTION, self._description)
        yield AttributeEntry(
            ToolAttributes.PARAMETERS,
            to_json(self._parameters),
            content=True,
            redact=config.hide_inputs,
        )
        yield AttributeEntry(ToolAttributes.JSON_SCHEMA, to_json(self._json_schema))
        yield AttributeEntry(ToolCallAttributes.ID, self._tool_call_id)


class AgentSpanBuilder(SpanBuilder):
    """Builder for an agent's reasoning block."""

    span_kind = OpenInferenceSpanKind.AGENT
    operation_name = GenAIOperationName.INVOKE_AGENT

    def __init__(self, name: str):
        super().__init__(name)
        self._node_id: Optional[str] = None
        self._node_name: Optional[str] = None
        self._node_parent_id: Optional[str] = None

    def graph_node(
        self,
        node_id: str,
        name: Optional[str] = None,
        parent_id: Optional[str] = None,
    ) -> "AgentSpanBuilder":
        """Place the agent in an agent graph.

        Args:
            node_id: Identifier of this node
            name: Display name of the node
            parent_id: Identifier of the parent node

        Returns:
            Self for method chaining
        """
        self._node_id = node_id
        self._node_name = name
        self._node_parent_id = parent_id
        return self

    def _kind_entries(self, config: SpanConfig) -> Iterator[AttributeEntry]:
        yield AttributeEntry(AgentAttributes.NAME, self._name)
        yield AttributeEntry(GraphAttributes.NODE_ID, self._node_id)
        yield AttributeEntry(GraphAttributes.NODE_NAME, self._node_name)
        yield AttributeEntry(GraphAttributes.NODE_PARENT_ID, self._node_parent_id)


class RetrieverSpanBuilder(SpanBuilder):
    """Builder for a fetch from a vector store or search index."""

    span_kind = OpenInferenceSpanKind.RETRIEVER

    def __init__(self, name: str):
        super().__init__(name)
        self._documents: List[Document] = []

    def query(self, query: str) -> "RetrieverSpanBuilder":
        """Set the query text, recorded as the span input."""
        return self.input(query)

    def document(
        self,
        content: Optional[str] = None,
        id: Optional[Any] = None,
        score: Optional[float] = None,
        metadata: Optional[Mapping[str, Any]] = None,
    ) -> "RetrieverSpanBuilder":
        self._documents.append(
            Document(
                content=content,
                id=id,
                score=score,
                metadata=dict(metadata) if metadata is not None else None,
            )
        )
        return self

    def documents(self, documents: Iterable[DocumentLike]) -> "RetrieverSpanBuilder":
        """Append retrieved documents, as Document objects, dicts or strings."""
        self._documents.extend(Document.from_value(d) for d in documents)
        return self

    def _kind_entries(self, config: SpanConfig) -> Iterator[AttributeEntry]:
        return document_entries(RetrievalAttributes.DOCUMENTS, self._documents)


class RerankerSpanBuilder(SpanBuilder):
    """Builder for the rescoring of candidate documents."""

    span_kind = OpenInferenceSpanKind.RERANKER

    def __init__(self, name: str):
        super().__init__(name)
        self._model_name: Optional[str] = None
        self._query: Optional[str] = None
        self._top_k: Optional[int] = None
        self._input_documents: List[Document] = []
        self._output_documents: List[Document] = []

    def model_name(self, model_name: str) -> "RerankerSpanBuilder":
        self._model_name = model_name
        return self

    def query(self, query: str) -> "RerankerSpanBuilder":
        self._query = query
        return self

    def top_k(self, top_k: int) -> "RerankerSpanBuilder":
        self._top_k = top_k
        return self

    def input_document(self, document: DocumentLike) -> "RerankerSpanBuilder":
        self._input_documents.append(Document.from_value(document))
        return self

    def input_documents(self, documents: Iterable[DocumentLike]) -> "RerankerSpanBuilder":
        """Append the candidates passed to the reranker."""
        self._input_documents.extend(Document.from_value(d) for d in documents)
        return self

    def output_document(self, document: DocumentLike) -> "RerankerSpanBuilder":
        self._output_documents.append(Document.from_value(document))
        return self

    def output_documents(self, documents: Iterable[DocumentLike]) -> "RerankerSpanBuilder":
        """Append the reranked documents, best first."""
        self._output_documents.extend(Document.from_value(d) for d in documents)
        return self

    def _kind_entries(self, config: SpanConfig) -> Iterator[AttributeEntry]:
        yield AttributeEntry(RerankerAttributes.MODEL_NAME, self._model_name)
        yield AttributeEntry(
            RerankerAttributes.QUERY,
            self._query,
            content=True,
            redact=config.hide_inputs,
        )
        yield AttributeEntry(RerankerAttributes.TOP_K, self._top_k)
        yield from document_entries(
            RerankerAttributes.INPUT_DOCUMENTS, self._input_documents
        )
        yield from document_entries(
            RerankerAttributes.OUTPUT_DOCUMENTS, self._output_documents
        )


class GuardrailSpanBuilder(SpanBuilder):
    """Builder for a check run against inputs or outputs."""

    span_kind = OpenInferenceSpanKind.GUARDRAIL


class EvaluatorSpanBuilder(SpanBuilder):
    """Builder for the evaluation of a model output."""

    span_kind = OpenInferenceSpanKind.EVALUATOR

    def __init__(self, name: str):
        super().__init__(name)
        self._score: Optional[float] = None
        self._label: Optional[str] = None
        self._explanation: Optional[str] = None

    def score(self, score: float) -> "EvaluatorSpanBuilder":
        self._score = score
        return self

    def label(self, label: str) -> "EvaluatorSpanBuilder":
        self._label = label
        return self

    def explanation(self, explanation: str) -> "EvaluatorSpanBuilder":
        self._explanation = explanation
        return self

    def _kind_entries(self, config: SpanConfig) -> Iterator[AttributeEntry]:
        yield AttributeEntry(EvaluationAttributes.NAME, self._name)
        yield AttributeEntry(EvaluationAttributes.SCORE, self._score)
        yield AttributeEntry(EvaluationAttributes.LABEL, self._label)
        yield AttributeEntry(
            EvaluationAttributes.EXPLANATION, self._explanation, content=True
        )


__all__ = [
    "SpanBuilder",
    "LlmSpanBuilder",
    "EmbeddingSpanBuilder",
    "ChainSpanBuilder",
    "ToolSpanBuilder",
    "AgentSpanBuilder",
    "RetrieverSpanBuilder",
    "RerankerSpanBuilder",
    "GuardrailSpanBuilder",
    "EvaluatorSpanBuilder",
]
