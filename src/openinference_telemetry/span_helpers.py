"""
Attribute emission and post-creation helpers for OpenInference spans.

Every attribute written by this package goes through ``resolve_attributes``,
which applies the privacy settings and then mirrors each OpenInference key
to its GenAI counterpart. Builders use it when opening a span, and the
``record_*`` helpers use it to append attributes to a span that is already
open. Spans are append-only here: helpers never read back or clear what is
already set, so calling one twice simply writes its attributes twice.
"""

import json
import logging
from typing import Any, Dict, Iterable, Iterator, List, NamedTuple, Optional, Union

from opentelemetry.trace import Span, Status, StatusCode
from opentelemetry.util.types import AttributeValue

from .configuration import REDACTED, SpanConfig, get_default_config
from .schemas import Document, DocumentLike, Message, ToolCall, ToolCallLike
from .semantic_conventions import (
    DEFAULT_NAMESPACE_MAPPER,
    DocumentAttributes,
    ExceptionAttributes,
    ImageAttributes,
    LLMAttributes,
    MessageAttributes,
    MessageContentAttributes,
    NamespaceMapper,
    RetrievalAttributes,
    SpanAttributes,
    ToolCallAttributes,
    indexed_key,
)

logger = logging.getLogger(__name__)


class AttributeEntry(NamedTuple):
    """An OpenInference attribute waiting to be written to a span."""

    key: str
    value: Any
    content: bool = False  # Dropped entirely when record_content is off
    redact: bool = False  # Written as REDACTED instead of its value


def resolve_attributes(
    entries: Iterable[AttributeEntry],
    config: SpanConfig,
    mapper: NamespaceMapper = DEFAULT_NAMESPACE_MAPPER,
) -> Dict[str, AttributeValue]:
    """Turn pending OpenInference entries into the attributes to write.

    Entries with a None value are skipped. Content entries are skipped when
    ``config.record_content`` is off, and redacted entries get the
    ``REDACTED`` placeholder. If ``config.emit_gen_ai_attributes`` is on,
    every OpenInference key that survived is mirrored under its GenAI key
    with the same value; keys without a mapping are not mirrored.

    Args:
        entries: Pending OpenInference attributes
        config: Privacy and dual emission settings
        mapper: Namespace mapping used for the GenAI mirrors

    Returns:
        Attributes to write, OpenInference keys first
    """
    attributes: Dict[str, AttributeValue] = {}
    for entry in entries:
        if entry.value is None:
            continue
        if entry.content and not config.record_content:
            continue
        attributes[entry.key] = REDACTED if entry.redact else entry.value

    if config.emit_gen_ai_attributes:
        for key, value in list(attributes.items()):
            gen_ai_key = mapper.map_forward(key)
            if gen_ai_key is not None:
                attributes[gen_ai_key] = value

    return attributes


def apply_attributes(
    span: Span, entries: Iterable[AttributeEntry], config: Optional[SpanConfig] = None
) -> Dict[str, AttributeValue]:
    """Resolve entries and append them to an open span.

    Returns:
        The attributes that were written
    """
    if not span.is_recording():
        return {}

    attributes = resolve_attributes(entries, config or get_default_config())
    span.set_attributes(attributes)
    return attributes


def to_json(value: Any) -> Optional[str]:
    """Serialize a value for a JSON-string attribute, passing strings through."""
    if value is None or isinstance(value, str):
        return value
    try:
        return json.dumps(value, default=str, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        logger.debug(f"Failed to serialize attribute value to JSON: {e}")
        return str(value)


# Entry factories shared by builders and helpers


def tool_call_entries(
    tool_calls_group: str,
    tool_calls: Iterable[ToolCallLike],
    redact_arguments: bool,
) -> Iterator[AttributeEntry]:
    for call_index, value in enumerate(tool_calls):
        call = ToolCall.from_value(value)
        yield AttributeEntry(
            indexed_key(tool_calls_group, call_index, ToolCallAttributes.ID), call.id
        )
        yield AttributeEntry(
            indexed_key(tool_calls_group, call_index, ToolCallAttributes.FUNCTION_NAME),
            call.function_name,
        )
        yield AttributeEntry(
            indexed_key(
                tool_calls_group, call_index, ToolCallAttributes.FUNCTION_ARGUMENTS
            ),
            to_json(call.function_arguments),
            content=True,
            redact=redact_arguments,
        )


def message_entries(
    group: str,
    index: int,
    message: Message,
    hide_message: bool,
    hide_text: bool,
    hide_images: bool = False,
    image_max_length: Optional[int] = None,
) -> Iterator[AttributeEntry]:
    """Entries for one element of ``llm.input_messages`` or ``llm.output_messages``.

    Args:
        group: Message list group
        index: Position of the message in the list
        message: Message to describe
        hide_message: Redact every field of the message
        hide_text: Redact the message text and tool arguments only
        hide_images: Redact image URLs
        image_max_length: Redact base64 data URIs longer than this
    """
    yield AttributeEntry(
        indexed_key(group, index, MessageAttributes.ROLE),
        message.role,
        redact=hide_message,
    )
    yield AttributeEntry(
        indexed_key(group, index, MessageAttributes.CONTENT),
        message.content,
        content=True,
        redact=hide_message or hide_text,
    )
    yield AttributeEntry(
        indexed_key(group, index, MessageAttributes.TOOL_CALL_ID),
        message.tool_call_id,
        redact=hide_message,
    )
    if message.tool_calls:
        yield from tool_call_entries(
            indexed_key(group, index, MessageAttributes.TOOL_CALLS),
            message.tool_calls,
            redact_arguments=hide_message or hide_text,
        )
    for content_index, url in enumerate(message.images):
        yield from image_entries(
            indexed_key(group, index, MessageAttributes.CONTENTS),
            content_index,
            url,
            redact=(
                hide_message
                or hide_images
                or _is_oversized_data_uri(url, image_max_length)
            ),
        )


def _is_oversized_data_uri(url: str, max_length: Optional[int]) -> bool:
    return max_length is not None and url.startswith("data:") and len(url) > max_length


def image_entries(
    contents_group: str, content_index: int, url: str, redact: bool
) -> Iterator[AttributeEntry]:
    yield AttributeEntry(
        indexed_key(contents_group, content_index, MessageContentAttributes.TYPE), "image"
    )
    yield AttributeEntry(
        indexed_key(
            contents_group,
            content_index,
            f"{MessageContentAttributes.IMAGE}.{ImageAttributes.URL}",
        ),
        url,
        content=True,
        redact=redact,
    )


def document_entries(
    group: str, documents: Iterable[DocumentLike]
) -> Iterator[AttributeEntry]:
    for index, value in enumerate(documents):
        document = Document.from_value(value)
        yield AttributeEntry(
            indexed_key(group, index, DocumentAttributes.ID), document.id
        )
        yield AttributeEntry(
            indexed_key(group, index, DocumentAttributes.CONTENT),
            document.content,
            content=True,
        )
        yield AttributeEntry(
            indexed_key(group, index, DocumentAttributes.SCORE), document.score
        )
        yield AttributeEntry(
            indexed_key(group, index, DocumentAttributes.METADATA),
            to_json(document.metadata),
        )


def token_count_entries(
    prompt_tokens: Optional[int] = None,
    completion_tokens: Optional[int] = None,
    total_tokens: Optional[int] = None,
    cache_read: Optional[int] = None,
    cache_write: Optional[int] = None,
    reasoning: Optional[int] = None,
) -> List[AttributeEntry]:
    if total_tokens is None and prompt_tokens is not None and completion_tokens is not None:
        total_tokens = prompt_tokens + completion_tokens

    return [
        AttributeEntry(LLMAttributes.TOKEN_COUNT_PROMPT, prompt_tokens),
        AttributeEntry(LLMAttributes.TOKEN_COUNT_COMPLETION, completion_tokens),
        AttributeEntry(LLMAttributes.TOKEN_COUNT_TOTAL, total_tokens),
        AttributeEntry(LLMAttributes.TOKEN_COUNT_PROMPT_DETAILS_CACHE_READ, cache_read),
        AttributeEntry(
            LLMAttributes.TOKEN_COUNT_PROMPT_DETAILS_CACHE_WRITE, cache_write
        ),
        AttributeEntry(
            LLMAttributes.TOKEN_COUNT_COMPLETION_DETAILS_REASONING, reasoning
        ),
    ]


# Post-creation helpers


def record_token_usage(
    span: Span,
    prompt_tokens: Optional[int] = None,
    completion_tokens: Optional[int] = None,
    total_tokens: Optional[int] = None,
    config: Optional[SpanConfig] = None,
    *,
    cache_read: Optional[int] = None,
    cache_write: Optional[int] = None,
    reasoning: Optional[int] = None,
) -> Dict[str, AttributeValue]:
    """Record token usage on an LLM span.

    The total defaults to prompt + completion when both are given. Counts
    left as None are not written.

    Args:
        span: Open span to append to
        prompt_tokens: Tokens in the prompt
        completion_tokens: Tokens in the completion
        total_tokens: Total tokens, if reported separately
        config: Span configuration (defaults to the process-wide one)
        cache_read: Prompt tokens read from cache
        cache_write: Prompt tokens written to cache
        reasoning: Completion tokens spent on reasoning

    Returns:
        The attributes that were written
    """
    entries = token_count_entries(
        prompt_tokens,
        completion_tokens,
        total_tokens,
        cache_read=cache_read,
        cache_write=cache_write,
        reasoning=reasoning,
    )
    return apply_attributes(span, entries, config)


def record_output_message(
    span: Span,
    index: int,
    role: str,
    content: Optional[str] = None,
    config: Optional[SpanConfig] = None,
    tool_calls: Optional[Iterable[ToolCallLike]] = None,
) -> Dict[str, AttributeValue]:
    """Record an output message on an LLM span.

    Args:
        span: Open span to append to
        index: Position of the message among the outputs
        role: Message role, e.g. ``"assistant"``
        content: Message text
        config: Span configuration (defaults to the process-wide one)
        tool_calls: Tool calls requested by the message

    Returns:
        The attributes that were written

    Raises:
        ValueError: If ``index`` is negative
    """
    if index < 0:
        raise ValueError(f"Output message index must be non-negative, got {index}")

    config = config or get_default_config()
    message = Message(
        role=role,
        content=content,
        tool_calls=[ToolCall.from_value(call) for call in tool_calls or []],
    )
    entries = message_entries(
        LLMAttributes.OUTPUT_MESSAGES,
        index,
        message,
        hide_message=config.should_hide_output_messages(),
        hide_text=config.should_hide_output_text(),
    )
    return apply_attributes(span, entries, config)


def record_output(
    span: Span,
    value: Any,
    mime_type: Optional[str] = None,
    config: Optional[SpanConfig] = None,
) -> Dict[str, AttributeValue]:
    """Record the output value of any span.

    Non-string values are serialized to JSON, and the MIME type defaults to
    ``application/json`` for them.

    Returns:
        The attributes that were written
    """
    config = config or get_default_config()
    return apply_attributes(span, output_entries(value, mime_type, config), config)


def output_entries(
    value: Any, mime_type: Optional[str], config: SpanConfig
) -> List[AttributeEntry]:
    if value is not None and not isinstance(value, str) and mime_type is None:
        mime_type = "application/json"
    return [
        AttributeEntry(
            SpanAttributes.OUTPUT_VALUE,
            to_json(value),
            content=True,
            redact=config.hide_outputs,
        ),
        AttributeEntry(SpanAttributes.OUTPUT_MIME_TYPE, mime_type),
    ]


def record_documents(
    span: Span,
    documents: Iterable[DocumentLike],
    config: Optional[SpanConfig] = None,
    group: str = RetrievalAttributes.DOCUMENTS,
) -> Dict[str, AttributeValue]:
    """Record retrieved documents on a retriever span.

    Returns:
        The attributes that were written
    """
    return apply_attributes(span, document_entries(group, documents), config)


def record_error(
    span: Span,
    error: Union[BaseException, str],
    message: Optional[str] = None,
    config: Optional[SpanConfig] = None,
) -> Dict[str, AttributeValue]:
    """Record an error on a span and mark the span as failed.

    Args:
        span: Open span to append to
        error: The exception, or the name of the error type
        message: Error message (defaults to ``str(error)`` for exceptions)
        config: Span configuration (defaults to the process-wide one)

    Returns:
        The attributes that were written
    """
    if isinstance(error, BaseException):
        error_type = type(error).__name__
        if message is None:
            message = str(error)
        span.record_exception(error)
    else:
        error_type = error

    span.set_status(Status(StatusCode.ERROR, message))
    entries = [
        AttributeEntry(ExceptionAttributes.TYPE, error_type),
        AttributeEntry(ExceptionAttributes.MESSAGE, message),
    ]
    return apply_attributes(span, entries, config)
