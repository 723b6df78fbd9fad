"""Bidirectional mapping between OpenInference and OTel GenAI attribute keys.

The mapping is a fixed table of key pairs. Indexed keys are registered as
templates with ``{}`` in each index position, e.g.
``llm.input_messages.{}.message.role`` <-> ``gen_ai.prompt.{}.role``, so a
lookup for any index is resolved without enumerating indices up front:

1. every non-negative decimal segment of the key is replaced by ``{}`` and
   its digits captured as text, so indices of any length are accepted,
2. the resulting template is looked up in the table,
3. the counterpart template is rendered with the captured indices in order.

Keys that are unmapped and keys that are malformed (leading zeros, empty
segments, braces) both resolve to ``None``.
"""

from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Iterator, Optional, Tuple

from .attributes import (
    AgentAttributes,
    ExceptionAttributes,
    LLMAttributes,
    MessageAttributes,
    ToolAttributes,
    ToolCallAttributes,
)
from .gen_ai import GenAIAttributes, GenAIMessageAttributes

INDEX_PLACEHOLDER = "{}"


def indexed_template(group: str, field: str) -> str:
    """Template for an indexed key, with ``{}`` in the index position."""
    return f"{group}.{INDEX_PLACEHOLDER}.{field}"


def _normalize_key(key: object) -> Optional[Tuple[str, Tuple[str, ...]]]:
    """Split a key into its template and the indices it carries.

    Returns:
        ``(template, indices)``, or None if the key is malformed
    """
    if not isinstance(key, str) or not key or "{" in key or "}" in key:
        return None

    segments = key.split(".")
    indices = []
    for position, segment in enumerate(segments):
        if not segment:
            return None
        if segment.isascii() and segment.isdigit():
            # Canonical base-10 form only: "0", "7", "12" but not "07"
            if len(segment) > 1 and segment[0] == "0":
                return None
            indices.append(segment)
            segments[position] = INDEX_PLACEHOLDER

    if not indices:
        return key, ()
    return ".".join(segments), tuple(indices)


@lru_cache(maxsize=4096)
def _render(template: str, indices: Tuple[str, ...]) -> str:
    return template.format(*indices)


class NamespaceMapper:
    """Immutable one-to-one association between two attribute key spaces.

    The table is built once in ``__init__`` and never written afterwards, so a
    single instance can be shared across threads without locking.
    """

    def __init__(self, pairs: Iterable[Tuple[str, str]]):
        """Build the mapping table.

        Args:
            pairs: ``(domain_key, generic_key)`` pairs; indexed keys are given
                as templates with ``{}`` in each index position

        Raises:
            ValueError: If a key appears twice on either side, or the two
                templates of a pair have a different number of indices
        """
        forward = {}
        backward = {}
        for domain_key, generic_key in pairs:
            if domain_key in forward:
                raise ValueError(f"Duplicate domain key in mapping: {domain_key}")
            if generic_key in backward:
                raise ValueError(f"Duplicate generic key in mapping: {generic_key}")
            if domain_key.count(INDEX_PLACEHOLDER) != generic_key.count(
                INDEX_PLACEHOLDER
            ):
                raise ValueError(
                    f"Index arity mismatch between {domain_key} and {generic_key}"
                )
            forward[domain_key] = generic_key
            backward[generic_key] = domain_key

        self._forward = MappingProxyType(forward)
        self._backward = MappingProxyType(backward)

    def map_forward(self, domain_key: str) -> Optional[str]:
        """Translate an OpenInference key to its GenAI counterpart.

        Args:
            domain_key: Static or indexed OpenInference key

        Returns:
            The GenAI key, or None if there is no mapping
        """
        return self._translate(domain_key, self._forward)

    def map_backward(self, generic_key: str) -> Optional[str]:
        """Translate a GenAI key to its OpenInference counterpart.

        Args:
            generic_key: Static or indexed GenAI key

        Returns:
            The OpenInference key, or None if there is no mapping
        """
        return self._translate(generic_key, self._backward)

    @staticmethod
    def _translate(key: str, table) -> Optional[str]:
        normalized = _normalize_key(key)
        if normalized is None:
            return None

        template, indices = normalized
        target = table.get(template)
        if target is None:
            return None
        if not indices:
            return target
        return _render(target, indices)

    def pairs(self) -> Iterator[Tuple[str, str]]:
        """Iterate over the registered ``(domain, generic)`` template pairs."""
        return iter(self._forward.items())

    def __len__(self) -> int:
        return len(self._forward)

    def __contains__(self, domain_key: object) -> bool:
        return self.map_forward(domain_key) is not None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self)} pairs)"


_OUTPUT_TOOL_CALLS = indexed_template(
    LLMAttributes.OUTPUT_MESSAGES, MessageAttributes.TOOL_CALLS
)
_COMPLETION_TOOL_CALLS = indexed_template(
    GenAIMessageAttributes.COMPLETION, GenAIMessageAttributes.TOOL_CALLS
)

DEFAULT_MAPPING_PAIRS: Tuple[Tuple[str, str], ...] = (
    # Model identity
    (LLMAttributes.MODEL_NAME, GenAIAttributes.REQUEST_MODEL),
    (LLMAttributes.PROVIDER, GenAIAttributes.PROVIDER_NAME),
    (LLMAttributes.SYSTEM, GenAIAttributes.SYSTEM),
    # Invocation parameters
    (LLMAttributes.TEMPERATURE, GenAIAttributes.REQUEST_TEMPERATURE),
    (LLMAttributes.TOP_P, GenAIAttributes.REQUEST_TOP_P),
    (LLMAttributes.TOP_K, GenAIAttributes.REQUEST_TOP_K),
    (LLMAttributes.MAX_TOKENS, GenAIAttributes.REQUEST_MAX_TOKENS),
    (LLMAttributes.FREQUENCY_PENALTY, GenAIAttributes.REQUEST_FREQUENCY_PENALTY),
    (LLMAttributes.PRESENCE_PENALTY, GenAIAttributes.REQUEST_PRESENCE_PENALTY),
    (LLMAttributes.STOP_SEQUENCES, GenAIAttributes.REQUEST_STOP_SEQUENCES),
    # Token usage
    (LLMAttributes.TOKEN_COUNT_PROMPT, GenAIAttributes.USAGE_INPUT_TOKENS),
    (LLMAttributes.TOKEN_COUNT_COMPLETION, GenAIAttributes.USAGE_OUTPUT_TOKENS),
    # Prompt template
    (LLMAttributes.PROMPT_TEMPLATE_TEMPLATE, GenAIAttributes.PROMPT_TEMPLATE),
    (LLMAttributes.PROMPT_TEMPLATE_VERSION, GenAIAttributes.PROMPT_VERSION),
    # Tools and agents
    (ToolAttributes.NAME, GenAIAttributes.TOOL_NAME),
    (ToolAttributes.PARAMETERS, GenAIAttributes.TOOL_ARGUMENTS),
    (ToolCallAttributes.ID, GenAIAttributes.TOOL_CALL_ID),
    (AgentAttributes.NAME, GenAIAttributes.AGENT_NAME),
    # Errors
    (ExceptionAttributes.TYPE, GenAIAttributes.ERROR_TYPE),
    # Input messages
    (
        indexed_template(LLMAttributes.INPUT_MESSAGES, MessageAttributes.ROLE),
        indexed_template(GenAIMessageAttributes.PROMPT, GenAIMessageAttributes.ROLE),
    ),
    (
        indexed_template(LLMAttributes.INPUT_MESSAGES, MessageAttributes.CONTENT),
        indexed_template(
            GenAIMessageAttributes.PROMPT, GenAIMessageAttributes.CONTENT
        ),
    ),
    # Output messages
    (
        indexed_template(LLMAttributes.OUTPUT_MESSAGES, MessageAttributes.ROLE),
        indexed_template(
            GenAIMessageAttributes.COMPLETION, GenAIMessageAttributes.ROLE
        ),
    ),
    (
        indexed_template(LLMAttributes.OUTPUT_MESSAGES, MessageAttributes.CONTENT),
        indexed_template(
            GenAIMessageAttributes.COMPLETION, GenAIMessageAttributes.CONTENT
        ),
    ),
    # Tool calls on output messages
    (
        indexed_template(_OUTPUT_TOOL_CALLS, ToolCallAttributes.ID),
        indexed_template(_COMPLETION_TOOL_CALLS, GenAIMessageAttributes.TOOL_CALL_ID),
    ),
    (
        indexed_template(_OUTPUT_TOOL_CALLS, ToolCallAttributes.FUNCTION_NAME),
        indexed_template(
            _COMPLETION_TOOL_CALLS, GenAIMessageAttributes.TOOL_CALL_NAME
        ),
    ),
    (
        indexed_template(_OUTPUT_TOOL_CALLS, ToolCallAttributes.FUNCTION_ARGUMENTS),
        indexed_template(
            _COMPLETION_TOOL_CALLS, GenAIMessageAttributes.TOOL_CALL_ARGUMENTS
        ),
    ),
)

DEFAULT_NAMESPACE_MAPPER = NamespaceMapper(DEFAULT_MAPPING_PAIRS)


def map_openinference_to_gen_ai(openinference_key: str) -> Optional[str]:
    """Map an OpenInference key to its GenAI equivalent using the default table."""
    return DEFAULT_NAMESPACE_MAPPER.map_forward(openinference_key)


def map_gen_ai_to_openinference(gen_ai_key: str) -> Optional[str]:
    """Map a GenAI key to its OpenInference equivalent using the default table."""
    return DEFAULT_NAMESPACE_MAPPER.map_backward(gen_ai_key)
