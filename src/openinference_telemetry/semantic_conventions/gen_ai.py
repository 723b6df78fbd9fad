"""OpenTelemetry GenAI semantic convention attribute names.

These keys are emitted alongside the OpenInference keys for backends that
only understand the generic convention.

Based on:
https://github.com/open-telemetry/semantic-conventions/blob/main/docs/gen-ai/gen-ai-spans.md
"""


class GenAIAttributes:
    """Semantic convention attribute names for GenAI operations."""

    # Operation attributes
    OPERATION_NAME = "gen_ai.operation.name"
    PROVIDER_NAME = "gen_ai.provider.name"
    SYSTEM = "gen_ai.system"

    # Request attributes
    REQUEST_MODEL = "gen_ai.request.model"
    REQUEST_TEMPERATURE = "gen_ai.request.temperature"
    REQUEST_TOP_P = "gen_ai.request.top_p"
    REQUEST_TOP_K = "gen_ai.request.top_k"
    REQUEST_MAX_TOKENS = "gen_ai.request.max_tokens"
    REQUEST_STOP_SEQUENCES = "gen_ai.request.stop_sequences"
    REQUEST_FREQUENCY_PENALTY = "gen_ai.request.frequency_penalty"
    REQUEST_PRESENCE_PENALTY = "gen_ai.request.presence_penalty"

    # Content attributes (opt-in, sensitive)
    SYSTEM_INSTRUCTIONS = "gen_ai.system_instructions"
    INPUT_MESSAGES = "gen_ai.input.messages"
    OUTPUT_MESSAGES = "gen_ai.output.messages"

    # Response attributes
    RESPONSE_MODEL = "gen_ai.response.model"
    RESPONSE_ID = "gen_ai.response.id"
    RESPONSE_FINISH_REASONS = "gen_ai.response.finish_reasons"

    # Usage attributes
    USAGE_INPUT_TOKENS = "gen_ai.usage.input_tokens"
    USAGE_OUTPUT_TOKENS = "gen_ai.usage.output_tokens"

    # Token type for metrics
    TOKEN_TYPE = "gen_ai.token.type"

    # Choice attributes
    CHOICE_FINISH_REASON = "gen_ai.choice.finish_reason"
    CHOICE_INDEX = "gen_ai.choice.index"

    # Prompt template attributes
    PROMPT_TEMPLATE = "gen_ai.prompt.template"
    PROMPT_VERSION = "gen_ai.prompt.version"

    # Tool attributes
    TOOL_NAME = "gen_ai.tool.name"
    TOOL_CALL_ID = "gen_ai.tool.call.id"
    TOOL_ARGUMENTS = "gen_ai.tool.arguments"
    TOOL_RESULT = "gen_ai.tool.result"

    # Agent attributes
    AGENT_NAME = "gen_ai.agent.name"
    AGENT_DESCRIPTION = "gen_ai.agent.description"
    AGENT_ID = "gen_ai.agent.id"

    # Error attributes
    ERROR_TYPE = "error.type"


class GenAIMessageAttributes:
    """Indexed message attributes of the generic convention.

    Elements are addressed as ``gen_ai.prompt.{i}.role`` or
    ``gen_ai.completion.{i}.tool_calls.{j}.name``.
    """

    # Indexed list groups
    PROMPT = "gen_ai.prompt"
    COMPLETION = "gen_ai.completion"

    # Message fields
    ROLE = "role"
    CONTENT = "content"
    TOOL_CALLS = "tool_calls"

    # Tool call fields
    TOOL_CALL_ID = "id"
    TOOL_CALL_NAME = "name"
    TOOL_CALL_ARGUMENTS = "arguments"


class GenAIOperationName:
    """Standard operation names for gen_ai.operation.name."""

    CHAT = "chat"
    TEXT_COMPLETION = "text_completion"
    EMBEDDINGS = "embeddings"
    EXECUTE_TOOL = "execute_tool"
    INVOKE_AGENT = "invoke_agent"


class GenAITokenType:
    """Token type values for gen_ai.token.type attribute."""

    INPUT = "input"
    OUTPUT = "output"


class GenAIEvents:
    """Standard event names for GenAI operations."""

    CONTENT = "gen_ai.content"
    TOOL_CALL = "gen_ai.tool.call"
    CHOICE = "gen_ai.choice"
    SYSTEM_PROMPT = "gen_ai.system.prompt"
    USER_PROMPT = "gen_ai.user.prompt"
    ASSISTANT_RESPONSE = "gen_ai.assistant.response"


class GenAIMetrics:
    """Standard metric names for GenAI operations."""

    CLIENT_REQUEST_DURATION = "gen_ai.client.request.duration"
    CLIENT_TOKEN_USAGE = "gen_ai.client.token.usage"
    SERVER_REQUEST_DURATION = "gen_ai.server.request.duration"
    SERVER_TIME_TO_FIRST_TOKEN = "gen_ai.server.time_to_first_token"
    SERVER_TIME_PER_OUTPUT_TOKEN = "gen_ai.server.time_per_output_token"
