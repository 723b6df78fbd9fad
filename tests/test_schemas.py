from openinference_telemetry.schemas import Document, Message, ToolCall


def test_tool_call_accepts_short_field_names():
    call = ToolCall.from_value({"id": "call_1", "name": "search", "arguments": {"q": "otel"}})

    assert call.function_name == "search"
    assert call.function_arguments == {"q": "otel"}
    assert call.id == "call_1"


def test_tool_call_keeps_empty_arguments():
    assert ToolCall.from_value({"name": "f", "function_arguments": {}}).function_arguments == {}
    assert ToolCall.from_value({"name": "f", "function_arguments": ""}).function_arguments == ""


def test_tool_call_prefers_full_field_names():
    call = ToolCall.from_value(
        {
            "function_name": "",
            "name": "fallback",
            "function_arguments": {},
            "arguments": {"q": "otel"},
        }
    )

    assert call.function_name == ""
    assert call.function_arguments == {}


def test_tool_call_instance_is_returned_as_is():
    call = ToolCall(function_name="search")
    assert ToolCall.from_value(call) is call


def test_message_from_dict():
    message = Message.from_value(
        {
            "role": "user",
            "content": "what is this?",
            "images": ["https://example.com/cat.png"],
            "tool_calls": [{"name": "search"}],
        }
    )

    assert message.role == "user"
    assert message.images == ["https://example.com/cat.png"]
    assert message.tool_calls == [ToolCall(function_name="search")]


def test_message_defaults():
    message = Message.from_value({"role": "assistant"})

    assert message.content is None
    assert message.tool_calls == []
    assert message.images == []


def test_document_from_string():
    assert Document.from_value("text") == Document(content="text")
