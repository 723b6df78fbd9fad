import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from openinference_telemetry.configuration import (
    _ENV_FLAGS,
    ENV_BASE64_IMAGE_MAX_LENGTH,
    set_default_config,
)
from openinference_telemetry.tracing import get_tracer


@pytest.fixture(autouse=True)
def reset_default_config(monkeypatch):
    """Start every test from a clean environment and a fresh default config"""
    for env_var in _ENV_FLAGS.values():
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.delenv(ENV_BASE64_IMAGE_MAX_LENGTH, raising=False)
    set_default_config(None)
    yield
    set_default_config(None)


@pytest.fixture
def exporter():
    exporter = InMemorySpanExporter()
    yield exporter
    exporter.clear()


@pytest.fixture
def tracer_provider(exporter):
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    return provider


@pytest.fixture
def tracer(tracer_provider):
    return get_tracer(tracer_provider)
