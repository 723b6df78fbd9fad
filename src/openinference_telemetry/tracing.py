"""Tracer access for the OpenInference telemetry helpers."""

from typing import Optional

from opentelemetry import trace

from .version import __version__

INSTRUMENTATION_NAME = "openinference_telemetry"


def get_tracer(
    tracer_provider: Optional[trace.TracerProvider] = None,
) -> trace.Tracer:
    """Get the tracer used by span builders.

    Spans are opened through whichever provider the application configured;
    exporting and sampling are left entirely to it.

    Args:
        tracer_provider: Provider to use (defaults to the global provider)

    Returns:
        A tracer instance
    """
    return trace.get_tracer(
        INSTRUMENTATION_NAME, __version__, tracer_provider=tracer_provider
    )
