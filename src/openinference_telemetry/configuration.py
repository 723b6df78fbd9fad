"""
Span configuration for OpenInference telemetry.

Controls whether GenAI attributes are emitted alongside OpenInference
attributes and how much content (prompts, completions, tool arguments)
is recorded on spans.

Privacy flags follow the OpenInference configuration conventions and can be
set through ``OPENINFERENCE_HIDE_*`` environment variables, which are read
once when the configuration is constructed.
"""

import dataclasses
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# Placeholder written in place of hidden content
REDACTED = "__REDACTED__"

ENV_HIDE_INPUTS = "OPENINFERENCE_HIDE_INPUTS"
ENV_HIDE_OUTPUTS = "OPENINFERENCE_HIDE_OUTPUTS"
ENV_HIDE_INPUT_MESSAGES = "OPENINFERENCE_HIDE_INPUT_MESSAGES"
ENV_HIDE_OUTPUT_MESSAGES = "OPENINFERENCE_HIDE_OUTPUT_MESSAGES"
ENV_HIDE_INPUT_IMAGES = "OPENINFERENCE_HIDE_INPUT_IMAGES"
ENV_HIDE_INPUT_TEXT = "OPENINFERENCE_HIDE_INPUT_TEXT"
ENV_HIDE_OUTPUT_TEXT = "OPENINFERENCE_HIDE_OUTPUT_TEXT"
ENV_HIDE_LLM_INVOCATION_PARAMETERS = "OPENINFERENCE_HIDE_LLM_INVOCATION_PARAMETERS"
# Deprecated spelling, still honored
ENV_HIDE_EMBEDDING_VECTORS = "OPENINFERENCE_HIDE_EMBEDDING_VECTORS"
ENV_HIDE_EMBEDDINGS_VECTORS = "OPENINFERENCE_HIDE_EMBEDDINGS_VECTORS"
ENV_HIDE_EMBEDDINGS_TEXT = "OPENINFERENCE_HIDE_EMBEDDINGS_TEXT"
ENV_HIDE_PROMPTS = "OPENINFERENCE_HIDE_PROMPTS"
ENV_HIDE_CHOICES = "OPENINFERENCE_HIDE_CHOICES"
ENV_BASE64_IMAGE_MAX_LENGTH = "OPENINFERENCE_BASE64_IMAGE_MAX_LENGTH"

DEFAULT_BASE64_IMAGE_MAX_LENGTH = 32000

# Field name -> environment variable
_ENV_FLAGS = {
    "hide_inputs": ENV_HIDE_INPUTS,
    "hide_outputs": ENV_HIDE_OUTPUTS,
    "hide_input_messages": ENV_HIDE_INPUT_MESSAGES,
    "hide_output_messages": ENV_HIDE_OUTPUT_MESSAGES,
    "hide_input_images": ENV_HIDE_INPUT_IMAGES,
    "hide_input_text": ENV_HIDE_INPUT_TEXT,
    "hide_output_text": ENV_HIDE_OUTPUT_TEXT,
    "hide_llm_invocation_parameters": ENV_HIDE_LLM_INVOCATION_PARAMETERS,
    "hide_embedding_vectors": ENV_HIDE_EMBEDDING_VECTORS,
    "hide_embeddings_vectors": ENV_HIDE_EMBEDDINGS_VECTORS,
    "hide_embeddings_text": ENV_HIDE_EMBEDDINGS_TEXT,
    "hide_prompts": ENV_HIDE_PROMPTS,
    "hide_choices": ENV_HIDE_CHOICES,
}


@dataclass(frozen=True)
class SpanConfig:
    """Settings applied while span builders and helpers populate a span.

    A config is read-only once constructed. Builders take one per span, or
    share a single instance across the process.

    Content handling has two levels:

    - ``record_content=False`` omits every content-bearing value (message
      text, tool arguments, input/output values, documents) from both
      namespaces. Structural fields such as roles, counts and names stay.
    - The ``hide_*`` flags keep the attribute but write ``REDACTED`` in
      place of its value. Hidden invocation parameters and embedding
      vectors are omitted instead, since they are not text.

    Input images given as base64 data URIs longer than
    ``base64_image_max_length`` are also written as ``REDACTED``.
    """

    # Dual emission
    emit_gen_ai_attributes: bool = True

    # Master content switch
    record_content: bool = True

    # Privacy flags
    hide_inputs: bool = False
    hide_outputs: bool = False
    hide_input_messages: bool = False
    hide_output_messages: bool = False
    hide_input_images: bool = False
    hide_input_text: bool = False
    hide_output_text: bool = False
    hide_llm_invocation_parameters: bool = False
    hide_embedding_vectors: bool = False  # Deprecated alias of hide_embeddings_vectors
    hide_embeddings_vectors: bool = False
    hide_embeddings_text: bool = False
    hide_prompts: bool = False
    hide_choices: bool = False

    # Longer base64 data URIs are written as REDACTED
    base64_image_max_length: int = DEFAULT_BASE64_IMAGE_MAX_LENGTH

    @classmethod
    def from_env(cls, **overrides: Any) -> "SpanConfig":
        """Create configuration from environment variables.

        Each ``OPENINFERENCE_HIDE_*`` variable accepts ``true`` or ``false``
        (case-insensitive). Missing or unrecognized values fall back to the
        default, which records everything. ``OPENINFERENCE_BASE64_IMAGE_MAX_LENGTH``
        accepts a non-negative integer.

        Args:
            **overrides: Field values that take precedence over the environment.
                String values are parsed the same way as environment values.

        Returns:
            SpanConfig instance populated from environment
        """
        values: Dict[str, Any] = {
            name: _parse_bool(os.getenv(env_var), default=False, env_var=env_var)
            for name, env_var in _ENV_FLAGS.items()
        }
        values["base64_image_max_length"] = _parse_int(
            os.getenv(ENV_BASE64_IMAGE_MAX_LENGTH),
            default=DEFAULT_BASE64_IMAGE_MAX_LENGTH,
            env_var=ENV_BASE64_IMAGE_MAX_LENGTH,
        )

        fields = {f.name: f for f in dataclasses.fields(cls)}
        for key, value in overrides.items():
            if key not in fields:
                logger.warning(f"Unknown span configuration field: {key}")
                continue
            # String overrides are parsed like environment values
            if isinstance(value, str):
                if key == "base64_image_max_length":
                    value = _parse_int(value, default=values[key], env_var=key)
                else:
                    default = values.get(key, fields[key].default)
                    value = _parse_bool(value, default=default, env_var=key)
            values[key] = value

        return cls(**values)

    def replace(self, **changes: Any) -> "SpanConfig":
        """Return a copy of this configuration with some fields changed."""
        return dataclasses.replace(self, **changes)

    # Compound hide rules: hiding all inputs implies hiding input messages,
    # input text, input images and prompts; likewise for outputs.

    def should_hide_input_messages(self) -> bool:
        return self.hide_inputs or self.hide_input_messages

    def should_hide_output_messages(self) -> bool:
        return self.hide_outputs or self.hide_output_messages

    def should_hide_input_text(self) -> bool:
        return self.should_hide_input_messages() or self.hide_input_text

    def should_hide_output_text(self) -> bool:
        return self.should_hide_output_messages() or self.hide_output_text

    def should_hide_input_images(self) -> bool:
        return self.should_hide_input_messages() or self.hide_input_images

    def should_hide_prompts(self) -> bool:
        return self.hide_inputs or self.hide_prompts

    def should_hide_choices(self) -> bool:
        return self.hide_outputs or self.hide_choices

    def should_hide_embedding_vectors(self) -> bool:
        return self.hide_embedding_vectors or self.hide_embeddings_vectors

    def should_hide_embedding_text(self) -> bool:
        return self.hide_inputs or self.hide_embeddings_text

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return dataclasses.asdict(self)

    def to_env_vars(self) -> Dict[str, str]:
        """Convert the privacy flags to environment variable format.

        Returns:
            Dictionary of environment variables
        """
        env_vars = {
            env_var: str(getattr(self, name)).lower()
            for name, env_var in _ENV_FLAGS.items()
        }
        env_vars[ENV_BASE64_IMAGE_MAX_LENGTH] = str(self.base64_image_max_length)
        return env_vars


def _parse_bool(
    value: Optional[str], default: bool, env_var: Optional[str] = None
) -> bool:
    """Parse a ``true``/``false`` literal, falling back to ``default``."""
    if value is None:
        return default

    normalized = value.lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False

    logger.debug(
        f"Ignoring unrecognized boolean value {value!r} for {env_var or 'setting'}, "
        f"using default {default}"
    )
    return default


def _parse_int(value: Optional[str], default: int, env_var: Optional[str] = None) -> int:
    """Parse a non-negative integer, falling back to ``default``."""
    if value is None:
        return default

    try:
        parsed = int(value)
    except ValueError:
        parsed = -1
    if parsed >= 0:
        return parsed

    logger.debug(
        f"Ignoring invalid integer value {value!r} for {env_var or 'setting'}, "
        f"using default {default}"
    )
    return default


_default_config: Optional[SpanConfig] = None


def get_default_config() -> SpanConfig:
    """Get the process-wide configuration, read from the environment on first use.

    Returns:
        Shared SpanConfig instance
    """
    global _default_config
    if _default_config is None:
        _default_config = SpanConfig.from_env()
    return _default_config


def set_default_config(config: Optional[SpanConfig]) -> None:
    """Replace the process-wide configuration.

    Passing None makes the next ``get_default_config`` call re-read the
    environment.
    """
    global _default_config
    _default_config = config


__all__ = [
    "SpanConfig",
    "REDACTED",
    "get_default_config",
    "set_default_config",
]
