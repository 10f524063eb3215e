# Copyright The OpenTelemetry Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Privacy configuration for OpenInference spans.

A :class:`TraceConfig` decides, per category of recorded content, whether the
content is emitted verbatim or replaced by :data:`REDACTED_VALUE`. Values are
resolved per field with the precedence

    explicit builder override > environment variable > default

Usage:
    # Defaults only: nothing hidden
    config = TraceConfig()

    # Environment variables, falling back to defaults
    config = TraceConfig.from_env()

    # Programmatic overrides on top of the environment
    config = (
        TraceConfig.builder()
        .hide_inputs(True)
        .base64_image_max_length(16_000)
        .build()
    )
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional

from typing_extensions import Self

from opentelemetry.util.openinference.environment_variables import (
    OPENINFERENCE_BASE64_IMAGE_MAX_LENGTH,
    OPENINFERENCE_HIDE_CHOICES,
    OPENINFERENCE_HIDE_EMBEDDING_VECTORS,
    OPENINFERENCE_HIDE_EMBEDDINGS_TEXT,
    OPENINFERENCE_HIDE_EMBEDDINGS_VECTORS,
    OPENINFERENCE_HIDE_INPUT_IMAGES,
    OPENINFERENCE_HIDE_INPUT_MESSAGES,
    OPENINFERENCE_HIDE_INPUT_TEXT,
    OPENINFERENCE_HIDE_INPUTS,
    OPENINFERENCE_HIDE_LLM_INVOCATION_PARAMETERS,
    OPENINFERENCE_HIDE_OUTPUT_MESSAGES,
    OPENINFERENCE_HIDE_OUTPUT_TEXT,
    OPENINFERENCE_HIDE_OUTPUTS,
    OPENINFERENCE_HIDE_PROMPTS,
)

_logger = logging.getLogger(__name__)

REDACTED_VALUE = "__REDACTED__"
"""Placeholder emitted in place of hidden content."""

DEFAULT_BASE64_IMAGE_MAX_LENGTH = 32_000

_BOOL_ENV_VARS: Mapping[str, str] = {
    "hide_inputs": OPENINFERENCE_HIDE_INPUTS,
    "hide_outputs": OPENINFERENCE_HIDE_OUTPUTS,
    "hide_input_messages": OPENINFERENCE_HIDE_INPUT_MESSAGES,
    "hide_output_messages": OPENINFERENCE_HIDE_OUTPUT_MESSAGES,
    "hide_input_images": OPENINFERENCE_HIDE_INPUT_IMAGES,
    "hide_input_text": OPENINFERENCE_HIDE_INPUT_TEXT,
    "hide_output_text": OPENINFERENCE_HIDE_OUTPUT_TEXT,
    "hide_llm_invocation_parameters": OPENINFERENCE_HIDE_LLM_INVOCATION_PARAMETERS,
    "hide_embedding_vectors": OPENINFERENCE_HIDE_EMBEDDING_VECTORS,
    "hide_embeddings_vectors": OPENINFERENCE_HIDE_EMBEDDINGS_VECTORS,
    "hide_embeddings_text": OPENINFERENCE_HIDE_EMBEDDINGS_TEXT,
    "hide_prompts": OPENINFERENCE_HIDE_PROMPTS,
    "hide_choices": OPENINFERENCE_HIDE_CHOICES,
}

_TRUE_VALUES = frozenset(("true", "1"))
_FALSE_VALUES = frozenset(("false", "0"))


@dataclass(frozen=True)
class TraceConfig:
    """Immutable snapshot of the OpenInference privacy settings.

    The defaults give maximum observability: nothing is hidden and the OTel
    GenAI attributes are emitted next to the OpenInference ones.
    """

    hide_inputs: bool = False
    hide_outputs: bool = False
    hide_input_messages: bool = False
    hide_output_messages: bool = False
    hide_input_images: bool = False
    hide_input_text: bool = False
    hide_output_text: bool = False
    hide_llm_invocation_parameters: bool = False
    # Deprecated, use hide_embeddings_vectors.
    hide_embedding_vectors: bool = False
    hide_embeddings_vectors: bool = False
    hide_embeddings_text: bool = False
    hide_prompts: bool = False
    hide_choices: bool = False
    base64_image_max_length: int = DEFAULT_BASE64_IMAGE_MAX_LENGTH
    emit_gen_ai_attributes: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> TraceConfig:
        """Load the configuration from environment variables.

        ``environ`` defaults to :data:`os.environ`. Unset or unparseable
        values fall back to the defaults; this never raises.
        """
        if environ is None:
            environ = os.environ
        values: Dict[str, Any] = {}
        for name, envvar in _BOOL_ENV_VARS.items():
            parsed = _parse_bool(environ, envvar)
            if parsed is not None:
                values[name] = parsed
        max_length = _parse_non_negative_int(
            environ, OPENINFERENCE_BASE64_IMAGE_MAX_LENGTH
        )
        if max_length is not None:
            values["base64_image_max_length"] = max_length
        if values.get("hide_embedding_vectors"):
            _logger.warning(
                "%s is deprecated, use %s instead.",
                OPENINFERENCE_HIDE_EMBEDDING_VECTORS,
                OPENINFERENCE_HIDE_EMBEDDINGS_VECTORS,
            )
        return cls(**values)

    @staticmethod
    def builder() -> TraceConfigBuilder:
        return TraceConfigBuilder()

    def should_hide_input_value(self) -> bool:
        return self.hide_inputs

    def should_hide_output_value(self) -> bool:
        return self.hide_outputs

    def should_hide_input_messages(self) -> bool:
        return self.hide_inputs or self.hide_input_messages

    def should_hide_output_messages(self) -> bool:
        return self.hide_outputs or self.hide_output_messages

    def should_hide_input_text(self) -> bool:
        return (
            self.hide_inputs or self.hide_input_messages or self.hide_input_text
        )

    def should_hide_output_text(self) -> bool:
        return (
            self.hide_outputs
            or self.hide_output_messages
            or self.hide_output_text
        )

    def should_hide_input_images(self) -> bool:
        return (
            self.hide_inputs
            or self.hide_input_messages
            or self.hide_input_images
        )

    def should_hide_image_url(self, url: str) -> bool:
        """Hide the image when images are hidden or it is an oversized base64 URL."""
        if self.should_hide_input_images():
            return True
        return (
            _is_base64_image_url(url)
            and len(url) > self.base64_image_max_length
        )

    def should_hide_embedding_vectors(self) -> bool:
        # The deprecated and the current flag are equivalent.
        return self.hide_embedding_vectors or self.hide_embeddings_vectors

    def should_hide_embeddings_text(self) -> bool:
        return self.hide_embeddings_text

    def should_hide_llm_invocation_parameters(self) -> bool:
        return self.hide_llm_invocation_parameters

    def should_hide_prompts(self) -> bool:
        return self.hide_inputs or self.hide_prompts

    def should_hide_choices(self) -> bool:
        return self.hide_outputs or self.hide_choices


class TraceConfigBuilder:
    """Stages explicit overrides for a :class:`TraceConfig`.

    Fields that are never set fall back to the environment, then to the
    default, independently of each other.
    """

    def __init__(self) -> None:
        self._overrides: Dict[str, Any] = {}

    def _set(self, name: str, value: Any) -> Self:
        self._overrides[name] = value
        return self

    def hide_inputs(self, value: bool) -> Self:
        return self._set("hide_inputs", value)

    def hide_outputs(self, value: bool) -> Self:
        return self._set("hide_outputs", value)

    def hide_input_messages(self, value: bool) -> Self:
        return self._set("hide_input_messages", value)

    def hide_output_messages(self, value: bool) -> Self:
        return self._set("hide_output_messages", value)

    def hide_input_images(self, value: bool) -> Self:
        return self._set("hide_input_images", value)

    def hide_input_text(self, value: bool) -> Self:
        return self._set("hide_input_text", value)

    def hide_output_text(self, value: bool) -> Self:
        return self._set("hide_output_text", value)

    def hide_llm_invocation_parameters(self, value: bool) -> Self:
        return self._set("hide_llm_invocation_parameters", value)

    def hide_embedding_vectors(self, value: bool) -> Self:
        return self._set("hide_embedding_vectors", value)

    def hide_embeddings_vectors(self, value: bool) -> Self:
        return self._set("hide_embeddings_vectors", value)

    def hide_embeddings_text(self, value: bool) -> Self:
        return self._set("hide_embeddings_text", value)

    def hide_prompts(self, value: bool) -> Self:
        return self._set("hide_prompts", value)

    def hide_choices(self, value: bool) -> Self:
        return self._set("hide_choices", value)

    def base64_image_max_length(self, value: int) -> Self:
        return self._set("base64_image_max_length", value)

    def emit_gen_ai_attributes(self, value: bool) -> Self:
        return self._set("emit_gen_ai_attributes", value)

    def build(self, environ: Optional[Mapping[str, str]] = None) -> TraceConfig:
        """Resolve overrides on top of :meth:`TraceConfig.from_env`."""
        resolved = TraceConfig.from_env(environ)
        return replace(resolved, **self._overrides)


def _parse_bool(environ: Mapping[str, str], envvar: str) -> Optional[bool]:
    raw = environ.get(envvar)
    if raw is None:
        return None
    value = raw.lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    _logger.debug("Ignoring invalid boolean %r for %s.", raw, envvar)
    return None


def _parse_non_negative_int(
    environ: Mapping[str, str], envvar: str
) -> Optional[int]:
    raw = environ.get(envvar)
    if raw is None:
        return None
    # Plain decimal digits only, no sign, padding or underscores.
    if not (raw.isascii() and raw.isdigit()):
        _logger.debug("Ignoring invalid integer %r for %s.", raw, envvar)
        return None
    return int(raw)


def _is_base64_image_url(url: str) -> bool:
    return url.startswith("data:image/") and ";base64," in url


__all__ = [
    "DEFAULT_BASE64_IMAGE_MAX_LENGTH",
    "REDACTED_VALUE",
    "TraceConfig",
    "TraceConfigBuilder",
]
