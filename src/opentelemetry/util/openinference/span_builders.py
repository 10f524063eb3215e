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
Fluent builders for OpenInference spans.

Each builder collects the fields of one kind of operation and, on
:meth:`build`, starts a span carrying the OpenInference attributes (and,
unless disabled, the matching OpenTelemetry GenAI attributes) with the
redaction decisions of its :class:`TraceConfig` applied.

Usage:
    span = (
        LLMSpanBuilder("gpt-4")
        .with_config(TraceConfig.from_env())
        .provider("openai")
        .temperature(0.7)
        .input_message("system", "You are a helpful assistant.")
        .input_message("user", "Hello!")
        .build()
    )
    try:
        ...
        record_output_message(span, 0, "assistant", "Hi!", config)
        record_token_usage(span, 12, 3, config)
    finally:
        span.end()

    # Or let the builder manage the span lifecycle
    with ToolSpanBuilder("calculator").parameters('{"a": 1}').start_as_current_span() as span:
        ...

A builder can only be built once, any later call raises
:class:`BuilderFinalizedError`.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    ClassVar,
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
)

from typing_extensions import Self, TypeAlias

from opentelemetry.semconv.schemas import Schemas
from opentelemetry.trace import Span, TracerProvider, get_tracer, use_span
from opentelemetry.util.openinference import attributes as oi
from opentelemetry.util.openinference import gen_ai
from opentelemetry.util.openinference.config import TraceConfig
from opentelemetry.util.openinference.span_kind import SpanKind
from opentelemetry.util.openinference.span_utils import (
    Attributes,
    _documents_attributes,
    _message_attributes,
    _redact,
    record_error,
)
from opentelemetry.util.openinference.types import Document, Message
from opentelemetry.util.openinference.version import __version__
from opentelemetry.util.types import AttributeValue


_logger = logging.getLogger(__name__)


class BuilderFinalizedError(RuntimeError):
    """Raised when a span builder is used after :meth:`build`."""


@dataclass(frozen=True)
class _Field:
    # None for fields that only exist in the GenAI vocabulary.
    key: Optional[str]
    convert: Callable[[Any], AttributeValue] = str
    hide: Optional[Callable[[TraceConfig], bool]] = None
    gen_ai_key: Optional[str] = None


_Group: TypeAlias = Callable[[List[Any], TraceConfig], Attributes]

_COMMON_FIELDS: Mapping[str, _Field] = {
    "input_value": _Field(
        oi.INPUT_VALUE, hide=TraceConfig.should_hide_input_value
    ),
    "input_mime_type": _Field(oi.INPUT_MIME_TYPE),
    "output_value": _Field(
        oi.OUTPUT_VALUE, hide=TraceConfig.should_hide_output_value
    ),
    "output_mime_type": _Field(oi.OUTPUT_MIME_TYPE),
    "metadata": _Field(oi.METADATA),
    "session_id": _Field(oi.SESSION_ID),
    "user_id": _Field(oi.USER_ID),
}


class _SpanBuilder:
    """Shared accumulate-then-build machinery.

    Subclasses only declare their kind, the name of the field holding the
    identifying name (if any), their scalar fields and their indexed groups.
    """

    _KIND: ClassVar[SpanKind]
    _IDENTITY: ClassVar[Optional[str]] = None
    _FIELDS: ClassVar[Mapping[str, _Field]] = _COMMON_FIELDS
    _GROUPS: ClassVar[Mapping[str, _Group]] = {}

    def __init__(self, name: str):
        self._name = name
        self._config = TraceConfig()
        self._values: Dict[str, Any] = {}
        self._groups: Dict[str, List[Any]] = {
            group: [] for group in self._GROUPS
        }
        self._finalized = False
        if self._IDENTITY is not None:
            self._values[self._IDENTITY] = name

    @property
    def span_name(self) -> str:
        return f"{self._KIND.value.lower()} {self._name}"

    def _check_not_finalized(self) -> None:
        if self._finalized:
            raise BuilderFinalizedError(
                f"{type(self).__name__} for {self._name!r} was already built"
            )

    def _set(self, name: str, value: Any) -> Self:
        self._check_not_finalized()
        self._values[name] = value
        return self

    def _append(self, group: str, items: Iterable[Any]) -> Self:
        self._check_not_finalized()
        self._groups[group].extend(items)
        return self

    def with_config(self, config: TraceConfig) -> Self:
        """Replace the configuration, the previous one is discarded."""
        self._check_not_finalized()
        self._config = config
        return self

    def input_value(self, value: Optional[str]) -> Self:
        return self._set("input_value", value)

    def input_mime_type(self, value: Optional[str]) -> Self:
        return self._set("input_mime_type", value)

    def output_value(self, value: Optional[str]) -> Self:
        return self._set("output_value", value)

    def output_mime_type(self, value: Optional[str]) -> Self:
        return self._set("output_mime_type", value)

    def metadata(self, value: Optional[str]) -> Self:
        """Arbitrary metadata as a JSON string."""
        return self._set("metadata", value)

    def session_id(self, value: Optional[str]) -> Self:
        return self._set("session_id", value)

    def user_id(self, value: Optional[str]) -> Self:
        return self._set("user_id", value)

    def attributes(self) -> Attributes:
        """The attributes :meth:`build` would put on the span."""
        config = self._config
        result: Attributes = {oi.OPENINFERENCE_SPAN_KIND: self._KIND.value}
        for name, field in self._FIELDS.items():
            value = self._values.get(name)
            if value is None:
                continue
            try:
                value = field.convert(value)
            except (TypeError, ValueError):
                # Left to the attribute validation of the span.
                _logger.debug(
                    "Could not convert %r for %s, recording it as is.",
                    value,
                    name,
                )
            if field.hide is not None:
                value = _redact(value, field.hide(config))
            if field.key is not None:
                result[field.key] = value
            if field.gen_ai_key is not None and config.emit_gen_ai_attributes:
                result[field.gen_ai_key] = value
        for group, generate in self._GROUPS.items():
            items = self._groups[group]
            if items:
                result.update(generate(items, config))
        return result

    def build(self, tracer_provider: Optional[TracerProvider] = None) -> Span:
        """Start the span and finalize the builder.

        The span is neither made current nor ended, that is left to the
        caller.
        """
        self._check_not_finalized()
        span_attributes = self.attributes()
        self._finalized = True
        tracer = get_tracer(
            __name__,
            __version__,
            tracer_provider,
            schema_url=Schemas.V1_36_0.value,
        )
        return tracer.start_span(self.span_name, attributes=span_attributes)

    @contextmanager
    def start_as_current_span(
        self, tracer_provider: Optional[TracerProvider] = None
    ) -> Iterator[Span]:
        """Build the span, make it current and end it on exit.

        If an exception occurs inside the context, records it on the span,
        ends the span, and re-raises the original exception.
        """
        span = self.build(tracer_provider)
        with use_span(
            span,
            end_on_exit=True,
            record_exception=False,
            set_status_on_exception=False,
        ):
            try:
                yield span
            except Exception as exc:
                record_error(span, type(exc).__qualname__, str(exc))
                raise


def _input_messages(messages: List[Message], config: TraceConfig) -> Attributes:
    attributes: Attributes = {}
    for index, message in enumerate(messages):
        attributes.update(
            _message_attributes(
                oi.LLM_INPUT_MESSAGES,
                index,
                message,
                hide_messages=config.should_hide_input_messages(),
                hide_text=config.should_hide_input_text(),
                hide_image_url=config.should_hide_image_url,
            )
        )
    return attributes


def _prompts(prompts: List[str], config: TraceConfig) -> Attributes:
    hide = config.should_hide_prompts()
    return {
        oi.llm_prompt_text(index): _redact(prompt, hide)
        for index, prompt in enumerate(prompts)
    }


def _tools(schemas: List[str], config: TraceConfig) -> Attributes:
    return {
        oi.llm_tool_json_schema(index): schema
        for index, schema in enumerate(schemas)
    }


def _embedding_texts(texts: List[str], config: TraceConfig) -> Attributes:
    hide = config.should_hide_embeddings_text()
    return {
        oi.embedding_text(index): _redact(text, hide)
        for index, text in enumerate(texts)
    }


def _retrieval_documents(
    documents: List[Document], config: TraceConfig
) -> Attributes:
    return _documents_attributes(
        oi.RETRIEVAL_DOCUMENTS,
        documents,
        hide_content=config.should_hide_output_value(),
    )


def _reranker_input_documents(
    documents: List[Document], config: TraceConfig
) -> Attributes:
    return _documents_attributes(
        oi.RERANKER_INPUT_DOCUMENTS,
        documents,
        hide_content=config.should_hide_input_value(),
    )


def _reranker_output_documents(
    documents: List[Document], config: TraceConfig
) -> Attributes:
    return _documents_attributes(
        oi.RERANKER_OUTPUT_DOCUMENTS,
        documents,
        hide_content=config.should_hide_output_value(),
    )


class LLMSpanBuilder(_SpanBuilder):
    """Builder for a call to a Large Language Model."""

    _KIND = SpanKind.LLM
    _IDENTITY = "model_name"
    _FIELDS = {
        **_COMMON_FIELDS,
        "model_name": _Field(
            oi.LLM_MODEL_NAME, gen_ai_key=gen_ai.GEN_AI_REQUEST_MODEL
        ),
        "provider": _Field(
            oi.LLM_PROVIDER, gen_ai_key=gen_ai.GEN_AI_PROVIDER_NAME
        ),
        "system": _Field(oi.LLM_SYSTEM, gen_ai_key=gen_ai.GEN_AI_SYSTEM),
        "temperature": _Field(
            None, float, gen_ai_key=gen_ai.GEN_AI_REQUEST_TEMPERATURE
        ),
        "top_p": _Field(None, float, gen_ai_key=gen_ai.GEN_AI_REQUEST_TOP_P),
        "top_k": _Field(None, int, gen_ai_key=gen_ai.GEN_AI_REQUEST_TOP_K),
        "max_tokens": _Field(
            None, int, gen_ai_key=gen_ai.GEN_AI_REQUEST_MAX_TOKENS
        ),
        "frequency_penalty": _Field(
            None, float, gen_ai_key=gen_ai.GEN_AI_REQUEST_FREQUENCY_PENALTY
        ),
        "presence_penalty": _Field(
            None, float, gen_ai_key=gen_ai.GEN_AI_REQUEST_PRESENCE_PENALTY
        ),
        "invocation_parameters": _Field(
            oi.LLM_INVOCATION_PARAMETERS,
            hide=TraceConfig.should_hide_llm_invocation_parameters,
        ),
        "prompt_template": _Field(oi.LLM_PROMPT_TEMPLATE),
        "prompt_template_variables": _Field(
            oi.LLM_PROMPT_TEMPLATE_VARIABLES,
            hide=TraceConfig.should_hide_input_value,
        ),
        "prompt_template_version": _Field(oi.LLM_PROMPT_TEMPLATE_VERSION),
    }
    _GROUPS = {
        "input_messages": _input_messages,
        "prompts": _prompts,
        "tools": _tools,
    }

    def provider(self, value: Optional[str]) -> Self:
        return self._set("provider", value)

    def system(self, value: Optional[str]) -> Self:
        return self._set("system", value)

    def temperature(self, value: Optional[float]) -> Self:
        return self._set("temperature", value)

    def top_p(self, value: Optional[float]) -> Self:
        return self._set("top_p", value)

    def top_k(self, value: Optional[int]) -> Self:
        return self._set("top_k", value)

    def max_tokens(self, value: Optional[int]) -> Self:
        return self._set("max_tokens", value)

    def frequency_penalty(self, value: Optional[float]) -> Self:
        return self._set("frequency_penalty", value)

    def presence_penalty(self, value: Optional[float]) -> Self:
        return self._set("presence_penalty", value)

    def invocation_parameters(self, value: Optional[str]) -> Self:
        """Parameters the model is invoked with, as a JSON string."""
        return self._set("invocation_parameters", value)

    def prompt_template(self, value: Optional[str]) -> Self:
        return self._set("prompt_template", value)

    def prompt_template_variables(self, value: Optional[str]) -> Self:
        """Template variables as a JSON string."""
        return self._set("prompt_template_variables", value)

    def prompt_template_version(self, value: Optional[str]) -> Self:
        return self._set("prompt_template_version", value)

    def input_message(self, role: str, content: Optional[str] = None) -> Self:
        """Append a plain text input message."""
        return self._append(
            "input_messages", [Message(role=role, content=content)]
        )

    def input_messages(self, messages: Iterable[Message]) -> Self:
        return self._append("input_messages", messages)

    def prompt(self, text: str) -> Self:
        """Append a prompt of a text completion call."""
        return self._append("prompts", [text])

    def tool(self, json_schema: str) -> Self:
        """Append the JSON schema of a tool made available to the model."""
        return self._append("tools", [json_schema])


class EmbeddingSpanBuilder(_SpanBuilder):
    """Builder for a call to an embedding model."""

    _KIND = SpanKind.EMBEDDING
    _IDENTITY = "model_name"
    _FIELDS = {
        **_COMMON_FIELDS,
        "model_name": _Field(oi.EMBEDDING_MODEL_NAME),
        "invocation_parameters": _Field(
            oi.EMBEDDING_INVOCATION_PARAMETERS,
            hide=TraceConfig.should_hide_llm_invocation_parameters,
        ),
    }
    _GROUPS = {"texts": _embedding_texts}

    def invocation_parameters(self, value: Optional[str]) -> Self:
        return self._set("invocation_parameters", value)

    def text(self, text: str) -> Self:
        return self._append("texts", [text])

    def texts(self, texts: Iterable[str]) -> Self:
        return self._append("texts", texts)


class ChainSpanBuilder(_SpanBuilder):
    """Builder for a workflow step or a link between application steps."""

    _KIND = SpanKind.CHAIN


class ToolSpanBuilder(_SpanBuilder):
    _KIND = SpanKind.TOOL
    _IDENTITY = "tool_name"
    _FIELDS = {
        **_COMMON_FIELDS,
        "tool_name": _Field(oi.TOOL_NAME, gen_ai_key=gen_ai.GEN_AI_TOOL_NAME),
        "description": _Field(oi.TOOL_DESCRIPTION),
        "parameters": _Field(oi.TOOL_PARAMETERS),
        "json_schema": _Field(oi.TOOL_JSON_SCHEMA),
        "tool_id": _Field(oi.TOOL_ID),
    }

    def description(self, value: Optional[str]) -> Self:
        return self._set("description", value)

    def parameters(self, value: Optional[str]) -> Self:
        """Parameters of the tool as a JSON string."""
        return self._set("parameters", value)

    def json_schema(self, value: Optional[str]) -> Self:
        return self._set("json_schema", value)

    def tool_id(self, value: Optional[str]) -> Self:
        return self._set("tool_id", value)


class RetrieverSpanBuilder(_SpanBuilder):
    """Builder for a lookup of documents in a vector store or database.

    Documents known before the span starts can be added here, documents
    returned by the lookup are usually recorded with
    :func:`record_retrieval_documents`.
    """

    _KIND = SpanKind.RETRIEVER
    _GROUPS = {"documents": _retrieval_documents}

    def query(self, value: Optional[str]) -> Self:
        """The query text, recorded as the input value."""
        return self._set("input_value", value)

    def document(self, document: Document) -> Self:
        return self._append("documents", [document])

    def documents(self, documents: Iterable[Document]) -> Self:
        return self._append("documents", documents)


class AgentSpanBuilder(_SpanBuilder):
    _KIND = SpanKind.AGENT
    _IDENTITY = "agent_name"
    _FIELDS = {
        **_COMMON_FIELDS,
        "agent_name": _Field(
            oi.AGENT_NAME, gen_ai_key=gen_ai.GEN_AI_AGENT_NAME
        ),
        "graph_node_id": _Field(oi.GRAPH_NODE_ID),
        "graph_node_name": _Field(oi.GRAPH_NODE_NAME),
        "graph_node_parent_id": _Field(oi.GRAPH_NODE_PARENT_ID),
    }

    def graph_node_id(self, value: Optional[str]) -> Self:
        return self._set("graph_node_id", value)

    def graph_node_name(self, value: Optional[str]) -> Self:
        return self._set("graph_node_name", value)

    def graph_node_parent_id(self, value: Optional[str]) -> Self:
        return self._set("graph_node_parent_id", value)


class RerankerSpanBuilder(_SpanBuilder):
    """Builder for a reordering of documents by relevance."""

    _KIND = SpanKind.RERANKER
    _IDENTITY = "model_name"
    _FIELDS = {
        **_COMMON_FIELDS,
        "model_name": _Field(oi.RERANKER_MODEL_NAME),
        "query": _Field(
            oi.RERANKER_QUERY, hide=TraceConfig.should_hide_input_value
        ),
        "top_k": _Field(oi.RERANKER_TOP_K, int),
    }
    _GROUPS = {
        "input_documents": _reranker_input_documents,
        "output_documents": _reranker_output_documents,
    }

    def query(self, value: Optional[str]) -> Self:
        return self._set("query", value)

    def top_k(self, value: Optional[int]) -> Self:
        return self._set("top_k", value)

    def input_documents(self, documents: Iterable[Document]) -> Self:
        return self._append("input_documents", documents)

    def output_documents(self, documents: Iterable[Document]) -> Self:
        return self._append("output_documents", documents)


class GuardrailSpanBuilder(_SpanBuilder):
    _KIND = SpanKind.GUARDRAIL


class EvaluatorSpanBuilder(_SpanBuilder):
    _KIND = SpanKind.EVALUATOR


__all__ = [
    "AgentSpanBuilder",
    "BuilderFinalizedError",
    "ChainSpanBuilder",
    "EmbeddingSpanBuilder",
    "EvaluatorSpanBuilder",
    "GuardrailSpanBuilder",
    "LLMSpanBuilder",
    "RerankerSpanBuilder",
    "RetrieverSpanBuilder",
    "ToolSpanBuilder",
]
