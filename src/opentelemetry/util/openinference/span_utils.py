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
Post-hoc recording of attributes that are only known once the traced
operation has completed (token usage, output messages, retrieved documents,
errors, ...).

Every function writes to an already started span and applies the same
redaction decisions as the span builders. Calling a function again
overwrites the keys it wrote before.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Optional, Sequence

from opentelemetry.semconv.attributes import (
    error_attributes as ErrorAttributes,
)
from opentelemetry.trace import Span
from opentelemetry.trace.status import Status, StatusCode
from opentelemetry.util.openinference import attributes as oi
from opentelemetry.util.openinference import gen_ai
from opentelemetry.util.openinference.config import REDACTED_VALUE, TraceConfig
from opentelemetry.util.openinference.types import (
    Document,
    ImageMessageContent,
    Message,
    TextMessageContent,
    ToolCall,
)
from opentelemetry.util.types import AttributeValue

Attributes = Dict[str, AttributeValue]


def _redact(value: AttributeValue, hide: bool) -> AttributeValue:
    return REDACTED_VALUE if hide else value


def _tool_call_attributes(
    prefix: str,
    message_index: int,
    call_index: int,
    tool_call: ToolCall,
    hide_identity: bool,
    hide_arguments: bool,
) -> Attributes:
    attributes: Attributes = {
        oi.tool_call_function_name(
            prefix, message_index, call_index
        ): _redact(tool_call.function_name, hide_identity)
    }
    if tool_call.id is not None:
        attributes[oi.tool_call_id(prefix, message_index, call_index)] = (
            _redact(tool_call.id, hide_identity)
        )
    if tool_call.arguments is not None:
        attributes[
            oi.tool_call_function_arguments(prefix, message_index, call_index)
        ] = _redact(tool_call.arguments, hide_arguments)
    return attributes


def _message_attributes(
    prefix: str,
    index: int,
    message: Message,
    hide_messages: bool,
    hide_text: bool,
    hide_image_url: Callable[[str], bool],
) -> Attributes:
    """Attributes of one chat message.

    ``hide_messages`` hides everything including the role, ``hide_text``
    hides the text but keeps the role and the content part types.
    """
    attributes: Attributes = {
        oi.message_role(prefix, index): _redact(message.role, hide_messages)
    }
    if message.content is not None:
        attributes[oi.message_content(prefix, index)] = _redact(
            message.content, hide_text
        )
    for content_index, part in enumerate(message.contents):
        attributes[oi.message_content_type(prefix, index, content_index)] = (
            part.type
        )
        if isinstance(part, TextMessageContent):
            attributes[
                oi.message_content_text(prefix, index, content_index)
            ] = _redact(part.text, hide_text)
        elif isinstance(part, ImageMessageContent):
            attributes[
                oi.message_content_image_url(prefix, index, content_index)
            ] = _redact(part.url, hide_messages or hide_image_url(part.url))
    for call_index, tool_call in enumerate(message.tool_calls):
        attributes.update(
            _tool_call_attributes(
                prefix,
                index,
                call_index,
                tool_call,
                hide_identity=hide_messages,
                hide_arguments=hide_text,
            )
        )
    if message.tool_call_id is not None:
        attributes[oi.message_tool_call_id(prefix, index)] = _redact(
            message.tool_call_id, hide_messages
        )
    return attributes


def _document_attributes(
    prefix: str, index: int, document: Document, hide_content: bool
) -> Attributes:
    # Only the content is sensitive, id, score and metadata are kept.
    attributes: Attributes = {
        oi.document_content(prefix, index): _redact(
            document.content, hide_content
        )
    }
    if document.id is not None:
        attributes[oi.document_id(prefix, index)] = document.id
    if document.score is not None:
        attributes[oi.document_score(prefix, index)] = float(document.score)
    if document.metadata is not None:
        attributes[oi.document_metadata(prefix, index)] = document.metadata
    return attributes


def _documents_attributes(
    prefix: str, documents: Iterable[Document], hide_content: bool
) -> Attributes:
    attributes: Attributes = {}
    for index, document in enumerate(documents):
        attributes.update(
            _document_attributes(prefix, index, document, hide_content)
        )
    return attributes


def record_token_usage(
    span: Span,
    prompt_tokens: int,
    completion_tokens: int,
    config: Optional[TraceConfig] = None,
    *,
    cache_read: Optional[int] = None,
    cache_write: Optional[int] = None,
    reasoning: Optional[int] = None,
) -> None:
    """Record token counts; the total is the sum of prompt and completion."""
    config = config or TraceConfig()
    attributes: Attributes = {
        oi.LLM_TOKEN_COUNT_PROMPT: prompt_tokens,
        oi.LLM_TOKEN_COUNT_COMPLETION: completion_tokens,
        oi.LLM_TOKEN_COUNT_TOTAL: prompt_tokens + completion_tokens,
    }
    if cache_read is not None:
        attributes[oi.LLM_TOKEN_COUNT_PROMPT_DETAILS_CACHE_READ] = cache_read
    if cache_write is not None:
        attributes[oi.LLM_TOKEN_COUNT_PROMPT_DETAILS_CACHE_WRITE] = (
            cache_write
        )
    if reasoning is not None:
        attributes[oi.LLM_TOKEN_COUNT_COMPLETION_DETAILS_REASONING] = (
            reasoning
        )
    if config.emit_gen_ai_attributes:
        attributes[gen_ai.GEN_AI_USAGE_INPUT_TOKENS] = prompt_tokens
        attributes[gen_ai.GEN_AI_USAGE_OUTPUT_TOKENS] = completion_tokens
    span.set_attributes(attributes)


def record_output_message(
    span: Span,
    index: int,
    role: str,
    content: str,
    config: Optional[TraceConfig] = None,
) -> None:
    config = config or TraceConfig()
    span.set_attributes(
        _message_attributes(
            oi.LLM_OUTPUT_MESSAGES,
            index,
            Message(role=role, content=content),
            hide_messages=config.should_hide_output_messages(),
            hide_text=config.should_hide_output_text(),
            hide_image_url=config.should_hide_image_url,
        )
    )


def record_output_tool_call(
    span: Span,
    message_index: int,
    call_index: int,
    tool_call: ToolCall,
    config: Optional[TraceConfig] = None,
) -> None:
    """Record one tool call requested by an output message."""
    config = config or TraceConfig()
    span.set_attributes(
        _tool_call_attributes(
            oi.LLM_OUTPUT_MESSAGES,
            message_index,
            call_index,
            tool_call,
            hide_identity=config.should_hide_output_messages(),
            hide_arguments=config.should_hide_output_text(),
        )
    )


def record_choice(
    span: Span,
    index: int,
    text: str,
    config: Optional[TraceConfig] = None,
) -> None:
    """Record the text of one choice of a text completion call."""
    config = config or TraceConfig()
    span.set_attribute(
        oi.llm_choice_text(index), _redact(text, config.should_hide_choices())
    )


def record_embedding_vector(
    span: Span,
    index: int,
    vector: Sequence[float],
    config: Optional[TraceConfig] = None,
) -> None:
    config = config or TraceConfig()
    value: AttributeValue
    if config.should_hide_embedding_vectors():
        value = REDACTED_VALUE
    else:
        value = tuple(float(component) for component in vector)
    span.set_attribute(oi.embedding_vector(index), value)


def record_retrieval_documents(
    span: Span,
    documents: Iterable[Document],
    config: Optional[TraceConfig] = None,
) -> None:
    config = config or TraceConfig()
    span.set_attributes(
        _documents_attributes(
            oi.RETRIEVAL_DOCUMENTS,
            documents,
            hide_content=config.should_hide_output_value(),
        )
    )


def record_reranker_output_documents(
    span: Span,
    documents: Iterable[Document],
    config: Optional[TraceConfig] = None,
) -> None:
    config = config or TraceConfig()
    span.set_attributes(
        _documents_attributes(
            oi.RERANKER_OUTPUT_DOCUMENTS,
            documents,
            hide_content=config.should_hide_output_value(),
        )
    )


def record_output(
    span: Span,
    value: str,
    mime_type: Optional[str] = None,
    config: Optional[TraceConfig] = None,
) -> None:
    """Record the final output value of the operation."""
    config = config or TraceConfig()
    attributes: Attributes = {
        oi.OUTPUT_VALUE: _redact(value, config.should_hide_output_value())
    }
    if mime_type is not None:
        attributes[oi.OUTPUT_MIME_TYPE] = mime_type
    span.set_attributes(attributes)


def record_error(span: Span, error_type: str, message: str) -> None:
    """Record a failure of the traced operation and mark the span as errored."""
    span.set_status(Status(StatusCode.ERROR, message))
    if span.is_recording():
        span.set_attributes(
            {
                oi.EXCEPTION_TYPE: error_type,
                oi.EXCEPTION_MESSAGE: message,
                ErrorAttributes.ERROR_TYPE: error_type,
            }
        )


__all__ = [
    "record_choice",
    "record_embedding_vector",
    "record_error",
    "record_output",
    "record_output_message",
    "record_output_tool_call",
    "record_reranker_output_documents",
    "record_retrieval_documents",
    "record_token_usage",
]
