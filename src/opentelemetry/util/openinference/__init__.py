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
OpenInference span utilities for OpenTelemetry.

Builds spans that follow the OpenInference semantic conventions for LLM,
embedding, tool, retrieval, agent and related operations, optionally
dual-writing the OpenTelemetry GenAI attributes, and redacting sensitive
content according to a :class:`TraceConfig`.
"""

from opentelemetry.util.openinference.config import (
    REDACTED_VALUE,
    TraceConfig,
    TraceConfigBuilder,
)
from opentelemetry.util.openinference.span_builders import (
    AgentSpanBuilder,
    BuilderFinalizedError,
    ChainSpanBuilder,
    EmbeddingSpanBuilder,
    EvaluatorSpanBuilder,
    GuardrailSpanBuilder,
    LLMSpanBuilder,
    RerankerSpanBuilder,
    RetrieverSpanBuilder,
    ToolSpanBuilder,
)
from opentelemetry.util.openinference.span_kind import SpanKind
from opentelemetry.util.openinference.span_utils import (
    record_choice,
    record_embedding_vector,
    record_error,
    record_output,
    record_output_message,
    record_output_tool_call,
    record_reranker_output_documents,
    record_retrieval_documents,
    record_token_usage,
)
from opentelemetry.util.openinference.types import (
    Document,
    ImageMessageContent,
    Message,
    TextMessageContent,
    ToolCall,
)
from opentelemetry.util.openinference.version import __version__

__all__ = [
    "REDACTED_VALUE",
    "AgentSpanBuilder",
    "BuilderFinalizedError",
    "ChainSpanBuilder",
    "Document",
    "EmbeddingSpanBuilder",
    "EvaluatorSpanBuilder",
    "GuardrailSpanBuilder",
    "ImageMessageContent",
    "LLMSpanBuilder",
    "Message",
    "RerankerSpanBuilder",
    "RetrieverSpanBuilder",
    "SpanKind",
    "TextMessageContent",
    "ToolCall",
    "ToolSpanBuilder",
    "TraceConfig",
    "TraceConfigBuilder",
    "__version__",
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
