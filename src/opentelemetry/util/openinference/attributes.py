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
OpenInference attribute names.

Scalar keys are plain constants. Keys of repeated records (messages, tool
calls, documents, embeddings, ...) are built at runtime from a collection
prefix, a zero-based index and a per-record suffix, e.g.
``llm.input_messages.0.message.role``.

Consumers of exported traces match these strings byte for byte.
"""

from typing import Final

from opentelemetry.semconv.attributes import exception_attributes

OPENINFERENCE_SPAN_KIND: Final = "openinference.span.kind"
"""
The kind of operation the span represents, see :class:`SpanKind`.
"""

# LLM
LLM_MODEL_NAME: Final = "llm.model_name"
LLM_PROVIDER: Final = "llm.provider"
LLM_SYSTEM: Final = "llm.system"
LLM_INVOCATION_PARAMETERS: Final = "llm.invocation_parameters"
"""
JSON string of the parameters the model was invoked with.
"""
LLM_FUNCTION_CALL: Final = "llm.function_call"
LLM_INPUT_MESSAGES: Final = "llm.input_messages"
LLM_OUTPUT_MESSAGES: Final = "llm.output_messages"
LLM_PROMPTS: Final = "llm.prompts"
LLM_CHOICES: Final = "llm.choices"
LLM_TOOLS: Final = "llm.tools"
LLM_PROMPT_TEMPLATE: Final = "llm.prompt_template.template"
LLM_PROMPT_TEMPLATE_VARIABLES: Final = "llm.prompt_template.variables"
LLM_PROMPT_TEMPLATE_VERSION: Final = "llm.prompt_template.version"

LLM_TOKEN_COUNT_PROMPT: Final = "llm.token_count.prompt"
LLM_TOKEN_COUNT_COMPLETION: Final = "llm.token_count.completion"
LLM_TOKEN_COUNT_TOTAL: Final = "llm.token_count.total"
LLM_TOKEN_COUNT_PROMPT_DETAILS_CACHE_READ: Final = (
    "llm.token_count.prompt_details.cache_read"
)
LLM_TOKEN_COUNT_PROMPT_DETAILS_CACHE_WRITE: Final = (
    "llm.token_count.prompt_details.cache_write"
)
LLM_TOKEN_COUNT_PROMPT_DETAILS_AUDIO: Final = (
    "llm.token_count.prompt_details.audio"
)
LLM_TOKEN_COUNT_COMPLETION_DETAILS_REASONING: Final = (
    "llm.token_count.completion_details.reasoning"
)
LLM_TOKEN_COUNT_COMPLETION_DETAILS_AUDIO: Final = (
    "llm.token_count.completion_details.audio"
)

LLM_COST_PROMPT: Final = "llm.cost.prompt"
LLM_COST_COMPLETION: Final = "llm.cost.completion"
LLM_COST_TOTAL: Final = "llm.cost.total"

# Suffixes of a message record
MESSAGE_ROLE: Final = "message.role"
MESSAGE_CONTENT: Final = "message.content"
MESSAGE_CONTENTS: Final = "message.contents"
MESSAGE_TOOL_CALLS: Final = "message.tool_calls"
MESSAGE_TOOL_CALL_ID: Final = "message.tool_call_id"
MESSAGE_FUNCTION_CALL_NAME: Final = "message.function_call_name"
MESSAGE_FUNCTION_CALL_ARGUMENTS_JSON: Final = (
    "message.function_call_arguments_json"
)

# Suffixes of a message content part
MESSAGE_CONTENT_TYPE: Final = "message_content.type"
MESSAGE_CONTENT_TEXT: Final = "message_content.text"
MESSAGE_CONTENT_IMAGE: Final = "message_content.image"
IMAGE_URL: Final = "image.url"

# Suffixes of a tool call record
TOOL_CALL_ID: Final = "tool_call.id"
TOOL_CALL_FUNCTION_NAME: Final = "tool_call.function.name"
TOOL_CALL_FUNCTION_ARGUMENTS_JSON: Final = "tool_call.function.arguments"

# Suffix of a prompt / choice record of the completions API
PROMPT_TEXT: Final = "prompt.text"
COMPLETION_TEXT: Final = "completion.text"

# Embedding
EMBEDDING_MODEL_NAME: Final = "embedding.model_name"
EMBEDDING_INVOCATION_PARAMETERS: Final = "embedding.invocation_parameters"
EMBEDDING_EMBEDDINGS: Final = "embedding.embeddings"
EMBEDDING_TEXT: Final = "embedding.text"
EMBEDDING_VECTOR: Final = "embedding.vector"

# Tool
TOOL_NAME: Final = "tool.name"
TOOL_DESCRIPTION: Final = "tool.description"
TOOL_JSON_SCHEMA: Final = "tool.json_schema"
TOOL_PARAMETERS: Final = "tool.parameters"
TOOL_ID: Final = "tool.id"

# Suffixes of a document record
DOCUMENT_ID: Final = "document.id"
DOCUMENT_CONTENT: Final = "document.content"
DOCUMENT_SCORE: Final = "document.score"
DOCUMENT_METADATA: Final = "document.metadata"

# Retrieval and reranking
RETRIEVAL_DOCUMENTS: Final = "retrieval.documents"
RERANKER_MODEL_NAME: Final = "reranker.model_name"
RERANKER_QUERY: Final = "reranker.query"
RERANKER_TOP_K: Final = "reranker.top_k"
RERANKER_INPUT_DOCUMENTS: Final = "reranker.input_documents"
RERANKER_OUTPUT_DOCUMENTS: Final = "reranker.output_documents"

# Input / output
INPUT_VALUE: Final = "input.value"
INPUT_MIME_TYPE: Final = "input.mime_type"
OUTPUT_VALUE: Final = "output.value"
OUTPUT_MIME_TYPE: Final = "output.mime_type"

# Context
USER_ID: Final = "user.id"
SESSION_ID: Final = "session.id"
METADATA: Final = "metadata"
"""
JSON string of arbitrary key/value metadata.
"""
TAG_TAGS: Final = "tag.tags"

# Multimodal
AUDIO_URL: Final = "audio.url"
AUDIO_MIME_TYPE: Final = "audio.mime_type"
AUDIO_TRANSCRIPT: Final = "audio.transcript"

# Agents and graphs
AGENT_NAME: Final = "agent.name"
GRAPH_NODE_ID: Final = "graph.node.id"
GRAPH_NODE_NAME: Final = "graph.node.name"
GRAPH_NODE_PARENT_ID: Final = "graph.node.parent_id"

# Prompt management
PROMPT_VENDOR: Final = "prompt.vendor"
PROMPT_ID: Final = "prompt.id"
PROMPT_URL: Final = "prompt.url"

# Errors, shared with the OpenTelemetry semantic conventions
EXCEPTION_TYPE: Final = exception_attributes.EXCEPTION_TYPE
EXCEPTION_MESSAGE: Final = exception_attributes.EXCEPTION_MESSAGE
EXCEPTION_STACKTRACE: Final = exception_attributes.EXCEPTION_STACKTRACE


def indexed_key(prefix: str, index: int, suffix: str) -> str:
    """``{prefix}.{index}.{suffix}``, the shape of every repeated-record key."""
    return f"{prefix}.{index}.{suffix}"


def _tool_call_key(
    prefix: str, message_index: int, call_index: int, suffix: str
) -> str:
    return indexed_key(
        indexed_key(prefix, message_index, MESSAGE_TOOL_CALLS),
        call_index,
        suffix,
    )


def _content_key(
    prefix: str, message_index: int, content_index: int, suffix: str
) -> str:
    return indexed_key(
        indexed_key(prefix, message_index, MESSAGE_CONTENTS),
        content_index,
        suffix,
    )


def message_role(prefix: str, index: int) -> str:
    return indexed_key(prefix, index, MESSAGE_ROLE)


def message_content(prefix: str, index: int) -> str:
    return indexed_key(prefix, index, MESSAGE_CONTENT)


def message_tool_call_id(prefix: str, index: int) -> str:
    return indexed_key(prefix, index, MESSAGE_TOOL_CALL_ID)


def message_content_type(
    prefix: str, message_index: int, content_index: int
) -> str:
    return _content_key(
        prefix, message_index, content_index, MESSAGE_CONTENT_TYPE
    )


def message_content_text(
    prefix: str, message_index: int, content_index: int
) -> str:
    return _content_key(
        prefix, message_index, content_index, MESSAGE_CONTENT_TEXT
    )


def message_content_image_url(
    prefix: str, message_index: int, content_index: int
) -> str:
    return _content_key(
        prefix,
        message_index,
        content_index,
        f"{MESSAGE_CONTENT_IMAGE}.{IMAGE_URL}",
    )


def tool_call_id(prefix: str, message_index: int, call_index: int) -> str:
    return _tool_call_key(prefix, message_index, call_index, TOOL_CALL_ID)


def tool_call_function_name(
    prefix: str, message_index: int, call_index: int
) -> str:
    return _tool_call_key(
        prefix, message_index, call_index, TOOL_CALL_FUNCTION_NAME
    )


def tool_call_function_arguments(
    prefix: str, message_index: int, call_index: int
) -> str:
    return _tool_call_key(
        prefix, message_index, call_index, TOOL_CALL_FUNCTION_ARGUMENTS_JSON
    )


def document_id(prefix: str, index: int) -> str:
    return indexed_key(prefix, index, DOCUMENT_ID)


def document_content(prefix: str, index: int) -> str:
    return indexed_key(prefix, index, DOCUMENT_CONTENT)


def document_score(prefix: str, index: int) -> str:
    return indexed_key(prefix, index, DOCUMENT_SCORE)


def document_metadata(prefix: str, index: int) -> str:
    return indexed_key(prefix, index, DOCUMENT_METADATA)


# Fully qualified generators for the common collections


def llm_input_message_role(index: int) -> str:
    return message_role(LLM_INPUT_MESSAGES, index)


def llm_input_message_content(index: int) -> str:
    return message_content(LLM_INPUT_MESSAGES, index)


def llm_input_message_content_type(index: int, content_index: int) -> str:
    return message_content_type(LLM_INPUT_MESSAGES, index, content_index)


def llm_input_message_content_text(index: int, content_index: int) -> str:
    return message_content_text(LLM_INPUT_MESSAGES, index, content_index)


def llm_input_message_content_image_url(
    index: int, content_index: int
) -> str:
    return message_content_image_url(LLM_INPUT_MESSAGES, index, content_index)


def llm_output_message_role(index: int) -> str:
    return message_role(LLM_OUTPUT_MESSAGES, index)


def llm_output_message_content(index: int) -> str:
    return message_content(LLM_OUTPUT_MESSAGES, index)


def llm_output_message_tool_call_id(msg_index: int, call_index: int) -> str:
    return tool_call_id(LLM_OUTPUT_MESSAGES, msg_index, call_index)


def llm_output_message_tool_call_function_name(
    msg_index: int, call_index: int
) -> str:
    return tool_call_function_name(LLM_OUTPUT_MESSAGES, msg_index, call_index)


def llm_output_message_tool_call_function_arguments(
    msg_index: int, call_index: int
) -> str:
    return tool_call_function_arguments(
        LLM_OUTPUT_MESSAGES, msg_index, call_index
    )


def llm_prompt_text(index: int) -> str:
    return indexed_key(LLM_PROMPTS, index, PROMPT_TEXT)


def llm_choice_text(index: int) -> str:
    return indexed_key(LLM_CHOICES, index, COMPLETION_TEXT)


def llm_tool_json_schema(index: int) -> str:
    return indexed_key(LLM_TOOLS, index, TOOL_JSON_SCHEMA)


def embedding_text(index: int) -> str:
    return indexed_key(EMBEDDING_EMBEDDINGS, index, EMBEDDING_TEXT)


def embedding_vector(index: int) -> str:
    return indexed_key(EMBEDDING_EMBEDDINGS, index, EMBEDDING_VECTOR)


def retrieval_document_id(index: int) -> str:
    return document_id(RETRIEVAL_DOCUMENTS, index)


def retrieval_document_content(index: int) -> str:
    return document_content(RETRIEVAL_DOCUMENTS, index)


def retrieval_document_score(index: int) -> str:
    return document_score(RETRIEVAL_DOCUMENTS, index)


def reranker_input_document_id(index: int) -> str:
    return document_id(RERANKER_INPUT_DOCUMENTS, index)


def reranker_input_document_content(index: int) -> str:
    return document_content(RERANKER_INPUT_DOCUMENTS, index)


def reranker_input_document_score(index: int) -> str:
    return document_score(RERANKER_INPUT_DOCUMENTS, index)


def reranker_output_document_id(index: int) -> str:
    return document_id(RERANKER_OUTPUT_DOCUMENTS, index)


def reranker_output_document_content(index: int) -> str:
    return document_content(RERANKER_OUTPUT_DOCUMENTS, index)


def reranker_output_document_score(index: int) -> str:
    return document_score(RERANKER_OUTPUT_DOCUMENTS, index)
