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

from enum import Enum
from typing import Optional


class SpanKind(Enum):
    """Value of the ``openinference.span.kind`` attribute.

    Not to be confused with :class:`opentelemetry.trace.SpanKind`, which
    describes the span's role in a distributed trace.
    """

    # A call to a Large Language Model.
    LLM = "LLM"
    # A call to generate embeddings.
    EMBEDDING = "EMBEDDING"
    # A starting point or a link between application steps.
    CHAIN = "CHAIN"
    # A call to an external tool or function.
    TOOL = "TOOL"
    # A reasoning block that drives LLMs and tools.
    AGENT = "AGENT"
    # A lookup of documents in a vector store or database.
    RETRIEVER = "RETRIEVER"
    # A reordering of documents by relevance.
    RERANKER = "RERANKER"
    # A guardrail check on inputs or outputs.
    GUARDRAIL = "GUARDRAIL"
    # An evaluation of model outputs.
    EVALUATOR = "EVALUATOR"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> Optional["SpanKind"]:
        """Case-insensitive lookup; returns None for unknown kinds."""
        try:
            return cls(value.upper())
        except ValueError:
            return None
