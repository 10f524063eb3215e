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
OpenTelemetry GenAI semantic convention keys emitted next to the
OpenInference ones, and the fixed mapping between the two vocabularies.
"""

from typing import Mapping, Optional

from opentelemetry.semconv._incubating.attributes import (
    gen_ai_attributes as GenAI,
)
from opentelemetry.util.openinference import attributes as oi

GEN_AI_PROVIDER_NAME = GenAI.GEN_AI_PROVIDER_NAME
GEN_AI_SYSTEM = GenAI.GEN_AI_SYSTEM
GEN_AI_REQUEST_MODEL = GenAI.GEN_AI_REQUEST_MODEL
GEN_AI_REQUEST_TEMPERATURE = GenAI.GEN_AI_REQUEST_TEMPERATURE
GEN_AI_REQUEST_TOP_P = GenAI.GEN_AI_REQUEST_TOP_P
GEN_AI_REQUEST_TOP_K = GenAI.GEN_AI_REQUEST_TOP_K
GEN_AI_REQUEST_MAX_TOKENS = GenAI.GEN_AI_REQUEST_MAX_TOKENS
GEN_AI_REQUEST_FREQUENCY_PENALTY = GenAI.GEN_AI_REQUEST_FREQUENCY_PENALTY
GEN_AI_REQUEST_PRESENCE_PENALTY = GenAI.GEN_AI_REQUEST_PRESENCE_PENALTY
GEN_AI_USAGE_INPUT_TOKENS = GenAI.GEN_AI_USAGE_INPUT_TOKENS
GEN_AI_USAGE_OUTPUT_TOKENS = GenAI.GEN_AI_USAGE_OUTPUT_TOKENS
GEN_AI_TOOL_NAME = GenAI.GEN_AI_TOOL_NAME
GEN_AI_AGENT_NAME = GenAI.GEN_AI_AGENT_NAME

_OPENINFERENCE_TO_GEN_AI: Mapping[str, str] = {
    oi.LLM_MODEL_NAME: GEN_AI_REQUEST_MODEL,
    oi.LLM_PROVIDER: GEN_AI_PROVIDER_NAME,
    oi.LLM_SYSTEM: GEN_AI_SYSTEM,
    oi.LLM_TOKEN_COUNT_PROMPT: GEN_AI_USAGE_INPUT_TOKENS,
    oi.LLM_TOKEN_COUNT_COMPLETION: GEN_AI_USAGE_OUTPUT_TOKENS,
}

_GEN_AI_TO_OPENINFERENCE: Mapping[str, str] = {
    gen_ai: openinference
    for openinference, gen_ai in _OPENINFERENCE_TO_GEN_AI.items()
}


def map_openinference_to_gen_ai(key: str) -> Optional[str]:
    """GenAI equivalent of an OpenInference key, None when there is none."""
    return _OPENINFERENCE_TO_GEN_AI.get(key)


def map_gen_ai_to_openinference(key: str) -> Optional[str]:
    """OpenInference equivalent of a GenAI key, None when there is none."""
    return _GEN_AI_TO_OPENINFERENCE.get(key)
