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

OPENINFERENCE_HIDE_INPUTS = "OPENINFERENCE_HIDE_INPUTS"
"""
.. envvar:: OPENINFERENCE_HIDE_INPUTS

Hides input values, all input messages and prompts. Must be one of ``true``,
``false``, ``1`` or ``0`` (case-insensitive). Defaults to ``false``.
"""

OPENINFERENCE_HIDE_OUTPUTS = "OPENINFERENCE_HIDE_OUTPUTS"
"""
.. envvar:: OPENINFERENCE_HIDE_OUTPUTS

Hides output values, all output messages and choices. Defaults to ``false``.
"""

OPENINFERENCE_HIDE_INPUT_MESSAGES = "OPENINFERENCE_HIDE_INPUT_MESSAGES"
"""
.. envvar:: OPENINFERENCE_HIDE_INPUT_MESSAGES

Hides every attribute of every LLM input message, including the role.
Defaults to ``false``.
"""

OPENINFERENCE_HIDE_OUTPUT_MESSAGES = "OPENINFERENCE_HIDE_OUTPUT_MESSAGES"
"""
.. envvar:: OPENINFERENCE_HIDE_OUTPUT_MESSAGES

Hides every attribute of every LLM output message, including the role.
Defaults to ``false``.
"""

OPENINFERENCE_HIDE_INPUT_IMAGES = "OPENINFERENCE_HIDE_INPUT_IMAGES"
"""
.. envvar:: OPENINFERENCE_HIDE_INPUT_IMAGES

Hides image URLs in LLM input messages. Defaults to ``false``.
"""

OPENINFERENCE_HIDE_INPUT_TEXT = "OPENINFERENCE_HIDE_INPUT_TEXT"
"""
.. envvar:: OPENINFERENCE_HIDE_INPUT_TEXT

Hides the text of LLM input messages while keeping their roles.
Defaults to ``false``.
"""

OPENINFERENCE_HIDE_OUTPUT_TEXT = "OPENINFERENCE_HIDE_OUTPUT_TEXT"
"""
.. envvar:: OPENINFERENCE_HIDE_OUTPUT_TEXT

Hides the text of LLM output messages while keeping their roles.
Defaults to ``false``.
"""

OPENINFERENCE_HIDE_LLM_INVOCATION_PARAMETERS = (
    "OPENINFERENCE_HIDE_LLM_INVOCATION_PARAMETERS"
)
"""
.. envvar:: OPENINFERENCE_HIDE_LLM_INVOCATION_PARAMETERS

Hides the JSON invocation parameters of LLM and embedding calls.
Defaults to ``false``.
"""

OPENINFERENCE_HIDE_EMBEDDING_VECTORS = "OPENINFERENCE_HIDE_EMBEDDING_VECTORS"
"""
.. envvar:: OPENINFERENCE_HIDE_EMBEDDING_VECTORS

Deprecated alias of :envvar:`OPENINFERENCE_HIDE_EMBEDDINGS_VECTORS`. Either
variable being ``true`` hides embedding vectors.
"""

OPENINFERENCE_HIDE_EMBEDDINGS_VECTORS = "OPENINFERENCE_HIDE_EMBEDDINGS_VECTORS"
"""
.. envvar:: OPENINFERENCE_HIDE_EMBEDDINGS_VECTORS

Hides embedding vectors. Defaults to ``false``.
"""

OPENINFERENCE_HIDE_EMBEDDINGS_TEXT = "OPENINFERENCE_HIDE_EMBEDDINGS_TEXT"
"""
.. envvar:: OPENINFERENCE_HIDE_EMBEDDINGS_TEXT

Hides the text that is sent to an embedding model. Defaults to ``false``.
"""

OPENINFERENCE_HIDE_PROMPTS = "OPENINFERENCE_HIDE_PROMPTS"
"""
.. envvar:: OPENINFERENCE_HIDE_PROMPTS

Hides the prompts of text completion calls. Defaults to ``false``.
"""

OPENINFERENCE_HIDE_CHOICES = "OPENINFERENCE_HIDE_CHOICES"
"""
.. envvar:: OPENINFERENCE_HIDE_CHOICES

Hides the choices of text completion calls. Defaults to ``false``.
"""

OPENINFERENCE_BASE64_IMAGE_MAX_LENGTH = "OPENINFERENCE_BASE64_IMAGE_MAX_LENGTH"
"""
.. envvar:: OPENINFERENCE_BASE64_IMAGE_MAX_LENGTH

Base64 encoded images longer than this many characters are replaced by the
redaction marker. Must be a non-negative integer. Defaults to ``32000``.
"""
