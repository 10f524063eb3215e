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


from dataclasses import dataclass
from typing import Literal, Optional, Sequence, Union

from typing_extensions import TypeAlias


@dataclass(frozen=True)
class Document:
    content: str
    id: Optional[str] = None
    score: Optional[float] = None
    # JSON string
    metadata: Optional[str] = None


@dataclass(frozen=True)
class ToolCall:
    function_name: str
    # JSON string
    arguments: Optional[str] = None
    id: Optional[str] = None


@dataclass(frozen=True)
class TextMessageContent:
    text: str
    type: Literal["text"] = "text"


@dataclass(frozen=True)
class ImageMessageContent:
    url: str
    type: Literal["image"] = "image"


MessageContent: TypeAlias = Union[TextMessageContent, ImageMessageContent]


@dataclass(frozen=True)
class Message:
    """
    A chat message. ``content`` is the plain text form, ``contents`` holds
    the parts of a multimodal message; either or both may be set.

    ``contents`` and ``tool_calls`` accept any sequence and are stored as
    tuples so that messages stay hashable.
    """

    role: str
    content: Optional[str] = None
    contents: Sequence[MessageContent] = ()
    tool_calls: Sequence[ToolCall] = ()
    # Set on tool result messages.
    tool_call_id: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "contents", tuple(self.contents))
        object.__setattr__(self, "tool_calls", tuple(self.tool_calls))
