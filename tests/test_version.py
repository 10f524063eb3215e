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

import unittest

from opentelemetry.util.openinference import __version__
from opentelemetry.util.openinference.version import (
    __version__ as module_version,
)


class TestVersion(unittest.TestCase):
    def test_version_exists(self):
        self.assertIsInstance(__version__, str)
        self.assertTrue(len(__version__) > 0)
        self.assertEqual(__version__, module_version)

    def test_version_format(self):
        # Should be in format like "0.1b0.dev" or similar
        self.assertRegex(__version__, r"^\d+\.\d+.*")
