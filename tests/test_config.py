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

import dataclasses
import os
import unittest
from unittest.mock import patch

from opentelemetry.util.openinference import config as config_module
from opentelemetry.util.openinference.config import (
    DEFAULT_BASE64_IMAGE_MAX_LENGTH,
    REDACTED_VALUE,
    TraceConfig,
)
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

_CONFIG_LOGGER = "opentelemetry.util.openinference.config"

_DERIVED_DECISIONS = (
    "should_hide_input_messages",
    "should_hide_output_messages",
    "should_hide_input_text",
    "should_hide_output_text",
    "should_hide_input_images",
    "should_hide_embedding_vectors",
    "should_hide_prompts",
    "should_hide_choices",
)

# switch -> derived decisions it turns on, everything else stays off
_CASCADE = {
    "hide_inputs": {
        "should_hide_input_messages",
        "should_hide_input_text",
        "should_hide_input_images",
        "should_hide_prompts",
    },
    "hide_outputs": {
        "should_hide_output_messages",
        "should_hide_output_text",
        "should_hide_choices",
    },
    "hide_input_messages": {
        "should_hide_input_messages",
        "should_hide_input_text",
        "should_hide_input_images",
    },
    "hide_output_messages": {
        "should_hide_output_messages",
        "should_hide_output_text",
    },
    "hide_input_text": {"should_hide_input_text"},
    "hide_output_text": {"should_hide_output_text"},
    "hide_input_images": {"should_hide_input_images"},
    "hide_embedding_vectors": {"should_hide_embedding_vectors"},
    "hide_embeddings_vectors": {"should_hide_embedding_vectors"},
    "hide_prompts": {"should_hide_prompts"},
    "hide_choices": {"should_hide_choices"},
}


class TestTraceConfigDefaults(unittest.TestCase):
    def test_defaults_hide_nothing(self):
        config = TraceConfig()
        for switch in _CASCADE:
            self.assertFalse(getattr(config, switch), switch)
        for decision in _DERIVED_DECISIONS:
            self.assertFalse(getattr(config, decision)(), decision)
        self.assertFalse(config.should_hide_input_value())
        self.assertFalse(config.should_hide_output_value())
        self.assertFalse(config.should_hide_llm_invocation_parameters())
        self.assertFalse(config.should_hide_embeddings_text())
        self.assertEqual(
            config.base64_image_max_length, DEFAULT_BASE64_IMAGE_MAX_LENGTH
        )
        self.assertEqual(config.base64_image_max_length, 32_000)
        self.assertTrue(config.emit_gen_ai_attributes)

    def test_redacted_value(self):
        self.assertEqual(REDACTED_VALUE, "__REDACTED__")

    def test_config_is_immutable(self):
        config = TraceConfig()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            config.hide_inputs = True  # type: ignore[misc]

    def test_empty_environment_yields_defaults(self):
        self.assertEqual(TraceConfig.from_env({}), TraceConfig())


class TestTraceConfigCascade(unittest.TestCase):
    def test_each_switch_sets_exactly_its_derived_decisions(self):
        for switch, expected in _CASCADE.items():
            config = TraceConfig(**{switch: True})
            for decision in _DERIVED_DECISIONS:
                with self.subTest(switch=switch, decision=decision):
                    self.assertEqual(
                        getattr(config, decision)(), decision in expected
                    )

    def test_narrow_flags_never_set_broad_decisions(self):
        config = TraceConfig(hide_input_text=True)
        self.assertFalse(config.should_hide_prompts())
        self.assertFalse(config.should_hide_input_messages())
        self.assertFalse(config.should_hide_input_value())

        config = TraceConfig(hide_output_text=True)
        self.assertFalse(config.should_hide_choices())
        self.assertFalse(config.should_hide_output_messages())
        self.assertFalse(config.should_hide_output_value())

    def test_single_switch_decisions(self):
        self.assertTrue(TraceConfig(hide_inputs=True).should_hide_input_value())
        self.assertTrue(
            TraceConfig(hide_outputs=True).should_hide_output_value()
        )
        self.assertTrue(
            TraceConfig(
                hide_llm_invocation_parameters=True
            ).should_hide_llm_invocation_parameters()
        )
        self.assertTrue(
            TraceConfig(hide_embeddings_text=True).should_hide_embeddings_text()
        )
        # hide_inputs does not reach the embedding text switch.
        self.assertFalse(
            TraceConfig(hide_inputs=True).should_hide_embeddings_text()
        )

    def test_embedding_vector_flags_are_equivalent(self):
        for deprecated in (False, True):
            for current in (False, True):
                config = TraceConfig(
                    hide_embedding_vectors=deprecated,
                    hide_embeddings_vectors=current,
                )
                self.assertEqual(
                    config.should_hide_embedding_vectors(),
                    deprecated or current,
                )


class TestImageUrlDecision(unittest.TestCase):
    def test_plain_url_is_visible(self):
        config = TraceConfig(base64_image_max_length=10)
        self.assertFalse(
            config.should_hide_image_url("https://example.com/cat.png")
        )

    def test_long_base64_url_is_hidden(self):
        config = TraceConfig(base64_image_max_length=40)
        short = "data:image/png;base64,AAAA"
        long = "data:image/png;base64," + "A" * 64
        self.assertFalse(config.should_hide_image_url(short))
        self.assertTrue(config.should_hide_image_url(long))

    def test_hidden_images_hide_every_url(self):
        for config in (
            TraceConfig(hide_input_images=True),
            TraceConfig(hide_input_messages=True),
            TraceConfig(hide_inputs=True),
        ):
            self.assertTrue(
                config.should_hide_image_url("https://example.com/cat.png")
            )


class TestTraceConfigFromEnv(unittest.TestCase):
    def test_reads_every_variable(self):
        environ = {
            OPENINFERENCE_HIDE_INPUTS: "true",
            OPENINFERENCE_HIDE_OUTPUTS: "TRUE",
            OPENINFERENCE_HIDE_INPUT_MESSAGES: "1",
            OPENINFERENCE_HIDE_OUTPUT_MESSAGES: "True",
            OPENINFERENCE_HIDE_INPUT_IMAGES: "True",
            OPENINFERENCE_HIDE_INPUT_TEXT: "true",
            OPENINFERENCE_HIDE_OUTPUT_TEXT: "true",
            OPENINFERENCE_HIDE_LLM_INVOCATION_PARAMETERS: "true",
            OPENINFERENCE_HIDE_EMBEDDINGS_VECTORS: "true",
            OPENINFERENCE_HIDE_EMBEDDINGS_TEXT: "true",
            OPENINFERENCE_HIDE_PROMPTS: "true",
            OPENINFERENCE_HIDE_CHOICES: "true",
            OPENINFERENCE_BASE64_IMAGE_MAX_LENGTH: "1000",
        }
        config = TraceConfig.from_env(environ)
        self.assertTrue(config.hide_inputs)
        self.assertTrue(config.hide_outputs)
        self.assertTrue(config.hide_input_messages)
        self.assertTrue(config.hide_output_messages)
        self.assertTrue(config.hide_input_images)
        self.assertTrue(config.hide_input_text)
        self.assertTrue(config.hide_output_text)
        self.assertTrue(config.hide_llm_invocation_parameters)
        self.assertTrue(config.hide_embeddings_vectors)
        self.assertTrue(config.hide_embeddings_text)
        self.assertTrue(config.hide_prompts)
        self.assertTrue(config.hide_choices)
        self.assertEqual(config.base64_image_max_length, 1000)

    def test_false_values(self):
        config = TraceConfig.from_env(
            {OPENINFERENCE_HIDE_INPUTS: "false", OPENINFERENCE_HIDE_OUTPUTS: "0"}
        )
        self.assertFalse(config.hide_inputs)
        self.assertFalse(config.hide_outputs)

    def test_invalid_values_fall_back_to_defaults(self):
        with self.assertLogs(_CONFIG_LOGGER, level="DEBUG") as cm:
            config = TraceConfig.from_env(
                {
                    OPENINFERENCE_HIDE_INPUTS: "not_a_bool",
                    OPENINFERENCE_HIDE_PROMPTS: "yes",
                    OPENINFERENCE_BASE64_IMAGE_MAX_LENGTH: "not_a_number",
                }
            )
        self.assertEqual(config, TraceConfig())
        self.assertEqual(len(cm.output), 3)

    def test_negative_length_falls_back_to_default(self):
        config = TraceConfig.from_env(
            {OPENINFERENCE_BASE64_IMAGE_MAX_LENGTH: "-1"}
        )
        self.assertEqual(
            config.base64_image_max_length, DEFAULT_BASE64_IMAGE_MAX_LENGTH
        )

    def test_padded_values_fall_back_to_defaults(self):
        config = TraceConfig.from_env(
            {
                OPENINFERENCE_HIDE_INPUTS: " true ",
                OPENINFERENCE_HIDE_OUTPUTS: "1 ",
                OPENINFERENCE_BASE64_IMAGE_MAX_LENGTH: " 1000",
            }
        )
        self.assertEqual(config, TraceConfig())

    def test_non_decimal_lengths_fall_back_to_default(self):
        for raw in ("1_000", "+5", "1e3", "10.0", "\uff11\uff12"):
            with self.subTest(raw=raw):
                config = TraceConfig.from_env(
                    {OPENINFERENCE_BASE64_IMAGE_MAX_LENGTH: raw}
                )
                self.assertEqual(
                    config.base64_image_max_length,
                    DEFAULT_BASE64_IMAGE_MAX_LENGTH,
                )

    def test_zero_length_is_valid(self):
        config = TraceConfig.from_env(
            {OPENINFERENCE_BASE64_IMAGE_MAX_LENGTH: "0"}
        )
        self.assertEqual(config.base64_image_max_length, 0)

    def test_deprecated_embedding_vectors_variable(self):
        with self.assertLogs(_CONFIG_LOGGER, level="WARNING") as cm:
            config = TraceConfig.from_env(
                {OPENINFERENCE_HIDE_EMBEDDING_VECTORS: "true"}
            )
        self.assertTrue(config.hide_embedding_vectors)
        self.assertFalse(config.hide_embeddings_vectors)
        self.assertTrue(config.should_hide_embedding_vectors())
        self.assertIn(OPENINFERENCE_HIDE_EMBEDDING_VECTORS, cm.output[0])

    def test_deprecated_variable_warns_only_when_enabled(self):
        for raw in ("false", "0", "not_a_bool"):
            with self.subTest(raw=raw):
                with patch.object(config_module._logger, "warning") as warning:
                    config = TraceConfig.from_env(
                        {OPENINFERENCE_HIDE_EMBEDDING_VECTORS: raw}
                    )
                warning.assert_not_called()
                self.assertFalse(config.should_hide_embedding_vectors())

    @patch.dict(
        os.environ,
        {OPENINFERENCE_HIDE_INPUTS: "true", OPENINFERENCE_HIDE_CHOICES: "1"},
        clear=True,
    )
    def test_defaults_to_process_environment(self):
        config = TraceConfig.from_env()
        self.assertTrue(config.hide_inputs)
        self.assertTrue(config.hide_choices)
        self.assertFalse(config.hide_outputs)


class TestTraceConfigBuilder(unittest.TestCase):
    def test_override_wins_over_environment(self):
        environ = {
            OPENINFERENCE_HIDE_INPUTS: "true",
            OPENINFERENCE_HIDE_OUTPUTS: "true",
            OPENINFERENCE_BASE64_IMAGE_MAX_LENGTH: "500",
        }
        config = (
            TraceConfig.builder()
            .hide_inputs(False)
            .base64_image_max_length(100)
            .build(environ)
        )
        self.assertFalse(config.hide_inputs)
        self.assertEqual(config.base64_image_max_length, 100)
        # Not overridden, taken from the environment.
        self.assertTrue(config.hide_outputs)
        # Neither overridden nor in the environment.
        self.assertFalse(config.hide_prompts)
        self.assertTrue(config.emit_gen_ai_attributes)

    def test_every_setter(self):
        config = (
            TraceConfig.builder()
            .hide_inputs(True)
            .hide_outputs(True)
            .hide_input_messages(True)
            .hide_output_messages(True)
            .hide_input_images(True)
            .hide_input_text(True)
            .hide_output_text(True)
            .hide_llm_invocation_parameters(True)
            .hide_embedding_vectors(True)
            .hide_embeddings_vectors(True)
            .hide_embeddings_text(True)
            .hide_prompts(True)
            .hide_choices(True)
            .base64_image_max_length(7)
            .emit_gen_ai_attributes(False)
            .build({})
        )
        for switch in _CASCADE:
            self.assertTrue(getattr(config, switch), switch)
        self.assertTrue(config.hide_embeddings_text)
        self.assertTrue(config.hide_llm_invocation_parameters)
        self.assertEqual(config.base64_image_max_length, 7)
        self.assertFalse(config.emit_gen_ai_attributes)

    @patch.dict(os.environ, {OPENINFERENCE_HIDE_OUTPUTS: "true"}, clear=True)
    def test_build_reads_process_environment(self):
        config = TraceConfig.builder().hide_inputs(True).build()
        self.assertTrue(config.hide_inputs)
        self.assertTrue(config.hide_outputs)
