"""Smoke tests for CLI wiring without audio/network side effects."""

import io
import unittest
from contextlib import ExitStack, redirect_stderr, redirect_stdout
from unittest.mock import patch

from voicecmd import cli_runtime
from voicecmd.app_config import AppConfig
from voicecmd.errors import ConfigurationError, PipelineError, ResponseFormatError
from voicecmd.pipeline import Stage


class _FakePipeline:
    result = "echo hi"
    error: Exception | None = None

    def __init__(self, _config, stdin=None):
        pass

    def run(self) -> str:
        if self.error is not None:
            raise self.error
        return self.result


class RuntimeWiringSmokeTests(unittest.TestCase):
    def _run(self, pipeline_cls, config=None):
        out = io.StringIO()
        err = io.StringIO()
        with ExitStack() as stack:
            stack.enter_context(patch.object(cli_runtime, "quiet_native_audio"))
            stack.enter_context(patch.object(cli_runtime, "_configure_logging"))
            stack.enter_context(
                patch.object(cli_runtime.AppConfig, "from_env", return_value=config or AppConfig(api_key="k"))
            )
            stack.enter_context(patch.object(cli_runtime, "CommandPipeline", pipeline_cls))
            close_shared_client = stack.enter_context(patch.object(cli_runtime, "close_shared_client"))
            stack.enter_context(redirect_stdout(out))
            stack.enter_context(redirect_stderr(err))
            code = cli_runtime.run_cli()
        close_shared_client.assert_called_once_with()
        return code, out.getvalue(), err.getvalue()

    def test_success_prints_command_after_blank_line(self):
        code, out, err = self._run(_FakePipeline)
        self.assertEqual(code, 0)
        self.assertEqual(out, "\necho hi\n")
        self.assertEqual(err, "")

    def test_failure_prints_error_to_stdout_and_exits_1(self):
        class Failing(_FakePipeline):
            error = ConfigurationError("OpenAI API key not found.")

        code, out, _ = self._run(Failing)
        self.assertEqual(code, 1)
        self.assertEqual(out, "An error occurred: OpenAI API key not found.\n")

    def test_keyboard_interrupt_outside_recording_exits_1(self):
        class Interrupted(_FakePipeline):
            error = KeyboardInterrupt()

        code, out, _ = self._run(Interrupted)
        self.assertEqual(code, 1)
        self.assertIn("interrupted", out)

    def test_no_choices_failure_exits_1(self):
        class NoChoices(_FakePipeline):
            error = PipelineError(
                Stage.GENERATING,
                "error generating command",
                ResponseFormatError("no choices returned from chat completion"),
            )

        code, out, _ = self._run(NoChoices)
        self.assertEqual(code, 1)
        self.assertEqual(
            out, "An error occurred: error generating command: no choices returned from chat completion\n"
        )

    def test_main_exits_with_run_cli_code(self):
        with patch.object(cli_runtime, "run_cli", return_value=1):
            with self.assertRaises(SystemExit) as ctx:
                cli_runtime.main()
        self.assertEqual(ctx.exception.code, 1)


if __name__ == "__main__":
    unittest.main()
