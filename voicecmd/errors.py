"""Error types raised by the voice-to-command pipeline."""


class VoiceCommandError(RuntimeError):
    """Base class for failures surfaced to the CLI."""


class ConfigurationError(VoiceCommandError):
    """Required configuration (such as the API key) is missing."""


class DeviceError(VoiceCommandError):
    """The audio input device could not be opened, read or stopped."""


class ResponseFormatError(VoiceCommandError):
    """A 200 response did not have the expected JSON shape."""


class ApiError(VoiceCommandError):
    """An API endpoint answered with a status other than 200."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"non-200 status code: {status_code} - {body}")


class PipelineError(VoiceCommandError):
    """A pipeline stage failed; wraps the underlying exception with context."""

    def __init__(self, stage, context: str, cause: BaseException):
        self.stage = stage
        self.context = context
        self.cause = cause
        super().__init__(f"{context}: {cause}")
