"""Custom exceptions for the transcription workflow."""


class AudioFileError(Exception):
    """Raised when the local audio file is missing or unreadable."""

    def __init__(self, file_path: str, cause: Exception | None = None):
        self.file_path = file_path
        self.cause = cause
        super().__init__(f"Audio file '{file_path}' is missing or unreadable")


class ProviderRequestError(Exception):
    """Raised when a request to the transcription provider fails."""

    def __init__(
        self,
        operation: str,
        status_code: int | None,
        message: str,
        cause: Exception | None = None,
    ):
        self.operation = operation
        self.status_code = status_code
        self.message = message
        self.cause = cause
        if status_code is None:
            super().__init__(f"{operation} failed: {message}")
        else:
            super().__init__(f"{operation} failed: {status_code} {message}")


class UploadError(ProviderRequestError):
    """Raised when uploading the audio file fails."""

    def __init__(
        self, status_code: int | None, message: str, cause: Exception | None = None
    ):
        super().__init__("File upload", status_code, message, cause)


class SubmissionError(ProviderRequestError):
    """Raised when creating the transcription job fails."""

    def __init__(
        self, status_code: int | None, message: str, cause: Exception | None = None
    ):
        super().__init__("Transcription submission", status_code, message, cause)


class PollError(ProviderRequestError):
    """Raised when checking the transcription job status fails."""

    def __init__(
        self, status_code: int | None, message: str, cause: Exception | None = None
    ):
        super().__init__("Transcription status check", status_code, message, cause)


class MalformedResponseError(Exception):
    """Raised when a successful response lacks a required field."""

    def __init__(self, field: str, cause: Exception | None = None):
        self.field = field
        self.cause = cause
        super().__init__(f"Provider response is missing or has invalid '{field}'")


class JobFailedError(Exception):
    """Raised when the provider reports the transcription job as failed."""

    def __init__(self, transcript_id: str, detail: str | None = None):
        self.transcript_id = transcript_id
        self.detail = detail or "Provider reported an unspecified error"
        super().__init__(f"Transcription job failed: {self.detail}")


class TranscriptionFailedError(Exception):
    """Raised to the caller when any stage of the workflow fails."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__("Transcription failed")
