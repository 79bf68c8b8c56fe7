"""Error taxonomy shared by the pipeline stages and the HTTP layer.

Two families let callers tell bad input apart from a failing dependency:

- ``ClientError``: the request itself was invalid. Retrying unchanged won't help.
- ``UpstreamError``: a collaborator (LLM, listings provider) is missing or failed.
  Retrying later may help.
"""


class JobHuntError(Exception):
    """Base class. ``status_code`` is the HTTP status the API layer reports."""

    status_code: int = 500
    kind: str = "internal_error"

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message or self.__class__.__doc__ or self.kind


class ClientError(JobHuntError):
    status_code = 400
    kind = "invalid_request"


class InvalidUpload(ClientError):
    """No file, wrong media type, or oversized file."""

    kind = "invalid_upload"


class UnreadablePDF(ClientError):
    """The uploaded bytes could not be parsed as a PDF."""

    kind = "unreadable_pdf"


class InvalidRequest(ClientError):
    """Missing or malformed request parameters."""

    kind = "invalid_request"


class AlreadySaved(ClientError):
    """The job is already in the application tracker."""

    status_code = 409
    kind = "already_saved"


class NotFound(ClientError):
    """Referenced record does not exist."""

    status_code = 404
    kind = "not_found"


class UpstreamError(JobHuntError):
    status_code = 502
    kind = "upstream_error"


class ConfigurationMissing(UpstreamError):
    """A collaborator credential is not configured."""

    status_code = 503
    kind = "configuration_missing"


class ModelOutputInvalid(UpstreamError):
    """The LLM response could not be parsed as the expected JSON object."""

    kind = "model_output_invalid"


class ProviderError(UpstreamError):
    """A collaborator returned an error status or was unreachable."""

    kind = "provider_error"

    def __init__(
        self,
        message: str = "",
        status_code: int | None = None,
        retry_after: str | None = None,
    ) -> None:
        super().__init__(message)
        self.upstream_status = status_code
        self.retry_after = retry_after
        if status_code == 429:
            self.status_code = 429
        elif status_code == 504:
            self.status_code = 504
