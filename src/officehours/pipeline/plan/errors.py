from typing import Optional, Tuple

MODEL_OUTPUT_LIMIT = 2000


class PipelineError(Exception):
    """A request failure that maps onto one HTTP error response.

    `details` and `model_output` are diagnostics; they only reach the caller
    when debug errors are enabled.
    """
    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None, details: Optional[str] = None, model_output: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details
        self.model_output = model_output[:MODEL_OUTPUT_LIMIT] if model_output is not None else None


#client request errors
class MethodNotAllowed(PipelineError):
    status_code = 405

class PayloadTooLarge(PipelineError):
    status_code = 413

class InvalidJSONBody(PipelineError):
    status_code = 400

class MissingField(PipelineError):
    status_code = 400

class InputTooLong(PipelineError):
    status_code = 400

#server configuration
class MissingCredentials(PipelineError):
    status_code = 500

#upstream
class ProviderFailure(PipelineError):
    status_code = 502

class EmptyModelOutput(PipelineError):
    status_code = 502

class NonJSONOutput(PipelineError):
    status_code = 502

class InvalidResponseShape(PipelineError):
    status_code = 502


def classify_provider_error(exc: BaseException) -> Tuple[int, str]:
    """Map a provider exception onto (HTTP status, user-facing message)."""
    status = getattr(exc, "status_code", None)
    if not isinstance(status, int) or isinstance(status, bool):
        status = None

    if status in (401, 403):
        return 502, "LLM authentication failed."
    if status == 429:
        return 429, "Rate limited by LLM provider. Try again shortly."
    if status and status >= 500:
        return 502, "LLM provider error. Try again shortly."
    return 502, "LLM request failed."


def provider_failure(exc: BaseException) -> ProviderFailure:
    status, message = classify_provider_error(exc)
    return ProviderFailure(message, status_code=status, details=str(exc) or type(exc).__name__)
