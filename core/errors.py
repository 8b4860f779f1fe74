# =============================================================================
# core/errors.py  —  Error Taxonomy
# =============================================================================
#
# Every failure a tool invocation can hit, in one place.  None of these are
# caught or retried inside the server: they propagate to FastMCP, which turns
# them into an error result for the host.
#
#   StartupConfigurationError  → bad/missing environment, fatal at startup
#   GatewayError               → upstream answered with a non-2xx status
#   DecodeError                → upstream body is not valid JSON
#   TransportError             → the request never got an HTTP answer
#
# Argument validation errors are NOT defined here: FastMCP validates tool
# arguments with pydantic before the handler runs.
# =============================================================================


class EBirdError(Exception):
    """Base class for all errors raised by this package."""


class StartupConfigurationError(EBirdError):
    """The process environment cannot be turned into usable Settings."""


class GatewayError(EBirdError):
    """The eBird API returned a non-success HTTP status."""

    def __init__(self, status_code: int, reason: str = "", url: str | None = None):
        self.status_code = status_code
        self.reason = reason
        self.url = url
        super().__init__(f"eBird API error: {status_code} {reason}".rstrip())


class DecodeError(EBirdError):
    """The eBird API returned a body that is not valid JSON."""


class TransportError(EBirdError):
    """Network-level failure (DNS, refused connection, timeout)."""
