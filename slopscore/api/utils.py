"""Module with the API utility functions."""

from fastapi import HTTPException, Request

from slopscore.errors import (
    AssetsUnavailableError,
    InputTooLargeError,
    InsufficientTextError,
    SlopScoreError,
    TaggingUnavailableError,
    UnsupportedLanguageError,
)

# Status codes of library errors, checked in order.
ERROR_STATUS_CODES: list[tuple[type[SlopScoreError], int]] = [
    (UnsupportedLanguageError, 400),
    (InputTooLargeError, 413),
    (InsufficientTextError, 422),
    (AssetsUnavailableError, 503),
    (TaggingUnavailableError, 503),
]


def get_ip_address_or_raise(fastapi_request: Request) -> str:
    """
    Get an IP address of the client sending the request raising an exception if missing.

    Args:
        fastapi_request (Request): The request of the client.

    Raises:
        HTTPException: Raised if an IP address cannot be retrieved from the request.

    Returns:
        str: IP address of the client. The first address of `X-Forwarded-For`
            takes precedence over the address of the connection.
    """
    forwarded = fastapi_request.headers.get("X-Forwarded-For")
    if forwarded:
        ip = forwarded.split(",")[0].strip()
        if ip:
            return ip
    if fastapi_request.client is None:
        raise HTTPException(
            detail=(
                "Unable to identify the IP address. Please, do not use proxy while "
                "connecting to this API."
            ),
            status_code=401,
        )
    return fastapi_request.client.host


def to_http_exception(error: SlopScoreError) -> HTTPException:
    """
    Translate a library error into an HTTP error.

    Args:
        error (SlopScoreError): Error raised while scoring a text.

    Returns:
        HTTPException: The HTTP error with a matching status code.
    """
    for error_type, status_code in ERROR_STATUS_CODES:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))
    return HTTPException(status_code=500, detail=str(error))
