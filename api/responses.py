"""
Plain-text error responses.

Error bodies are the bare message followed by a newline, served as
text/plain with content sniffing disabled.
"""

from typing import Mapping, Optional

from fastapi.responses import PlainTextResponse


def plain_text_error(
    message: str,
    status_code: int,
    headers: Optional[Mapping[str, str]] = None,
) -> PlainTextResponse:
    """
    Build a plain-text error response.

    Args:
        message: Client-facing message, without a trailing newline
        status_code: HTTP status code
        headers: Extra headers (e.g. Allow on a 405)

    Returns:
        PlainTextResponse with the message and a trailing newline
    """
    response_headers = {"X-Content-Type-Options": "nosniff"}
    if headers:
        response_headers.update(headers)
    return PlainTextResponse(
        f"{message}\n",
        status_code=status_code,
        headers=response_headers,
    )
