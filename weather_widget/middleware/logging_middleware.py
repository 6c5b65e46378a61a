"""Scrubbing of credentials from URLs before they are logged.

WeatherAPI.com takes its API key as the ``key`` query parameter, so every
outbound URL the HTTP client hooks log would otherwise carry it in clear.
"""

import re

REDACTED = "***REDACTED***"

# Matched case-insensitively, and only as whole query parameter names, so
# ``q=monkey=1`` or ``?keyword=x`` are left alone.
SENSITIVE_PARAMS = (
    "key",
    "api_key",
    "token",
    "access_token",
    "password",
    "secret",
    "authorization",
)

_SENSITIVE_QUERY = re.compile(
    r"(?P<prefix>[?&](?:" + "|".join(SENSITIVE_PARAMS) + r")=)[^&#\s\"]*",
    re.IGNORECASE,
)


def redact_sensitive_data(url: str) -> str:
    """Return ``url`` with the values of sensitive query parameters masked."""
    return _SENSITIVE_QUERY.sub(rf"\g<prefix>{REDACTED}", url)
