"""Request ID middleware.

Every HTTP request gets an ``X-Request-ID``. A well-formed ID sent by the
client or the auth proxy is reused, anything else is replaced by a fresh
UUID4. The ID lands in ``request.state.request_id``, the log context (so every
log line of the request carries it), problem+json bodies and the response
headers.
"""

from __future__ import annotations

import re

from blog_service.app.middleware.base import HeaderContextMiddleware, generate_uuid

MAX_REQUEST_ID_LENGTH = 128
_REQUEST_ID_RE = re.compile(r"^[A-Za-z0-9._:-]+$")


class RequestIDMiddleware(HeaderContextMiddleware):
    header_name = "x-request-id"
    state_key = "request_id"
    log_context_key = "request_id"
    should_clear_context_on_finish = True

    def accept_value(self, value: str) -> bool:
        return len(value) <= MAX_REQUEST_ID_LENGTH and bool(_REQUEST_ID_RE.match(value))

    def generate_value(self) -> str:
        return generate_uuid()
