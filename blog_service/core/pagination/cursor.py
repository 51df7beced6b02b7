"""Cursor encoding for keyset pagination.

A cursor is an opaque, URL-safe string that records the ordering key of one
node together with the collection it came from:

    base64url({"k": {"created_at": "...", "id": "..."}, "s": "entries:<blog>", "v": 1})

optionally followed by "." and an HMAC-SHA256 signature when a cursor secret
is configured. The payload is serialized with sorted keys and compact
separators, so the same node always yields the same cursor.

Decoding is strict. Anything that is not a well-formed cursor for the
expected scope and key fields raises InvalidCursorError; a cursor is never
"best effort" matched to some other position.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import json
from collections.abc import Mapping, Sequence
from datetime import UTC, datetime
from functools import lru_cache
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from blog_service.core.pagination.exceptions import InvalidCursorError

CURSOR_VERSION = 1
_SIGNATURE_SEPARATOR = "."


class CursorData(BaseModel):
    """Decoded cursor payload.

    Attributes:
        scope: Collection the cursor was minted for (e.g. "blogs")
        keys: Raw JSON values of the ordering key, by field name
    """

    model_config = ConfigDict(frozen=True)

    scope: str
    keys: dict[str, Any]


class CursorCodec:
    """Encode and decode scoped, versioned cursors.

    Example:
        codec = CursorCodec()
        token = codec.encode("blogs", {"created_at": blog.created_at, "id": blog.id})
        data = codec.decode(token, scope="blogs", key_fields=("created_at", "id"))
    """

    __slots__ = ("_secret",)

    def __init__(self, secret: str | bytes | None = None) -> None:
        if isinstance(secret, str):
            secret = secret.encode("utf-8")
        self._secret = secret or None

    @property
    def signed(self) -> bool:
        return self._secret is not None

    def encode(self, scope: str, keys: Mapping[str, Any]) -> str:
        payload = {
            "k": {name: self._serialize_value(value) for name, value in keys.items()},
            "s": scope,
            "v": CURSOR_VERSION,
        }
        raw = json.dumps(payload, sort_keys=True, separators=(",", ":")).encode("utf-8")
        token = base64.urlsafe_b64encode(raw).decode("ascii")
        if self._secret is not None:
            token = f"{token}{_SIGNATURE_SEPARATOR}{self._sign(token)}"
        return token

    def decode(self, cursor: str, *, scope: str, key_fields: Sequence[str]) -> CursorData:
        """Decode a cursor minted for `scope` over `key_fields`.

        Raises:
            InvalidCursorError: malformed token, unknown version, foreign
                scope, unexpected key fields or a bad signature.
        """
        if not cursor.isascii():
            raise InvalidCursorError("malformed", "Cursor is not a valid token")

        body, sep, signature = cursor.partition(_SIGNATURE_SEPARATOR)
        if self._secret is not None:
            if not sep or not hmac.compare_digest(signature, self._sign(body)):
                raise InvalidCursorError("signature", "Cursor signature is missing or invalid")
        elif sep:
            raise InvalidCursorError("signature", "Cursor was signed by another deployment")

        if "+" in body or "/" in body:
            raise InvalidCursorError("malformed", "Cursor is not a valid token")
        try:
            raw = base64.b64decode(body.encode("ascii"), altchars=b"-_", validate=True)
            payload = json.loads(raw.decode("utf-8"))
        except (binascii.Error, UnicodeError, ValueError) as exc:
            raise InvalidCursorError("malformed", "Cursor is not a valid token") from exc

        if not isinstance(payload, dict):
            raise InvalidCursorError("malformed", "Cursor is not a valid token")
        if payload.get("v") != CURSOR_VERSION:
            raise InvalidCursorError("version", "Cursor version is not supported")
        if payload.get("s") != scope:
            raise InvalidCursorError("scope", "Cursor belongs to a different collection")

        keys = payload.get("k")
        if not isinstance(keys, dict) or set(keys) != set(key_fields):
            raise InvalidCursorError("keys", "Cursor does not match the collection ordering")
        if any(keys[name] is None for name in key_fields):
            raise InvalidCursorError("keys", "Cursor does not match the collection ordering")

        return CursorData(scope=scope, keys=keys)

    def _sign(self, body: str) -> str:
        digest = hmac.new(self._secret or b"", body.encode("ascii"), hashlib.sha256).digest()
        return base64.urlsafe_b64encode(digest).decode("ascii").rstrip("=")

    @staticmethod
    def _serialize_value(value: Any) -> Any:
        # Naive datetimes are read back from SQLite; treat them as UTC so a
        # node encodes identically whether it was just created or reloaded.
        if isinstance(value, datetime):
            if value.tzinfo is None:
                value = value.replace(tzinfo=UTC)
            return value.astimezone(UTC).isoformat()
        if isinstance(value, UUID):
            return str(value)
        return value


@lru_cache(maxsize=1)
def get_cursor_codec() -> CursorCodec:
    """Codec configured from PaginationSettings (signed when a secret is set)."""
    from blog_service.core.settings import get_pagination_settings

    secret = get_pagination_settings().cursor_secret
    return CursorCodec(secret.get_secret_value() if secret else None)
