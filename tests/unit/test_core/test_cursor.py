"""Unit tests for the cursor codec."""

from __future__ import annotations

import base64
import json
from datetime import UTC, datetime, timedelta, timezone
from uuid import UUID

import pytest

from blog_service.core.pagination.cursor import CURSOR_VERSION, CursorCodec, CursorData
from blog_service.core.pagination.exceptions import InvalidCursorError

KEY_FIELDS = ("created_at", "id")
NODE_ID = UUID("6f1c2f0e-8d5b-4d8c-9f4a-3d2e1b0a9c8d")
CREATED = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)


def _keys() -> dict[str, object]:
    return {"created_at": CREATED, "id": NODE_ID}


@pytest.mark.unit
class TestCursorEncoding:
    """Tests for CursorCodec.encode."""

    def test_cursor_is_urlsafe_base64_json(self):
        """Unsigned cursors are base64url of compact, sorted JSON."""
        token = CursorCodec().encode("blogs", _keys())

        payload = json.loads(base64.urlsafe_b64decode(token.encode()))
        assert payload == {
            "k": {"created_at": "2024-01-01T12:00:00+00:00", "id": str(NODE_ID)},
            "s": "blogs",
            "v": CURSOR_VERSION,
        }

    def test_encoding_is_stable(self):
        """The same key always yields the same cursor."""
        codec = CursorCodec()

        assert codec.encode("blogs", _keys()) == codec.encode("blogs", _keys())

    def test_key_order_does_not_matter(self):
        """Keys are serialized sorted, so insertion order is irrelevant."""
        codec = CursorCodec()
        reordered = {"id": NODE_ID, "created_at": CREATED}

        assert codec.encode("blogs", reordered) == codec.encode("blogs", _keys())

    def test_naive_datetime_is_treated_as_utc(self):
        """A datetime reloaded from SQLite (naive) encodes like the aware original."""
        codec = CursorCodec()
        naive = {"created_at": CREATED.replace(tzinfo=None), "id": NODE_ID}

        assert codec.encode("blogs", naive) == codec.encode("blogs", _keys())

    def test_other_timezones_are_normalized_to_utc(self):
        """Equal instants in different zones give the same cursor."""
        codec = CursorCodec()
        shifted = {"created_at": CREATED.astimezone(timezone(timedelta(hours=2))), "id": NODE_ID}

        assert codec.encode("blogs", shifted) == codec.encode("blogs", _keys())

    def test_signed_cursor_has_signature_suffix(self):
        """With a secret the token is '<body>.<signature>'."""
        token = CursorCodec("s3cret").encode("blogs", _keys())

        body, _, signature = token.partition(".")
        assert body == CursorCodec().encode("blogs", _keys())
        assert signature


@pytest.mark.unit
class TestCursorDecoding:
    """Tests for CursorCodec.decode."""

    def test_decode_returns_scope_and_raw_keys(self):
        """Decoding yields CursorData with JSON values."""
        codec = CursorCodec()
        token = codec.encode("blogs", _keys())

        data = codec.decode(token, scope="blogs", key_fields=KEY_FIELDS)

        assert data == CursorData(
            scope="blogs",
            keys={"created_at": "2024-01-01T12:00:00+00:00", "id": str(NODE_ID)},
        )

    def test_foreign_scope_is_rejected(self):
        """A cursor minted for one collection is invalid for another."""
        codec = CursorCodec()
        token = codec.encode("entries:a", _keys())

        with pytest.raises(InvalidCursorError) as exc_info:
            codec.decode(token, scope="entries:b", key_fields=KEY_FIELDS)

        assert exc_info.value.reason == "scope"

    @pytest.mark.parametrize(
        "token",
        [
            "not a cursor",
            "!!!!",
            "Zm9v",  # base64 of "foo"
            base64.urlsafe_b64encode(b"[1, 2]").decode(),
            "cursör",
        ],
    )
    def test_corrupted_cursor_is_rejected(self, token: str):
        """Garbage never decodes to a position."""
        with pytest.raises(InvalidCursorError) as exc_info:
            CursorCodec().decode(token, scope="blogs", key_fields=KEY_FIELDS)

        assert exc_info.value.reason == "malformed"

    @pytest.mark.parametrize(
        "tamper",
        [
            lambda token: token + "@@",
            lambda token: token[:5] + "!" + token[5:],
            lambda token: token + " ",
            lambda token: token[:4] + "/" + token[5:],
        ],
        ids=["suffix", "spliced", "trailing-space", "standard-alphabet"],
    )
    def test_tampered_cursor_is_rejected(self, tamper):
        """Characters outside the url-safe alphabet make a real cursor invalid."""
        codec = CursorCodec()
        token = codec.encode("blogs", _keys())

        with pytest.raises(InvalidCursorError) as exc_info:
            codec.decode(tamper(token), scope="blogs", key_fields=KEY_FIELDS)

        assert exc_info.value.reason == "malformed"

    def test_unknown_version_is_rejected(self):
        """Only the current cursor version is accepted."""
        raw = json.dumps({"k": {"created_at": "x", "id": "y"}, "s": "blogs", "v": 99})
        token = base64.urlsafe_b64encode(raw.encode()).decode()

        with pytest.raises(InvalidCursorError) as exc_info:
            CursorCodec().decode(token, scope="blogs", key_fields=KEY_FIELDS)

        assert exc_info.value.reason == "version"

    def test_mismatched_key_fields_are_rejected(self):
        """A cursor over different ordering columns does not match."""
        codec = CursorCodec()
        token = codec.encode("blogs", {"name": "a", "id": str(NODE_ID)})

        with pytest.raises(InvalidCursorError) as exc_info:
            codec.decode(token, scope="blogs", key_fields=KEY_FIELDS)

        assert exc_info.value.reason == "keys"

    def test_null_key_values_are_rejected(self):
        codec = CursorCodec()
        token = codec.encode("blogs", {"created_at": None, "id": str(NODE_ID)})

        with pytest.raises(InvalidCursorError):
            codec.decode(token, scope="blogs", key_fields=KEY_FIELDS)


@pytest.mark.unit
class TestCursorSigning:
    """Tests for HMAC-signed cursors."""

    def test_signed_roundtrip(self):
        codec = CursorCodec("s3cret")
        token = codec.encode("blogs", _keys())

        assert codec.decode(token, scope="blogs", key_fields=KEY_FIELDS).scope == "blogs"

    def test_tampered_body_is_rejected(self):
        """Changing the payload invalidates the signature."""
        codec = CursorCodec("s3cret")
        token = codec.encode("blogs", _keys())
        _, _, signature = token.partition(".")
        forged_body = CursorCodec().encode("blogs", {"created_at": CREATED, "id": UUID(int=0)})

        with pytest.raises(InvalidCursorError) as exc_info:
            codec.decode(f"{forged_body}.{signature}", scope="blogs", key_fields=KEY_FIELDS)

        assert exc_info.value.reason == "signature"

    def test_unsigned_cursor_is_rejected_when_secret_set(self):
        token = CursorCodec().encode("blogs", _keys())

        with pytest.raises(InvalidCursorError) as exc_info:
            CursorCodec("s3cret").decode(token, scope="blogs", key_fields=KEY_FIELDS)

        assert exc_info.value.reason == "signature"

    def test_cursor_signed_with_other_secret_is_rejected(self):
        token = CursorCodec("other").encode("blogs", _keys())

        with pytest.raises(InvalidCursorError):
            CursorCodec("s3cret").decode(token, scope="blogs", key_fields=KEY_FIELDS)

    def test_signed_cursor_is_rejected_without_secret(self):
        token = CursorCodec("s3cret").encode("blogs", _keys())

        with pytest.raises(InvalidCursorError) as exc_info:
            CursorCodec().decode(token, scope="blogs", key_fields=KEY_FIELDS)

        assert exc_info.value.reason == "signature"
