"""Unit tests for UserService."""

from __future__ import annotations

from uuid import uuid4

import pytest
from pydantic import ValidationError

from blog_service.core.exceptions import ConflictException, NotFoundException
from blog_service.features.users.schemas import UserCreate
from blog_service.features.users.service import UserService


@pytest.mark.unit
class TestUserService:
    @pytest.mark.asyncio
    async def test_create_and_get_user(self, db_session):
        service = UserService(db_session)

        user = await service.create_user(UserCreate(username="carol", email="Carol@Example.com"))

        assert user.email == "carol@example.com"
        assert await service.get_user(user.id) is user
        assert await service.find_by_email("carol@example.com") is user

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts(self, db_session, alice):
        with pytest.raises(ConflictException) as exc_info:
            await UserService(db_session).create_user(UserCreate(username="imposter", email="ALICE@example.com"))

        assert exc_info.value.type == "user-email-exists"

    @pytest.mark.asyncio
    async def test_get_missing_user(self, db_session):
        with pytest.raises(NotFoundException):
            await UserService(db_session).get_user(uuid4())

    @pytest.mark.asyncio
    async def test_get_or_provision_returns_existing(self, db_session, alice):
        assert await UserService(db_session).get_or_provision("alice@example.com") is alice

    @pytest.mark.asyncio
    async def test_get_or_provision_registers_new_user(self, db_session):
        user = await UserService(db_session).get_or_provision("dave@example.com")

        assert user.username == "dave"
        assert user.email == "dave@example.com"

    @pytest.mark.parametrize(
        "payload",
        [
            {"username": "x", "email": "not-an-email"},
            {"username": "   ", "email": "x@example.com"},
            {"username": "x", "email": "x@example.com", "picture": "p" * 501},
        ],
    )
    def test_invalid_payloads(self, payload):
        with pytest.raises(ValidationError):
            UserCreate(**payload)
