from unittest.mock import create_autospec, patch

import pytest

from core.logging import AbstractLogger, stub_logger
from core.services.exceptions import EntityNotFoundError
from gateways.db import InMemoryStorage
from gateways.db.exceptions import NotFoundError
from sessions.domain.services import SessionsService
from sessions.sessions import (
    SessionCreator,
    SessionCreatorI,
    SessionManager,
    build_storage_key,
)
from tests.utils import exc_to_ctx_manager


@pytest.fixture
def sessions_service() -> SessionsService:
    session_creator = create_autospec(SessionCreatorI, instance=True)
    return SessionsService(stub_logger, session_creator)


class TestSessionsService:
    def test_start(self, sessions_service):
        creator = sessions_service._session_creator
        creator.create.return_value = "key"
        assert sessions_service.start() == "key"
        creator.create.assert_called_once_with({"cart": None})

    def test_start_logs_session_key(self):
        logger = create_autospec(AbstractLogger, instance=True)
        creator = create_autospec(SessionCreatorI, instance=True)
        creator.create.return_value = "key"
        SessionsService(logger, creator).start()
        logger.bind.assert_called_once_with(session_key="key")
        logger.bind.return_value.info.assert_called_once_with("Session started")

    @pytest.mark.parametrize(
        ["destroy_side_effect", "expected_exc"],
        [(None, None), (NotFoundError, EntityNotFoundError)],
    )
    def test_end(self, sessions_service, destroy_side_effect, expected_exc):
        creator = sessions_service._session_creator
        creator.destroy.side_effect = destroy_side_effect
        with exc_to_ctx_manager(expected_exc):
            sessions_service.end("key")
        creator.destroy.assert_called_once_with("key")


class TestSessionCreator:
    def test_create_unique_keys(self):
        creator = SessionCreator(InMemoryStorage())
        keys = {creator.create() for _ in range(20)}
        assert len(keys) == 20

    def test_create_retries_taken_key(self):
        storage = InMemoryStorage()
        storage.set(build_storage_key("taken"), {"cart": "existing"})
        creator = SessionCreator(storage)
        with patch(
            "sessions.sessions.token_urlsafe", side_effect=["taken", "free"]
        ) as token_mock:
            assert creator.create({"cart": None}) == "free"
        assert token_mock.call_count == 2
        assert storage.get(build_storage_key("taken")) == {"cart": "existing"}
        assert storage.get(build_storage_key("free")) == {"cart": None}

    def test_destroy(self):
        storage = InMemoryStorage()
        creator = SessionCreator(storage)
        session_key = creator.create({"cart": None})
        creator.destroy(session_key)
        assert storage.get(build_storage_key(session_key)) is None
        with pytest.raises(NotFoundError):
            creator.destroy(session_key)


class TestSessionManager:
    def test_set_retrieve(self):
        storage = InMemoryStorage()
        session_key = SessionCreator(storage).create()
        manager = SessionManager(storage, session_key)
        assert manager.retrieve_from_session("cart") is None
        manager.set_to_session("cart", {"p1": 1})
        assert manager.retrieve_from_session("cart") == {"p1": 1}
        manager.set_to_session("cart", None)
        assert manager.retrieve_from_session("cart") is None

    def test_missing_session(self):
        manager = SessionManager(InMemoryStorage(), "missing")
        with pytest.raises(NotFoundError):
            manager.retrieve_from_session("cart")
        with pytest.raises(NotFoundError):
            manager.set_to_session("cart", {})
