import typing as t
from secrets import token_urlsafe

from gateways.db import InMemoryStorage
from gateways.db.exceptions import NotFoundError

SESSIONS_PREFIX = "sessions"


def build_storage_key(session_key: str) -> str:
    return SESSIONS_PREFIX + ":" + session_key


class SessionCreatorI(t.Protocol):
    def create(self, initial_data: dict | None = None) -> str: ...
    def destroy(self, session_key: str) -> None: ...


class SessionCreator:
    def __init__(self, storage: InMemoryStorage, key_length: int = 16):
        self.storage = storage
        self.key_length = key_length

    def create(self, initial_data: dict | None = None) -> str:
        while True:
            session_key = token_urlsafe(self.key_length)
            if self.storage.set(
                build_storage_key(session_key), initial_data or {}, nx=True
            ):
                return session_key

    def destroy(self, session_key: str) -> None:
        if not self.storage.delete(build_storage_key(session_key)):
            raise NotFoundError()


class SessionManager:
    def __init__(self, db: InMemoryStorage, session_key: str):
        self._db = db
        self.session_key = session_key

    @property
    def storage_key(self) -> str:
        return build_storage_key(self.session_key)

    def _load(self) -> dict:
        data = self._db.get(self.storage_key)
        if data is None:
            raise NotFoundError()
        return data

    def set_to_session(self, field: str, data: t.Any) -> None:
        session = self._load()
        session[field] = data
        self._db.set(self.storage_key, session, xx=True)

    def retrieve_from_session(self, field: str) -> t.Any | None:
        return self._load().get(field)
