from core.logging import AbstractLogger
from core.services.base import BaseService
from core.services.exceptions import EntityNotFoundError
from gateways.db.exceptions import NotFoundError
from sessions.sessions import SessionCreatorI


class SessionsService(BaseService):
    entity_name = "Session"

    def __init__(self, logger: AbstractLogger, session_creator: SessionCreatorI):
        super().__init__(logger)
        self._session_creator = session_creator

    def start(self) -> str:
        session_key = self._session_creator.create({"cart": None})
        self._logger.bind(session_key=session_key).info("Session started")
        return session_key

    def end(self, session_key: str) -> None:
        try:
            self._session_creator.destroy(session_key)
        except NotFoundError:
            raise EntityNotFoundError(self.entity_name, key=session_key)
        self._logger.bind(session_key=session_key).info("Session ended, cart discarded")
