from core.logging import AbstractLogger


class BaseService:
    entity_name: str

    def __init__(self, logger: AbstractLogger) -> None:
        self._logger = logger
