class DatabaseError(Exception):
    def __init__(self, msg: str | None = None):
        self.msg = msg


class NotFoundError(DatabaseError): ...


class AlreadyExistsError(DatabaseError): ...
