class ServiceError(Exception):
    _msg = "unexpected service error"

    def __init__(self, msg: str | None = None) -> None:
        self._msg = msg or self._msg
        return super().__init__()

    def __str__(self):
        return self._msg


class CommonServiceError(ServiceError):
    def _generate_msg(self) -> str:
        return self._msg

    def __init__(self, entity_name: str, **kwargs) -> None:
        self._entity_name = entity_name
        self._params = kwargs
        return super().__init__(self._generate_msg())

    @property
    def params(self) -> dict:
        return dict(self._params)


class EntityNotFoundError(CommonServiceError):
    def _generate_msg(self) -> str:
        msg = "%s %s not found"
        params_string = ""
        if self._params:
            params_string = "with " + ", ".join(
                f"{key}={value}" for key, value in self._params.items()
            )
        return msg % (self._entity_name, params_string)


class ProductNotFoundError(EntityNotFoundError):
    def __init__(self, **kwargs) -> None:
        super().__init__("Product", **kwargs)


class LineItemNotFoundError(EntityNotFoundError):
    def __init__(self, **kwargs) -> None:
        super().__init__("Line item", **kwargs)


class UnknownCommandError(ServiceError):
    def __init__(self, command: object) -> None:
        super().__init__("Unknown cart command: %r" % (command,))
