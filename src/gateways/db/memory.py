import copy
import typing as t


class InMemoryStorage:
    """Process-local key/value storage.

    Mimics the subset of redis SET semantics the repositories rely on:
    ``nx`` only sets missing keys, ``xx`` only overwrites existing ones and
    the return value tells whether anything was written.
    Values are copied on the way in and out so callers can't mutate stored data.
    """

    def __init__(self) -> None:
        self._data: dict[str, t.Any] = {}

    def set(self, key: str, value: t.Any, nx: bool = False, xx: bool = False) -> bool:
        assert not (nx and xx), "nx and xx are mutually exclusive"
        exists = key in self._data
        if (nx and exists) or (xx and not exists):
            return False
        self._data[key] = copy.deepcopy(value)
        return True

    def get(self, key: str) -> t.Any | None:
        if key not in self._data:
            return None
        return copy.deepcopy(self._data[key])

    def delete(self, *keys: str) -> int:
        deleted = 0
        for key in keys:
            if key in self._data:
                del self._data[key]
                deleted += 1
        return deleted
