"""In-memory implementation of KeyValueStore (no disk)."""


class InMemoryKeyValueStore:
    """Stores string values in a dict. Lives as long as the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError("KeyValueStore values must be strings.")
        self._data[key] = value
