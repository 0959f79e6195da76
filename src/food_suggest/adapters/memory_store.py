"""Process-local key-value store."""

from dataclasses import dataclass, field

from food_suggest.services.storage import KeyValueStore


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """Key-value store kept in a dict; contents die with the process."""

    values: dict[str, str] = field(default_factory=dict)

    async def get(self, key: str) -> str | None:
        """Return the stored value, if present."""
        return self.values.get(key)

    async def set(self, key: str, value: str) -> None:
        """Store a value."""
        self.values[key] = value

    async def remove(self, key: str) -> None:
        """Delete a key if present."""
        self.values.pop(key, None)
