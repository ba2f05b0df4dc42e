from typing import Protocol, runtime_checkable


@runtime_checkable
class StoragePort(Protocol):
    """
    Key/value text storage.

    Values are opaque strings (JSON blobs in practice). A set() replaces
    the whole value for the key; there is no partial update.
    """

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...

    async def delete(self, key: str) -> None: ...
