from abc import ABC, abstractmethod
from typing import Optional


class StorageError(Exception):
    """Object storage rejected an upload or removal"""


class IAvatarStorage(ABC):
    """Object storage port for member avatars"""

    @abstractmethod
    async def upload(self, path: str, content: bytes, content_type: str) -> str:
        """Store the object and return its public URL"""
        pass

    @abstractmethod
    async def remove(self, path: str) -> None:
        pass

    @abstractmethod
    def path_from_url(self, public_url: str) -> Optional[str]:
        """Object path for a public URL issued by this storage, else None"""
        pass
