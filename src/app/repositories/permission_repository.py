from abc import ABC, abstractmethod
from typing import List

from src.domain.entities import Permission


class IPermissionRepository(ABC):
    """Permission catalog repository interface - application layer"""

    @abstractmethod
    async def get_all(self) -> List[Permission]:
        """Get every catalog entry"""
        pass

    @abstractmethod
    async def create(self, permission: Permission) -> Permission:
        """Create a catalog entry"""
        pass
