from abc import ABC, abstractmethod

from src.app.repositories.category_repository import ICategoryRepository
from src.app.repositories.event_repository import IEventRepository
from src.app.repositories.invitation_repository import IInvitationRepository
from src.app.repositories.lions_year_repository import ILionsYearRepository
from src.app.repositories.member_repository import IMemberRepository
from src.app.repositories.permission_repository import IPermissionRepository
from src.app.repositories.planned_event_repository import IPlannedEventRepository
from src.app.repositories.registration_repository import IRegistrationRepository
from src.app.repositories.role_repository import IRoleRepository
from src.app.repositories.tenant_repository import ITenantRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    tenants: ITenantRepository
    permissions: IPermissionRepository
    roles: IRoleRepository
    members: IMemberRepository
    invitations: IInvitationRepository
    events: IEventRepository
    registrations: IRegistrationRepository
    categories: ICategoryRepository
    lions_years: ILionsYearRepository
    planned_events: IPlannedEventRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        """Commit the transaction; raises DuplicateEntryError on a uniqueness violation"""
        pass

    @abstractmethod
    async def rollback(self):
        pass
