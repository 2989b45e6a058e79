from sqlalchemy.exc import IntegrityError
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.category_repository import CategoryRepository
from src.adapter.repositories.event_repository import EventRepository
from src.adapter.repositories.invitation_repository import InvitationRepository
from src.adapter.repositories.lions_year_repository import LionsYearRepository
from src.adapter.repositories.member_repository import MemberRepository
from src.adapter.repositories.permission_repository import PermissionRepository
from src.adapter.repositories.planned_event_repository import PlannedEventRepository
from src.adapter.repositories.registration_repository import RegistrationRepository
from src.adapter.repositories.role_repository import RoleRepository
from src.adapter.repositories.tenant_repository import TenantRepository
from src.app.repositories.errors import DuplicateEntryError
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.tenants = TenantRepository(self.session)
        self.permissions = PermissionRepository(self.session)
        self.roles = RoleRepository(self.session)
        self.members = MemberRepository(self.session)
        self.invitations = InvitationRepository(self.session)
        self.events = EventRepository(self.session)
        self.registrations = RegistrationRepository(self.session)
        self.categories = CategoryRepository(self.session)
        self.lions_years = LionsYearRepository(self.session)
        self.planned_events = PlannedEventRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            raise DuplicateEntryError(str(exc.orig)) from exc

    async def rollback(self):
        await self.session.rollback()
