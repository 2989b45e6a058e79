import logging
import re

from libs.result import Error, Result, Return
from src.app.repositories.errors import DuplicateEntryError
from src.app.services.auth_provider import AuthProviderError, IAuthProvider
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import EVENTS_FEATURE, PLANNING_FEATURE, WEBSITE_FEATURE
from src.domain.entities import Member, MemberStatus, RoleType, Tenant

from .dtos import RegisterClubCommand, RegisteredClub, RegisterClubResponse
from .provisioning import ensure_permission_catalog, seed_system_roles

logger = logging.getLogger(__name__)

CLUB_NUMBER_PATTERN = re.compile(r"^[0-9]{6}$")
MIN_PASSWORD_LENGTH = 8
DEFAULT_FEATURES = [EVENTS_FEATURE, PLANNING_FEATURE, WEBSITE_FEATURE]

_TRANSLITERATIONS = (("ä", "ae"), ("ö", "oe"), ("ü", "ue"), ("ß", "ss"))


def generate_slug(name: str) -> str:
    """
    URL slug from a club name.

    >>> generate_slug("Lions Club Lauf an der Pegnitz")
    'lions-club-lauf-an-der-pegnitz'
    >>> generate_slug("Würzburg Süd")
    'wuerzburg-sued'
    """
    slug = name.lower()
    for umlaut, replacement in _TRANSLITERATIONS:
        slug = slug.replace(umlaut, replacement)
    slug = re.sub(r"[^a-z0-9]+", "-", slug).strip("-")
    return slug[:50]


class RegisterClubUseCase:
    """
    Register Club Use Case

    Business Logic:
    1. Validate the form (all fields, six-digit club number, password rules)
    2. Reject a taken club number or an email already used by any member
    3. Derive a unique slug from the club name
    4. Create the auth identity (hard failure aborts the registration)
    5. In one transaction: tenant, permission catalog, six system roles,
       administrator member
    """

    def __init__(self, uow: UnitOfWork, auth_provider: IAuthProvider, app_url: str):
        self.uow = uow
        self.auth_provider = auth_provider
        self.app_url = app_url

    def _validate(self, command: RegisterClubCommand):
        required = (
            command.club_name,
            command.club_number,
            command.first_name,
            command.last_name,
            command.email,
            command.password,
        )
        if not all(value and value.strip() for value in required):
            return Error("MISSING_FIELDS", "Bitte füllen Sie alle Pflichtfelder aus.")
        if not CLUB_NUMBER_PATTERN.match(command.club_number):
            return Error("INVALID_CLUB_NUMBER", "Die Club-Nummer muss 6 Ziffern haben.")
        if command.password != command.password_confirm:
            return Error("PASSWORD_MISMATCH", "Die Passwörter stimmen nicht überein.")
        if len(command.password) < MIN_PASSWORD_LENGTH:
            return Error(
                "PASSWORD_TOO_SHORT", "Das Passwort muss mindestens 8 Zeichen haben."
            )
        return None

    async def execute(self, command: RegisterClubCommand) -> Result[RegisterClubResponse]:
        error = self._validate(command)
        if error:
            return Return.err(error)

        club_name = command.club_name.strip()
        email = command.email.strip().lower()

        async with self.uow:
            if await self.uow.tenants.get_by_club_number(command.club_number):
                return Return.err(
                    Error(
                        "CLUB_NUMBER_TAKEN",
                        "Ein Club mit dieser Club-Nummer ist bereits registriert.",
                    )
                )

            if await self.uow.members.get_by_email(email):
                return Return.err(
                    Error("EMAIL_TAKEN", "Diese E-Mail-Adresse ist bereits registriert.")
                )

            slug = generate_slug(club_name) or "club"
            if await self.uow.tenants.get_by_slug(slug):
                slug = f"{slug}-{command.club_number}"

            try:
                auth_user = await self.auth_provider.sign_up(
                    email=email,
                    password=command.password,
                    metadata={
                        "first_name": command.first_name.strip(),
                        "last_name": command.last_name.strip(),
                    },
                    redirect_to=f"{self.app_url.rstrip('/')}/auth/callback",
                )
            except AuthProviderError as exc:
                logger.error(f"Auth sign-up failed for {email}: {exc}")
                return Return.err(
                    Error("AUTH_SIGNUP_FAILED", str(exc) or "Fehler bei der Registrierung.")
                )

            try:
                tenant = await self.uow.tenants.create(
                    Tenant(
                        name=club_name,
                        slug=slug,
                        club_number=command.club_number,
                        settings={},
                        features=list(DEFAULT_FEATURES),
                    )
                )

                permission_ids = await ensure_permission_catalog(self.uow)
                roles = await seed_system_roles(self.uow, tenant.id, permission_ids)

                await self.uow.members.create(
                    Member(
                        tenant_id=tenant.id,
                        auth_user_id=auth_user.id,
                        email=email,
                        first_name=command.first_name.strip(),
                        last_name=command.last_name.strip(),
                        status=MemberStatus.active,
                        is_active=True,
                        role_id=roles[RoleType.admin].id,
                    )
                )

                await self.uow.commit()
            except DuplicateEntryError:
                logger.error(
                    f"Registration of club {command.club_number} failed after auth sign-up; "
                    f"auth user {auth_user.id} left in place"
                )
                return Return.err(
                    Error(
                        "REGISTRATION_CONFLICT",
                        "Club-Nummer oder E-Mail-Adresse ist bereits registriert.",
                    )
                )

            logger.info(f"Club registered: {tenant.name} ({tenant.slug}-{tenant.club_number})")
            return Return.ok(
                RegisterClubResponse(
                    tenant=RegisteredClub(
                        id=tenant.id,
                        name=tenant.name,
                        slug=tenant.slug,
                        club_number=tenant.club_number,
                    )
                )
            )
