"""
Avatar Use Cases

Upload and remove the signed-in member's avatar image.
"""

import logging
from uuid import uuid4

from libs.result import Error, Result, Return
from src.app.services.avatar_storage import IAvatarStorage, StorageError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import MEMBER_NOT_FOUND, load_actor
from src.domain.base import utcnow
from src.domain.entities import Member

from .dtos import AvatarResponse

logger = logging.getLogger(__name__)

MAX_AVATAR_BYTES = 5 * 1024 * 1024
ALLOWED_CONTENT_TYPES = ("image/jpeg", "image/png", "image/webp", "image/gif")


async def _remove_stored_avatar(storage: IAvatarStorage, member: Member) -> None:
    path = storage.path_from_url(member.avatar_url)
    if not path:
        return
    try:
        await storage.remove(path)
    except StorageError as exc:
        logger.warning(f"Could not remove old avatar {path}: {exc}")


class UploadAvatarUseCase:
    """
    Business Rules:
    - JPEG, PNG, WebP or GIF, at most 5 MiB
    - Stored as {tenant_id}/{member_id}-{random}.{ext}
    - The previous avatar is removed before the upload
    """

    def __init__(self, uow: UnitOfWork, storage: IAvatarStorage):
        self.uow = uow
        self.storage = storage

    async def execute(
        self, auth_user_id: str, filename: str, content_type: str, content: bytes
    ) -> Result[AvatarResponse]:
        if content_type not in ALLOWED_CONTENT_TYPES:
            return Return.err(
                Error("INVALID_FILE_TYPE", "Ungültiger Dateityp. Erlaubt: JPG, PNG, WebP, GIF")
            )
        if len(content) > MAX_AVATAR_BYTES:
            return Return.err(Error("FILE_TOO_LARGE", "Datei zu groß. Maximal 5 MB"))

        ext = "jpg"
        if filename and "." in filename:
            ext = filename.rsplit(".", 1)[1].lower() or "jpg"

        async with self.uow:
            member = await load_actor(self.uow, auth_user_id)
            if member is None:
                return Return.err(MEMBER_NOT_FOUND)

            path = f"{member.tenant_id}/{member.id}-{uuid4()}.{ext}"

            if member.avatar_url:
                await _remove_stored_avatar(self.storage, member)

            try:
                avatar_url = await self.storage.upload(path, content, content_type)
            except StorageError as exc:
                logger.error(f"Avatar upload failed for member {member.id}: {exc}")
                return Return.err(Error("UPLOAD_FAILED", "Datei konnte nicht hochgeladen werden"))

            member.avatar_url = avatar_url
            member.updated_at = utcnow()
            await self.uow.members.update(member)
            await self.uow.commit()

            return Return.ok(AvatarResponse(avatar_url=avatar_url))


class DeleteAvatarUseCase:
    def __init__(self, uow: UnitOfWork, storage: IAvatarStorage):
        self.uow = uow
        self.storage = storage

    async def execute(self, auth_user_id: str) -> Result[AvatarResponse]:
        async with self.uow:
            member = await load_actor(self.uow, auth_user_id)
            if member is None:
                return Return.err(MEMBER_NOT_FOUND)

            if not member.avatar_url:
                return Return.err(Error("NO_AVATAR", "Kein Avatar vorhanden"))

            await _remove_stored_avatar(self.storage, member)

            member.avatar_url = None
            member.updated_at = utcnow()
            await self.uow.members.update(member)
            await self.uow.commit()

            return Return.ok(AvatarResponse())
