from typing import Optional

import httpx

from src.app.services.avatar_storage import IAvatarStorage, StorageError


class SupabaseAvatarStorage(IAvatarStorage):
    """Supabase Storage helper for a public bucket"""

    def __init__(
        self,
        url: str,
        key: str,
        bucket: str,
        timeout: float = 30,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = url.rstrip("/")
        self.key = key
        self.bucket = bucket
        self.timeout = timeout
        self.transport = transport

    def _ensure_config(self):
        if not self.base_url or not self.key:
            raise StorageError("Supabase Storage is not configured")

    @property
    def public_prefix(self) -> str:
        return f"{self.base_url}/storage/v1/object/public/{self.bucket}/"

    async def upload(self, path: str, content: bytes, content_type: str) -> str:
        self._ensure_config()

        url = f"{self.base_url}/storage/v1/object/{self.bucket}/{path}"
        headers = {
            "Authorization": f"Bearer {self.key}",
            "apikey": self.key,
            "Content-Type": content_type or "application/octet-stream",
            "x-upsert": "true",
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await client.post(url, headers=headers, content=content)
        except httpx.HTTPError as exc:
            raise StorageError(f"Storage upload failed: {exc}") from exc

        if resp.status_code not in (200, 201):
            raise StorageError(f"Storage upload failed: {resp.text}")

        return f"{self.public_prefix}{path}"

    async def remove(self, path: str) -> None:
        self._ensure_config()

        url = f"{self.base_url}/storage/v1/object/{self.bucket}/{path}"
        headers = {"Authorization": f"Bearer {self.key}", "apikey": self.key}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await client.delete(url, headers=headers)
        except httpx.HTTPError as exc:
            raise StorageError(f"Storage delete failed: {exc}") from exc

        if resp.status_code not in (200, 204, 404):
            raise StorageError(f"Storage delete failed: {resp.text}")

    def path_from_url(self, public_url: str) -> Optional[str]:
        marker = f"{self.bucket}/"
        if marker not in public_url:
            return None
        return public_url.split(marker, 1)[1] or None
