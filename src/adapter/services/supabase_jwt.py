from typing import Optional

from jose import JWTError, jwt

SUPABASE_AUDIENCE = "authenticated"


def verify_access_token(token: str, secret: str) -> Optional[dict]:
    """
    Verify and decode a Supabase access token

    Args:
        token: JWT access token string
        secret: Project JWT secret (HS256)

    Returns:
        Decoded payload dict or None if invalid or expired
    """
    try:
        return jwt.decode(
            token, secret, algorithms=["HS256"], audience=SUPABASE_AUDIENCE
        )
    except JWTError:
        return None
