import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./lions_hub.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")

    # Host routing
    MAIN_DOMAIN = data.get("MAIN_DOMAIN", "lions-hub.de")
    APP_SUBDOMAINS = data.get("APP_SUBDOMAINS", ["app", "www"])
    DEFAULT_TENANT_SLUG = data.get("DEFAULT_TENANT_SLUG", "lauf")
    DEFAULT_LOCALE = data.get("DEFAULT_LOCALE", "de")
    SESSION_COOKIE_SECURE = data.get("SESSION_COOKIE_SECURE", False)
    APP_URL = data.get("APP_URL", "http://localhost:3000")
    TENANT_CACHE_TTL = data.get("TENANT_CACHE_TTL", 60)

    # Supabase
    SUPABASE_URL = data.get("SUPABASE_URL", "")
    SUPABASE_ANON_KEY = data.get("SUPABASE_ANON_KEY", "")
    SUPABASE_SERVICE_ROLE_KEY = data.get("SUPABASE_SERVICE_ROLE_KEY", "")
    SUPABASE_JWT_SECRET = data.get("SUPABASE_JWT_SECRET", "")
    AVATAR_BUCKET = data.get("AVATAR_BUCKET", "avatars")

    # Email
    RESEND_API_KEY = data.get("RESEND_API_KEY", "")
    RESEND_API_URL = data.get("RESEND_API_URL", "https://api.resend.com")
    FROM_EMAIL = data.get("FROM_EMAIL", "Lions Hub <onboarding@resend.dev>")

    INVITATION_EXPIRY_DAYS = data.get("INVITATION_EXPIRY_DAYS", 7)
