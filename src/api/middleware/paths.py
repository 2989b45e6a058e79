import re
from typing import Iterable, List, Tuple

STATIC_EXTENSIONS = re.compile(
    r"\.(?:html?|css|js|jpe?g|webp|png|gif|svg|ttf|woff2?|ico|csv|docx?|xlsx?|zip|webmanifest)$",
    re.IGNORECASE,
)


def is_static_asset(path: str) -> bool:
    return path.startswith("/static/") or bool(STATIC_EXTENSIONS.search(path))


def replace_request_headers(scope: dict, values: dict) -> None:
    """Set headers on the ASGI scope, dropping any client-sent values for the same names"""
    names = {name.lower().encode("latin-1") for name in values}
    headers: List[Tuple[bytes, bytes]] = [
        (k, v) for k, v in scope.get("headers", []) if k.lower() not in names
    ]
    for name, value in values.items():
        headers.append((name.lower().encode("latin-1"), value.encode("latin-1")))
    scope["headers"] = headers


def matches_prefix(path: str, prefixes: Iterable[str]) -> bool:
    """True if path equals a prefix or lies below it"""
    for prefix in prefixes:
        if path == prefix or path.startswith(prefix.rstrip("/") + "/"):
            return True
    return False
