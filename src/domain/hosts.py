"""
Host classification for subdomain routing.

A club's public site lives on ``{slug}-{clubNumber}.{main domain}``; the
application itself is served from the bare domain, reserved subdomains and
local development hosts.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union


@dataclass(frozen=True)
class MainDomain:
    pass


@dataclass(frozen=True)
class AppSubdomain:
    label: str


@dataclass(frozen=True)
class ClubSubdomain:
    slug: str
    club_number: str


@dataclass(frozen=True)
class LocalDev:
    pass


HostClass = Union[MainDomain, AppSubdomain, ClubSubdomain, LocalDev]


def parse_public_subdomain(label: str) -> Optional[Tuple[str, str]]:
    """
    Split ``lions-lauf-123456`` into ``("lions-lauf", "123456")``.

    The split happens at the last hyphen so slugs may contain hyphens.
    Returns None when there is no hyphen, either half is empty, or the
    club number is not all digits.
    """
    slug, sep, club_number = label.rpartition("-")
    if not sep or not slug or not club_number:
        return None
    if not (club_number.isascii() and club_number.isdigit()):
        return None
    return slug, club_number


def classify_host(
    host: str,
    main_domain: Optional[str] = None,
    app_subdomains: Iterable[str] = ("app", "www"),
) -> HostClass:
    hostname = host.split(":", 1)[0].lower()

    if main_domain and hostname == main_domain.lower():
        return MainDomain()

    if "localhost" in hostname or "127.0.0.1" in hostname:
        return LocalDev()

    parts = hostname.split(".")
    # A subdomain needs at least three labels (club.lions-hub.de)
    if len(parts) < 3:
        return MainDomain()

    label = parts[0]
    if label in set(app_subdomains):
        return AppSubdomain(label)

    parsed = parse_public_subdomain(label)
    if parsed is None:
        return AppSubdomain(label)
    return ClubSubdomain(*parsed)
