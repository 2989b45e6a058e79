"""
Public Website Use Cases
"""

from .dtos import PublicPageResponse, PublicSite
from .get_public_page_use_case import GetPublicPageUseCase, PublicPage

__all__ = ["GetPublicPageUseCase", "PublicPage", "PublicPageResponse", "PublicSite"]
