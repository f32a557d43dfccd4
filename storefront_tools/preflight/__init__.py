from .site_checker import SiteChecker, SiteStatus

__all__ = [
    "SiteChecker",
    "SiteStatus",
]
