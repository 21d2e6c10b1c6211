"""
Pattern Catalog

Core bundle patterns and keyword-to-file mappings used by the signal
scorer. Tuned for the restaurant website templates, whose file layout is
predictable (pages/, components/Hero.tsx, data/menu.json, ...).

Matching rules:
- Path patterns are plain substrings, case-sensitive.
- Keywords are matched against the lowercased query by substring
  containment, so "backgrounds" also fires "background".
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple


# Files that are relevant to nearly any edit: entry points, layout,
# global styles and template data.
CORE_PATTERNS: Tuple[str, ...] = (
    "pages/",
    "App.tsx",
    "main.tsx",
    "index.css",
    "styles/",
    "data/",
    "Layout",
    "Footer",
)

_STYLE = ("index.css", "styles/", "tailwind.config")
_PALETTE = ("index.css", "styles/", "tailwind.config", "guidelines/", "theme")
_MENU = ("Menu", "MenuPreview", "data/")
_NAV = ("Layout", "Navbar", "Nav", "Header")
_MEDIA = ("Hero", "Gallery", "About")
_RESERVATION = ("Reservation", "Book", "CTA")
_SOCIAL = ("Footer", "Social")
_TEXT = ("Hero", "About", "data/")
_TAGLINE = ("Hero", "Home")

KEYWORD_MAP: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    # Navigation and header
    "header": ("Hero", "Layout", "Navbar", "Header"),
    "hero": ("Hero", "Home"),
    "menu": _MENU,
    "navigation": _NAV,
    "nav": _NAV,
    "navbar": ("Layout", "Navbar", "Header"),
    "logo": ("Layout", "Hero", "Header", "Navbar"),

    "footer": ("Footer",),

    # About
    "about": ("About", "Story"),
    "story": ("Story", "About"),

    # Styling
    "color": _PALETTE,
    "colour": _PALETTE,
    "font": _STYLE + ("typography",),
    "style": _STYLE,
    "theme": ("styles/", "guidelines/", "tailwind.config", "theme"),
    "background": ("index.css", "styles/", "Hero", "Layout"),
    "css": _STYLE,

    # UI elements
    "button": ("Hero", "ui/Button", "Button", "CTA"),
    "headline": ("Hero", "Home"),
    "title": ("Hero", "Home", "Layout"),
    "banner": ("Hero", "Banner"),
    "image": ("Hero", "Gallery", "About", "Menu"),
    "photo": _MEDIA,
    "picture": _MEDIA,

    # Menu and food
    "dish": _MENU,
    "dishes": _MENU,
    "food": _MENU,
    "price": _MENU,
    "prices": _MENU,
    "item": _MENU,
    "items": _MENU,
    "category": _MENU,
    "categories": _MENU,

    # Contact and info
    "contact": ("Footer", "Contact", "data/"),
    "hours": ("Footer", "Hours", "data/"),
    "address": ("Footer", "Contact", "data/"),
    "phone": ("Footer", "Contact", "data/"),
    "email": ("Footer", "Contact", "data/"),
    "location": ("Footer", "Contact", "Map", "data/"),
    "map": ("Map", "Contact", "Footer"),

    # Features and services
    "feature": ("Feature", "Features"),
    "features": ("Feature", "Features"),
    "service": ("Feature", "Service", "Services"),
    "services": ("Feature", "Service", "Services"),

    "gallery": ("Gallery", "Photos"),
    "photos": ("Gallery", "Photos"),

    "reservation": _RESERVATION,
    "reservations": _RESERVATION,
    "book": _RESERVATION,
    "booking": _RESERVATION,

    "social": _SOCIAL,
    "instagram": _SOCIAL,
    "facebook": _SOCIAL,
    "twitter": _SOCIAL,

    # Layout
    "layout": ("Layout", "App"),
    "page": ("pages/", "Home", "App"),
    "section": ("Hero", "About", "Menu", "Feature", "Footer"),

    # Text content
    "text": _TEXT,
    "content": _TEXT,
    "copy": _TEXT,
    "description": ("Hero", "About", "Menu", "data/"),
    "tagline": _TAGLINE,
    "slogan": _TAGLINE,

    # Home
    "home": ("Home", "pages/", "index"),
    "landing": ("Home", "pages/", "Hero"),
    "main": ("Home", "main.tsx", "App"),
})


@dataclass(frozen=True)
class PatternCatalog:
    """
    Read-only pattern tables injected into the scorer.

    Templates with a different layout pass their own catalog to
    SignalScorer instead of editing the defaults.
    """
    core_patterns: Tuple[str, ...] = CORE_PATTERNS
    keyword_map: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: KEYWORD_MAP)

    def is_core(self, path: str) -> bool:
        return any(pattern in path for pattern in self.core_patterns)

    def keywords_in(self, query: str) -> Tuple[str, ...]:
        """Keywords contained in `query`, in catalog order."""
        query_lower = query.lower()
        return tuple(kw for kw in self.keyword_map if kw in query_lower)

    def matches_keyword(self, keyword: str, path: str) -> bool:
        return any(pattern in path for pattern in self.keyword_map.get(keyword, ()))


DEFAULT_CATALOG = PatternCatalog()
