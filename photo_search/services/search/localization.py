"""Display names for filter categories."""
from typing import Dict

DEFAULT_LOCALE = "en"

_STRINGS: Dict[str, Dict[str, str]] = {
    "en": {"photos": "Photos", "videos": "Videos", "live_photos": "Live Photos"},
    "fr": {"photos": "Photos", "videos": "Vidéos", "live_photos": "Live Photos"},
    "de": {"photos": "Fotos", "videos": "Videos", "live_photos": "Live-Fotos"},
    "es": {"photos": "Fotos", "videos": "Vídeos", "live_photos": "Fotos en vivo"},
}


class Localizer:
    """Looks up category names, falling back to English."""

    def __init__(self, locale: str = DEFAULT_LOCALE):
        self.locale = locale if locale in _STRINGS else DEFAULT_LOCALE

    def _get(self, key: str) -> str:
        return _STRINGS[self.locale].get(key) or _STRINGS[DEFAULT_LOCALE][key]

    def photos(self) -> str:
        return self._get("photos")

    def videos(self) -> str:
        return self._get("videos")

    def live_photos(self) -> str:
        return self._get("live_photos")
