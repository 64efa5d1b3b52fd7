"""
Palette / banner color sync between the editor and the stored preferences.

The server record is authoritative. ``PaletteSync.mount`` pulls it into the
theme; ``PaletteSync.change`` applies locally first and then writes through.
A failed write is reported in the returned ``SyncResult`` and logged, and
the local value is kept.
"""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from accounts.themes import DEFAULT_BANNER_COLOR, DEFAULT_PALETTE

from .client import ResumeApiClient, ResumeApiError

logger = logging.getLogger(__name__)


@dataclass
class SyncResult:
    ok: bool
    error: Optional[str] = None


class ThemeContext:
    """
    Current palette and banner color, with change listeners.
    """

    def __init__(self, palette: str = DEFAULT_PALETTE.value, banner_color: str = DEFAULT_BANNER_COLOR.value):
        self.palette = palette
        self.banner_color = banner_color
        self._listeners: List[Callable[['ThemeContext'], None]] = []

    def subscribe(self, listener: Callable[['ThemeContext'], None]) -> Callable[[], None]:
        """Register ``listener``; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def apply(self, palette: Optional[str] = None, banner_color: Optional[str] = None) -> bool:
        changed = False
        if palette and palette != self.palette:
            self.palette = palette
            changed = True
        if banner_color and banner_color != self.banner_color:
            self.banner_color = banner_color
            changed = True
        if changed:
            for listener in list(self._listeners):
                listener(self)
        return changed


class PaletteSync:
    def __init__(self, client: ResumeApiClient, theme: Optional[ThemeContext] = None):
        self.client = client
        self.theme = theme or ThemeContext()

    def mount(self) -> SyncResult:
        """Pull the stored preference into the theme."""
        try:
            preferences = self.client.get_preferences()
        except ResumeApiError as exc:
            logger.warning("Could not load palette preference: %s", exc.message)
            return SyncResult(ok=False, error=exc.message)

        self.theme.apply(preferences.get('palette'), preferences.get('banner_color'))
        return SyncResult(ok=True)

    def change(self, palette: Optional[str] = None, banner_color: Optional[str] = None) -> SyncResult:
        """Apply locally, then write through to the server. Never rolls back."""
        self.theme.apply(palette, banner_color)

        changes = {}
        if palette:
            changes['palette'] = palette
        if banner_color:
            changes['banner_color'] = banner_color
        if not changes:
            return SyncResult(ok=True)

        try:
            self.client.patch_preferences(changes)
        except ResumeApiError as exc:
            logger.warning("Could not save palette preference %s: %s", changes, exc.message)
            return SyncResult(ok=False, error=exc.message)
        return SyncResult(ok=True)
