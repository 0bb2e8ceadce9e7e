# landscape.py
from __future__ import annotations

from .host import Page
from .layout import LandscapeContext, LayoutMode, LayoutRescaler
from .touch_remap import TouchRemapper

__all__ = ["LandscapeSupport"]


class LandscapeSupport:
    """
    Page initialization for landscape fullscreen: owns the shared context,
    installs the touch listeners and wraps the runtime's layout function.
    """

    def __init__(self, page: Page):
        self.context = LandscapeContext(page)
        self.remapper = TouchRemapper(self.context)
        self.rescaler = LayoutRescaler(self.context)

    def install(self) -> bool:
        """Returns True the first time; repeated calls leave the page as it is."""
        installed = self.remapper.install_once()
        wrapped = self.rescaler.wrap()
        return installed or wrapped

    def mode(self) -> LayoutMode:
        return self.context.mode
