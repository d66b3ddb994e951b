"""Theme catalog — named syntax colour schemes backed by pygments styles."""

from __future__ import annotations

from typing import List, Type

from pygments.style import Style as PygmentsStyle
from pygments.styles import get_all_styles, get_style_by_name
from pygments.util import ClassNotFound


class ThemeError(LookupError):
    """Raised when a theme name is not in the catalog."""


class ThemeCatalog:
    """Lookup of syntax themes by name."""

    def names(self) -> List[str]:
        return sorted(get_all_styles())

    def load(self, name: str) -> Type[PygmentsStyle]:
        try:
            return get_style_by_name(name)
        except ClassNotFound as exc:
            raise ThemeError(f"Invalid theme: '{name}'") from exc
