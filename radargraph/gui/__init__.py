"""GUI package - uses lazy imports to avoid triggering Kivy initialization."""

from __future__ import annotations

from typing import Any

__all__ = ["RadarGraphWidget", "KivySurface"]


def __getattr__(name: str) -> Any:
    """Lazy load Kivy-dependent classes on first access."""
    if name == "RadarGraphWidget":
        from radargraph.gui.radar_graph import RadarGraphWidget

        return RadarGraphWidget
    if name == "KivySurface":
        from radargraph.gui.kivy_surface import KivySurface

        return KivySurface
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
