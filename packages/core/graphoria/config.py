"""Configuration management for Graphoria"""

import os
from typing import Dict

from graphoria.models.graph import HistoryOrder


class DiffConfig:
    """Configuration for the line diff engine"""

    # Above this many cells (|A| * |B|) the engine switches from the full
    # edit-distance table to the linear-space Myers algorithm
    DEFAULT_DP_THRESHOLD = 20000

    # Side-by-side rendering defaults
    DEFAULT_COLUMN_WIDTH = 60

    @classmethod
    def get_dp_threshold(cls) -> int:
        """
        Get the cell-count threshold for the dynamic-programming diff.

        Can be overridden via GRAPHORIA_DP_THRESHOLD environment variable.

        Returns:
            Maximum |A| * |B| handled by the DP variant (default: 20000)
        """
        try:
            value = int(os.getenv("GRAPHORIA_DP_THRESHOLD", cls.DEFAULT_DP_THRESHOLD))
        except ValueError:
            # If invalid value provided, return default
            return cls.DEFAULT_DP_THRESHOLD
        if value < 0:
            return cls.DEFAULT_DP_THRESHOLD
        return value

    @classmethod
    def get_column_width(cls) -> int:
        """Get the side-by-side column width (GRAPHORIA_COLUMN_WIDTH)"""
        try:
            value = int(os.getenv("GRAPHORIA_COLUMN_WIDTH", cls.DEFAULT_COLUMN_WIDTH))
        except ValueError:
            return cls.DEFAULT_COLUMN_WIDTH
        return value if value > 0 else cls.DEFAULT_COLUMN_WIDTH


class LayoutConfig:
    """Configuration for commit graph layout and rendering"""

    SUPPORTED_THEMES = ("dark", "light")

    DEFAULTS = {
        "history_order": HistoryOrder.ALL.value,
        "theme": "dark",
    }

    @classmethod
    def get_history_order(cls) -> HistoryOrder:
        """
        Get the history traversal mode.

        Priority hierarchy (from highest to lowest):
        1. GRAPHORIA_HISTORY_ORDER environment variable ("all" or "first_parent")
        2. Default from DEFAULTS dict ("all")

        Unknown values are ignored.
        """
        env_value = os.getenv("GRAPHORIA_HISTORY_ORDER")
        if env_value:
            try:
                return HistoryOrder(env_value)
            except ValueError:
                pass
        return HistoryOrder(cls.DEFAULTS["history_order"])

    @classmethod
    def get_theme(cls) -> str:
        """Get the lane colour theme (GRAPHORIA_THEME, default: dark)"""
        env_value = (os.getenv("GRAPHORIA_THEME") or "").strip().lower()
        if env_value in cls.SUPPORTED_THEMES:
            return env_value
        return cls.DEFAULTS["theme"]

    @classmethod
    def get_all_settings(cls) -> Dict[str, str]:
        """
        Get the effective layout configuration.

        Returns:
            Dictionary mapping setting names to their values
        """
        return {
            "history_order": cls.get_history_order().value,
            "theme": cls.get_theme(),
        }
