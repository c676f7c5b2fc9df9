"""Style and theme utilities"""
from typing import Dict


# Color scheme
COLORS = {
    "primary": "#3b82f6",
    "header_bg": "#f9fafb",
    "header_text": "#6b7280",
    "cell_text": "#6b7280",
    "border": "#e5e7eb",
    "muted": "#9ca3af",
    "danger": "#b91c1c",
}


# Table styling
TABLE_STYLE = {
    "cell_padding": "12px 16px",
    "header_font_size": "0.75rem",
    "cell_font_size": "0.875rem",
}


def get_table_style() -> Dict[str, str]:
    """Get default table styling configuration.

    Returns:
        Dictionary of style parameters
    """
    return TABLE_STYLE.copy()


def get_color(name: str) -> str:
    """Get color by name.

    Args:
        name: Color name

    Returns:
        Hex color string
    """
    return COLORS.get(name, "#000000")
