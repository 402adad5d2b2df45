"""Theme and style constants for the GUI.

All GUI components should reference these constants to maintain consistent styling.

Constants:
    COLORS: Color palette for buttons, text, and status messages
    FONTS: Font family, size, and weight configurations
    PADDING: Spacing values for margins and padding
    WINDOW_SIZES: Default and minimum window dimensions
    STATUS_COLORS: Text color per status message type
"""

from ..core.copy_session import MessageType

COLORS = {
    "primary": "#b8860b",        # Copy button when enabled (goldenrod)
    "primary_hover": "#8b6508",  # Copy button hover state
    "success": "#ffd700",        # Successful copy (gold)
    "danger": "#ff8c00",         # Errors and disabled copy button (dark orange)
    "danger_hover": "#cc7000",
    "muted": "#6c757d",          # Disabled/secondary text (gray)
    "bar": ("#3d3d3d", "#202020"),
}

# Font configurations - tuple format: (family, size, weight)
FONTS = {
    "title": ("Segoe UI", 18, "bold"),
    "heading": ("Segoe UI", 14, "bold"),
    "body": ("Segoe UI", 12),
    "small": ("Segoe UI", 10),
}

# Padding and spacing values in pixels
PADDING = {
    "small": 10,
    "medium": 18,
    "large": 30,
}

# Window sizes - tuple format: (width, height)
WINDOW_SIZES = {
    "main": (720, 420),
    "config_dialog": (620, 380),
    "min_main": (620, 380),
}

STATUS_COLORS = {
    MessageType.ERROR: COLORS["danger"],
    MessageType.INFO: ("#1a1a1a", "#ffffff"),
    MessageType.SUCCESS: COLORS["success"],
}
