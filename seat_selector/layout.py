from seat_selector.config import MOBILE_MAX_WIDTH, TABLET_MAX_WIDTH
from seat_selector.models.view import LayoutResponse

LAYOUT_COPY = {
    "desktop": (
        "Desktop layout · full seat map with side controls.",
        "Click seats to select. Use the side buttons to clear or continue.",
    ),
    "tablet": (
        "Tablet layout · condensed map and stacked controls.",
        "Tap seats to select. Summary appears beside the map.",
    ),
    "mobile": (
        "Mobile layout · sector view with larger touch targets and bottom booking bar.",
        "Tap a sector (Left, Center, Right) to zoom, then tap seats to select.",
    ),
}


def get_layout_mode(width: int) -> str:
    if width <= MOBILE_MAX_WIDTH:
        return "mobile"
    if width <= TABLET_MAX_WIDTH:
        return "tablet"
    return "desktop"


def describe_layout(width: int) -> LayoutResponse:
    """Guidance copy for a viewport width; derives text only, never touches state"""
    mode = get_layout_mode(width)
    label, hint = LAYOUT_COPY[mode]
    return LayoutResponse(mode=mode, label=label, hint=hint)
