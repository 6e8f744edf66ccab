"""Clients for both APIs: hardcoded classic calls vs link-following navigation."""

STATUS_LABELS = {
    "pending": "Pending",
    "preparing": "Preparing",
    "baking": "In the oven",
    "ready": "Ready",
    "delivered": "Delivered",
    "cancelled": "Cancelled",
}


def status_label(status: str) -> str:
    return STATUS_LABELS.get(status, status)
