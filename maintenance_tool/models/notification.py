"""Push notification payload model"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .config import NotificationDefaults


@dataclass
class Notification:
    """User-visible notification built from a push message payload"""

    title: str
    body: str
    icon: str

    @classmethod
    def from_payload(cls,
                     payload: Optional[Dict[str, Any]],
                     defaults: Optional[NotificationDefaults] = None) -> 'Notification':
        """Build a notification, falling back to defaults for missing fields

        Args:
            payload: Inbound message, e.g. ``{"notification": {"title": ..., "body": ...}}``
            defaults: Fallback title, body and icon

        Returns:
            Notification ready to display
        """
        defaults = defaults or NotificationDefaults()
        content = (payload or {}).get("notification") or {}

        return cls(
            title=content.get("title") or defaults.title,
            body=content.get("body") or defaults.body,
            icon=defaults.icon,
        )

    def to_options(self) -> Dict[str, str]:
        """Options dict in the shape the browser notification API expects"""
        return {"body": self.body, "icon": self.icon}
