from typing import List, Optional, Tuple

from .models import NotificationPreferences

# Preference flag and its label, in display order.
NOTIFICATION_LABELS: Tuple[Tuple[str, str], ...] = (
    ("email_notifications", "Email notifications"),
    ("push_notifications", "Push notifications"),
    ("task_reminders", "Task reminders"),
    ("calendar_alerts", "Calendar alerts"),
    ("chat_messages", "Chat messages"),
    ("request_updates", "Request updates"),
)

def enabled_notification_labels(preferences: Optional[NotificationPreferences]) -> List[str]:
    """Labels of the enabled notification channels. Preferences that are not loaded yet give none."""
    if preferences is None:
        return []
    return [label for flag, label in NOTIFICATION_LABELS if getattr(preferences, flag)]

def has_enabled_notifications(preferences: Optional[NotificationPreferences]) -> bool:
    return len(enabled_notification_labels(preferences)) > 0
