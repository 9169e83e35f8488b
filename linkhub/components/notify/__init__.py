"""
Notify component - User notifications with auto-dismiss.
"""

from .component import DEFAULT_DURATION_SECONDS, NOTIFICATION_KINDS, NotificationCenter
from .models import Notification
from .ports import NotificationSink, NotifierPort

__all__ = [
    "NotificationCenter",
    "Notification",
    "NotificationSink",
    "NotifierPort",
    "NOTIFICATION_KINDS",
    "DEFAULT_DURATION_SECONDS",
]
