from .activity import ActivityLogRead, LogEntryRead
from .service import HealthRead, ServiceInfoRead
from .webhook import ManualTestResponse, WebhookAck, WebhookEventPayload

__all__ = [
    "ActivityLogRead",
    "LogEntryRead",
    "HealthRead",
    "ServiceInfoRead",
    "ManualTestResponse",
    "WebhookAck",
    "WebhookEventPayload",
]
