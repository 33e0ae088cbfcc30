"""Domain models for the fulfillment service layer.

Re-exports every public symbol so imports like
``from dialogbridge.core.service.models import WebhookRequest`` work.
"""

from .constants import *  # noqa: F401, F403
from .message import *  # noqa: F401, F403
from .payloads import *  # noqa: F401, F403
