from .deps import get_orchestrator  # noqa: F401
from .errors import CapabilityError, MalformedInputError, WebhookError  # noqa: F401
from .history import reconstruct_history  # noqa: F401
from .orchestrator import CompletionOrchestrator  # noqa: F401
