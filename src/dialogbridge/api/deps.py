"""``Annotated`` dependency aliases used by the route modules.

Override the underlying factory in tests with
``app.dependency_overrides[get_orchestrator] = ...``.
"""

from typing import Annotated

from fastapi import Depends

from dialogbridge.core.service import CompletionOrchestrator, get_orchestrator

OrchestratorDep = Annotated[CompletionOrchestrator, Depends(get_orchestrator)]
