"""Client-side context store mimicking the platform's context echo.

Every turn each active context loses one unit of lifespan and expires
at zero. Contexts returned by the webhook replace any active context of
the same name; a returned lifespan of zero deletes it.
"""

import copy
from typing import Any

_KEY_NAME = "name"
_KEY_LIFESPAN = "lifespanCount"


class ContextStore:
    """Active contexts of one simulated conversation."""

    def __init__(self) -> None:
        self._contexts: dict[str, dict[str, Any]] = {}

    def __len__(self) -> int:
        return len(self._contexts)

    def active(self) -> list[dict[str, Any]]:
        """Contexts to send with the next request, in insertion order."""
        return [copy.deepcopy(ctx) for ctx in self._contexts.values()]

    def advance(self, returned: list[dict[str, Any]] | None) -> None:
        """Age the active contexts by one turn, then apply *returned*."""
        for name, ctx in list(self._contexts.items()):
            remaining = int(ctx.get(_KEY_LIFESPAN, 0)) - 1
            if remaining <= 0:
                del self._contexts[name]
            else:
                ctx[_KEY_LIFESPAN] = remaining

        for ctx in returned or []:
            name = ctx.get(_KEY_NAME)
            if not name:
                continue
            # Replace-by-name moves the context to the end, keeping the
            # most recently written context last.
            self._contexts.pop(name, None)
            if int(ctx.get(_KEY_LIFESPAN, 0)) > 0:
                self._contexts[name] = copy.deepcopy(ctx)

    def clear(self) -> None:
        self._contexts.clear()
