"""Role and platform field constants."""

# ---------------------------------------------------------------------------
# Chat roles, as sent to the completion API.
# ---------------------------------------------------------------------------

ROLE_SYSTEM = "system"
ROLE_USER = "user"
ROLE_ASSISTANT = "assistant"

# ---------------------------------------------------------------------------
# Context parameter keys echoed back by the platform every turn.
# ---------------------------------------------------------------------------

PARAM_LAST_AI_RESPONSE = "lastAIResponse"
PARAM_LAST_USER_QUERY = "lastUserQuery"

CONTEXTS_PATH_SEGMENT = "contexts"
