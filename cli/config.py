"""Configuration management for the CLI tool."""

from pydantic import BaseModel, Field


class CLIConfig(BaseModel):
    """CLI configuration settings."""

    host: str = Field(
        default="localhost",
        description="Server host",
    )
    port: int = Field(
        default=3000,
        description="Server port",
    )
    webhook_path: str = Field(
        default="/dialogflow-webhook",
        description="API path for the fulfillment webhook",
    )
    project: str = Field(
        default="dialogbridge-cli",
        description="Project id used to build session resource names",
    )

    @property
    def base_url(self) -> str:
        """Get the base URL for the API."""
        return f"http://{self.host}:{self.port}"

    @property
    def webhook_url(self) -> str:
        """Get the full URL for the webhook endpoint."""
        return f"{self.base_url}{self.webhook_path}"

    def session_name(self, session_id: str) -> str:
        """Build a platform-style session resource name."""
        return f"projects/{self.project}/agent/sessions/{session_id}"
