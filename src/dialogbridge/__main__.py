"""Run the webhook server: ``python -m dialogbridge``."""

import uvicorn

from dialogbridge.configs.config import get_app_config
from dialogbridge.infra.logging import setup_logging


def main() -> None:
    config = get_app_config()
    setup_logging(config.logging)
    uvicorn.run(
        "dialogbridge.app:app",
        host=config.server.host,
        port=config.server.port,
        # Keep the handlers installed by setup_logging.
        log_config=None,
    )


if __name__ == "__main__":
    main()
