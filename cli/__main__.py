"""Entry point for running the CLI as a module."""

import argparse
import asyncio
import sys

from .dialog_cli import main


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Interactive platform simulator for the dialogbridge webhook",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--host",
        type=str,
        default="localhost",
        help="Server host (default: localhost)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=3000,
        help="Server port (default: 3000)",
    )
    parser.add_argument(
        "--webhook-path",
        type=str,
        default="/dialogflow-webhook",
        help="Webhook path (default: /dialogflow-webhook)",
    )
    parser.add_argument(
        "--session",
        type=str,
        default=None,
        help="Session id to reuse (default: random)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (shows request payloads)",
    )

    return parser.parse_args()


def cli_entry() -> None:
    """CLI entry point."""
    args = parse_args()

    try:
        asyncio.run(
            main(
                host=args.host,
                port=args.port,
                webhook_path=args.webhook_path,
                session_id=args.session,
                debug=args.debug,
            )
        )
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == "__main__":
    cli_entry()
