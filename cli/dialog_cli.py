"""Main CLI loop simulating the dialogue platform side of a conversation."""

import logging
import sys
import uuid
from typing import TextIO

import httpx

from .client import WebhookClient, reply_texts
from .config import CLIConfig
from .contexts import ContextStore

logger = logging.getLogger(__name__)

_EXIT_COMMANDS = ("exit", "quit", "q")
_RESET_COMMAND = "/reset"
_CONTEXTS_COMMAND = "/contexts"


class DialogCLI:
    """Interactive CLI that plays the platform against the webhook."""

    def __init__(
        self,
        config: CLIConfig,
        input_stream: TextIO = sys.stdin,
        output_stream: TextIO = sys.stdout,
        session_id: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the CLI.

        Parameters
        ----------
        config
            CLI configuration.
        input_stream
            Input stream for user input (default: stdin).
        output_stream
            Output stream for responses (default: stdout).
        session_id
            Session id to use; a random one is generated when omitted.
        transport
            Optional httpx transport, used by tests.
        """
        self.config = config
        self.input_stream = input_stream
        self.output_stream = output_stream
        self.session = config.session_name(session_id or uuid.uuid4().hex)
        self.contexts = ContextStore()
        self.client = WebhookClient(config, transport=transport)

    async def run(self) -> None:
        """Run the interactive CLI loop."""
        try:
            self._print_welcome()
            while True:
                try:
                    query = self._get_user_input()
                    if not query:
                        continue

                    command = query.strip().lower()
                    if command in _EXIT_COMMANDS:
                        self._print("Goodbye!\n")
                        break
                    if command == _RESET_COMMAND:
                        self.contexts.clear()
                        self._print("Contexts cleared.\n\n")
                        continue
                    if command == _CONTEXTS_COMMAND:
                        for ctx in self.contexts.active():
                            self._print(f"  {ctx}\n")
                        self._print("\n")
                        continue

                    await self.process_turn(query)

                except KeyboardInterrupt:
                    self._print("\n\nInterrupted. Use 'exit' or 'quit' to exit.\n")
                except EOFError:
                    self._print("\nGoodbye!\n")
                    break
        finally:
            await self.client.close()

    async def process_turn(self, query: str) -> list[str]:
        """Send one utterance, apply returned contexts and print the reply."""
        response = await self.client.send_turn(
            self.session, query, self.contexts.active()
        )
        self.contexts.advance(response.get("outputContexts"))

        texts = reply_texts(response)
        for text in texts:
            self._print(f"\n{text}\n")
        self._print("\n")
        return texts

    def _get_user_input(self) -> str:
        """Get user input from the input stream."""
        self._print("> ")
        line = self.input_stream.readline()
        if not line:
            raise EOFError
        return line.rstrip("\n\r")

    def _print_welcome(self) -> None:
        self._print("dialogbridge CLI - platform simulator\n")
        self._print(f"Connected to: {self.config.webhook_url}\n")
        self._print(f"Session: {self.session}\n")
        self._print(
            "Type your message and press Enter. '/contexts' shows active "
            "contexts, '/reset' clears them, 'exit' quits.\n\n"
        )

    def _print(self, text: str) -> None:
        """Print text to output stream."""
        self.output_stream.write(text)
        self.output_stream.flush()


async def main(
    host: str = "localhost",
    port: int = 3000,
    webhook_path: str = "/dialogflow-webhook",
    session_id: str | None = None,
    debug: bool = False,
) -> None:
    """Main entry point for the CLI."""
    log_level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    config = CLIConfig(host=host, port=port, webhook_path=webhook_path)
    cli = DialogCLI(config, session_id=session_id)
    await cli.run()
