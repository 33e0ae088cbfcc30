"""E2E test configuration and fixtures.

These tests talk to a real completion API and are skipped unless
``OPENAI_API_KEY`` is set.
"""

import multiprocessing
import os
import time
from typing import Generator

import httpx
import pytest
import uvicorn


def is_server_running(port: int) -> bool:
    """Check if a server is running on the specified port by checking the /health endpoint."""
    try:
        response = httpx.get(f"http://localhost:{port}/health", timeout=2)
        return response.status_code == 200
    except (httpx.RequestError, httpx.ConnectTimeout):
        return False


@pytest.fixture(scope="session")
def server_port() -> int:
    """Get the port for the test server."""
    return int(os.environ.get("DIALOGBRIDGE_E2E_PORT", "3100"))


@pytest.fixture(scope="session")
def ensure_api_key() -> None:
    if not os.environ.get("OPENAI_API_KEY"):
        pytest.skip("OPENAI_API_KEY is not set; skipping e2e tests.")


def run_server(port: int) -> None:
    """Run the uvicorn server in a separate process."""
    uvicorn.run("dialogbridge.app:app", host="127.0.0.1", port=port, log_level="info")


@pytest.fixture(scope="session")
def webhook_server(ensure_api_key: None, server_port: int) -> Generator[int, None, None]:
    """
    A session-scoped fixture that starts the webhook server if it's not already running.
    It tears down the server process after all tests in the session are complete.
    """
    if is_server_running(server_port):
        yield server_port
        return

    process = multiprocessing.Process(target=run_server, args=(server_port,))
    process.start()

    server_started = False
    for _ in range(30):
        if is_server_running(server_port):
            server_started = True
            break
        time.sleep(1)

        if not process.is_alive():
            pytest.fail("Server process crashed during startup.", pytrace=False)

    if not server_started:
        process.terminate()
        pytest.fail(
            "Webhook server did not start within the timeout period.", pytrace=False
        )

    yield server_port

    process.terminate()
    process.join(timeout=10)
    if process.is_alive():
        process.kill()
        process.join()


@pytest.fixture
def base_url(webhook_server: int) -> str:
    """Base URL for the webhook API."""
    return f"http://localhost:{webhook_server}"
