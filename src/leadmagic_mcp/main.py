"""Server process entry point — stdio transport + graceful shutdown."""

from __future__ import annotations

import asyncio
import signal
import sys

from mcp.server import Server
from mcp.server.stdio import stdio_server
from pydantic import ValidationError

from leadmagic_mcp import SERVER_NAME, __version__
from leadmagic_mcp.common.logging import get_logger, setup_logging
from leadmagic_mcp.common.settings import Settings, get_settings
from leadmagic_mcp.integrations.leadmagic import LeadMagicClient
from leadmagic_mcp.server import LeadMagicMCPServer

log = get_logger(__name__)

API_KEYS_URL = "https://app.leadmagic.io/dashboard/api-keys"
PROJECT_URL = "https://github.com/LeadMagic/leadmagic-mcp"
SHUTDOWN_GRACE_SECONDS = 5.0

MISSING_KEY_HELP = f"""
LeadMagic API key not found!

The LEADMAGIC_API_KEY environment variable is required to run the server.

Set it in one of these ways:

  1. Environment variable:
       export LEADMAGIC_API_KEY=your-api-key-here

  2. .env file in the working directory:
       echo "LEADMAGIC_API_KEY=your-api-key-here" > .env

  3. The "env" block of your MCP client's server configuration.

Get your API key: {API_KEYS_URL}
Need help? {PROJECT_URL}
"""


async def _run_stdio(server: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def _install_signal_handlers(shutdown: asyncio.Event) -> None:
    # Unix only; Windows falls back to KeyboardInterrupt.
    if sys.platform == "win32":
        return

    def _handle_signal(sig: signal.Signals) -> None:
        log.info("shutdown_signal", signal=sig.name)
        shutdown.set()

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGTERM, signal.SIGINT):
        loop.add_signal_handler(sig, _handle_signal, sig)


async def serve(settings: Settings) -> None:
    """Run the MCP server on stdio until the client disconnects or a signal arrives."""
    config = settings.client_config()
    shutdown = asyncio.Event()
    _install_signal_handlers(shutdown)

    async with LeadMagicClient(config) as client:
        app = LeadMagicMCPServer(client)
        log.info(
            "server_started",
            server=SERVER_NAME,
            version=__version__,
            api_key=config.masked_api_key,
            base_url=config.base_url,
            tools=len(app.registry),
        )

        serve_task = asyncio.create_task(_run_stdio(app.server))
        shutdown_task = asyncio.create_task(shutdown.wait())
        done, _ = await asyncio.wait(
            {serve_task, shutdown_task}, return_when=asyncio.FIRST_COMPLETED
        )
        shutdown_task.cancel()

        if serve_task in done:
            serve_task.result()
        else:
            log.info("server_shutting_down")
            serve_task.cancel()
            # The stdin reader may sit in a worker thread until the next line.
            await asyncio.wait({serve_task}, timeout=SHUTDOWN_GRACE_SECONDS)

    log.info("server_stopped")


def run() -> None:
    """Console-script entry point."""
    try:
        settings = get_settings()
    except ValidationError as exc:
        setup_logging()
        print(f"Invalid configuration:\n{exc}", file=sys.stderr)
        sys.exit(1)

    setup_logging("DEBUG" if settings.debug else settings.log_level)

    if not settings.leadmagic_api_key.strip():
        print(MISSING_KEY_HELP, file=sys.stderr)
        sys.exit(1)

    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        log.info("server_interrupted")
    except ValidationError as exc:
        print(f"Invalid configuration:\n{exc}", file=sys.stderr)
        sys.exit(1)
    except Exception as exc:
        log.error("server_failed", error=str(exc))
        print(f"\nFailed to start {SERVER_NAME}: {exc}", file=sys.stderr)
        print(f"Need help? Visit: {PROJECT_URL}/issues", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    run()
