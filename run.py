#!/usr/bin/env python
# =============================================================================
# Application Runner
# =============================================================================
"""
Entry point script for running the LinkedIn Job Counter service.

Host and port default to the API_HOST and PORT settings (port 3000 unless set).

Usage:
    python run.py
    python run.py --reload
    python run.py --host 0.0.0.0 --port 8080
"""

import argparse
import asyncio

from linkedin_job_counter.config import get_settings


async def run_server(host: str, port: int, reload: bool) -> None:
    """
    Run the uvicorn server.

    Args:
        host: Host to bind to.
        port: Port to bind to.
        reload: Enable auto-reload.
    """
    import uvicorn

    config = uvicorn.Config(
        "linkedin_job_counter.api.main:app",
        host=host,
        port=port,
        reload=reload,
    )
    server = uvicorn.Server(config)
    await server.serve()


def main() -> None:
    """
    Main entry point that parses arguments and starts uvicorn.
    """
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Run the LinkedIn Job Counter API")
    parser.add_argument("--host", default=settings.api_host, help="Host to bind to")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to bind to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    args = parser.parse_args()

    asyncio.run(run_server(args.host, args.port, args.reload))


if __name__ == "__main__":
    main()
