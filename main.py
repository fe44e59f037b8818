#!/usr/bin/env python3
"""Main entry point for the Rostrum debate trainer."""

import logging
import os
import sys

from rostrum.config.settings import get_default_config


def setup_logging(level: str = "INFO"):
    """Configure logging for the web server."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    # Suppress noisy third-party loggers
    logging.getLogger("openai").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def print_usage():
    """Print usage information for local development."""

    print("Rostrum Debate Trainer")
    print("=" * 40)
    print("Usage:")
    print("   python main.py --web     start the API server")
    print("   python main.py --help    show this message")
    print()
    print("Configuration is read from $ROSTRUM_CONFIG (default rostrum_config.json).")
    print("Set OPENAI_API_KEY, or use evaluator.provider = \"demo\" to run offline.")
    print()


def start_web_server():
    """Start the FastAPI web server."""

    config = get_default_config()
    setup_logging(config.system.log_level)

    import uvicorn

    from rostrum.web.api import app

    port = int(os.environ.get("PORT", 8000))

    print("🎤 Starting Rostrum Debate Trainer...")
    print(f"📡 API Documentation: http://localhost:{port}/docs")

    uvicorn.run(app, host="0.0.0.0", port=port, log_level="info", access_log=True)


def main():
    """Main entry point."""
    is_production = any([
        "PORT" in os.environ,
        os.environ.get("ENVIRONMENT") == "production"
    ])

    if is_production or "--web" in sys.argv:
        start_web_server()
    else:
        print_usage()


if __name__ == "__main__":
    main()
