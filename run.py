#!/usr/bin/env python3
"""
Simple Banking API Entry Point

Starts the FastAPI server with a fresh in-memory ledger.
"""

import sys

import uvicorn

from simple_banking.api import create_app
from simple_banking.config import get_config
from simple_banking.ledger import Ledger
from simple_banking.logging_config import setup_logging


def main():
    config = get_config()
    setup_logging(config.log_level, fmt=config.log_format)

    print("🏦 Starting Simple Banking API...")
    print("💰 All amounts use Decimal precision")
    print(f"🌐 API available at: http://{config.api_host}:{config.api_port}")
    print(f"📚 Documentation at: http://{config.api_host}:{config.api_port}/docs")
    print()

    try:
        uvicorn.run(
            create_app(Ledger(config)),
            host=config.api_host,
            port=config.api_port,
            access_log=False
        )
    except KeyboardInterrupt:
        print("\n👋 Shutting down Simple Banking API...")
    except Exception as e:
        print(f"❌ Error starting server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
