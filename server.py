#!/usr/bin/env python3
"""Neon Snake game server - FastAPI + uvicorn"""

import argparse
import logging

import uvicorn

from snake_arcade.config import load_settings


def main(argv=None):
    settings = load_settings()
    parser = argparse.ArgumentParser(description="Run the snake game server.")
    parser.add_argument("--host", default=settings.host)
    parser.add_argument("--port", type=int, default=settings.port)
    parser.add_argument("--log-level", default=settings.log_level)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    print(f"Snake server starting on http://{args.host}:{args.port}")
    uvicorn.run(
        "snake_arcade.main:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        log_level=args.log_level.lower(),
    )


if __name__ == "__main__":
    main()
