#!/usr/bin/env python3
"""
Start the Simile Board API with uvicorn.

The server process reads its own settings from ``.env`` and
``.env.<ENVIRONMENT>``; this script only selects the environment and
forwards command line overrides.
"""

import os
import sys
import argparse

from app.config.loader import ConfigLoader, load_config_for_environment
from app.config.settings import Environment


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Simile Board API Server")
    parser.add_argument(
        "--env",
        choices=[e.value for e in Environment],
        help="Environment whose .env.<env> file is loaded (default: $ENVIRONMENT)",
    )
    parser.add_argument("--host", help="Bind address")
    parser.add_argument("--port", type=int, help="Bind port")
    parser.add_argument("--workers", type=int, help="Worker processes, ignored with --reload")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    parser.add_argument(
        "--create-sample",
        metavar="ENV",
        help="Write .env.<ENV>.sample and exit",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.create_sample:
        try:
            path = ConfigLoader.create_sample_env_file(args.create_sample)
        except (OSError, ValueError) as e:
            print(f"✗ Could not write sample configuration: {e}")
            sys.exit(1)
        print(f"✓ Wrote {path}")
        return

    try:
        settings = load_config_for_environment(args.env)
    except ValueError as e:
        print(f"✗ Invalid configuration: {e}")
        sys.exit(1)

    # Worker processes import app.main and load the same env files from this
    os.environ["ENVIRONMENT"] = settings.environment.value

    host = args.host or settings.host
    port = args.port or settings.port
    reload = args.reload or settings.reload
    workers = 1 if reload else (args.workers or settings.workers)

    print(
        f"🚀 {settings.app_name} v{settings.app_version} [{settings.environment.value}] "
        f"on {host}:{port}, pin limit {settings.pin_limit}"
    )

    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=settings.log_level.value.lower(),
    )


if __name__ == "__main__":
    main()
