"""Run the task list service under uvicorn."""

import argparse
import logging

import uvicorn

from mytasks.config import get_settings
from mytasks.logging_setup import setup_logging

logger = logging.getLogger("mytasks")


def create_arg_parser(host: str, port: int) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mytasks", description="Personal task list service")
    parser.add_argument("--host", default=host, help=f"Host to bind to (default: {host})")
    parser.add_argument("--port", type=int, default=port, help=f"Port to run on (default: {port})")
    return parser


def main(argv=None) -> None:
    settings = get_settings()
    args = create_arg_parser(settings.host, settings.port).parse_args(argv)
    setup_logging(console_level=settings.log_level, log_file=settings.log_file)

    logger.info(
        "Starting on http://%s:%s (redis %s:%s db %s, key %r)",
        args.host, args.port, settings.redis_host, settings.redis_port, settings.redis_db, settings.tasks_key,
    )
    uvicorn.run("mytasks.main:app", host=args.host, port=args.port, log_config=None)


if __name__ == "__main__":
    main()
