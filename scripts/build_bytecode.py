#!/usr/bin/env python3
"""Compile a build request JSON file into an executor payload.

The request has the same shape as the body of ``POST /bytecode``.

Usage:
    python scripts/build_bytecode.py request.json

    python scripts/build_bytecode.py request.json --verbose
"""

import argparse
import json
import logging
import sys
from pathlib import Path

import structlog
from pydantic import ValidationError

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from executor.builders import get_bytecode_builder  # noqa: E402
from executor.config import load_config_from_env  # noqa: E402
from executor.errors import BytecodeBuilderError  # noqa: E402
from executor.models.request import BuildRequest, BuildResponse  # noqa: E402
from executor.models.types import bytes_to_hex  # noqa: E402

logger = structlog.get_logger()


def main() -> int:
    parser = argparse.ArgumentParser(description="Compile a route into executor bytecode")
    parser.add_argument("request", type=Path, help="Path to a build request JSON file")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full response (bytecode + executor address) as JSON",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    args = parser.parse_args()

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )

    if not args.request.exists():
        logger.error("request_file_not_found", path=str(args.request))
        return 1

    try:
        with open(args.request) as f:
            request = BuildRequest.model_validate(json.load(f))
    except (json.JSONDecodeError, ValidationError) as err:
        logger.error("invalid_request", path=str(args.request), error=str(err))
        return 1

    try:
        builder = get_bytecode_builder(request.executor, load_config_from_env())
        bytecode = builder.build_bytecode(
            request.price_route,
            request.exchange_params,
            request.sender,
            request.weth_call_data,
        )
    except BytecodeBuilderError as err:
        logger.error("bytecode_build_failed", error_type=type(err).__name__, error=str(err))
        return 1

    if args.json:
        response = BuildResponse(
            bytecode=bytes_to_hex(bytecode),
            executor=request.executor,
            executor_address=builder.get_address(),
        )
        print(response.model_dump_json(by_alias=True, indent=2))
    else:
        print(bytes_to_hex(bytecode))
    return 0


if __name__ == "__main__":
    sys.exit(main())
