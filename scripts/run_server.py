#!/usr/bin/env python3
import argparse
import logging
import os
import sys

import uvicorn

# scripts/run_server.py -> repo root is parent of scripts/
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from app.core import config  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the user search server.")
    parser.add_argument("--host", default=config.server_host())
    parser.add_argument("--port", type=int, default=config.server_port())
    parser.add_argument("--dataset", default=None, help="Path to the users XML file")
    parser.add_argument("--reload", action="store_true")
    args = parser.parse_args()

    if args.dataset:
        os.environ["SEARCH_DATASET_PATH"] = args.dataset

    logging.basicConfig(
        level=config.log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    uvicorn.run(
        "app.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=config.log_level().lower(),
    )


if __name__ == "__main__":
    main()
