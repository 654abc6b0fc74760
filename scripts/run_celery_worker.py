"""
Start a Celery worker that runs queued schedule generation tasks.
"""

import argparse
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.celery_app import celery_app
from app.core.config import CELERY_CONCURRENCY, LOG_LEVEL
from app.core.logging_config import setup_logging


def worker_argv(concurrency: int, loglevel: str) -> list:
    # Prefork is unavailable on Windows
    pool = "solo" if os.name == "nt" else "prefork"
    return [
        "worker",
        f"--loglevel={loglevel.lower()}",
        f"--concurrency={concurrency}",
        f"--pool={pool}",
    ]


def main(argv=None):
    parser = argparse.ArgumentParser(description='Run the schedule generation worker')
    parser.add_argument('--concurrency', type=int, default=CELERY_CONCURRENCY)
    parser.add_argument('--loglevel', default=LOG_LEVEL)
    args = parser.parse_args(argv)

    setup_logging()
    print(f"Schedule worker starting (concurrency={args.concurrency})")
    celery_app.worker_main(worker_argv(args.concurrency, args.loglevel))


if __name__ == "__main__":
    main()
