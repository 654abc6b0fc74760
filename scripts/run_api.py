"""
Start the tournament scheduler REST API under uvicorn.
"""

import argparse
import os
import sys

import uvicorn

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.config import API_HOST, API_PORT, LOG_LEVEL


def build_parser():
    parser = argparse.ArgumentParser(description='Run the Tournament Scheduler API server')
    parser.add_argument('--host', default=API_HOST, help='Interface to bind')
    parser.add_argument('--port', type=int, default=API_PORT, help='Port to listen on')
    parser.add_argument('--reload', action='store_true', help='Restart on code changes (development)')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    print(f"Tournament Scheduler API on http://{args.host}:{args.port} (docs at /docs)")
    uvicorn.run(
        "app.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()
