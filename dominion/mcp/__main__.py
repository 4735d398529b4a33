"""CLI entry point: python -m dominion.mcp"""

from __future__ import annotations

import logging
import sys


def main() -> None:
    # stdout carries the protocol; diagnostics go to stderr
    logging.basicConfig(stream=sys.stderr, level=logging.WARNING)

    from dominion.catalog import define_game
    from dominion.mcp.server import create_server

    server = create_server(define_game())
    server.run(transport="stdio")


if __name__ == "__main__":
    main()
