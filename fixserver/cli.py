"""Command line entry point: serve one FIX client on a TCP port."""

from __future__ import annotations

import argparse
import logging

from fixserver.parser import FixParser
from fixserver.session import FixSessionManager
from fixserver.tcp import TCPServer

log = logging.getLogger(__name__)

DEFAULT_PORT = 5000
DEFAULT_DELIMITER = "|"


def _port(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port: {text!r}") from None
    if not 0 <= value <= 65535:
        raise argparse.ArgumentTypeError(f"port out of range: {value}")
    return value


def _delimiter(text: str) -> str:
    if len(text) != 1:
        raise argparse.ArgumentTypeError("delimiter must be a single character")
    return text


def main(argv: list[str] | None = None) -> int:
    """Accept one client, echo every FIX message it sends, return an exit code."""
    arg_parser = argparse.ArgumentParser(
        prog="fixserver",
        description="Accept one client and echo back the FIX messages it sends.",
    )
    arg_parser.add_argument("--port", type=_port, default=DEFAULT_PORT)
    arg_parser.add_argument("--delimiter", type=_delimiter, default=DEFAULT_DELIMITER)
    args = arg_parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="[%(asctime)s] [%(levelname)s] %(message)s")

    server = TCPServer(1)
    try:
        server.start(args.port)
    except OSError:
        log.error("Could not start TCP server")
        return 1

    try:
        log.info("Server started on port %d", server.port)
        try:
            server.accept_client()
        except OSError:
            log.error("Failed to accept client")
            return 1
        log.info("Client accepted")

        FixSessionManager(server, FixParser(args.delimiter), args.delimiter).run()
    finally:
        server.stop()
    return 0