"""A websocket chat client that sends standard input lines to the server."""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import AsyncIterable, AsyncIterator
from typing import Optional

import websockets
from websockets.exceptions import ConnectionClosedOK


async def _stdin_lines() -> AsyncIterator[str]:
    loop = asyncio.get_running_loop()
    while True:
        line = await loop.run_in_executor(None, sys.stdin.readline)
        if not line:
            return
        yield line.rstrip("\r\n")


async def run_client(
    uri: str = "ws://127.0.0.1:2000", lines: Optional[AsyncIterable[str]] = None
) -> list[str]:
    """Send each line to the server and print what it sends back.

    Returns the text messages received, once either the lines run out or the
    server closes the connection.
    """
    if lines is None:
        lines = _stdin_lines()
    iterator = aiter(lines)
    received: list[str] = []
    async with websockets.connect(uri) as websocket:
        incoming = asyncio.ensure_future(websocket.recv())
        outgoing = asyncio.ensure_future(anext(iterator))
        try:
            while True:
                done, _ = await asyncio.wait(
                    {incoming, outgoing}, return_when=asyncio.FIRST_COMPLETED
                )
                if incoming in done:
                    try:
                        message = incoming.result()
                    except ConnectionClosedOK:
                        return received
                    if isinstance(message, str):
                        print(f"From server: {message}")
                        received.append(message)
                    incoming = asyncio.ensure_future(websocket.recv())
                if outgoing in done:
                    try:
                        line = outgoing.result()
                    except StopAsyncIteration:
                        return received
                    await websocket.send(line)
                    outgoing = asyncio.ensure_future(anext(iterator))
        finally:
            pending = [task for task in (incoming, outgoing) if not task.done()]
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Chat with the chat server.")
    parser.add_argument("--uri", default="ws://127.0.0.1:2000")
    args = parser.parse_args(argv)
    try:
        asyncio.run(run_client(args.uri))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())