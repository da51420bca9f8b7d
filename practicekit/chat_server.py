"""A websocket chat server that broadcasts every message to every client."""

from __future__ import annotations

import argparse
import asyncio
from typing import Any

import websockets
from websockets.exceptions import ConnectionClosedOK

WELCOME = "Welcome to chat! Type a message"

_LAGGED = object()


class Broadcaster:
    """Delivers each sent message to every subscribed queue."""

    def __init__(self, capacity: int = 16) -> None:
        self.capacity = capacity
        self._subscribers: list[asyncio.Queue] = []

    def subscribe(self) -> asyncio.Queue:
        """Return a new queue that receives every later message."""
        queue: asyncio.Queue = asyncio.Queue(maxsize=self.capacity)
        self._subscribers.append(queue)
        return queue

    def unsubscribe(self, queue: asyncio.Queue) -> None:
        """Stop delivering messages to ``queue``."""
        if queue in self._subscribers:
            self._subscribers.remove(queue)

    def send(self, message: str) -> int:
        """Deliver ``message`` to every subscriber and return their number."""
        if not self._subscribers:
            raise RuntimeError("no subscribers to receive the message")
        for queue in self._subscribers:
            try:
                queue.put_nowait(message)
            except asyncio.QueueFull:
                # The subscriber fell behind: drop its backlog and tell it so.
                while not queue.empty():
                    queue.get_nowait()
                queue.put_nowait(_LAGGED)
        return len(self._subscribers)


async def handle_connection(websocket: Any, broadcaster: Broadcaster) -> None:
    """Relay a client's messages to everyone and everyone's messages to it."""
    address = websocket.remote_address
    queue = broadcaster.subscribe()
    await websocket.send(WELCOME)
    incoming = asyncio.ensure_future(websocket.recv())
    outgoing = asyncio.ensure_future(queue.get())
    try:
        while True:
            done, _ = await asyncio.wait(
                {incoming, outgoing}, return_when=asyncio.FIRST_COMPLETED
            )
            if incoming in done:
                try:
                    message = incoming.result()
                except ConnectionClosedOK:
                    return
                if isinstance(message, str):
                    print(f"From client {address} {message!r}")
                    broadcaster.send(message)
                incoming = asyncio.ensure_future(websocket.recv())
            if outgoing in done:
                message = outgoing.result()
                if message is _LAGGED:
                    raise RuntimeError("client fell behind the broadcast")
                await websocket.send(message)
                outgoing = asyncio.ensure_future(queue.get())
    finally:
        pending = [task for task in (incoming, outgoing) if not task.done()]
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        broadcaster.unsubscribe(queue)


async def serve(host: str = "127.0.0.1", port: int = 2000) -> None:
    """Accept chat clients on ``host``:``port`` until cancelled."""
    broadcaster = Broadcaster(16)

    async def handler(websocket: Any) -> None:
        print(f"New connection from {websocket.remote_address}")
        await handle_connection(websocket, broadcaster)

    async with websockets.serve(handler, host, port):
        print(f"listening on port {port}")
        await asyncio.Future()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the chat server.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=2000)
    args = parser.parse_args(argv)
    try:
        asyncio.run(serve(args.host, args.port))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())