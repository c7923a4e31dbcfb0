import asyncio
import os
import sys

import orjson

from i3_window_killer.data_types import CommandOutcome, Node

JSONValue = (
    bool
    | str
    | int
    | None
    | float
    | dict[str, "JSONInnerValue"]
    | list[dict[str, "JSONInnerValue"]]
)
JSONInnerValue = JSONValue | list[dict[str, JSONValue]]
JSONDict = dict[str, JSONValue]
JSONList = list[JSONDict]

magic_string = "i3-ipc"
magic_len = len(magic_string)
magic_enc = magic_string.encode()
payload_len_len = 4  # length of payload length
payload_type_len = 4  # length of payload type
header_len = magic_len + payload_len_len + payload_type_len

RUN_COMMAND = 0
GET_TREE = 4
GET_VERSION = 7


def socket_path() -> str:
    path = next((p for s in ["I3SOCK", "SWAYSOCK"] if (p := os.environ.get(s))), None)
    if not path:
        raise EnvironmentError("Could not find the socket, is I3SOCK set?")
    return path


def pack(payload_type: int, command: bytes = b"") -> bytes:
    data = magic_enc
    data += len(command).to_bytes(payload_len_len, sys.byteorder)
    data += payload_type.to_bytes(payload_type_len, sys.byteorder)
    data += command
    return data


def unpack_header(header: bytes) -> tuple[int, int]:
    """Returns `payload_length`, `payload_type`"""
    if header[:magic_len] != magic_enc:
        raise ConnectionError(f"Invalid reply header: {header!r}")

    payload_length_bytes = header[magic_len : magic_len + payload_len_len]
    payload_type_bytes = header[magic_len + payload_len_len :]
    return (
        int.from_bytes(payload_length_bytes, sys.byteorder),
        int.from_bytes(payload_type_bytes, sys.byteorder),
    )


class I3IPCSocket:
    def __init__(self, path: str | None = None):
        self.path = path
        self.lock = asyncio.Lock()
        self.reader: asyncio.StreamReader = None  # pyright: ignore
        self.writer: asyncio.StreamWriter = None  # pyright: ignore

    async def connect(self):
        if self.path is None:
            self.path = socket_path()
        self.reader, self.writer = await asyncio.open_unix_connection(path=self.path)

    async def send(self, payload_type: int, command=b""):
        if not self.writer:  # first time calling, create socket
            await self.connect()

        self.writer.write(pack(payload_type, command))
        await self.writer.drain()

    async def receive(self) -> JSONDict | JSONList:
        try:
            header = await self.reader.readexactly(header_len)
            payload_length, _ = unpack_header(header)
            raw_response = await self.reader.readexactly(payload_length)
        except asyncio.IncompleteReadError as e:
            raise ConnectionError("i3 closed the connection") from e

        return orjson.loads(raw_response)

    async def close(self):
        if self.writer and not self.writer.is_closing():
            self.writer.close()
            await self.writer.wait_closed()

    async def send_receive(self, payload_type: int, command=b"") -> JSONDict | JSONList:
        async with self.lock:  # ensure only one coroutine is in this block at a time
            await self.send(payload_type, command)
            return await self.receive()


class I3IPCConnection:
    def __init__(self, path: str | None = None) -> None:
        self.socket = I3IPCSocket(path)

    async def run_command(self, c: str) -> list[CommandOutcome]:
        return await self.socket.send_receive(RUN_COMMAND, c.encode())  # pyright:ignore

    async def get_tree(self) -> Node:
        return await self.socket.send_receive(GET_TREE)  # pyright: ignore

    async def get_version(self) -> JSONDict:
        return await self.socket.send_receive(GET_VERSION)  # pyright: ignore

    async def close(self):
        await self.socket.close()

    async def __aenter__(self) -> "I3IPCConnection":
        return self

    async def __aexit__(self, *_) -> None:
        await self.close()
