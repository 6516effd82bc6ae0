import sys
from typing import BinaryIO

BUFFER_SIZE = 16 * 1024 if sys.platform == "win32" else 64 * 1024


class StdoutBuffer:
    """
    Batches formatted output into a fixed-size byte buffer, writing it to
    `stream` only when the next write would not fit.
    """

    def __init__(self, stream: BinaryIO, capacity: int = BUFFER_SIZE):
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.stream = stream
        self.capacity = capacity
        self.data = bytearray()

    def __enter__(self) -> "StdoutBuffer":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.flush()

    def write(self, chunk: bytes):
        if len(self.data) + len(chunk) > self.capacity:
            self.write_and_clear()
        if len(chunk) >= self.capacity:
            self.stream.write(chunk)
        else:
            self.data += chunk

    def write_and_clear(self):
        if self.data:
            self.stream.write(self.data)
            self.data.clear()

    def flush(self):
        self.write_and_clear()
        self.stream.flush()
