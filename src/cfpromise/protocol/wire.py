from __future__ import annotations

from typing import BinaryIO, Union

from .. import errors


# Terminator after the content of a record: the newline ending the content
# line, and one empty line.
_SEP = b"\n\n"


def read_record(stream: BinaryIO) -> bytes:
    """
    Read one record from stream -> bytes

    Layout:
        [content]\\n
        \\n

    The content line is returned without its newline. The line following
    it must be empty.
    """

    line = stream.readline()

    if not line.endswith(b"\n"):
        raise errors.FramingError("unexpected end of input")

    empty = stream.readline()

    if empty == b"":
        raise errors.FramingError("unexpected end of input, expecting an empty line")

    if empty.rstrip(b"\r\n") != b"":
        raise errors.FramingError("expecting an empty line, got %r" % (empty,))

    return line.rstrip(b"\r\n")


def write_record(stream: BinaryIO, payload: Union[bytes, str]) -> None:
    """
    Write one record to stream, flushing immediately; the peer may be
    reading synchronously, with no buffering of its own.
    """

    if isinstance(payload, str):
        payload = payload.encode("utf-8")

    stream.write(payload + _SEP)
    stream.flush()


class Reader:
    """Read records from a binary stream, counting them as they go."""

    def __init__(self, stream: BinaryIO):
        self.stream = stream
        self.count = 0

    def read(self) -> bytes:
        record = read_record(self.stream)
        self.count += 1
        return record


class Writer:
    """Write records to a binary stream, counting them as they go."""

    def __init__(self, stream: BinaryIO):
        self.stream = stream
        self.count = 0

    def write(self, payload: Union[bytes, str]) -> None:
        write_record(self.stream, payload)
        self.count += 1


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
