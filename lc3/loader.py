"""
Program image loading.

An image is a big-endian byte stream: the first word is the origin, every
following word is stored sequentially from the origin. A trailing odd byte
becomes the high byte of a final word whose low byte is zero. Words that run
past xFFFF wrap around to x0000.
"""
import logging
import os
import struct
from typing import BinaryIO, List, Tuple, Union

from .errors import ImageIOError
from .memory import Memory

logger = logging.getLogger(__name__)

ImageSource = Union[str, "os.PathLike[str]", bytes, bytearray, BinaryIO]


def read_image(source: ImageSource) -> bytes:
    """Return the raw bytes of an image given a path, a file object or bytes."""
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    try:
        if isinstance(source, (str, os.PathLike)):
            with open(source, "rb") as f:
                return f.read()
        return source.read()
    except OSError as e:
        raise ImageIOError(f"cannot read image {source!r}: {e}") from e


def decode_image(data: bytes) -> Tuple[int, List[int]]:
    """Split image bytes into (origin, words)."""
    if len(data) < 2:
        raise ImageIOError(f"image too short ({len(data)} bytes): no origin word")
    if len(data) % 2:
        data = data + b"\x00"
    origin, *words = struct.unpack(f">{len(data) // 2}H", data)
    return origin, words


def load_image(memory: Memory, source: ImageSource) -> Tuple[int, int]:
    """Load an image into `memory`. Returns (origin, number of words)."""
    origin, words = decode_image(read_image(source))
    count = memory.load(origin, words)
    if origin + count > len(memory):
        logger.debug("image wraps past xFFFF (%d words from x%04X)", count, origin)
    logger.debug("loaded %d words at x%04X", count, origin)
    return origin, count
