"""Packing of values into network-byte-order buffers, and queues of such buffers."""

from __future__ import annotations

import itertools
import logging
import math
import struct
import threading
from collections import deque
from typing import Any, Callable, Deque, Dict, Iterable, List, Tuple, Union

logger = logging.getLogger(__name__)

MAX_FRACTIONAL = 0x7FFFFFFFFFFFFFFF  # 2**63 - 1
UINT32_MAX = 0xFFFFFFFF
INT32_MAX = 0x7FFFFFFF
INT32_MIN = -0x80000000
ANGLE_SCALE = INT32_MAX // 100

_PACKED_DOUBLE = struct.Struct(">qi")
_QUAT = struct.Struct(">4i")

_FORMAT_SIZES = {
    "b": 1,
    "h": 2,
    "w": 4,
    "S": 4,
    "U": 4,
    "R": 4,
    "d": _PACKED_DOUBLE.size,
    "q": 8,
    "Q": _QUAT.size,
}

Bytes = Union[bytes, bytearray, memoryview]


class MarshalError(ValueError):
    """Raised when a value cannot be packed into or read from a buffer."""


def _pack(fmt: str, *values: Any) -> bytes:
    try:
        return struct.pack(fmt, *values)
    except struct.error as exc:
        raise MarshalError(f"cannot pack {values!r} as {fmt!r}: {exc}") from None


def _pack_double(value: float) -> Tuple[int, int]:
    if not math.isfinite(value):
        raise MarshalError(f"cannot pack non-finite double {value!r}")
    mantissa, exponent = math.frexp(value)
    fractional = abs(mantissa) - 0.5
    if fractional < 0.0:
        return 0, exponent
    packed = 1 + int(fractional * 2.0 * float(MAX_FRACTIONAL - 1))
    return (-packed if value < 0.0 else packed), exponent


def _unpack_double(fractional: int, exponent: int) -> float:
    if fractional == 0:
        return 0.0
    frac = ((abs(fractional) - 1) / float(MAX_FRACTIONAL - 1)) / 2.0
    value = math.ldexp(frac + 0.5, exponent)
    return -value if fractional < 0 else value


def dtou32(d: float, scale: int) -> int:
    """Encode d in 0..scale as an unsigned 32-bit integer."""
    encoded = int((d / scale) * float(UINT32_MAX))
    if not 0 <= encoded <= UINT32_MAX:
        raise MarshalError(f"{d} does not fit unsigned 32 bits at scale {scale}")
    return encoded


def u32tod(u: int, scale: int) -> float:
    return (float(u) * float(scale)) / float(UINT32_MAX)


def dtos32(d: float, scale: int) -> int:
    """Encode d in -scale..scale as a signed 32-bit integer."""
    encoded = int((d / scale) * float(INT32_MAX))
    if not INT32_MIN <= encoded <= INT32_MAX:
        raise MarshalError(f"{d} does not fit signed 32 bits at scale {scale}")
    return encoded


def s32tod(u: int, scale: int) -> float:
    return (float(u) * float(scale)) / float(INT32_MAX)


def qtos32(q: float) -> int:
    """Encode a quaternion component (-1.0 <= q <= 1.0) as a signed 32-bit integer."""
    encoded = int(q * float(INT32_MAX - 1))
    if not INT32_MIN <= encoded <= INT32_MAX:
        raise MarshalError(f"quaternion component {q} out of range")
    return encoded


def s32toq(i: int) -> float:
    return float(i) / float(INT32_MAX - 1)


class PackedBuffer:
    """A fixed-size byte buffer with a cursor for sequential packing and unpacking."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise MarshalError("buffer size must not be negative")
        self.buffer = bytearray(size)
        self.cursor = 0

    def __len__(self) -> int:
        return self.cursor

    def __repr__(self) -> str:
        return f"PackedBuffer(size={len(self.buffer)}, cursor={self.cursor})"

    def _put(self, data: Bytes) -> None:
        end = self.cursor + len(data)
        if end > len(self.buffer):
            raise MarshalError(
                f"no room for {len(data)} bytes at {self.cursor} in buffer of {len(self.buffer)}"
            )
        self.buffer[self.cursor:end] = data
        self.cursor = end

    def _take(self, n: int) -> bytes:
        end = self.cursor + n
        if end > len(self.buffer):
            raise MarshalError(
                f"cannot read {n} bytes at {self.cursor} from buffer of {len(self.buffer)}"
            )
        data = bytes(self.buffer[self.cursor:end])
        self.cursor = end
        return data

    def append_u8(self, value: int) -> None:
        self._put(_pack(">B", value))

    def append_u16(self, value: int) -> None:
        self._put(_pack(">H", value))

    def append_u32(self, value: int) -> None:
        self._put(_pack(">I", value))

    def append_u64(self, value: int) -> None:
        self._put(_pack(">Q", value))

    def append_double(self, value: float) -> None:
        self._put(_PACKED_DOUBLE.pack(*_pack_double(value)))

    def append_string(self, data: Union[str, Bytes]) -> None:
        """Append a 16-bit length followed by the bytes of data."""
        raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
        self._put(_pack(">H", len(raw)) + raw)

    def append_raw(self, data: Bytes) -> None:
        raw = bytes(data)
        if len(raw) > 0xFFFF:
            raise MarshalError("raw data longer than 65535 bytes")
        self._put(raw)

    def append_quat(self, q: Iterable[float]) -> None:
        """Append four quaternion components, each in -1.0..1.0."""
        components = tuple(q)
        if len(components) != 4:
            raise MarshalError(f"a quaternion has 4 components, got {len(components)}")
        if self.cursor + _QUAT.size > len(self.buffer):
            raise MarshalError("no room for quaternion")
        self._put(_pack(">4i", *(qtos32(c) for c in components)))

    def append_du32(self, d: float, scale: int) -> None:
        self.append_u32(dtou32(d, scale))

    def append_ds32(self, d: float, scale: int) -> None:
        self._put(_pack(">i", dtos32(d, scale)))

    def _append_angle(self, d: float) -> None:
        if d < -2.0 * math.pi or d > 2.0 * math.pi:
            logger.warning("out of range angle %d", int(d * 180.0 / math.pi))
        self.append_ds32(d, ANGLE_SCALE)

    def extract_u8(self) -> int:
        return self._take(1)[0]

    def extract_u16(self) -> int:
        return struct.unpack(">H", self._take(2))[0]

    def extract_u32(self) -> int:
        return struct.unpack(">I", self._take(4))[0]

    def extract_u64(self) -> int:
        return struct.unpack(">Q", self._take(8))[0]

    def extract_double(self) -> float:
        return _unpack_double(*_PACKED_DOUBLE.unpack(self._take(_PACKED_DOUBLE.size)))

    def extract_string(self, buflen: int) -> bytes:
        """Read a length-prefixed string, keeping at most buflen bytes of it."""
        if buflen < 0:
            raise MarshalError("buflen must not be negative")
        length = self.extract_u16()
        data = self._take(length)
        return data[:buflen]

    def extract_raw(self, length: int) -> bytes:
        if length < 0:
            raise MarshalError("length must not be negative")
        return self._take(length)

    def extract_quat(self) -> Tuple[float, float, float, float]:
        return tuple(s32toq(i) for i in _QUAT.unpack(self._take(_QUAT.size)))  # type: ignore[return-value]

    def extract_du32(self, scale: int) -> float:
        return u32tod(self.extract_u32(), scale)

    def extract_ds32(self, scale: int) -> float:
        return s32tod(struct.unpack(">i", self._take(4))[0], scale)

    def _extract_angle(self) -> float:
        return self.extract_ds32(ANGLE_SCALE)

    def append(self, fmt: str, *args: Any) -> None:
        """Append values described by fmt.

        b u8, h u16, w u32, q u64, s string, r raw bytes, d double,
        S double + signed scale, U double + unsigned scale,
        Q quaternion (4 floats), R angle in radians (-2*pi..2*pi).
        """
        table: Dict[str, Tuple[int, Callable[..., Any]]] = {
            "b": (1, self.append_u8),
            "h": (1, self.append_u16),
            "w": (1, self.append_u32),
            "q": (1, self.append_u64),
            "s": (1, self.append_string),
            "r": (1, self.append_raw),
            "d": (1, self.append_double),
            "S": (2, self.append_ds32),
            "R": (1, self._append_angle),
            "U": (2, self.append_du32),
            "Q": (1, self.append_quat),
        }
        _dispatch(fmt, table, args)

    def extract(self, fmt: str, *args: Any) -> Tuple[Any, ...]:
        """Read values described by fmt and return them as a tuple.

        s takes a maximum length, r a length, S and U a scale; the rest take nothing.
        """
        table: Dict[str, Tuple[int, Callable[..., Any]]] = {
            "b": (0, self.extract_u8),
            "h": (0, self.extract_u16),
            "w": (0, self.extract_u32),
            "q": (0, self.extract_u64),
            "s": (1, self.extract_string),
            "r": (1, self.extract_raw),
            "d": (0, self.extract_double),
            "S": (1, self.extract_ds32),
            "R": (0, self._extract_angle),
            "U": (1, self.extract_du32),
            "Q": (0, self.extract_quat),
        }
        return tuple(_dispatch(fmt, table, args))

    def copy(self) -> PackedBuffer:
        duplicate = PackedBuffer(len(self.buffer))
        duplicate.buffer[:] = self.buffer
        duplicate.cursor = self.cursor
        return duplicate


def _dispatch(
    fmt: str, table: Dict[str, Tuple[int, Callable[..., Any]]], args: Tuple[Any, ...]
) -> List[Any]:
    specs = []
    for code in fmt:
        try:
            specs.append(table[code])
        except KeyError:
            raise MarshalError(f"unknown format character {code!r}") from None
    needed = sum(arity for arity, _ in specs)
    if needed != len(args):
        raise MarshalError(f"format {fmt!r} takes {needed} arguments, got {len(args)}")
    it = iter(args)
    return [handler(*itertools.islice(it, arity)) for arity, handler in specs]


def _wrap(data: Bytes) -> PackedBuffer:
    pb = PackedBuffer(0)
    pb.buffer = bytearray(data)
    return pb


class PackedBufferQueue:
    """A thread-safe FIFO of packed buffers that can be merged into one."""

    def __init__(self) -> None:
        self._entries: Deque[PackedBuffer] = deque()
        self._lock = threading.Lock()

    def add(self, pb: PackedBuffer) -> None:
        with self._lock:
            self._entries.append(pb)

    def combine(self) -> PackedBuffer:
        """Join the used bytes of all queued buffers in order and empty the queue."""
        with self._lock:
            total = sum(pb.cursor for pb in self._entries)
            answer = PackedBuffer(total)
            for pb in self._entries:
                answer._put(pb.buffer[:pb.cursor])
            self._entries.clear()
            return answer

    def length(self) -> int:
        """Total number of used bytes across queued buffers."""
        with self._lock:
            return sum(pb.cursor for pb in self._entries)


def calculate_buffer_size(fmt: str) -> int:
    """Bytes needed for a format made only of fixed-size codes."""
    try:
        return sum(_FORMAT_SIZES[code] for code in fmt)
    except KeyError as exc:
        raise MarshalError(f"format character {exc.args[0]!r} has no fixed size") from None


def packed_buffer_new(fmt: str, *args: Any) -> PackedBuffer:
    """Allocate a buffer exactly large enough for fmt and append args to it."""
    pb = PackedBuffer(calculate_buffer_size(fmt))
    pb.append(fmt, *args)
    return pb


def unpack(data: Bytes, fmt: str, *args: Any) -> Tuple[Any, ...]:
    """Extract values described by fmt from the start of data."""
    return _wrap(data).extract(fmt, *args)