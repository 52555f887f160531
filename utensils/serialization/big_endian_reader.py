# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from types import TracebackType
from typing import Optional, Union

from structlog import get_logger
from typing_extensions import Self

from utensils.serialization.encoding.float import decode_float
from utensils.serialization.encoding.int import decode_int
from utensils.serialization.exceptions import DisposedError, EndOfStreamError, SerializationError
from utensils.serialization.primitive import MAX_PRIMITIVE_WIDTH, Primitive
from utensils.serialization.types import ByteSource
from utensils.utils.result import Result, as_result

logger = get_logger()


class BigEndianReader:
    """Reads fixed-width numbers encoded in big-endian byte order from a byte source.

    Every read pulls exactly the width of the requested type from the source, calling `readinto` as many times as
    needed because sources are allowed to return short reads. When the source reports no more data before the value
    is complete, `EndOfStreamError` is raised and the bytes read so far are lost.

    A single scratch buffer is reused by all reads, so an instance must not be shared between threads.

    >>> import io
    >>> reader = BigEndianReader(io.BytesIO(bytes.fromhex('ffffffff' '1234' '3f800000')), leave_open=False)
    >>> reader.read_i32()
    -1
    >>> reader.read_u16()
    4660
    >>> reader.read_f32()
    1.0
    """

    def __init__(self, source: ByteSource, *, leave_open: Optional[bool] = None) -> None:
        """
        :param source: where the bytes are read from, it must have a `readinto` method
        :param leave_open: when true `close()` won't close the source, defaults to the READER_LEAVE_OPEN setting
        """
        if leave_open is None:
            from utensils.conf.get_settings import get_global_settings
            leave_open = get_global_settings().READER_LEAVE_OPEN

        self.log = logger.new(source=type(source).__name__)
        self._source = source
        self._leave_open = leave_open
        self._scratch = bytearray(MAX_PRIMITIVE_WIDTH)
        self._view = memoryview(self._scratch)
        self._closed = False

    @property
    def source(self) -> ByteSource:
        return self._source

    @property
    def leave_open(self) -> bool:
        return self._leave_open

    @property
    def closed(self) -> bool:
        return self._closed

    def _fill(self, width: int) -> memoryview:
        """Read exactly `width` bytes from the source into the scratch buffer and return a view of them."""
        if self._closed:
            raise DisposedError(type(self).__name__)

        filled = 0
        while filled < width:
            n = self._source.readinto(self._view[filled:width])
            if n is None:
                raise BlockingIOError('source has no data available, non-blocking sources are not supported')
            if n == 0:
                self.log.debug('end of stream', expected=width, received=filled)
                raise EndOfStreamError(width, filled)
            filled += n
        return self._view[:width]

    def read(self, primitive: Primitive) -> Union[int, float]:
        """Read a value of the given primitive type, advancing the source by exactly `primitive.width` bytes.

        :raises DisposedError: the reader was closed
        :raises EndOfStreamError: the source ran out of data before the value was complete
        """
        data = self._fill(primitive.width)
        if primitive.is_float:
            return decode_float(data)
        return decode_int(data, signed=primitive.signed)

    @as_result(DisposedError, EndOfStreamError)
    def _read_as_result(self, primitive: Primitive) -> Union[int, float]:
        return self.read(primitive)

    def try_read(self, primitive: Primitive) -> Result[Union[int, float], SerializationError]:
        """Same as `read()` but returns `Err` for a closed reader or a truncated value instead of raising.

        Errors raised by the source itself still propagate.
        """
        return self._read_as_result(primitive)

    def read_i16(self) -> int:
        """Read a 2-byte signed integer."""
        return decode_int(self._fill(2), signed=True)

    def read_u16(self) -> int:
        """Read a 2-byte unsigned integer."""
        return decode_int(self._fill(2), signed=False)

    def read_i32(self) -> int:
        """Read a 4-byte signed integer."""
        return decode_int(self._fill(4), signed=True)

    def read_u32(self) -> int:
        """Read a 4-byte unsigned integer."""
        return decode_int(self._fill(4), signed=False)

    def read_i64(self) -> int:
        """Read an 8-byte signed integer."""
        return decode_int(self._fill(8), signed=True)

    def read_u64(self) -> int:
        """Read an 8-byte unsigned integer."""
        return decode_int(self._fill(8), signed=False)

    def read_f32(self) -> float:
        """Read a 4-byte IEEE-754 binary32 float."""
        return decode_float(self._fill(4))

    def read_f64(self) -> float:
        """Read an 8-byte IEEE-754 binary64 float."""
        return decode_float(self._fill(8))

    def close(self) -> None:
        """Close the reader, and the source too unless `leave_open` is set.

        Closing an already closed reader does nothing.
        """
        if self._closed:
            return

        try:
            if not self._leave_open:
                close = getattr(self._source, 'close', None)
                if close is not None:
                    close()
        finally:
            self._closed = True
            self.log.debug('reader closed', leave_open=self._leave_open)

    # allow using the reader as a context manager:

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: Union[type[BaseException], None],
        exc_value: Union[BaseException, None],
        traceback: Union[TracebackType, None],
    ) -> None:
        self.close()
