# Copyright 2026 Matt Chaput. All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#    1. Redistributions of source code must retain the above copyright notice,
#       this list of conditions and the following disclaimer.
#
#    2. Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY MATT CHAPUT ``AS IS'' AND ANY EXPRESS OR
# IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF
# MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO
# EVENT SHALL MATT CHAPUT OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT,
# INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
# LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA,
# OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF
# LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING
# NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE,
# EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
#
# The views and conclusions contained in the software and documentation are
# those of the authors and should not be interpreted as representing official
# policies, either expressed or implied, of Matt Chaput.

"""
This module contains functions for reversing the bytes of a fixed-width
scalar held in a mutable buffer, and for moving such a buffer between host
byte order and an explicit big-endian or little-endian order.

Buffers may be any writable, contiguous object supporting the buffer
protocol, such as a ``bytearray``, an ``array.array`` or a writable
``memoryview``. The buffer is always treated as a run of unsigned bytes.

>>> buf = bytearray(b"\\x01\\x02\\x03\\x04")
>>> reverse_bytes(4, buf)
>>> bytes(buf)
b'\\x04\\x03\\x02\\x01'
"""

import logging

from endianness.system import IS_LITTLE, MAX_WIDTH, SUPPORTED_WIDTHS


logger = logging.getLogger(__name__)


# Exceptions

class WidthError(ValueError):
    """
    Base class for requests to convert a scalar of a width this library
    does not handle.
    """

    pass


class WidthOverflow(WidthError):
    """
    Raised when asked to reverse more bytes than the widest supported scalar.
    """

    pass


class UnsupportedWidth(WidthError):
    """
    Raised when asked to reverse a width that is not 1, 2, 4 or 8 bytes.
    """

    pass


class BufferSizeError(ValueError):
    """
    Raised when the buffer does not hold exactly the requested number of
    bytes.
    """

    pass


# Reversal

def check_width(length: int):
    """
    Raises an exception if the given byte width is not one the converters
    accept.

    :param length: the width in bytes of the scalar to convert.
    """

    if not isinstance(length, int) or isinstance(length, bool):
        logger.debug("Rejected %r byte width", length)
        raise UnsupportedWidth("Width must be an int, not %r" % (length,))
    if length > MAX_WIDTH:
        logger.debug("Rejected %d byte width", length)
        raise WidthOverflow("Can't reverse %d bytes, the maximum is %d"
                            % (length, MAX_WIDTH))
    if length not in SUPPORTED_WIDTHS:
        logger.debug("Rejected %d byte width", length)
        raise UnsupportedWidth("Can't reverse %r bytes, width must be one of %r"
                               % (length, SUPPORTED_WIDTHS))


def _byte_view(length: int, buf) -> memoryview:
    check_width(length)
    view = memoryview(buf)
    if view.readonly:
        view.release()
        raise TypeError("Can't convert a read-only buffer in place")
    if view.format != "B":
        view = view.cast("B")
    if view.nbytes != length:
        size = view.nbytes
        view.release()
        raise BufferSizeError("Buffer holds %d bytes, expected %d"
                              % (size, length))
    return view


def _reverse(view: memoryview, length: int):
    i = 0
    j = length - 1
    while i < j:
        view[i], view[j] = view[j], view[i]
        i += 1
        j -= 1


def reverse_bytes(length: int, buf):
    """
    Reverses the order of the bytes in ``buf`` in place, so the first byte
    swaps with the last, the second with the second-to-last, and so on.

    The buffer is not touched if the request is rejected.

    :param length: the number of bytes in the buffer; one of 1, 2, 4 or 8.
    :param buf: a writable buffer of exactly ``length`` bytes.
    :raises WidthOverflow: if ``length`` is more than 8.
    :raises UnsupportedWidth: if ``length`` is not 1, 2, 4 or 8.
    :raises BufferSizeError: if the buffer is not ``length`` bytes long.
    """

    with _byte_view(length, buf) as view:
        _reverse(view, length)


# Directional converters

def to_big_endian(length: int, buf):
    """
    Puts a host-order scalar in ``buf`` into big-endian order, in place.
    Does nothing to the bytes if the host is already big-endian.

    Calling this twice on the same buffer restores the original bytes.

    :param length: the number of bytes in the buffer; one of 1, 2, 4 or 8.
    :param buf: a writable buffer of exactly ``length`` bytes.
    """

    with _byte_view(length, buf) as view:
        if IS_LITTLE:
            _reverse(view, length)


def to_little_endian(length: int, buf):
    """
    Puts a host-order scalar in ``buf`` into little-endian order, in place.
    Does nothing to the bytes if the host is already little-endian.

    :param length: the number of bytes in the buffer; one of 1, 2, 4 or 8.
    :param buf: a writable buffer of exactly ``length`` bytes.
    """

    with _byte_view(length, buf) as view:
        if not IS_LITTLE:
            _reverse(view, length)


def to_byte_order(order: str, length: int, buf):
    """
    Calls :func:`to_big_endian` or :func:`to_little_endian` depending on
    ``order``.

    :param order: ``"big"`` or ``"little"``.
    """

    if order == "big":
        to_big_endian(length, buf)
    elif order == "little":
        to_little_endian(length, buf)
    else:
        raise ValueError("Unknown byte order %r, expected 'big' or 'little'"
                         % (order,))
