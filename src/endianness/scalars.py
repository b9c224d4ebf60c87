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
Typed converters for fixed-width numbers.

Every supported kind of number gets a pair of functions, for example
:func:`big_endian_int32` and :func:`little_endian_int32`. Each takes a
Python number, copies it into a one-item native array, runs the matching
converter from :mod:`endianness.swap` over the copy's bytes, and returns the
copy read back in host order. The input is never modified.

>>> hex(big_endian_uint32(0x01020304))  # on a little-endian machine
'0x4030201'

All the pairs are built by :func:`_wrappers` from the same
:meth:`ScalarType.convert` method.

Integers outside the range of the kind raise ``OverflowError``. Float bit
patterns, including NaNs and infinities, come back exactly. A Python
``float`` is a C double, so 32-bit floats are carried as ``numpy.float32``
scalars instead: the float32 converters accept a Python float or a
``numpy.float32`` and always return a ``numpy.float32`` holding the exact
reordered bits.
"""

from array import array
from functools import partial
from typing import Callable, Dict, Sequence, Union

import numpy

from endianness.swap import to_big_endian, to_little_endian, to_byte_order


Number = Union[int, float]


class UnknownScalarType(KeyError):
    """
    Raised when looking up a scalar kind name that doesn't exist.
    """

    pass


def _typecode(candidates: Sequence[str], size: int) -> str:
    # The C types behind array typecodes vary in size between platforms
    for code in candidates:
        if array(code).itemsize == size:
            return code
    raise ValueError("No array typecode in %r is %d bytes on this platform"
                    % (candidates, size))


class ScalarType:
    """
    Describes one kind of fixed-width number.
    """

    def __init__(self, name: str, candidates: str, size: int,
                 isfloat: bool=False, dtype: type=None):
        """
        :param name: the public name of the kind, such as ``"int32"``.
        :param candidates: array typecodes that might hold this kind, in
            order of preference.
        :param size: the width of the kind in bytes.
        :param isfloat: whether the kind is an IEEE-754 float.
        :param dtype: a numpy scalar type to carry values in, for kinds with
            no exact built-in Python type.
        """

        self.name = name
        self.typecode = _typecode(candidates, size)
        self.size = size
        self.isfloat = isfloat
        self.dtype = dtype

    def __repr__(self):
        return "<%s %s %d>" % (type(self).__name__, self.name, self.size)

    def convert(self, value: Number,
                converter: Callable[[int, array], None]) -> Number:
        """
        Returns a copy of ``value`` with ``converter`` applied to its bytes.

        :param value: the number to convert.
        :param converter: a function taking a width and a writable buffer,
            such as :func:`endianness.swap.to_big_endian`.
        """

        copy = self._copy(value)
        converter(self.size, copy)
        return copy[0]

    def _copy(self, value: Number):
        if self.dtype is None:
            return array(self.typecode, [value])
        # Go through bytes so the value is never widened to a Python float
        if not isinstance(value, self.dtype):
            value = self.dtype(value)
        return numpy.frombuffer(bytearray(value.tobytes()), dtype=self.dtype)


INT8 = ScalarType("int8", "b", 1)
UINT8 = ScalarType("uint8", "B", 1)
INT16 = ScalarType("int16", "h", 2)
UINT16 = ScalarType("uint16", "H", 2)
INT32 = ScalarType("int32", "il", 4)
UINT32 = ScalarType("uint32", "IL", 4)
INT64 = ScalarType("int64", "ql", 8)
UINT64 = ScalarType("uint64", "QL", 8)
FLOAT32 = ScalarType("float32", "f", 4, isfloat=True, dtype=numpy.float32)
FLOAT64 = ScalarType("float64", "d", 8, isfloat=True)

SCALAR_TYPES: Dict[str, ScalarType] = {st.name: st for st in (
    INT8, UINT8, INT16, UINT16, INT32, UINT32, INT64, UINT64, FLOAT32, FLOAT64
)}


def scalar_type(name: str) -> ScalarType:
    """
    Returns the :class:`ScalarType` with the given name.

    :param name: a kind name such as ``"uint16"`` or ``"float64"``.
    """

    try:
        return SCALAR_TYPES[name]
    except KeyError:
        raise UnknownScalarType(name)


def convert(name: str, value: Number, order: str) -> Number:
    """
    Converts a host-order number of the named kind to the given byte order.

    >>> convert("uint16", 0xABCD, "little") == little_endian_uint16(0xABCD)
    True

    :param name: a kind name such as ``"int32"``.
    :param value: the number to convert.
    :param order: ``"big"`` or ``"little"``.
    """

    return scalar_type(name).convert(value, partial(to_byte_order, order))


def _wrappers(stype: ScalarType):
    def big(value):
        return stype.convert(value, to_big_endian)

    def little(value):
        return stype.convert(value, to_little_endian)

    for fn, order in ((big, "big"), (little, "little")):
        fn.__name__ = fn.__qualname__ = "%s_endian_%s" % (order, stype.name)
        fn.__doc__ = ("Returns a copy of the %s value with its bytes in "
                      "%s-endian order." % (stype.name, order))
    return big, little


big_endian_int8, little_endian_int8 = _wrappers(INT8)
big_endian_uint8, little_endian_uint8 = _wrappers(UINT8)
big_endian_int16, little_endian_int16 = _wrappers(INT16)
big_endian_uint16, little_endian_uint16 = _wrappers(UINT16)
big_endian_int32, little_endian_int32 = _wrappers(INT32)
big_endian_uint32, little_endian_uint32 = _wrappers(UINT32)
big_endian_int64, little_endian_int64 = _wrappers(INT64)
big_endian_uint64, little_endian_uint64 = _wrappers(UINT64)
big_endian_float32, little_endian_float32 = _wrappers(FLOAT32)
big_endian_float64, little_endian_float64 = _wrappers(FLOAT64)
