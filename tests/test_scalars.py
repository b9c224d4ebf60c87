import math
import struct

import numpy
import pytest

from endianness import scalars


def _swapped(fmt, value):
    # The value whose native bytes are the reverse of value's native bytes
    return struct.unpack(fmt, struct.pack(fmt, value)[::-1])[0]


def _dbits(x):
    return struct.unpack("=Q", struct.pack("=d", x))[0]


def _dfrombits(n):
    return struct.unpack("=d", struct.pack("=Q", n))[0]


def _fbits(x):
    return struct.unpack("=I", x.tobytes())[0]


def _ffrombits(n):
    return numpy.frombuffer(struct.pack("=I", n), dtype=numpy.float32)[0]


def test_registry():
    assert sorted(scalars.SCALAR_TYPES) == [
        "float32", "float64", "int16", "int32", "int64", "int8",
        "uint16", "uint32", "uint64", "uint8",
    ]
    for name, stype in scalars.SCALAR_TYPES.items():
        assert stype.name == name
        assert stype.size in (1, 2, 4, 8)
        assert struct.calcsize(stype.typecode) == stype.size

    assert scalars.scalar_type("int32") is scalars.INT32
    assert scalars.FLOAT64.isfloat
    assert not scalars.UINT16.isfloat
    assert repr(scalars.INT16) == "<ScalarType int16 2>"

    with pytest.raises(scalars.UnknownScalarType):
        scalars.scalar_type("int24")
    with pytest.raises(KeyError):
        scalars.convert("float16", 1.0, "big")


def test_wrapper_names():
    assert scalars.big_endian_int32.__name__ == "big_endian_int32"
    assert scalars.little_endian_float64.__name__ == "little_endian_float64"
    assert "big-endian" in scalars.big_endian_uint8.__doc__


def test_native_bytes_uint32():
    # Whatever the host, the big-endian result is laid out 01 02 03 04
    result = scalars.big_endian_uint32(0x01020304)
    assert struct.pack("=I", result) == b"\x01\x02\x03\x04"

    result = scalars.little_endian_uint32(0x01020304)
    assert struct.pack("=I", result) == b"\x04\x03\x02\x01"


def test_native_bytes_uint16():
    result = scalars.little_endian_uint16(0xABCD)
    assert struct.pack("=H", result) == b"\xcd\xab"

    result = scalars.big_endian_uint16(0xABCD)
    assert struct.pack("=H", result) == b"\xab\xcd"


def test_int32_by_host(host_little):
    if host_little:
        assert scalars.big_endian_int32(0x01020304) == 0x04030201
        assert scalars.little_endian_int32(0x01020304) == 0x01020304
    else:
        assert scalars.big_endian_int32(0x01020304) == 0x01020304
        assert scalars.little_endian_int32(0x01020304) == 0x04030201


def test_uint16_by_host(host_little):
    if host_little:
        assert scalars.little_endian_uint16(0xABCD) == 0xABCD
    else:
        assert scalars.little_endian_uint16(0xABCD) == 0xCDAB


def test_signed_results(host_little):
    convert = (scalars.big_endian_int16 if host_little
               else scalars.little_endian_int16)
    assert convert(0x00FF) == -256
    assert convert(-256) == 0x00FF


def test_single_byte_identity(host_little):
    for value in (-128, -1, 0, 1, 127):
        assert scalars.big_endian_int8(value) == value
        assert scalars.little_endian_int8(value) == value
    for value in (0, 1, 128, 255):
        assert scalars.big_endian_uint8(value) == value
        assert scalars.little_endian_uint8(value) == value


def test_integer_round_trip(host_little):
    cases = [
        (scalars.big_endian_int16, [-32768, -2, 0, 1, 258, 32767]),
        (scalars.little_endian_uint16, [0, 1, 0xABCD, 0xFFFF]),
        (scalars.big_endian_int32, [-2 ** 31, -1, 0, 0x01020304, 2 ** 31 - 1]),
        (scalars.little_endian_uint32, [0, 0xDEADBEEF, 2 ** 32 - 1]),
        (scalars.big_endian_int64, [-2 ** 63, -5, 0, 2 ** 63 - 1]),
        (scalars.little_endian_uint64, [0, 0x0102030405060708, 2 ** 64 - 1]),
    ]
    for fn, values in cases:
        for value in values:
            assert fn(fn(value)) == value


def test_reverses_when_host_differs(host_little):
    value = 0x0102030405060708
    expected = _swapped("=Q", value)
    if host_little:
        assert scalars.big_endian_uint64(value) == expected
        assert scalars.little_endian_uint64(value) == value
    else:
        assert scalars.big_endian_uint64(value) == value
        assert scalars.little_endian_uint64(value) == expected


def test_out_of_range():
    with pytest.raises(OverflowError):
        scalars.big_endian_int8(128)
    with pytest.raises(OverflowError):
        scalars.little_endian_uint16(-1)
    with pytest.raises(OverflowError):
        scalars.big_endian_uint32(2 ** 32)
    with pytest.raises(OverflowError):
        scalars.little_endian_int64(2 ** 63)


def test_float64_bits(host_little):
    patterns = [
        0x7FF0000000000000,  # inf
        0xFFF0000000000000,  # -inf
        0x7FF8000000000000,  # NaN
        0x7FF8000000000123,  # NaN with payload
        0x230100000000F87F,  # reverses to a NaN with payload
        0x8000000000000000,  # -0.0
        0x3FF0000000000000,  # 1.0
    ]
    for bits in patterns:
        value = _dfrombits(bits)
        for fn in (scalars.big_endian_float64, scalars.little_endian_float64):
            once = fn(value)
            assert _dbits(fn(once)) == bits


def test_float64_reversal(host_little):
    convert = (scalars.big_endian_float64 if host_little
               else scalars.little_endian_float64)
    assert _dbits(convert(1.0)) == 0x000000000000F03F
    assert _dbits(convert(math.inf)) == 0x000000000000F07F


def test_float32(host_little):
    convert = (scalars.big_endian_float32 if host_little
               else scalars.little_endian_float32)
    result = convert(1.0)
    assert isinstance(result, numpy.float32)
    assert result.tobytes() == struct.pack("=f", 1.0)[::-1]
    for value in (1.0, -2.5, 0.0, math.inf, -math.inf):
        assert convert(convert(value)) == value
    assert math.isnan(convert(convert(math.nan)))


def test_float32_bits(host_little):
    patterns = [
        0x0100807F,  # finite, reverses to a signalling NaN
        0x7F800001,  # signalling NaN
        0x7FC00123,  # NaN with payload
        0x7F800000,  # inf
        0xFF800000,  # -inf
        0x80000000,  # -0.0
        0x3F800000,  # 1.0
    ]
    for bits in patterns:
        value = _ffrombits(bits)
        for fn in (scalars.big_endian_float32, scalars.little_endian_float32):
            once = fn(value)
            assert isinstance(once, numpy.float32)
            assert _fbits(fn(once)) == bits

    value = _ffrombits(0x0100807F)
    convert = (scalars.big_endian_float32 if host_little
               else scalars.little_endian_float32)
    assert _fbits(convert(value)) == 0x7F800001
    expected = 0x7F800001 if host_little else 0x0100807F
    assert _fbits(scalars.convert("float32", value, "big")) == expected


def test_convert(host_little):
    assert (scalars.convert("uint16", 0xABCD, "little") ==
            scalars.little_endian_uint16(0xABCD))
    assert (scalars.convert("int32", 0x01020304, "big") ==
            scalars.big_endian_int32(0x01020304))
    assert scalars.convert("int8", -7, "big") == -7

    with pytest.raises(ValueError):
        scalars.convert("int32", 1, "network")


def test_input_not_modified(host_little):
    value = 0x0A0B
    scalars.big_endian_uint16(value)
    scalars.little_endian_uint16(value)
    assert value == 0x0A0B
