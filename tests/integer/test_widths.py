"""Tests for fixed-width integer type descriptions."""

import numpy as np
import pytest

from midpoint.widths import (
    INT8,
    INT16,
    INT32,
    INT64,
    INT_TYPES,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    WIDENED_DTYPES,
    IntType,
    int_type_of,
)


class TestIntType:
    def test_signed_range(self) -> None:
        assert INT8.min == -128
        assert INT8.max == 127
        assert INT64.min == -(2 ** 63)
        assert INT64.max == 2 ** 63 - 1

    def test_unsigned_range(self) -> None:
        assert UINT8.min == 0
        assert UINT8.max == 255
        assert UINT64.max == 0xFFFFFFFFFFFFFFFF

    def test_names(self) -> None:
        assert [t.name for t in INT_TYPES] == [
            "int8", "int16", "int32", "int64",
            "uint8", "uint16", "uint32", "uint64",
        ]

    def test_contains(self) -> None:
        assert INT16.contains(-32768)
        assert not INT16.contains(32768)
        assert UINT16.contains(65535)
        assert not UINT16.contains(-1)

    def test_rejects_sub_byte_width(self) -> None:
        """There is no 1-bit (boolean) integer type."""
        with pytest.raises(TypeError):
            IntType(1, False)

    def test_rejects_non_byte_multiple(self) -> None:
        with pytest.raises(TypeError):
            IntType(12, True)

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            INT32.bits = 16  # type: ignore[misc]


class TestCheck:
    def test_check_passes_through(self) -> None:
        assert UINT32.check(7) == 7

    def test_check_raises_overflow(self) -> None:
        with pytest.raises(OverflowError, match="uint32"):
            UINT32.check(-1)


class TestIntTypeOf:
    @pytest.mark.parametrize("dtype,expected", [
        (np.int8, INT8), (np.int16, INT16), (np.int32, INT32), (np.int64, INT64),
        (np.uint8, UINT8), (np.uint16, UINT16), (np.uint32, UINT32), (np.uint64, UINT64),
    ])
    def test_scalar_mapping(self, dtype: type, expected: IntType) -> None:
        assert int_type_of(dtype(0)) == expected
        assert int_type_of(np.dtype(dtype)) == expected

    def test_bool_rejected(self) -> None:
        with pytest.raises(TypeError, match="Boolean"):
            int_type_of(np.True_)

    def test_float_rejected(self) -> None:
        with pytest.raises(TypeError):
            int_type_of(np.float32(1.0))


class TestWidenedDtypes:
    def test_widened_holds_two_extra_bits(self) -> None:
        for narrow, wide in WIDENED_DTYPES.items():
            itype = int_type_of(narrow)
            wide_type = int_type_of(wide)
            assert wide_type.contains(2 * itype.min)
            assert wide_type.contains(2 * itype.max + 1)

    def test_no_native_widening_for_64_bit(self) -> None:
        assert np.dtype(np.int64) not in WIDENED_DTYPES
        assert np.dtype(np.uint64) not in WIDENED_DTYPES
