import numpy as np
import pytest

from halffloat import Half, serde


class TestRaw:
    def test_raw_integer(self):
        assert serde.to_raw(Half.ONE) == 0x3C00
        assert serde.from_raw(0xFC01).to_bits() == 0xFC01

    def test_raw_out_of_range(self):
        with pytest.raises(ValueError):
            serde.from_raw(0x10000)


class TestBytes:
    def test_little_endian(self):
        assert serde.to_bytes(Half.ONE) == b"\x00\x3c"
        assert serde.from_bytes(b"\x00\x3c") == Half.ONE

    def test_big_endian(self):
        assert serde.to_bytes(Half.ONE, "big") == b"\x3c\x00"
        assert serde.from_bytes(b"\xfc\x00", byteorder="big") == Half.NEG_INFINITY

    def test_nan_payload_kept(self):
        data = serde.to_bytes(Half.from_bits(0x7D55))
        assert serde.from_bytes(data).to_bits() == 0x7D55

    @pytest.mark.parametrize("data", [b"", b"\x00", b"\x00\x00\x00"])
    def test_wrong_length(self, data):
        with pytest.raises(ValueError):
            serde.from_bytes(data)

    def test_unknown_byteorder(self):
        with pytest.raises(ValueError):
            serde.to_bytes(Half.ONE, "middle")
        with pytest.raises(ValueError):
            serde.unpack(b"\x00\x00", "network")

    def test_pack_unpack(self):
        values = [Half.ZERO, Half.NEG_ZERO, Half.ONE, Half.MAX, Half.from_bits(0xFC01)]
        data = serde.pack(values)
        assert len(data) == 2 * len(values)
        assert data[:2] == b"\x00\x00"
        assert data[2:4] == b"\x00\x80"
        assert [h.to_bits() for h in serde.unpack(data)] == [h.to_bits() for h in values]
        big = serde.pack(values, "big")
        assert [h.to_bits() for h in serde.unpack(big, "big")] == [h.to_bits() for h in values]

    def test_pack_empty(self):
        assert serde.pack([]) == b""
        assert serde.unpack(b"") == []

    def test_unpack_odd_length(self):
        with pytest.raises(ValueError):
            serde.unpack(b"\x00\x3c\x00")

    def test_matches_numpy_buffer(self):
        values = [Half.from_f32(x) for x in (0.5, -3.25, 1000.0)]
        expected = np.array([0.5, -3.25, 1000.0], dtype="<f2").tobytes()
        assert serde.pack(values) == expected


class TestNdarray:
    def test_to_ndarray_is_bit_exact(self):
        bits = [0x0000, 0x8000, 0x3C00, 0x7C00, 0x7D55, 0xFFFF]
        arr = serde.to_ndarray([Half.from_bits(b) for b in bits])
        assert arr.dtype == np.float16
        assert arr.view(np.uint16).tolist() == bits

    def test_from_float16_array(self):
        arr = np.array([[1.0, -2.0], [np.inf, 0.0]], dtype=np.float16)
        values = serde.from_ndarray(arr)
        assert [h.to_bits() for h in values] == [0x3C00, 0xC000, 0x7C00, 0x0000]

    def test_from_float32_array_matches_numpy(self):
        arr = np.array([2000.5, 2001.5, 1e-8, 70000.0, -0.1], dtype=np.float32)
        with np.errstate(over="ignore"):
            expected = arr.astype(np.float16).view(np.uint16).tolist()
        assert [h.to_bits() for h in serde.from_ndarray(arr)] == expected

    def test_from_float64_array(self):
        arr = np.array([1.0, 65520.0, 2.0**-25], dtype=np.float64)
        assert [h.to_bits() for h in serde.from_ndarray(arr)] == [0x3C00, 0x7C00, 0x0000]

    def test_from_integer_array(self):
        with pytest.raises(TypeError):
            serde.from_ndarray(np.array([1, 2, 3]))
