"""Tests for savestate conversion hooks."""

import io

import pytest
import zstandard

from sramcompare.errors import ConversionError
from sramcompare.flags import ComparisonFlags
from sramcompare.options import Options
from sramcompare.savestate import (
    CONVERTERS, SavestateFormat, convert_savestate, extract_sram, register_converter,
)


def compress(data):
    return zstandard.ZstdCompressor().compress(data)


class TestZstdFormat:
    def test_scans_for_frame(self, save_bytes):
        state = b"STATEHDR" * 3 + compress(save_bytes)
        assert convert_savestate(io.BytesIO(state), "zstd").read() == save_bytes

    def test_type_is_case_insensitive(self, save_bytes):
        state = compress(save_bytes)
        assert convert_savestate(io.BytesIO(state), "ZSTD").read() == save_bytes

    def test_no_frame(self):
        with pytest.raises(ConversionError):
            convert_savestate(io.BytesIO(b"not a savestate"), "zstd")

    def test_unsized_frame(self, save_bytes):
        cctx = zstandard.ZstdCompressor(write_content_size=False)
        state = cctx.compress(save_bytes)
        assert extract_sram(state, SavestateFormat("zstd")) == save_bytes


class TestPpssppFormat:
    def test_fixed_header_and_offset(self, save_bytes):
        payload = b"\xee" * 0x48 + save_bytes
        state = b"\x00" * 0xB0 + compress(payload)
        assert convert_savestate(io.BytesIO(state), "ppsspp").read() == save_bytes

    def test_truncated(self):
        with pytest.raises(ConversionError):
            convert_savestate(io.BytesIO(b"\x00" * 0x10), "ppsspp")


class TestRegistry:
    def test_unknown_type(self):
        with pytest.raises(ConversionError):
            convert_savestate(io.BytesIO(b""), "nope")

    def test_missing_type(self):
        with pytest.raises(ConversionError):
            convert_savestate(io.BytesIO(b""), None)

    def test_custom_converter(self):
        register_converter("reverse", lambda stream: io.BytesIO(stream.read()[::-1]))
        try:
            assert convert_savestate(io.BytesIO(b"\x01\x02"), "reverse").read() == b"\x02\x01"
        finally:
            del CONVERTERS["reverse"]

    def test_sized_region(self):
        fmt = SavestateFormat("sized", sram_offset=2, sram_size=4)
        assert extract_sram(compress(bytes(range(10))), fmt) == bytes([2, 3, 4, 5])
        with pytest.raises(ConversionError):
            extract_sram(compress(bytes(3)), fmt)


def test_compare_savestates(tmp_path, handler, save_bytes):
    changed = bytearray(save_bytes)
    changed[3] = 0xFF
    curr = tmp_path / "now.state"
    comp = tmp_path / "before.state"
    curr.write_bytes(compress(save_bytes))
    comp.write_bytes(compress(bytes(changed)))

    options = Options(current_file_path=str(curr), comparison_file_path=str(comp), savestate_type="zstd",
                      comparison_flags=ComparisonFlags.SlotByteByByteComparison)
    assert handler.compare(options) == 1
