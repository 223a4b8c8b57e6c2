"""
Savestate -> raw save conversion hooks.

Converters are looked up by the savestate type string from the options.
Each one takes a binary stream and returns a new stream holding the raw
save bytes. The built-in formats unpack a zstd-compressed payload, the way
PPSSPP stores its states:

  zstd    scan for the first zstd frame, use the whole payload
  ppsspp  fixed 0xB0 byte header, memory starts 0x48 bytes into the payload

Other emulators plug in with register_converter().
"""

import dataclasses
import functools
import io
import logging

import zstandard

from sramcompare.errors import ConversionError

log = logging.getLogger(__name__)

ZSTD_MAGIC = b"\x28\xb5\x2f\xfd"
MAX_OUTPUT_SIZE = 256 * 1024 * 1024

CONVERTERS = {}


@dataclasses.dataclass(frozen=True)
class SavestateFormat:
    name: str
    header_size: int = None  # None: scan for the zstd magic
    sram_offset: int = 0
    sram_size: int = None  # None: up to the end of the payload


def register_converter(name, converter):
    """Register `converter(stream) -> stream` for savestate type `name`."""
    CONVERTERS[name.lower()] = converter
    return converter


def find_zstd_frame(data):
    """Offset of the first zstd frame in `data`, or -1."""
    return data.find(ZSTD_MAGIC)


def decompress_payload(compressed):
    """Decompress one zstd frame, falling back to streaming for unsized frames."""
    dctx = zstandard.ZstdDecompressor()
    try:
        return dctx.decompress(compressed, max_output_size=MAX_OUTPUT_SIZE)
    except zstandard.ZstdError as e:
        log.debug("one-shot decompression failed (%s), streaming instead", e)

    chunks = []
    with dctx.stream_reader(io.BytesIO(compressed)) as reader:
        while True:
            chunk = reader.read(65536)
            if not chunk:
                break
            chunks.append(chunk)
    return b"".join(chunks)


def extract_sram(data, fmt):
    """Pull the raw save bytes out of a whole savestate file."""
    if fmt.header_size is None:
        start = find_zstd_frame(data)
        if start < 0:
            raise ConversionError(f"No zstd frame found in {fmt.name} savestate")
    else:
        start = fmt.header_size
        if start >= len(data):
            raise ConversionError(f"Savestate is smaller than its {fmt.header_size:#x} byte header")

    try:
        payload = decompress_payload(data[start:])
    except zstandard.ZstdError as e:
        raise ConversionError(f"Cannot decompress {fmt.name} savestate: {e}") from e

    end = None if fmt.sram_size is None else fmt.sram_offset + fmt.sram_size
    sram = payload[fmt.sram_offset:end]
    if not sram or (fmt.sram_size is not None and len(sram) < fmt.sram_size):
        raise ConversionError(f"Savestate payload of {len(payload)} bytes holds no save data")
    log.debug("converted %s savestate: %d -> %d bytes", fmt.name, len(data), len(sram))
    return sram


def _convert_format(fmt, stream):
    return io.BytesIO(extract_sram(stream.read(), fmt))


def register_format(fmt):
    return register_converter(fmt.name, functools.partial(_convert_format, fmt))


register_format(SavestateFormat("zstd"))
register_format(SavestateFormat("ppsspp", header_size=0xB0, sram_offset=0x48))


def convert_savestate(stream, savestate_type):
    """Convert a savestate stream to a raw save stream."""
    if not savestate_type:
        raise ConversionError("File is not a raw save; set a savestate type to convert it")
    converter = CONVERTERS.get(savestate_type.lower())
    if converter is None:
        raise ConversionError(f"Unknown savestate type: {savestate_type!r} (known: {', '.join(sorted(CONVERTERS))})")
    result = converter(stream)
    if result is None:
        raise ConversionError(f"Savestate converter {savestate_type!r} returned nothing")
    return result
