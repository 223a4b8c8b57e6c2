"""
Byte-level comparison of two equal-length regions.

Three granularities:
  compare_byte   one byte, counts 1 when different
  compare_word   one 16-bit value, counts 2 when any bit differs
  compare_bytes  a byte array, counts every differing offset

Passing printer=None suppresses output; the count is returned either way.
None of these functions keep state between calls.
"""

WORD_SIZE = 2


def diff_offsets(curr, comp):
    """Offsets at which two equal-length buffers differ."""
    if len(curr) != len(comp):
        raise ValueError(f"Buffers differ in length: {len(curr)} != {len(comp)}")
    return [i for i, (a, b) in enumerate(zip(curr, comp)) if a != b]


def compare_byte(name, buffer_offset, curr, comp, printer=None):
    """Compare a single byte. Returns 1 if it changed, otherwise 0."""
    if curr == comp:
        return 0
    if printer is not None:
        printer.print_buffer_info(name, buffer_offset, WORD_SIZE)
        printer.print_comparison(0, None, curr, comp)
        printer.print_bytes_changed(1)
    return 1


def compare_word(name, buffer_offset, curr, comp, printer=None):
    """Compare a 16-bit value as one unit. Returns 2 if it changed, otherwise 0."""
    if curr == comp:
        return 0
    if printer is not None:
        printer.print_buffer_info(name, buffer_offset, WORD_SIZE)
        printer.print_comparison(0, None, curr, comp, width=WORD_SIZE)
        printer.print_bytes_changed(WORD_SIZE)
    return WORD_SIZE


def compare_bytes(name, buffer_offset, curr, comp, printer=None, offset_name=None):
    """Compare two byte arrays offset by offset.

    Args:
        name: buffer name shown in the header
        buffer_offset: where the buffer starts inside its slot/file
        curr, comp: equal-length bytes-like objects
        printer: ConsolePrinter, or None to suppress output
        offset_name: optional callable(offset) -> label or None

    Returns:
        Number of differing offsets.
    """
    offsets = diff_offsets(curr, comp)
    if printer is None or not offsets:
        return len(offsets)

    printer.print_buffer_info(name, buffer_offset, len(comp))
    for offset in offsets:
        label = offset_name(offset) if offset_name is not None else None
        printer.print_comparison(offset, label, curr[offset], comp[offset])
    printer.print_bytes_changed(len(offsets))
    return len(offsets)


def named_offsets(curr, comp, offset_name):
    """Map every differing offset that has a label to that label."""
    names = {}
    for offset in diff_offsets(curr, comp):
        label = offset_name(offset)
        if label is not None:
            names[offset] = label
    return names
