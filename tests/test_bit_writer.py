from jpegtune.bit_writer import BitWriter, has_zero_byte


def test_has_zero_byte_detection():
    assert has_zero_byte(0x0101010101010101) == 0
    assert bool(has_zero_byte(0x0101010101010100)) is True
    assert bool(has_zero_byte(0x00FFFFFFFFFFFFFF)) is True
    assert has_zero_byte(0xFFFFFFFFFFFFFFFF) == 0


def test_full_byte_roundtrip():
    writer = BitWriter(16)
    writer.write_bits(8, 0xAB)
    writer.jump_to_byte_boundary()
    assert writer.getvalue() == b"\xab"
    assert writer.overflow is False


def test_partial_byte_padded_with_ones():
    writer = BitWriter(16)
    writer.write_bits(4, 0b1010)
    writer.jump_to_byte_boundary()
    assert writer.getvalue() == b"\xaf"


def test_ff_is_stuffed():
    writer = BitWriter(16)
    writer.write_bits(8, 0xFF)
    writer.jump_to_byte_boundary()
    assert writer.getvalue() == b"\xff\x00"


def test_emit_byte_stuffs_ff():
    writer = BitWriter(4)
    writer.emit_byte(0xFF)
    writer.emit_byte(0x12)
    assert writer.getvalue() == b"\xff\x00\x12"


def test_many_bits_flush_in_order():
    payload = bytes(range(1, 21))
    writer = BitWriter(64)
    for byte in payload:
        writer.write_bits(8, byte)
    writer.jump_to_byte_boundary()
    assert writer.getvalue() == payload
    assert writer.overflow is False


def test_stuffing_inside_flushed_chunk():
    payload = bytes([1, 2, 0xFF, 4, 5, 6, 7])
    writer = BitWriter(32)
    for byte in payload:
        writer.write_bits(8, byte)
    writer.jump_to_byte_boundary()
    assert writer.getvalue() == bytes([1, 2, 0xFF, 0, 4, 5, 6, 7])


def test_overflow_flag_when_buffer_too_small():
    writer = BitWriter(1)
    writer.write_bits(8, 0x11)
    writer.write_bits(8, 0x22)
    writer.jump_to_byte_boundary()
    assert writer.overflow is True
    assert writer.getvalue() == b"\x11"


def test_fast_path_needs_room_beyond_six_bytes():
    writer = BitWriter(6)
    writer.write_bits(48, 0x010203040506)
    assert writer.overflow is True
    roomy = BitWriter(7)
    roomy.write_bits(48, 0x010203040506)
    assert roomy.overflow is False
    assert roomy.getvalue() == bytes([1, 2, 3, 4, 5, 6])