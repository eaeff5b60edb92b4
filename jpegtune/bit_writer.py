"""Packing of entropy-coded bits into JPEG bytes with 0xff stuffing."""

_MASK64 = (1 << 64) - 1
_ONES = 0x0101010101010101
_HIGHS = 0x8080808080808080


def has_zero_byte(x: int) -> int:
    """Return non-zero if and only if the 64-bit value x has a zero byte."""
    x &= _MASK64
    return ((x - _ONES) & _MASK64) & ~x & _HIGHS


class BitWriter:
    """Writes bits most-significant first into a fixed-size output buffer."""

    def __init__(self, length: int) -> None:
        self.len = length
        self.data = bytearray(length)
        self.pos = 0
        self.put_buffer = 0
        self.put_bits = 64
        self.overflow = False

    def write_bits(self, nbits: int, bits: int) -> None:
        """Append the low nbits of bits to the stream."""
        self.put_bits -= nbits
        self.put_buffer = (self.put_buffer | (bits << self.put_bits)) & _MASK64
        if self.put_bits > 16:
            return
        top = [(self.put_buffer >> shift) & 0xFF for shift in range(56, 8, -8)]
        if has_zero_byte(~self.put_buffer | 0xFFFF):
            for byte in top:
                self.emit_byte(byte)
        elif self.pos + 6 < self.len:
            self.data[self.pos:self.pos + 6] = bytes(top)
            self.pos += 6
        else:
            self.overflow = True
        self.put_buffer = (self.put_buffer << 48) & _MASK64
        self.put_bits += 48

    def emit_byte(self, byte: int) -> None:
        """Write one byte, followed by a zero byte if it is 0xff."""
        if self.pos < self.len:
            self.data[self.pos] = byte
            self.pos += 1
        else:
            self.overflow = True
        if byte == 0xFF:
            self.emit_byte(0)

    def jump_to_byte_boundary(self) -> None:
        """Flush pending bits, padding the last partial byte with ones."""
        while self.put_bits <= 56:
            self.emit_byte((self.put_buffer >> 56) & 0xFF)
            self.put_buffer = (self.put_buffer << 8) & _MASK64
            self.put_bits += 8
        if self.put_bits < 64:
            padmask = 0xFF >> (64 - self.put_bits)
            self.emit_byte((((self.put_buffer >> 56) & 0xFF) & ~padmask) | padmask)
        self.put_buffer = 0
        self.put_bits = 64

    def getvalue(self) -> bytes:
        """Return the bytes written so far."""
        return bytes(self.data[:self.pos])