import struct

from .errors import InsufficientDataError


class FieldCursor:
    """
    Forward-only reader over an immutable byte buffer.
    Each read hands back the next `n` bytes in file order and advances the offset.
    """

    def __init__(self, data):
        self.data = bytes(data)
        self.offset = 0

    @property
    def remaining(self):
        return len(self.data) - self.offset

    def at_end(self):
        return self.offset >= len(self.data)

    def read(self, n, field="bytes"):
        """Consume exactly n bytes or raise InsufficientDataError without consuming any."""
        if n < 0:
            raise ValueError(f"Cannot read a negative width ({n}) for {field}")
        if self.remaining < n:
            raise InsufficientDataError(field, n, self.remaining, self.offset)
        chunk = self.data[self.offset:self.offset + n]
        self.offset += n
        return chunk


def encode_uint32(n):
    """Encode a 4-byte unsigned integer (little-endian)."""
    return struct.pack('<I', n)

def decode_uint32(cursor, field="uint32"):
    """Decode a 4-byte unsigned integer (little-endian) from a FieldCursor."""
    return struct.unpack('<I', cursor.read(4, field))[0]

def uint32_from_bytes(data, byteorder='little'):
    if len(data) != 4:
        raise InsufficientDataError("uint32", 4, len(data))
    return int.from_bytes(data, byteorder)

def encode_varint(n):
    """
    Encode a variable-length integer (CompactSize).
    https://en.bitcoin.it/wiki/Protocol_documentation#Variable_length_integer
    """
    if n < 0xfd:
        return struct.pack('<B', n)
    elif n <= 0xffff:
        return b'\xfd' + struct.pack('<H', n)
    elif n <= 0xffffffff:
        return b'\xfe' + struct.pack('<I', n)
    else:
        return b'\xff' + struct.pack('<Q', n)

def decode_varint(cursor):
    """
    Decode a variable-length integer (CompactSize) from a FieldCursor.
    """
    prefix = cursor.read(1, "varint")[0]
    if prefix < 0xfd:
        return prefix
    elif prefix == 0xfd:
        return struct.unpack('<H', cursor.read(2, "varint (uint16)"))[0]
    elif prefix == 0xfe:
        return struct.unpack('<I', cursor.read(4, "varint (uint32)"))[0]
    else: # 0xff
        return struct.unpack('<Q', cursor.read(8, "varint (uint64)"))[0]
