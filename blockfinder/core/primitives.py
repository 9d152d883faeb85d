import datetime

from .errors import InsufficientDataError, NetworkMismatchError
from .hashing import double_sha256, header_hash_hex
from .params import (
    MAINNET, MAGIC_SIZE, LENGTH_SIZE, HEADER_SIZE, HASH_SIZE,
    ENTRY_COUNT_SIZE, BLOCK_PREFIX_SIZE,
)
from .serialization import (
    FieldCursor,
    encode_uint32, decode_uint32,
    uint32_from_bytes, decode_varint,
)


class BlockInfo:
    """
    The 8-byte framing unit in front of every block in a blk*.dat file:
    network magic followed by the little-endian size of the block that follows.
    """

    def __init__(self, height, magic_bytes, size, params=MAINNET):
        self.height = height
        self.magic_bytes = magic_bytes
        self.size = size
        self.params = params

    def serialize(self):
        return self.magic_bytes + self.size

    @classmethod
    def deserialize(cls, f, height, params=MAINNET):
        magic_bytes = f.read(MAGIC_SIZE, "network magic")
        size = f.read(LENGTH_SIZE, "block size")
        return cls(height, magic_bytes, size, params)

    @classmethod
    def for_payload(cls, height, payload_length, params=MAINNET):
        return cls(height, params.magic, encode_uint32(payload_length), params)

    def network_hex(self):
        # Magic is compared in stream order, unlike the size field
        return self.magic_bytes.hex()

    def validate_network(self):
        if self.network_hex() != self.params.magic_hex:
            raise NetworkMismatchError(self.network_hex(), self.params.magic_hex, self.height)

    @property
    def payload_length(self):
        return uint32_from_bytes(self.size, 'little')

    def to_dict(self):
        return {
            'height': self.height,
            'network': self.network_hex(),
            'block_size': self.payload_length,
        }

    def __eq__(self, other):
        if not isinstance(other, BlockInfo):
            return NotImplemented
        return (self.height, self.magic_bytes, self.size) == (other.height, other.magic_bytes, other.size)

    def __repr__(self):
        return f"BlockInfo(height={self.height}, network={self.network_hex()}, size={self.payload_length})"


class BlockHeader:
    def __init__(self, version=1, prev_block=b'\x00'*32, merkle_root=b'\x00'*32, timestamp=0, bits=0x1d00ffff, nonce=0):
        self.version = version
        self.prev_block = prev_block
        self.merkle_root = merkle_root
        self.timestamp = timestamp
        self.bits = bits
        self.nonce = nonce

    def serialize(self):
        return (
            encode_uint32(self.version) +
            self.prev_block +
            self.merkle_root +
            encode_uint32(self.timestamp) +
            encode_uint32(self.bits) +
            encode_uint32(self.nonce)
        )

    @classmethod
    def parse(cls, raw_header):
        """Split exactly 80 header bytes front to back into the six header fields."""
        if len(raw_header) != HEADER_SIZE:
            raise InsufficientDataError("block header", HEADER_SIZE, len(raw_header))
        return cls.deserialize(FieldCursor(raw_header))

    @classmethod
    def deserialize(cls, f):
        version = decode_uint32(f, "version")
        prev_block = f.read(HASH_SIZE, "previous block hash")
        merkle_root = f.read(HASH_SIZE, "merkle root")
        timestamp = decode_uint32(f, "timestamp")
        bits = decode_uint32(f, "target")
        nonce = decode_uint32(f, "nonce")
        return cls(version, prev_block, merkle_root, timestamp, bits, nonce)

    @property
    def prev_block_hex(self):
        return self.prev_block.hex()

    @property
    def merkle_root_hex(self):
        return self.merkle_root.hex()

    @property
    def time_utc(self):
        return datetime.datetime.fromtimestamp(self.timestamp, tz=datetime.timezone.utc)

    def get_hash(self):
        return double_sha256(self.serialize())

    @property
    def hash(self):
        return header_hash_hex(self.serialize())

    @property
    def target(self):
        """Expand compact bits into the full 256-bit target."""
        exponent = self.bits >> 24
        coefficient = self.bits & 0xffffff
        if exponent <= 3:
            return coefficient >> (8 * (3 - exponent))
        return coefficient * (256**(exponent - 3))

    @property
    def difficulty(self):
        # Difficulty 1 target is compact 0x1d00ffff
        target_1 = 0xffff * (256**(0x1d - 3))
        target = self.target
        if target == 0: return 0
        return target_1 / target

    def to_dict(self):
        return {
            'version': self.version,
            'prev_block': self.prev_block_hex,
            'merkle_root': self.merkle_root_hex,
            'timestamp': self.timestamp,
            'bits': self.bits,
            'nonce': self.nonce,
            'hash': self.hash,
        }

    def __repr__(self):
        return f"BlockHeader({self.hash})"


class Block:
    def __init__(self, header=None, entry_count=b'\x00'*4, payload=b'', params=MAINNET):
        self.header = header if header else BlockHeader()
        self.entry_count_bytes = entry_count
        self.payload = payload
        self.params = params

    def serialize(self):
        return self.header.serialize() + self.entry_count_bytes + self.payload

    @classmethod
    def deserialize(cls, f, payload_length, params=MAINNET):
        if payload_length < BLOCK_PREFIX_SIZE:
            raise InsufficientDataError("block payload", BLOCK_PREFIX_SIZE, payload_length, f.offset)
        raw_header = f.read(HEADER_SIZE, "block header")
        entry_count = f.read(ENTRY_COUNT_SIZE, "tx count")
        payload = f.read(payload_length - BLOCK_PREFIX_SIZE, "tx data")
        return cls(BlockHeader.parse(raw_header), entry_count, payload, params)

    @property
    def entry_count(self):
        return uint32_from_bytes(self.entry_count_bytes, self.params.entry_count_byteorder)

    @property
    def tx_count(self):
        """Transaction count as stored on disk: a CompactSize at the start of the count bytes."""
        return decode_varint(FieldCursor(self.entry_count_bytes + self.payload))

    @property
    def size(self):
        return BLOCK_PREFIX_SIZE + len(self.payload)

    def get_hash(self):
        return self.header.get_hash()

    @property
    def hash(self):
        return self.header.hash

    def to_dict(self, full_payload=True, preview_bytes=64):
        payload = self.payload if full_payload else self.payload[:preview_bytes]
        return {
            'header': self.header.to_dict(),
            'entry_count': self.entry_count,
            'payload_length': len(self.payload),
            'payload': payload.hex(),
        }
