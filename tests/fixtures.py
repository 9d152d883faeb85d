from blockfinder.core.params import MAINNET
from blockfinder.core.primitives import Block, BlockHeader, BlockInfo

# Mainnet genesis block exactly as it appears at the start of blk00000.dat
GENESIS_HEADER_HEX = (
    "01000000"
    "0000000000000000000000000000000000000000000000000000000000000000"
    "3ba3edfd7a7b12b27ac72c3e67768f617fc81bc3888a51323a9fb8aa4b1e5e4a"
    "29ab5f49"
    "ffff001d"
    "1dac2b7c"
)
GENESIS_TX_HEX = (
    "01000000"
    "01"
    "0000000000000000000000000000000000000000000000000000000000000000"
    "ffffffff"
    "4d"
    "04ffff001d0104455468652054696d65732030332f4a616e2f32303039204368616e63656c6c6f72"
    "206f6e206272696e6b206f66207365636f6e64206261696c6f757420666f722062616e6b73"
    "ffffffff"
    "01"
    "00f2052a01000000"
    "43"
    "4104678afdb0fe5548271967f1a67130b7105cd6a828e03909a67962e0ea1f61deb649f6bc3f4cef38c4f3"
    "5504e51ec112de5c384df7ba0b8d578a4c702b6bf11d5fac"
    "00000000"
)
GENESIS_FRAME_HEX = "f9beb4d91d010000"
GENESIS_RECORD = bytes.fromhex(GENESIS_FRAME_HEX + GENESIS_HEADER_HEX + "01" + GENESIS_TX_HEX)
GENESIS_HASH = "000000000019d6689c085ae165831e934ff763ae46a2a6c172b3f1b60a8ce26f"
GENESIS_MERKLE_ROOT_HEX = "3ba3edfd7a7b12b27ac72c3e67768f617fc81bc3888a51323a9fb8aa4b1e5e4a"


def make_block(nonce, payload=b'', prev_block=b'\x00'*32, entry_count=b'\x01\x00\x00\x00'):
    header = BlockHeader(
        version=2,
        prev_block=prev_block,
        merkle_root=bytes([nonce % 256]) * 32,
        timestamp=1231006505 + nonce * 600,
        bits=0x1d00ffff,
        nonce=nonce,
    )
    return Block(header, entry_count, payload)


def frame(block, height=0, params=MAINNET):
    body = block.serialize()
    return BlockInfo.for_payload(height, len(body), params).serialize() + body


def make_chain(count, params=MAINNET):
    """Return (raw_bytes, blocks) for `count` synthetic blocks with varied payload sizes."""
    blocks = []
    raw = b''
    prev = b'\x00'*32
    for i in range(count):
        block = make_block(i + 1, payload=bytes(range(i * 3 % 256)) + b'\xab' * i, prev_block=prev)
        blocks.append(block)
        raw += frame(block, i, params)
        prev = block.get_hash()
    return raw, blocks
