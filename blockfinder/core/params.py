from dataclasses import dataclass

__all__ = [
    "NetworkParams", "MAINNET", "TESTNET", "SIGNET", "REGTEST", "NETWORKS", "get_network",
    "MAGIC_SIZE", "LENGTH_SIZE", "HEADER_SIZE", "HASH_SIZE", "ENTRY_COUNT_SIZE",
    "BLOCK_PREFIX_SIZE",
]

# Byte widths of the blk*.dat record layout
MAGIC_SIZE = 4
LENGTH_SIZE = 4
HEADER_SIZE = 80
HASH_SIZE = 32
ENTRY_COUNT_SIZE = 4
BLOCK_PREFIX_SIZE = HEADER_SIZE + ENTRY_COUNT_SIZE


@dataclass(frozen=True)
class NetworkParams:
    """Immutable decoding parameters for one network's block files."""
    name: str
    magic: bytes
    entry_count_byteorder: str = "big"

    def __post_init__(self):
        if len(self.magic) != MAGIC_SIZE:
            raise ValueError(f"Network magic must be {MAGIC_SIZE} bytes, got {len(self.magic)}")
        if self.entry_count_byteorder not in ("big", "little"):
            raise ValueError(f"Unknown byte order: {self.entry_count_byteorder}")

    @property
    def magic_hex(self):
        return self.magic.hex()


MAINNET = NetworkParams(name="mainnet", magic=b"\xf9\xbe\xb4\xd9")
TESTNET = NetworkParams(name="testnet", magic=b"\x0b\x11\x09\x07")
SIGNET = NetworkParams(name="signet", magic=b"\x0a\x03\xcf\x40")
REGTEST = NetworkParams(name="regtest", magic=b"\xfa\xbf\xb5\xda")

NETWORKS = {p.name: p for p in (MAINNET, TESTNET, SIGNET, REGTEST)}


def get_network(name):
    return NETWORKS[name.lower()]
