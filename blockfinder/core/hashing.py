import hashlib

def double_sha256(data):
    """Calculate double-SHA256 hash (hash(hash(data)))."""
    return hashlib.sha256(hashlib.sha256(data).digest()).digest()

def hash_to_hex(digest):
    """Display form used by explorers and RPC: the digest byte-reversed."""
    return digest[::-1].hex()

def header_hash_hex(header_bytes):
    """Block id for a serialized 80-byte header."""
    return hash_to_hex(double_sha256(header_bytes))
