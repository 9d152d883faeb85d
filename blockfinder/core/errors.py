class BlockFinderError(Exception):
    """Base class for every failure raised while scanning a block file."""


class InsufficientDataError(BlockFinderError, EOFError):
    """The stream ran out before a fixed-width field could be filled."""

    def __init__(self, field, needed, available, offset=None):
        self.field = field
        self.needed = needed
        self.available = available
        self.offset = offset
        where = f" at offset {offset}" if offset is not None else ""
        super().__init__(
            f"Insufficient data for {field}{where}: need {needed} bytes, have {available}"
        )


class NetworkMismatchError(BlockFinderError, ValueError):
    def __init__(self, found_hex, expected_hex, height=None):
        self.found_hex = found_hex
        self.expected_hex = expected_hex
        self.height = height
        super().__init__(
            f"Network validation failed at block {height}: "
            f"magic {found_hex} != expected {expected_hex}"
        )


class BlockNotFoundError(BlockFinderError, LookupError):
    def __init__(self, height, blocks_scanned):
        self.height = height
        self.blocks_scanned = blocks_scanned
        super().__init__(
            f"Failed to find block at height {height} ({blocks_scanned} blocks scanned)"
        )
