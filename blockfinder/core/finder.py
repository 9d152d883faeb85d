import logging
from collections import namedtuple

from blockfinder.core.errors import BlockFinderError, BlockNotFoundError
from blockfinder.core.params import MAINNET
from blockfinder.core.primitives import Block, BlockInfo
from blockfinder.core.serialization import FieldCursor

logger = logging.getLogger("BlockFinder")

FoundBlock = namedtuple("FoundBlock", ["block_info", "block"])


class BlockFinder:
    """
    Linear locator over the contents of a single blk*.dat file.
    Every lookup rescans from the first byte; nothing is indexed or cached.
    """

    def __init__(self, params=MAINNET):
        self.params = params

    def iter_blocks(self, raw_bytes):
        """
        Yield (BlockInfo, Block) for every record in file order.
        Stops cleanly only when the stream is exhausted on a record boundary;
        any short read or foreign magic is raised to the caller.
        """
        cursor = FieldCursor(raw_bytes)
        height = 0
        while not cursor.at_end():
            block_info = BlockInfo.deserialize(cursor, height, self.params)
            block_info.validate_network()
            # Always decode the block so the cursor lands on the next framing unit
            block = Block.deserialize(cursor, block_info.payload_length, self.params)
            logger.debug(f"Decoded block {height} ({block_info.payload_length} bytes) ending at offset {cursor.offset}")
            yield block_info, block
            height += 1

    def find_block(self, raw_bytes, height):
        if height < 0:
            raise ValueError(f"Block height must be non-negative, got {height}")

        logger.info(f"Scanning {len(raw_bytes)} bytes for block at height {height} ({self.params.name})")
        scanned = 0
        try:
            for block_info, block in self.iter_blocks(raw_bytes):
                scanned += 1
                if block_info.height == height:
                    logger.info(f"Found block {height}: {block.hash}")
                    return FoundBlock(block_info, block)
        except BlockFinderError as e:
            logger.info(f"Scan aborted after {scanned} blocks: {e}")
            raise

        logger.info(f"Block {height} not found; file holds {scanned} blocks")
        raise BlockNotFoundError(height, scanned)
