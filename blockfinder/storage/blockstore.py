import logging
import os

logger = logging.getLogger("BlockStore")

DEFAULT_BLOCK_FILE = "blk00000.dat"


class BlockStore:
    """Read-only access to the blk*.dat files of a blocks directory."""

    def __init__(self, blocks_dir="."):
        self.blocks_dir = blocks_dir

    def get_file_path(self, file_num=0):
        return os.path.join(self.blocks_dir, f"blk{file_num:05d}.dat")

    def read_file(self, path=None):
        """Load an entire block file into memory."""
        file_path = path if path is not None else self.get_file_path(0)
        if not os.path.exists(file_path):
            raise FileNotFoundError(f"Block file {file_path} not found")

        with open(file_path, 'rb') as f:
            data = f.read()
        logger.debug(f"Loaded {len(data)} bytes from {file_path}")
        return data
