import argparse
import logging
import sys

from blockfinder import __version__
from blockfinder.core.errors import BlockFinderError
from blockfinder.core.finder import BlockFinder
from blockfinder.core.params import NETWORKS, get_network
from blockfinder.report.renderer import ReportRenderer
from blockfinder.storage.blockstore import BlockStore, DEFAULT_BLOCK_FILE


def non_negative_int(value):
    try:
        height = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid block height: {value!r}")
    if height < 0:
        raise argparse.ArgumentTypeError(f"block height must be non-negative, got {height}")
    return height


def build_parser():
    parser = argparse.ArgumentParser(
        prog="bitcoin-block-finder",
        description="A bitcoin block parser that returns a block at a given height",
    )
    parser.add_argument("-b", "--block-at-height", type=non_negative_int, required=True,
                        help="The height of a block to search for. Must be a non-negative integer.")
    parser.add_argument("-f", "--file", default=DEFAULT_BLOCK_FILE,
                        help=f"Block file to scan (default: {DEFAULT_BLOCK_FILE})")
    parser.add_argument("--network", default="mainnet", choices=sorted(NETWORKS),
                        help="Network whose magic bytes frame the file")
    parser.add_argument("--json", action="store_true", help="Print the block as JSON")
    parser.add_argument("--full-payload", action="store_true",
                        help="Print all transaction bytes instead of a preview")
    parser.add_argument("--debug", action="store_true", help="Output extra debugging information")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    params = get_network(args.network)
    try:
        raw_bytes = BlockStore().read_file(args.file)
        found = BlockFinder(params).find_block(raw_bytes, args.block_at_height)
    except (BlockFinderError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    renderer = ReportRenderer(network_name=params.name, full_payload=args.full_payload)
    if args.json:
        print(renderer.render_json(found))
    else:
        print(renderer.render_text(found))
    return 0


if __name__ == "__main__":
    sys.exit(main())
