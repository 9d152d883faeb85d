import json
import logging
import os

import jinja2

from blockfinder.core.errors import InsufficientDataError

logger = logging.getLogger("ReportRenderer")

PAYLOAD_PREVIEW_BYTES = 64


class ReportRenderer:
    """Turns a FoundBlock into human-readable text or JSON. Holds no decoding logic."""

    def __init__(self, network_name=None, full_payload=False, template_dir=None):
        self.network_name = network_name
        self.full_payload = full_payload

        if template_dir is None:
            template_dir = os.path.join(os.path.dirname(os.path.dirname(__file__)), 'templates')
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(template_dir),
            autoescape=jinja2.select_autoescape(['html', 'xml']),
            undefined=jinja2.StrictUndefined,
        )

    def _tx_count(self, block):
        try:
            return block.tx_count
        except InsufficientDataError as e:
            logger.warning(f"Could not read CompactSize tx count: {e}")
            return None

    def render_text(self, found):
        block_info, block = found
        if self.full_payload:
            shown = block.payload
        else:
            shown = block.payload[:PAYLOAD_PREVIEW_BYTES]

        template = self.jinja_env.get_template('block_report.txt')
        return template.render(
            info=block_info,
            header=block.header,
            block=block,
            network_name=self.network_name,
            tx_count=self._tx_count(block),
            payload_hex=shown.hex(),
            shown_bytes=len(shown),
            truncated=len(shown) < len(block.payload),
        )

    def render_json(self, found):
        block_info, block = found
        block_dict = block.to_dict(full_payload=self.full_payload, preview_bytes=PAYLOAD_PREVIEW_BYTES)
        tx_count = self._tx_count(block)
        if tx_count is not None:
            block_dict['tx_count'] = tx_count
        return json.dumps({
            'block_info': block_info.to_dict(),
            'block': block_dict,
        }, indent=2)
