"""
Stand-in for the language model call. No model is contacted.
"""
import logging

logger = logging.getLogger(__name__)


class PlaceholderProcessor:
    """Formats the input into the configured RESPONSE_TEMPLATE."""

    def __init__(self, template: str):
        self.template = template

    def process(self, input_text: str) -> str:
        logger.debug("Processing input of length %s", len(input_text))
        return self.template.format(input_text=input_text)
