"""Resume markdown to print-ready HTML."""

from loguru import logger

# Silent as a library; the CLI enables its own records.
logger.disable("resumark")
