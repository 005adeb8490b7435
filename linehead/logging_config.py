import logging
import sys


# Configure logging; stderr keeps log records out of the selected lines
def setup_logging(level=logging.WARNING, stream=None):
    logging.basicConfig(
        stream=stream or sys.stderr,
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )
