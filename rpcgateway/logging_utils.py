import sys
import logging
from typing import Optional, Union

from rpcgateway import env


def logging_basic_config(
    filename: Optional[str] = None, level: Union[int, str, None] = None
):
    format = "%(asctime)s - %(name)s [%(levelname)s] - %(message)s"
    if level is None:
        level = env.LOGGING_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    if filename is not None:
        logging.basicConfig(level=level, format=format, filename=filename)
    else:
        # stdout is reserved for command output
        logging.basicConfig(level=level, format=format, stream=sys.stderr)

    # urllib3 logs every pooled connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)
