# This source code is licensed under the license found in the
# LICENSE file in the root directory of this source tree.

import logging
import os


def create_logger(logging_dir=None, level=logging.INFO):
    """
    Create a logger that writes to the console and, given a directory, to log.txt.
    """
    handlers = [logging.StreamHandler()]
    if logging_dir is not None:
        os.makedirs(logging_dir, exist_ok=True)
        handlers.append(logging.FileHandler(f"{logging_dir}/log.txt"))
    logging.basicConfig(
        level=level,
        format="[\033[34m%(asctime)s\033[0m] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )
    return logging.getLogger(__name__)
