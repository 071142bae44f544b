"""Documentation lookup relative to the hub install prefix.

Help pages are looked up in these directories, in order:

* <prefix>/man/<doc>
* <prefix>/share/man/man1/<doc>
"""

import logging
import os
from typing import List

from .exceptions import DocumentNotFoundError

logger = logging.getLogger(__name__)


def candidates(doc_name: str, install_prefix: str) -> List[str]:
    """Return the candidate paths for a document, highest precedence first.

    Examples:
        >>> candidates('hub.1', '/usr/local')
        ['/usr/local/man/hub.1', '/usr/local/share/man/man1/hub.1']
    """
    return [
        os.path.join(install_prefix, "man", doc_name),
        os.path.join(install_prefix, "share", "man", "man1", doc_name),
    ]


def locate(doc_name: str, install_prefix: str) -> str:
    """Find a bundled documentation file.

    Existence is checked with stat only; the file is never opened here.

    Args:
        doc_name: File name, e.g. 'hub-sync.1' or 'hub-sync.1.txt'
        install_prefix: Directory the hub installation lives under

    Returns:
        Path of the first candidate that exists

    Raises:
        DocumentNotFoundError: If no candidate exists
    """
    paths = candidates(doc_name, install_prefix)
    for path in paths:
        try:
            os.stat(path)
        except OSError:
            logger.debug("no documentation at %s", path)
            continue
        return path
    raise DocumentNotFoundError(doc_name, paths)
