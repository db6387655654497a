"""
Finance Data Download Functions
===============================

This module downloads the pre-joined education finance artifacts from static
hosting into the local cache.

Key Features:
- Streamed downloads with Requests
- Write to a temporary file, then move into place, so a failed download
  never truncates an existing cache file
- Errors propagate to the caller (no retries, no resume)

Main Functions:
- fetch_artifact: Download one artifact URL to a destination path
"""

import logging
import os
import tempfile
from pathlib import Path

import requests

from .config import DOWNLOAD_TIMEOUT


logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192
USER_AGENT = "edfin-data-manager"


def fetch_artifact(
    url: str,
    dest_path: Path | str,
    timeout: float | None = DOWNLOAD_TIMEOUT,
    quiet: bool = False,
) -> Path:
    """
    Download a file and write the full response body to ``dest_path``.

    Parameters
    ----------
    url : str
        Remote artifact URL.
    dest_path : Path | str
        Destination file. Any existing file is replaced only after the
        download completes.
    timeout : float | None, optional
        Requests timeout in seconds. None (the default unless configured)
        waits indefinitely.
    quiet : bool, optional
        Suppress the per-download log record. Default is False.

    Returns
    -------
    Path
        The destination path.

    Raises
    ------
    requests.exceptions.RequestException
        On connection failures or a non-success HTTP status.
    OSError
        If the file cannot be written.
    """
    dest_path = Path(dest_path)
    dest_path.parent.mkdir(parents=True, exist_ok=True)

    if not quiet:
        logger.info("Downloading %s to %s...", url, dest_path)

    headers = {"User-Agent": USER_AGENT}
    fd, tmp_name = tempfile.mkstemp(
        dir=dest_path.parent, prefix=f".{dest_path.name}.", suffix=".part"
    )
    try:
        with os.fdopen(fd, "wb") as f:
            with requests.get(url, headers=headers, stream=True, timeout=timeout) as response:
                response.raise_for_status()
                n_bytes = 0
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    if chunk:
                        f.write(chunk)
                        n_bytes += len(chunk)
        os.replace(tmp_name, dest_path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    logger.debug("Wrote %d bytes to %s", n_bytes, dest_path)
    return dest_path


__all__ = [
    "fetch_artifact",
]
