"""
L4 Execution — Archive extraction.
"""

from __future__ import annotations

import logging
import tarfile
import zipfile
from pathlib import Path

from devsetup.core.errors import ExtractionError

logger = logging.getLogger(__name__)


def extract_archive(archive: Path, dest: Path) -> None:
    """Unpack a ``.tar.gz`` or ``.zip`` archive into ``dest``.

    Raises:
        ExtractionError: Unknown format or a corrupt archive.
    """
    dest.mkdir(parents=True, exist_ok=True)
    name = archive.name

    logger.info("Extracting %s into %s", name, dest)
    try:
        if name.endswith((".tar.gz", ".tgz")):
            with tarfile.open(archive, "r:gz") as tf:
                if hasattr(tarfile, "data_filter"):
                    tf.extractall(dest, filter="data")
                else:
                    tf.extractall(dest)
        elif name.endswith(".zip"):
            with zipfile.ZipFile(archive, "r") as zf:
                zf.extractall(dest)
        else:
            raise ExtractionError(f"Unsupported archive format: {name}")
    except (tarfile.TarError, zipfile.BadZipFile, OSError) as e:
        raise ExtractionError(f"Extraction failed: {e}") from e
