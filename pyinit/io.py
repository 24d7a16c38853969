import hashlib
import logging
import os
from pathlib import Path

from pyinit.errors import WriteError
from pyinit.messages import info

logger = logging.getLogger(__name__)

##################################################################################################
# File Reading/Writing
##################################################################################################

def read_bytes_file(path: Path) -> bytes:
    assert isinstance(path, Path), f"Expected Path, got {type(path)}"
    with open(path, 'rb') as f:
        return f.read()


def read_text_file(path: Path) -> str:
    assert isinstance(path, Path), f"Expected Path, got {type(path)}"
    with open(path, 'rt', encoding='utf-8') as f:
        return f.read()


def write_file(path: Path, data: bytes) -> Path:
    """
    Write `data` to `path`, creating or truncating it, and sync it to disk
    before returning. Any OS-level failure is raised as a WriteError.
    """
    assert isinstance(path, Path), f"Expected Path, got {type(path)}"
    assert isinstance(data, bytes), f"Expected bytes, got {type(data)}"

    try:
        if not path.parent.exists():
            info(f"Creating directory {path.parent}")
            path.parent.mkdir(parents=True)

        if path.exists():
            if path.is_dir():
                raise WriteError(path, "is a directory")

            old_hash = hashlib.sha256(path.read_bytes()).hexdigest()
            new_hash = hashlib.sha256(data).hexdigest()
            if old_hash == new_hash:
                logger.debug("%s is up to date (%d bytes)", path, len(data))
                return path

            info(f"Overwriting {path}")
        else:
            info(f"Writing to {path}")

        # w+b: read/write, create if missing, truncate if present
        with open(path, 'w+b') as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
    except OSError as e:
        raise WriteError(path, e.strerror or str(e)) from e

    logger.debug("Wrote %d bytes to %s", len(data), path)
    return path


def write_text_file(path: Path, content: str) -> Path:
    return write_file(path, content.encode('utf-8'))
