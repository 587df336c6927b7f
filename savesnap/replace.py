"""Crash-tolerant "copy source over destination".

An existing destination is never removed until the new content is fully
written and flushed to a staging file next to it (``<destination>~temp``).
A failure at any step leaves the destination holding either its old bytes
or the new ones.
"""
import enum
import logging
import os
import shutil
from pathlib import Path

from savesnap import console
from savesnap.paths import staging_path


class Status(enum.Enum):
    REPLACED = "replaced"
    COPIED = "copied"
    CLEAR = "clear"
    MISSING_SOURCE = "missing_source"
    COPY_FAILED = "copy_failed"
    DELETE_FAILED = "delete_failed"
    RENAME_FAILED = "rename_failed"

    @property
    def ok(self):
        return self in (Status.REPLACED, Status.COPIED, Status.CLEAR)


def copy_durable(source, target):
    """Copy the bytes of source into target (truncating it) and fsync before returning."""
    with open(source, "rb") as fsrc, open(target, "wb") as fdst:
        shutil.copyfileobj(fsrc, fdst)
        fdst.flush()
        os.fsync(fdst.fileno())
    shutil.copymode(source, target)


def _discard(path):
    try:
        Path(path).unlink(missing_ok=True)
    except OSError as e:
        logging.warning(f"Could not remove {path}: {e}")


def replace(source, destination, source_must_exist):
    source = Path(source)
    destination = Path(destination)

    try:
        source_present = source.exists()
    except OSError as e:
        logging.error(f"Cannot read {source}: {e}")
        return Status.MISSING_SOURCE if source_must_exist else Status.COPY_FAILED

    if not source_present:
        if source_must_exist:
            logging.error(f"Save file not found @{source}")
            return Status.MISSING_SOURCE
        logging.info(f"{source} is clear!", extra={"color": console.BLUE})
        return Status.CLEAR

    try:
        destination_present = destination.exists()
    except OSError as e:
        logging.error(f"Cannot check {destination}: {e}")
        return Status.COPY_FAILED

    if not destination_present:
        try:
            copy_durable(source, destination)
        except OSError as e:
            logging.error(f"Failed to copy {source} to {destination}: {e}")
            _discard(destination)
            return Status.COPY_FAILED
        logging.debug(f"Copied {source} -> {destination}")
        return Status.COPIED

    staged = staging_path(destination)

    try:
        copy_durable(source, staged)
    except OSError as e:
        logging.error(f"Failed to copy file @{staged}: {e}")
        _discard(staged)
        return Status.COPY_FAILED

    try:
        os.remove(destination)
    except OSError as e:
        logging.error(f"Failed to delete {destination}: {e}")
        _discard(staged)
        return Status.DELETE_FAILED

    try:
        os.replace(staged, destination)
    except OSError as e:
        logging.warning(f"Rename {staged} -> {destination} failed ({e}), copying instead")
        try:
            copy_durable(staged, destination)
        except OSError as e:
            logging.error(f"Failed to restore {destination}; new content kept @{staged}: {e}")
            _discard(destination)
            return Status.RENAME_FAILED
        _discard(staged)

    logging.debug(f"Replaced {destination} with {source}")
    return Status.REPLACED
