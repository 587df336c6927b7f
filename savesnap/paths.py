import logging
import os
from collections import namedtuple
from pathlib import Path

from savesnap import console, settings
from savesnap.errors import DirectoryCreateFailed, UserDataRootError

SlotPaths = namedtuple("SlotPaths", ["save", "backup", "previous"])


def user_data_root(override=None):
    """Return the roaming app-data directory, or the override if one is given."""
    if override:
        return Path(override)
    appdata = os.environ.get("APPDATA")
    if not appdata:
        raise UserDataRootError("Error obtaining APPDATA path.")
    return Path(appdata)


def is_account_id(name):
    return len(name) == settings.ACCOUNT_ID_LENGTH and all("0" <= c <= "9" for c in name)


# Function to find the numeric account folder under the save root
def find_account_dir(save_root):
    save_root = Path(save_root)
    try:
        entries = sorted(save_root.iterdir())
    except OSError as e:
        logging.debug(f"Cannot list save root {save_root}: {e}")
        entries = []

    for entry in entries:
        if is_account_id(entry.name) and entry.is_dir():
            return entry

    logging.debug(f"No account folder under {save_root}, using '{settings.FALLBACK_ACCOUNT_ID}'")
    return save_root / settings.FALLBACK_ACCOUNT_ID


def resolve_save_path(data_root, save_root_name=settings.SAVE_ROOT, file_name=settings.SAVE_FILE):
    return find_account_dir(Path(data_root) / save_root_name) / file_name


def resolve_backup_path(work_dir, file_name=settings.SAVE_FILE):
    return Path(work_dir) / settings.BACKUP_DIR / file_name


def resolve_previous_backup_path(work_dir, file_name=settings.SAVE_FILE):
    return Path(work_dir) / settings.PREVIOUS_BACKUP_DIR / file_name


def resolve_paths(data_root, work_dir, save_root_name=settings.SAVE_ROOT, file_name=settings.SAVE_FILE):
    return SlotPaths(
        save=resolve_save_path(data_root, save_root_name, file_name),
        backup=resolve_backup_path(work_dir, file_name),
        previous=resolve_previous_backup_path(work_dir, file_name),
    )


def staging_path(destination):
    destination = Path(destination)
    return destination.with_name(destination.name + settings.STAGING_SUFFIX)


def staged_destination(staged):
    staged = Path(staged)
    return staged.with_name(staged.name[:-len(settings.STAGING_SUFFIX)])


def ensure_directory(path):
    """Create path (and parents) unless it already exists. Returns True if it was created."""
    path = Path(path)
    if path.is_dir():
        return False
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreateFailed(path, e) from e
    logging.info(f"Created directory @{path}", extra={"color": console.BLUE})
    return True


def prepare_slot_dirs(paths):
    ensure_directory(paths.backup.parent)
    ensure_directory(paths.previous.parent)


def stale_staging(paths):
    """Staging files left behind by an interrupted replace."""
    leftovers = []
    for destination in paths:
        candidate = staging_path(destination)
        if candidate.is_file():
            leftovers.append(candidate)
    return leftovers
