import argparse
import os

from savesnap import __version__

# Save location, relative to the user-data root (%APPDATA% on Windows)
SAVE_ROOT = "EldenRing"
SAVE_FILE = "ER0000.sl2"

# Slot directories, created under the working directory
BACKUP_DIR = "backup"
PREVIOUS_BACKUP_DIR = "~temp_backup.old"
STAGING_SUFFIX = "~temp"

# Steam account folders are 17-digit numeric ids
ACCOUNT_ID_LENGTH = 17
FALLBACK_ACCOUNT_ID = "0"

# Global hotkeys, in pynput hotkey syntax
BACKUP_HOTKEY = "<f1>"
RESTORE_HOTKEY = "<f5>"
QUIT_HOTKEY = "<ctrl>+q"

# Seconds to wait for the hotkey listener thread to come up
HOTKEY_STARTUP_GRACE = 0.2

# Key tapped after a successful backup/restore, and how long it is held (seconds)
FEEDBACK_KEY = "e"
FEEDBACK_HOLD = 0.05


def build_parser():
    parser = argparse.ArgumentParser(
        prog="savesnap",
        description="Back up and restore a save-game file with global hotkeys.",
    )
    parser.add_argument("--data-root", default=None,
                        help="user-data directory holding the save root (default: %%APPDATA%%)")
    parser.add_argument("--save-root", default=SAVE_ROOT,
                        help=f"save folder under the data root (default: {SAVE_ROOT})")
    parser.add_argument("--save-file", default=SAVE_FILE,
                        help=f"save file name (default: {SAVE_FILE})")
    parser.add_argument("--work-dir", default=None,
                        help="directory holding the backup slots (default: current directory)")
    parser.add_argument("--backup-key", default=BACKUP_HOTKEY, help="hotkey for backup")
    parser.add_argument("--restore-key", default=RESTORE_HOTKEY, help="hotkey for restore")
    parser.add_argument("--quit-key", default=QUIT_HOTKEY, help="hotkey for quit")
    parser.add_argument("--feedback-key", default=FEEDBACK_KEY,
                        help="key tapped after a successful operation")
    parser.add_argument("--no-feedback", action="store_true",
                        help="do not tap the feedback key")
    parser.add_argument("--log-file", default=None, help="also write log lines to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv=None):
    args = build_parser().parse_args(argv)
    if args.work_dir is None:
        args.work_dir = os.getcwd()
    return args
