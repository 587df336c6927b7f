import logging
import sys

from savesnap import paths, settings
from savesnap.console import setup_logging
from savesnap.errors import StartupError
from savesnap.feedback import keystroke_feedback, no_feedback
from savesnap.hotkeys import Action, HotkeySource, dispatch


def feedback_hook(args):
    if args.no_feedback:
        return no_feedback
    try:
        return keystroke_feedback(args.feedback_key)
    except Exception as e:
        # pyautogui needs a display; without one the tool still works, silently
        logging.warning(f"Keystroke feedback unavailable: {e}")
        return no_feedback


def startup(args):
    data_root = paths.user_data_root(args.data_root)
    slots = paths.resolve_paths(data_root, args.work_dir, args.save_root, args.save_file)
    paths.prepare_slot_dirs(slots)

    logging.debug(f"Save file: {slots.save}")
    if not slots.save.exists():
        logging.warning(f"No save file @{slots.save} yet")
    for leftover in paths.stale_staging(slots):
        destination = paths.staged_destination(leftover)
        if destination.exists():
            logging.warning(f"Leftover from an interrupted run @{leftover}; it will be overwritten")
        else:
            logging.error(f"{destination} is missing and @{leftover} holds its newest content; "
                          f"rename it to {destination.name} by hand before the next backup")
    return slots


def main(argv=None):
    args = settings.parse_args(argv)
    setup_logging(verbose=args.verbose, log_file=args.log_file)

    bindings = {
        args.backup_key: Action.BACKUP,
        args.restore_key: Action.RESTORE,
        args.quit_key: Action.QUIT,
    }

    try:
        slots = startup(args)
        source = HotkeySource(bindings)
        source.start()
    except StartupError as e:
        logging.error(str(e))
        return 1

    print(f"\t >> Press {args.quit_key} to quit. <<")
    try:
        dispatch(source, slots, feedback_hook(args))
    except KeyboardInterrupt:
        logging.info("User interrupted the application")
    finally:
        source.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
