import enum
import logging
import queue
import time

from savesnap import engine, settings
from savesnap.errors import EventSourceRegistrationFailed
from savesnap.feedback import no_feedback


class Action(enum.Enum):
    BACKUP = 0
    RESTORE = 1
    QUIT = 2


DEFAULT_BINDINGS = {
    settings.BACKUP_HOTKEY: Action.BACKUP,
    settings.RESTORE_HOTKEY: Action.RESTORE,
    settings.QUIT_HOTKEY: Action.QUIT,
}


class ScriptedSource:
    """Feeds a fixed sequence of actions, then signals end of stream."""

    def __init__(self, actions):
        self._actions = iter(actions)

    def next_action(self):
        return next(self._actions, None)


class HotkeySource:
    """Global hotkeys via pynput. The listener thread only enqueues; the caller dequeues."""

    def __init__(self, bindings=None):
        self.bindings = dict(bindings or DEFAULT_BINDINGS)
        self._queue = queue.Queue()
        self._listener = None

    def _push(self, action):
        return lambda: self._queue.put(action)

    def start(self):
        try:
            from pynput import keyboard

            hotkeys = {combo: self._push(action) for combo, action in self.bindings.items()}
            self._listener = keyboard.GlobalHotKeys(hotkeys)
            self._listener.daemon = True
            self._listener.start()
        except Exception as e:
            raise EventSourceRegistrationFailed(e) from e
        # Hook setup runs in the listener thread; a failure there ends it early
        time.sleep(settings.HOTKEY_STARTUP_GRACE)
        if not self._listener.is_alive():
            self._listener = None
            raise EventSourceRegistrationFailed("hotkey listener stopped during startup")
        logging.debug(f"Registered hotkeys: {', '.join(self.bindings)}")

    def stop(self):
        if self._listener is not None:
            self._listener.stop()
            self._listener = None
        self._queue.put(None)

    def next_action(self):
        # Short timeouts keep Ctrl+C responsive on Windows
        while True:
            try:
                return self._queue.get(timeout=0.25)
            except queue.Empty:
                continue

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, *exc):
        self.stop()


def handle(action, paths, on_success=no_feedback):
    if action is Action.BACKUP:
        result = engine.backup(paths.save, paths.backup, paths.previous)
        what = "backup"
    elif action is Action.RESTORE:
        result = engine.restore(paths.backup, paths.save)
        what = "restore"
    else:
        return None

    if result:
        on_success()
    else:
        logging.error(f"Failed to {what} game save")
    return result


# Main loop: one action at a time until Quit or end of stream
def dispatch(source, paths, on_success=no_feedback):
    handled = 0
    while True:
        action = source.next_action()
        if action is None or action is Action.QUIT:
            break
        if handle(action, paths, on_success) is not None:
            handled += 1
    return handled
