"""Shared fixtures: slot layouts in tmp_path and fake pynput / pyautogui modules."""

import logging
import sys
import types

import pytest

from savesnap import paths

ACCOUNT_ID = "76561198000000001"


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def data_root(tmp_path):
    """An APPDATA-like directory with one account folder under EldenRing/."""
    root = tmp_path / "appdata"
    (root / "EldenRing" / ACCOUNT_ID).mkdir(parents=True)
    return root


@pytest.fixture
def work_dir(tmp_path):
    d = tmp_path / "work"
    d.mkdir()
    return d


@pytest.fixture
def slots(data_root, work_dir):
    resolved = paths.resolve_paths(data_root, work_dir)
    paths.prepare_slot_dirs(resolved)
    return resolved


def snapshot(root):
    """Map of every file under root to its bytes."""
    return {p.relative_to(root).as_posix(): p.read_bytes() for p in sorted(root.rglob("*")) if p.is_file()}


class FakeGlobalHotKeys:
    presses = []
    fail_with = None
    dies = False
    instances = []

    def __init__(self, hotkeys):
        if FakeGlobalHotKeys.fail_with is not None:
            raise FakeGlobalHotKeys.fail_with
        self.hotkeys = hotkeys
        self.daemon = False
        self.started = False
        self.stopped = False
        FakeGlobalHotKeys.instances.append(self)

    def start(self):
        self.started = True
        for combo in FakeGlobalHotKeys.presses:
            self.hotkeys[combo]()

    def is_alive(self):
        return self.started and not self.stopped and not FakeGlobalHotKeys.dies

    def stop(self):
        self.stopped = True


@pytest.fixture
def fake_pynput(monkeypatch):
    FakeGlobalHotKeys.presses = []
    FakeGlobalHotKeys.fail_with = None
    FakeGlobalHotKeys.dies = False
    FakeGlobalHotKeys.instances = []
    monkeypatch.setattr("savesnap.settings.HOTKEY_STARTUP_GRACE", 0)

    keyboard = types.ModuleType("pynput.keyboard")
    keyboard.GlobalHotKeys = FakeGlobalHotKeys
    pynput = types.ModuleType("pynput")
    pynput.keyboard = keyboard
    monkeypatch.setitem(sys.modules, "pynput", pynput)
    monkeypatch.setitem(sys.modules, "pynput.keyboard", keyboard)
    return FakeGlobalHotKeys


@pytest.fixture
def fake_pyautogui(monkeypatch):
    module = types.ModuleType("pyautogui")
    module.FAILSAFE = True
    module.calls = []

    class PyAutoGUIException(Exception):
        pass

    module.PyAutoGUIException = PyAutoGUIException
    module.keyDown = lambda key: module.calls.append(("down", key))
    module.keyUp = lambda key: module.calls.append(("up", key))
    monkeypatch.setitem(sys.modules, "pyautogui", module)
    monkeypatch.setattr("savesnap.feedback.time.sleep", lambda seconds: None)
    return module
