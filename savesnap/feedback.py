import logging
import time

from savesnap import settings


def no_feedback():
    pass


def keystroke_feedback(key=settings.FEEDBACK_KEY, hold=settings.FEEDBACK_HOLD):
    """Return a hook that taps `key` with pyautogui, so the game shows the change."""
    import pyautogui

    pyautogui.FAILSAFE = False  # Disable failsafe for automation

    def press_and_release():
        try:
            pyautogui.keyDown(key)
            time.sleep(hold)
            pyautogui.keyUp(key)
        except pyautogui.PyAutoGUIException as e:
            logging.warning(f"Could not send feedback key '{key}': {e}")

    return press_and_release
