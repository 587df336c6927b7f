import logging

from savesnap import console
from savesnap.replace import replace


class OperationResult:
    """Statuses of the replace steps making up one backup or restore."""

    def __init__(self, name, steps):
        self.name = name
        self.steps = tuple(steps)

    @property
    def ok(self):
        return all(step.ok for step in self.steps)

    @property
    def failure(self):
        for step in self.steps:
            if not step.ok:
                return step
        return None

    def __bool__(self):
        return self.ok

    def __repr__(self):
        statuses = ", ".join(step.name for step in self.steps)
        return f"OperationResult({self.name!r}, [{statuses}])"


def backup(save_path, backup_path, previous_backup_path):
    # Rotation runs first and capture runs even if rotation failed
    rotated = replace(backup_path, previous_backup_path, False)
    captured = replace(save_path, backup_path, True)

    result = OperationResult("backup", [rotated, captured])
    if result:
        logging.info("Backed up", extra={"color": console.GREEN})
    return result


def restore(backup_path, save_path):
    result = OperationResult("restore", [replace(backup_path, save_path, True)])
    if result:
        logging.info("Restored", extra={"color": console.YELLOW})
    return result
