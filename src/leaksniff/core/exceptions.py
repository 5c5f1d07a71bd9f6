"""leaksniff custom exceptions."""

from __future__ import annotations


class LeakSniffConfigError(Exception):
    """Raised when configuration is missing or invalid."""

    def __init__(self, message: str, config_path: str = None, option: str = None):
        self.config_path = config_path
        self.option = option
        super().__init__(message)

    def __str__(self):
        msg = super().__str__()
        if self.config_path:
            msg += f" (config: {self.config_path})"
        if self.option:
            msg += f" (option: {self.option})"
        return msg
