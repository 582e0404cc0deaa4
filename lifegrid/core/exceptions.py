"""Custom exceptions used throughout the lifegrid package."""

from typing import Any, Optional


class LifeGridError(Exception):
    """Base exception for all lifegrid errors. ``details`` carries structured context."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class ConfigurationError(LifeGridError):
    """Raised when a session config value is missing or invalid."""

    def __init__(
        self,
        config_key: Optional[str] = None,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        # A lone positional argument is the message, not the key.
        if message is None:
            message = config_key or "Invalid configuration"
            config_key = "configuration"
        if config_key is None:
            config_key = "configuration"

        full_message = f"Configuration error for '{config_key}': {message}"
        super().__init__(message=full_message, details=details)
        self.config_key = config_key


class OutOfBoundsError(LifeGridError, IndexError):
    """Raised when a coordinate falls outside the grid extent.

    Examples:
    - get(-1, 0) on any grid
    - set_alive(width, 0)
    """

    def __init__(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        details: Optional[dict[str, Any]] = None,
    ):
        details = details or {}
        details.update({"x": x, "y": y, "width": width, "height": height})
        message = f"Coordinate ({x}, {y}) is outside the {width}x{height} grid"
        super().__init__(message=message, details=details)
        self.x = x
        self.y = y


class InvalidConstructionError(LifeGridError, ValueError):
    """Raised when a grid is created with non-positive dimensions."""

    def __init__(
        self,
        width: Any,
        height: Any,
        details: Optional[dict[str, Any]] = None,
    ):
        details = details or {}
        details.update({"width": width, "height": height})
        message = f"Grid dimensions must be positive, got {width}x{height}"
        super().__init__(message=message, details=details)
        self.width = width
        self.height = height


class InvalidStateError(LifeGridError):
    """Raised when an operation is not allowed in the engine's current state.

    Examples:
    - resize() while the simulation is running
    - reset() while the simulation is running
    """

    def __init__(
        self,
        operation: str,
        state: str,
        details: Optional[dict[str, Any]] = None,
    ):
        details = details or {}
        details.update({"operation": operation, "state": state})
        message = f"Cannot {operation} while the simulation is {state}"
        super().__init__(message=message, details=details)
        self.operation = operation
        self.state = state


class PatternError(LifeGridError):
    """Raised for unknown or duplicate pattern names."""

    def __init__(self, name: str, message: Optional[str] = None):
        if message is None:
            message = f"Unknown pattern '{name}'"
        super().__init__(message=message, details={"pattern": name})
        self.name = name
