# File: src/container_configurator/assembly/errors.py

"""Recoverable errors raised by assembly commands.

All of them are raised before any state is touched, so callers can surface
the message and carry on with the same session.
"""

from typing import Any, Dict, Optional


class ConfiguratorError(Exception):
    """
    Base class for assembly command failures.

    Attributes:
        code: Machine-readable error code for clients
        extra: Additional error context
    """

    code = "configurator_error"

    def __init__(self, detail: str, extra: Optional[Dict[str, Any]] = None):
        self.detail = detail
        self.extra = extra or {}
        super().__init__(detail)


class NoFaceSelectedError(ConfiguratorError):
    """Add-unit or set-wall-variant attempted without a matching face selection."""

    code = "no_face_selected"

    def __init__(self, action: str, extra: Optional[Dict[str, Any]] = None):
        super().__init__(f"Select a wall or the roof before trying to {action}", extra)


class InvalidFaceForVariantError(ConfiguratorError):
    """Attempt to put a window or door on the roof."""

    code = "invalid_face_for_variant"

    def __init__(self, face: str, variant: str):
        super().__init__(
            f"Variant '{variant}' cannot be assigned to face '{face}'",
            {"face": face, "variant": variant},
        )


class UnknownUnitError(ConfiguratorError):
    """Operation referenced a unit id that is not part of the assembly."""

    code = "unknown_unit"

    def __init__(self, unit_id: Any):
        super().__init__(f"Unit with ID '{unit_id}' not found", {"unit_id": unit_id})
