"""Pydantic models for ws-controllers.

This module provides the data models shared by the mapping rules,
the controller factory and the structured logging helpers, using
Pydantic v2 for validation and serialization.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

WILDCARD_MODULE = "*"
"""Module key of the default mapping rule."""

NAMESPACE_SEPARATOR = "\\"
"""Separator between namespace parts of a controller class name."""

MODULE_SEPARATOR = ":"
"""Separator between segments of a symbolic controller name."""

PLACEHOLDER = "*"
"""Placeholder substituted with a name segment inside templates."""


class MappingRule(BaseModel):
    """A compiled mapping mask for one module.

    A rule rewrites the segments of a symbolic name into a class name:
    the prefix is emitted once, the module template once per intermediate
    segment and the class template once for the final segment.

    Example:
        >>> rule = MappingRule(
        ...     module="*",
        ...     prefix="",
        ...     module_template="*Module\\\\",
        ...     class_template="*Controller",
        ... )
        >>> rule.is_wildcard
        True
    """

    model_config = {"frozen": True}

    module: str = Field(description="Module key this rule is registered for.")
    prefix: str = Field(
        default="",
        description="Literal prefix, empty or ending with the namespace separator.",
    )
    module_template: str = Field(
        description="Template applied to every segment except the last.",
    )
    class_template: str = Field(
        description="Template applied to the last segment.",
    )

    @property
    def is_wildcard(self) -> bool:
        """Return True if this is the default rule."""
        return self.module == WILDCARD_MODULE

    def as_tuple(self) -> tuple[str, str, str]:
        """Return the ``(prefix, module_template, class_template)`` triple."""
        return (self.prefix, self.module_template, self.class_template)


class NameCorrection(BaseModel):
    """Advisory emitted when a caller's name differs from the canonical one.

    Example:
        >>> correction = NameCorrection(
        ...     original_name="admin:users",
        ...     canonical_name="Admin:Users",
        ... )
    """

    model_config = {"frozen": True}

    original_name: str
    canonical_name: str


class Resolution(BaseModel):
    """Result of resolving a symbolic controller name.

    Attributes:
        name: Canonical name callers should use from now on.
        requested_name: The name as it was passed in.
        controller_class: Fully-qualified controller class name.
        correction: Case correction record, if the name was corrected.
    """

    model_config = {"frozen": True}

    name: str
    requested_name: str
    controller_class: str
    correction: NameCorrection | None = None

    @property
    def was_corrected(self) -> bool:
        """Return True if the requested name was not canonical."""
        return self.correction is not None


class LogContext(BaseModel):
    """Context fields for structured logging.

    Example:
        >>> context = LogContext(
        ...     controller_name="Admin:Users",
        ...     operation="resolve",
        ... )
        >>> log_debug("Resolving controller", context)
    """

    controller_name: str | None = Field(
        default=None,
        description="Symbolic controller name being processed.",
    )
    controller_class: str | None = Field(
        default=None,
        description="Fully-qualified controller class name.",
    )
    module: str | None = Field(
        default=None,
        description="Mapping module key.",
    )
    operation: str | None = Field(
        default=None,
        description="Current operation name.",
    )


__all__ = [
    "WILDCARD_MODULE",
    "NAMESPACE_SEPARATOR",
    "MODULE_SEPARATOR",
    "PLACEHOLDER",
    "MappingRule",
    "NameCorrection",
    "Resolution",
    "LogContext",
]
