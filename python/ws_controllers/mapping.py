r"""Controller name mapping rules.

A mapping rule turns a symbolic controller name such as ``Admin:Users``
into a fully-qualified class name such as ``AdminModule\UsersController``
and back again.

Masks are given per module key, either as a compact string::

    "App\Controllers\*Module\*Controller"

or as an explicit ``(prefix, module_template, class_template)`` triple::

    ("App\Controllers", "*Module", "*Controller")

The ``*`` module key holds the default rule used when a name has no
registered module segment.

Example:
    >>> mapping = ControllerMapping()
    >>> mapping.format("Admin:Users")
    'AdminModule\\UsersController'
    >>> mapping.unformat("AdminModule\\UsersController")
    'Admin:Users'
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

from .exceptions import ConfigurationError
from .logging import log_debug
from .types import (
    MODULE_SEPARATOR,
    NAMESPACE_SEPARATOR,
    PLACEHOLDER,
    WILDCARD_MODULE,
    MappingRule,
)

# Optional leading separator, optional prefix ending with a separator,
# optional module template with one placeholder, mandatory class template
# with one placeholder.
MASK_PATTERN = re.compile(r"^\\?([\w\\]*\\)?(\w*\*\w*?\\)?([\w\\]*\*\w*)\Z")

DEFAULT_MODULE_TEMPLATE = "*Module\\"

DEFAULT_MAPPING: dict[str, tuple[str, str, str]] = {
    WILDCARD_MODULE: ("", "*Module\\", "*Controller"),
    "WsControllers": ("WsControllersModule\\", "*\\", "*Controller"),
}

_SEGMENT_GROUP = r"(\w+)"


def compile_mask(module: str, mask: Any) -> MappingRule:
    """Compile a mapping mask into a MappingRule.

    Args:
        module: Module key the mask is registered for.
        mask: Compact mask string or a ``(prefix, module, class)`` sequence.

    Returns:
        The compiled rule.

    Raises:
        ConfigurationError: If the mask is malformed.
    """
    if isinstance(mask, str):
        match = MASK_PATTERN.match(mask)
        if not match:
            raise ConfigurationError(f'Invalid mapping mask "{mask}".', module, mask)

        return MappingRule(
            module=module,
            prefix=match.group(1) or "",
            module_template=match.group(2) or DEFAULT_MODULE_TEMPLATE,
            class_template=match.group(3),
        )

    if (
        isinstance(mask, Sequence)
        and len(mask) == 3
        and all(isinstance(part, str) for part in mask)
    ):
        prefix, module_template, class_template = mask
        prefix = prefix.rstrip(NAMESPACE_SEPARATOR)

        if prefix.count(PLACEHOLDER) != 0:
            raise ConfigurationError(
                f'Invalid mapping mask for module "{module}": prefix "{prefix}" '
                f"must not contain a placeholder.",
                module,
                mask,
            )
        for template in (module_template, class_template):
            if template.count(PLACEHOLDER) != 1:
                raise ConfigurationError(
                    f'Invalid mapping mask for module "{module}": template "{template}" '
                    f"must contain exactly one placeholder.",
                    module,
                    mask,
                )

        return MappingRule(
            module=module,
            prefix=prefix + NAMESPACE_SEPARATOR if prefix else "",
            module_template=module_template.rstrip(NAMESPACE_SEPARATOR) + NAMESPACE_SEPARATOR,
            class_template=class_template,
        )

    raise ConfigurationError(f'Invalid mapping mask for module "{module}".', module, mask)


class _RulePattern:
    """Case-insensitive regexes recognising class names produced by a rule."""

    def __init__(self, rule: MappingRule) -> None:
        self.rule = rule
        module_regex = _template_regex(rule.module_template)
        self.module = re.compile(module_regex, re.IGNORECASE)
        self.full = re.compile(
            r"\\?"
            + re.escape(rule.prefix)
            + "((?:"
            + _template_regex(rule.module_template, capture=False)
            + ")*)"
            + _template_regex(rule.class_template),
            re.IGNORECASE,
        )

    def unformat(self, class_name: str) -> str | None:
        match = self.full.fullmatch(class_name)
        if not match:
            return None

        segments: list[str] = []
        block = match.group(1)
        pos = 0
        while pos < len(block):
            part = self.module.match(block, pos)
            if part is None or part.end() == pos:
                return None
            segments.append(part.group(1))
            pos = part.end()

        segments.append(match.group(2))
        if not self.rule.is_wildcard:
            segments.insert(0, self.rule.module)
        return MODULE_SEPARATOR.join(segments)


def _template_regex(template: str, capture: bool = True) -> str:
    group = _SEGMENT_GROUP if capture else r"\w+"
    return group.join(re.escape(part) for part in template.split(PLACEHOLDER))


class ControllerMapping:
    """Ordered table of mapping rules with the format/unformat algorithms.

    The table always contains the wildcard rule. Rules are meant to be
    configured once before names are resolved; callers that reconfigure
    a live mapping must serialize ``set_mapping`` against readers.

    Example:
        >>> mapping = ControllerMapping({"Shop": ("ShopModule", "*", "*Controller")})
        >>> mapping.format("Shop:Cart")
        'ShopModule\\CartController'
        >>> mapping.format("Admin:Settings:Users")
        'AdminModule\\SettingsModule\\UsersController'
    """

    def __init__(self, mapping: Mapping[str, Any] | None = None) -> None:
        """Initialize the table with the default rules.

        Args:
            mapping: Optional masks applied on top of the defaults.
        """
        self._rules: dict[str, MappingRule] = {}
        self._patterns: dict[str, _RulePattern] = {}
        self.set_mapping(DEFAULT_MAPPING)
        if mapping:
            self.set_mapping(mapping)

    def set_mapping(self, mapping: Mapping[str, Any]) -> None:
        """Set masks as pairs of ``module -> mask``.

        Every mask is compiled before any rule is replaced, so a malformed
        mask leaves the table untouched.

        Args:
            mapping: Module keys to compact mask strings or triples.

        Raises:
            ConfigurationError: If any mask is malformed.
        """
        compiled = [compile_mask(module, mask) for module, mask in mapping.items()]

        for rule in compiled:
            self._rules[rule.module] = rule
            self._patterns[rule.module] = _RulePattern(rule)
            log_debug(
                f"Mapped module '{rule.module}'",
                {
                    "module": rule.module,
                    "prefix": rule.prefix,
                    "module_template": rule.module_template,
                    "class_template": rule.class_template,
                },
            )

    def format(self, name: str) -> str:
        """Format a controller class name from a symbolic name.

        Args:
            name: Symbolic controller name, e.g. ``Admin:Users``.

        Returns:
            The fully-qualified class name.
        """
        parts = name.split(MODULE_SEPARATOR)

        if len(parts) > 1 and parts[0] in self._rules:
            rule = self._rules[parts.pop(0)]
        else:
            rule = self._rules[WILDCARD_MODULE]

        result = rule.prefix
        for part in parts[:-1]:
            result += rule.module_template.replace(PLACEHOLDER, part)
        return result + rule.class_template.replace(PLACEHOLDER, parts[-1])

    def unformat(self, class_name: str) -> str | None:
        """Rebuild the canonical symbolic name from a class name.

        Module rules are tried in registration order, the wildcard rule last.

        Args:
            class_name: Fully-qualified controller class name.

        Returns:
            The canonical symbolic name, or None if no rule produces
            this class name.
        """
        for module, pattern in self._patterns.items():
            if module == WILDCARD_MODULE:
                continue
            name = pattern.unformat(class_name)
            if name is not None:
                return name

        return self._patterns[WILDCARD_MODULE].unformat(class_name)

    def rule(self, module: str) -> MappingRule | None:
        """Get the rule registered for a module key."""
        return self._rules.get(module)

    def rules(self) -> list[MappingRule]:
        """List rules in registration order."""
        return list(self._rules.values())

    def modules(self) -> list[str]:
        """List registered module keys in registration order."""
        return list(self._rules.keys())

    def __contains__(self, module: object) -> bool:
        return module in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"ControllerMapping(modules={self.modules()!r})"


__all__ = [
    "MASK_PATTERN",
    "DEFAULT_MAPPING",
    "DEFAULT_MODULE_TEMPLATE",
    "ControllerMapping",
    "compile_mask",
]
