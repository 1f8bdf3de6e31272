"""Rules package."""

from collections.abc import Callable
from dataclasses import dataclass

from responsive_check.rules.base import Finding, Rule
from responsive_check.rules.breakpoints import MobileBreakpointRule, TabletBreakpointRule
from responsive_check.rules.fixed_widths import FixedWidthRule
from responsive_check.rules.large_padding import LargePaddingRule
from responsive_check.rules.layout_primitives import LayoutPrimitivesRule
from responsive_check.rules.overflow_control import OverflowControlRule
from responsive_check.rules.responsive_fonts import ResponsiveFontsRule
from responsive_check.rules.responsive_images import ResponsiveImagesRule
from responsive_check.rules.responsive_units import ResponsiveUnitsRule

__all__ = [
    "Finding",
    "Rule",
    "RuleInfo",
    "build_rules",
    "default_rules",
    "list_rule_info",
]


@dataclass(frozen=True, slots=True)
class RuleInfo:
    """Rule metadata for listing and selection."""

    rule_id: str
    name: str
    description: str
    concern: str


@dataclass(frozen=True, slots=True)
class _RuleSpec:
    rule_id: str
    factory: Callable[[], Rule]
    name: str
    description: str
    concern: str


def default_rules() -> list[Rule]:
    """Return every rule in evaluation order."""
    return build_rules()


def build_rules(
    *,
    enabled_rule_ids: list[str] | None = None,
    disabled_rule_ids: list[str] | None = None,
) -> list[Rule]:
    """Build rule instances applying enable/disable filters."""
    specs = _ordered_rule_specs()
    registry = {spec.rule_id: spec for spec in specs}
    disabled_set = set(disabled_rule_ids or [])
    requested_ids = set(enabled_rule_ids or []) | disabled_set

    unknown = [rule_id for rule_id in requested_ids if rule_id not in registry]
    if unknown:
        joined = ", ".join(sorted(unknown))
        raise ValueError(f"Unknown rule ids: {joined}")

    if enabled_rule_ids is None:
        selected_ids = [spec.rule_id for spec in specs]
    else:
        selected_ids = _dedupe(enabled_rule_ids)
    return [registry[rule_id].factory() for rule_id in selected_ids if rule_id not in disabled_set]


def list_rule_info() -> list[RuleInfo]:
    """Return metadata for all known rules."""
    return [
        RuleInfo(
            rule_id=spec.rule_id,
            name=spec.name,
            description=spec.description,
            concern=spec.concern,
        )
        for spec in _ordered_rule_specs()
    ]


def _ordered_rule_specs() -> list[_RuleSpec]:
    return [
        _spec(TabletBreakpointRule, concern="breakpoints"),
        _spec(MobileBreakpointRule, concern="breakpoints"),
        _spec(FixedWidthRule, concern="fixed_width"),
        _spec(ResponsiveUnitsRule, concern="responsive_units"),
        _spec(LayoutPrimitivesRule, concern="layout"),
        _spec(OverflowControlRule, concern="overflow"),
        _spec(ResponsiveFontsRule, concern="font_scaling"),
        _spec(LargePaddingRule, concern="fixed_width"),
        _spec(ResponsiveImagesRule, concern="image_scaling"),
    ]


def _spec(rule_cls: type[Rule], *, concern: str) -> _RuleSpec:
    instance = rule_cls()
    return _RuleSpec(
        rule_id=instance.rule_id,
        factory=rule_cls,
        name=rule_cls.__name__,
        description=(rule_cls.__doc__ or "").strip(),
        concern=concern,
    )


def _dedupe(items: list[str]) -> list[str]:
    seen: set[str] = set()
    output: list[str] = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        output.append(item)
    return output
