# src/rules/registry.py

"""Rule-set factories built from the ``Settings.AVAILABLE_RULES`` registry."""

import importlib
import logging

from src.config.settings import Settings
from src.models.quality_issue import Severity
from src.rules.base_rule import QualityRule

logger = logging.getLogger("catalog_audit.rules")


def _load_rule_class(dotted_path: str) -> type[QualityRule]:
    """Dynamically import a rule class from its dotted module path."""
    module_path, class_name = dotted_path.rsplit(".", 1)
    module = importlib.import_module(module_path)
    cls: type[QualityRule] = getattr(module, class_name)
    return cls


def default_rules() -> list[QualityRule]:
    """Return fresh instances of every built-in rule, in registry order."""
    return [
        _load_rule_class(entry["rule"])()
        for entry in Settings.AVAILABLE_RULES
    ]


def critical_rules() -> list[QualityRule]:
    """Default rules whose *declared* severity is critical."""
    return [
        rule
        for rule in default_rules()
        if rule.default_severity is Severity.CRITICAL
    ]


def rules_matching_type(fragment: str) -> list[QualityRule]:
    """Default rules whose issue-type name contains *fragment*.

    Matching is case-insensitive against the enum member name, e.g.
    ``"stock"`` selects both OUT_OF_STOCK and DEAD_STOCK.
    """
    needle = fragment.strip().lower()
    selected = [
        rule
        for rule in default_rules()
        if needle in rule.issue_type.name.lower()
    ]
    logger.debug(
        "Type fragment '%s' selected %d rule(s)", fragment, len(selected)
    )
    return selected
