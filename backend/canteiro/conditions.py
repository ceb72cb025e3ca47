"""Evaluation of sub-phase visibility conditions.

A condition is either ``always`` or a list of rules folded left to right:
each rule's ``combine_with`` joins the running result with the *next* rule.
``A OR B AND C`` therefore reads as ``(A OR B) AND C``.

Unknown operators and fields log a warning and make the rule False, so a
sub-phase with a broken condition is hidden rather than failing the estimate.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any

from canteiro.models.enums import CombineOperator, ConditionType
from canteiro.models.phases import EvaluationContext

if TYPE_CHECKING:
    from canteiro.models.phases import ConditionalRule, PhaseCondition
    from canteiro.models.project import ProjectData

logger = logging.getLogger(__name__)

CONTEXT_FIELDS = frozenset(EvaluationContext.model_fields)

# Field names as written in camelCase schemas.
FIELD_ALIASES: dict[str, str] = {
    "constructionMethod": "construction_method",
    "siteType": "site_type",
    "landStatus": "land_status",
    "subsoilArea": "subsoil_area",
    "upperFloorArea": "upper_floor_area",
    "groundArea": "ground_area",
    "hasSubsoil": "has_subsoil",
    "hasUpperFloor": "has_upper_floor",
}


def extract_context(project: ProjectData) -> EvaluationContext:
    """Derive the evaluation context from a project snapshot."""
    areas = project.areas
    return EvaluationContext(
        topography=project.topography,
        construction_method=project.construction_method,
        site_type=project.site_type,
        land_status=project.land_status,
        maturity=project.maturity,
        standard=project.standard,
        subsoil_area=areas.subfloor,
        upper_floor_area=areas.upper,
        ground_area=areas.ground,
        has_subsoil=areas.subfloor > 0,
        has_upper_floor=areas.upper > 0,
    )


def evaluate(condition: PhaseCondition, context: EvaluationContext) -> bool:
    """Return True if *condition* holds for *context*.

    A conditional with no rules is False.
    """
    if condition.type == ConditionType.ALWAYS:
        return True
    if not condition.rules:
        return False
    return evaluate_rules(condition.rules, context)


def evaluate_rules(rules: list[ConditionalRule], context: EvaluationContext) -> bool:
    """Fold *rules* left to right using each previous rule's combine operator."""
    if not rules:
        return False

    result = evaluate_rule(rules[0], context)
    for previous, rule in zip(rules, rules[1:]):
        current = evaluate_rule(rule, context)
        if previous.combine_with == CombineOperator.OR:
            result = result or current
        else:
            result = result and current
    return result


def evaluate_rule(rule: ConditionalRule, context: EvaluationContext) -> bool:
    field = FIELD_ALIASES.get(rule.field, rule.field)
    if field not in CONTEXT_FIELDS:
        logger.warning("Unknown condition field '%s'; rule evaluates to False", rule.field)
        return False
    actual = getattr(context, field)

    operator = rule.operator
    if operator == "equals":
        return _strict_equals(actual, rule.value)
    if operator == "notEquals":
        return not _strict_equals(actual, rule.value)
    if operator == "greaterThan":
        return _to_number(actual) > _to_number(rule.value)
    if operator == "lessThan":
        return _to_number(actual) < _to_number(rule.value)
    if operator == "includes":
        return isinstance(rule.value, list) and actual in rule.value

    logger.warning("Unknown condition operator '%s'; rule evaluates to False", operator)
    return False


def _strict_equals(left: Any, right: Any) -> bool:
    # Booleans never equal numbers (True != 1).
    if isinstance(left, bool) != isinstance(right, bool):
        return False
    return left == right


def _to_number(value: Any) -> float:
    """Numeric reading of a context value; NaN when it has none."""
    if value is None:
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return math.nan
    return number
