"""Ordered field-rule validation for request objects."""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Union

from .exceptions import RequestValidationError

Message = Union[str, Callable[[Any], str]]


@dataclass(frozen=True)
class Rule:
    """A single validation rule.

    Attributes:
        field: Wire name of the field the rule is about
        check: Predicate over the whole request, True when the rule holds
        message: Error text, or a callable building it from the request
    """

    field: str
    check: Callable[[Any], bool]
    message: Message

    def render(self, target: Any) -> str:
        if callable(self.message):
            return self.message(target)
        return self.message


def required(attribute: str, field: Optional[str] = None, message: Optional[str] = None) -> Rule:
    """Rule requiring ``attribute`` to be non-empty.

    ``field`` defaults to ``attribute`` and is used in the default message.
    """
    field = field or attribute
    return Rule(
        field=field,
        check=lambda target: bool(getattr(target, attribute)),
        message=message or f"{field} is required",
    )


class RuleValidator:
    """
    Evaluate rules in declaration order and fail on the first violation.

    There is no aggregate reporting: callers fix one field at a time.

    Example:
        validator = RuleValidator([
            required("env_name"),
            Rule("target_replicas", lambda r: r.target_replicas >= 0,
                 "target_replicas must be greater than or equal to 0"),
        ])
        validator.validate(request)
    """

    def __init__(self, rules: Iterable[Rule]) -> None:
        self._rules: List[Rule] = list(rules)

    @property
    def rules(self) -> List[Rule]:
        return list(self._rules)

    def first_violation(self, target: Any) -> Optional[Rule]:
        for rule in self._rules:
            if not rule.check(target):
                return rule
        return None

    def validate(self, target: Any) -> None:
        """Raise :class:`RequestValidationError` for the first broken rule."""
        rule = self.first_violation(target)
        if rule is not None:
            raise RequestValidationError(rule.render(target), field=rule.field)
