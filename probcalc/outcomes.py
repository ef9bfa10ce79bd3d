"""Tagged view of the three kinds of result a numeric function can give.

The functions themselves return a float, nan, or ``False``; callers that
would rather branch on a type than compare sentinels use `tag`/`evaluate`.
"""
import enum
import math
from typing import Any, Callable, NamedTuple, Optional, Union


class Outcome(str, enum.Enum):
    VALUE = "value"
    DOMAIN_ERROR = "domain-error"
    REJECTED = "rejected"


class Result(NamedTuple):
    outcome: Outcome
    value: Optional[float] = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.VALUE

    def as_dict(self) -> dict[str, Any]:
        value: Union[float, str, None] = self.value
        if value is not None and math.isinf(value):
            value = "inf" if value > 0 else "-inf"
        return {"outcome": self.outcome.value, "value": value}


def tag(raw) -> Result:
    if raw is False:
        return Result(Outcome.REJECTED)
    raw = float(raw)
    if math.isnan(raw):
        return Result(Outcome.DOMAIN_ERROR)
    return Result(Outcome.VALUE, raw)


def evaluate(func: Callable[..., Any], *args) -> Result:
    return tag(func(*args))
