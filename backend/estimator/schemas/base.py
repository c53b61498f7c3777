"""Shared schema configuration and presentation-boundary rounding."""
from decimal import ROUND_FLOOR, Decimal, localcontext
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel


def round_half_up(value: Decimal, places: int = 2) -> Decimal:
    """
    Round halves toward +infinity (JS Math.round semantics): -0.5 -> 0, 2.5 -> 3.
    Precision grows with the value so large amounts never hit the context limit.
    """
    value = Decimal(value)
    step = Decimal(10) ** -places
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(value.as_tuple().digits), value.adjusted() + 1) + places + 2
        return (value / step + Decimal("0.5")).to_integral_value(rounding=ROUND_FLOOR) * step


# Values stay unrounded in Python and are rounded when rendered as JSON.
_display = PlainSerializer(lambda v: round_half_up(v), return_type=Decimal, when_used="json")

Money = Annotated[Decimal, _display]
Quantity = Annotated[Decimal, _display]


class SchemaBase(BaseModel):
    """Immutable model accepting both camelCase and snake_case field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )
