# backoffice/schemas/base.py

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Annotated, Optional, Type

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field, create_model
from pydantic.alias_generators import to_camel

from backoffice.utils.dates import blank_to_none, date_only_to_datetime, normalize_dt


def _check_decimal(value: str) -> str:
    value = value.strip()
    try:
        number = Decimal(value)
    except InvalidOperation:
        raise ValueError("must be a decimal number")
    if not number.is_finite():
        raise ValueError("must be a finite decimal number")
    return value


# Money and measurements travel as strings ("12.50") and are stored as-is
DecimalString = Annotated[str, AfterValidator(_check_decimal)]

# Quantities and levels must fit a 64-bit INTEGER column
StoreInt = Annotated[int, Field(ge=-(2**63), le=2**63 - 1)]

UtcDateTime = Annotated[
    datetime, BeforeValidator(date_only_to_datetime), AfterValidator(normalize_dt)
]
OptionalUtcDateTime = Annotated[
    Optional[datetime],
    BeforeValidator(date_only_to_datetime),
    BeforeValidator(blank_to_none),
    AfterValidator(normalize_dt),
]


class ApiSchema(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def partial_model(model: Type[ApiSchema], name: Optional[str] = None) -> Type[ApiSchema]:
    """
    Builds the update schema for ``model``: same fields and validators, every
    field omittable. Omitted fields stay unset so ``model_dump(exclude_unset=True)``
    only carries what the caller sent. An explicit null is still checked
    against the field type, so it is rejected for non-optional fields.
    """
    fields = {}
    for field_name, info in model.model_fields.items():
        annotation = info.annotation
        if info.metadata:
            annotation = Annotated[(annotation, *info.metadata)]
        fields[field_name] = (annotation, None)

    return create_model(
        name or model.__name__.replace("Create", "Update"),
        __base__=ApiSchema,
        **fields,
    )
