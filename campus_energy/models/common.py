# campus_energy/models/common.py

import uuid
from decimal import Decimal
from typing import Annotated

from pydantic import Field, PlainSerializer

from campus_energy.core.units import round2

# Exact quantities stay Decimal in Python and go out as JSON numbers.
Quantity = Annotated[
    Decimal,
    PlainSerializer(float, return_type=float, when_used="json"),
]

# Non-negative energy in kWh.
KWh = Annotated[
    Decimal,
    Field(ge=0, allow_inf_nan=False),
    PlainSerializer(float, return_type=float, when_used="json"),
]

# Chart values: exact in Python, rounded to 2 places on the wire.
DisplayKWh = Annotated[
    Decimal,
    PlainSerializer(lambda v: float(round2(v)), return_type=float, when_used="json"),
]


def new_id() -> str:
    return uuid.uuid4().hex
