# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Shared pydantic building blocks.

PartialUpdateRequest gives update payloads explicit field presence:
a key the client did not send is absent from changes(), a key sent as
null is present with None. Fields listed in non_nullable cannot be
cleared.
"""

from datetime import date
from typing import Annotated, Any, ClassVar, Literal

from pydantic import AfterValidator, BaseModel, ConfigDict, model_validator

from scolaris.utils.datetime import is_past

Gender = Literal["MALE", "FEMALE"]


class ORMModel(BaseModel):
    """Response model readable from ORM objects."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class PartialUpdateRequest(BaseModel):
    """Base class for sparse update payloads."""

    model_config = ConfigDict(extra="forbid")

    non_nullable: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="before")
    @classmethod
    def reject_cleared_required_fields(cls, data: Any) -> Any:
        """Reject an explicit null for any field listed in non_nullable."""
        if isinstance(data, dict):
            cleared = [key for key in cls.non_nullable if key in data and data[key] is None]
            if cleared:
                raise ValueError(f"Fields cannot be null: {', '.join(cleared)}")
        return data

    def changes(self) -> dict[str, Any]:
        """Return only the fields the client provided."""
        return self.model_dump(exclude_unset=True)


def check_past_date(value: date) -> date:
    """Validate that a birth date lies strictly in the past."""
    if not is_past(value):
        raise ValueError("Birth date must be in the past")
    return value


PastDate = Annotated[date, AfterValidator(check_past_date)]
