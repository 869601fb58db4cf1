"""
Shared base for partial-update request models.
"""

from __future__ import annotations

from typing import ClassVar, FrozenSet

from pydantic import BaseModel, model_validator


class PartialUpdate(BaseModel):
    """Base for ``*Update`` schemas where omitted fields are left unchanged.

    Fields are declared ``Optional`` so they can be omitted, but the columns
    listed in ``required_fields`` cannot hold ``None``: sending an explicit
    ``null`` for one of them fails validation (422) instead of reaching the
    store.
    """

    required_fields: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def _reject_null_required(self):
        nulls = sorted(
            name for name in self.model_fields_set & self.required_fields if getattr(self, name) is None
        )
        if nulls:
            raise ValueError(f"Fields cannot be null: {', '.join(nulls)}")
        return self
