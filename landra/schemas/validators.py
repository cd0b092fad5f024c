from typing import Iterable

from pydantic import BaseModel


def reject_nulls(model: BaseModel, fields: Iterable[str]) -> None:
    """Partial updates may omit a field but not send null for a required column."""
    for name in sorted(model.model_fields_set & set(fields)):
        if getattr(model, name) is None:
            raise ValueError(f"{name} cannot be null")
