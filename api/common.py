from typing import ClassVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Request model whose wire names are camelCase (``shortBio``, ``startDate``)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_document(self, *, partial: bool = False) -> dict:
        return self.model_dump(mode="python", by_alias=True, exclude_unset=partial)


class UpdateModel(CamelModel):
    """Partial update of a record described by ``create_schema``.

    Every field is optional so callers can send only what changes, but an
    explicit ``null`` is only accepted for fields that may be empty on the
    record itself.
    """

    create_schema: ClassVar[type[CamelModel]]

    @model_validator(mode="after")
    def _reject_null_for_required_fields(self):
        for name in self.model_fields_set:
            if getattr(self, name) is not None:
                continue
            field = self.create_schema.model_fields[name]
            if field.is_required() or field.default is not None:
                raise ValueError(f"{field.alias or name} cannot be null")
        return self


class MessageResponse(BaseModel):
    message: str
