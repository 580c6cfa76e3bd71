from pydantic import BaseModel, ConfigDict


class InsertModel(BaseModel):
    """Payload accepted by a create operation.

    Server-assigned fields (``id``, ``createdAt``) are not declared here, so
    supplying them is a validation error rather than a silent overwrite.
    """
    model_config = ConfigDict(extra='forbid')


class PartialModel(BaseModel):
    model_config = ConfigDict(extra='forbid')


def merge_partial(record, partial_cls, changes):
    """Return a copy of ``record`` with the explicitly supplied ``changes``.

    The merged record is validated again so an update cannot leave it in a
    shape its own model would reject (e.g. negative stock).
    """
    if not isinstance(changes, partial_cls):
        changes = partial_cls.model_validate(changes)
    data = record.model_dump()
    data.update(changes.model_dump(exclude_unset=True))
    return type(record).model_validate(data)
