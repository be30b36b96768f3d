"""
Base record type and the row-parsing boundary.

Rows come back from raw SQL as plain dicts keyed by column name (camelCase).
They are validated here so a schema drift fails loudly instead of leaking
half-typed data into the request.
"""

from typing import Any, Mapping, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from shortlink_app.exceptions import RowShapeError


class EdgeRecord(BaseModel):
    """
    Common configuration for database records.

    - populate_by_name: construct with snake_case names in code and tests
    - extra="allow": `SELECT *` columns we don't declare are kept, not dropped
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")


RecordT = TypeVar("RecordT", bound=EdgeRecord)


def parse_row(model: Type[RecordT], row: Mapping[str, Any], table: str) -> RecordT:
    """Validate one database row into `model`, raising RowShapeError on mismatch"""
    try:
        return model.model_validate(dict(row))
    except ValidationError as e:
        raise RowShapeError(table, e.errors()) from e
