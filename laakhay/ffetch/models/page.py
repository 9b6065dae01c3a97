"""Page envelope returned by content-index endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

Record = dict[str, Any]
"""One decoded entry: field name to JSON value (str, number, bool, None, list, dict)."""


class PageResponse(BaseModel):
    """One page of an index.

    ``total`` is the server-reported size of the whole index, not of this page.
    """

    total: int = Field(..., ge=0)
    offset: int = Field(..., ge=0)
    limit: int = Field(..., ge=0)
    data: list[Record]

    model_config = ConfigDict(frozen=True, strict=True)
