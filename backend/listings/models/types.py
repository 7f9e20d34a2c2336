"""Shared field types for request/response records"""

from typing import Annotated

from pydantic import Field

# SQLite INTEGER range
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

Int64 = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]
