"""Field types shared by the request schemas."""

from typing import Annotated

from pydantic import Field

# Integer primary keys are 32-bit signed on every supported backend
MAX_ROW_ID = 2**31 - 1

RowId = Annotated[int, Field(ge=1, le=MAX_ROW_ID)]
