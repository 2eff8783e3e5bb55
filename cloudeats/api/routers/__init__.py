from typing import Annotated

from fastapi import Path

from cloudeats.domain.schemas import INT64_MAX, INT64_MIN

Int64Path = Annotated[int, Path(ge=INT64_MIN, le=INT64_MAX)]
