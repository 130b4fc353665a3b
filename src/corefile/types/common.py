"""Cross-module type aliases."""

from __future__ import annotations

import os
from datetime import datetime
from typing import IO, Any, TypeAlias

StrPath: TypeAlias = str | os.PathLike[str]
FileStream: TypeAlias = IO[Any]
TimeValue: TypeAlias = datetime | int | float
