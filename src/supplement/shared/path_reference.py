"""Path argument type accepted by the filesystem helpers."""

from __future__ import annotations

import os
from typing import TypeAlias

PathReference: TypeAlias = str | os.PathLike[str]
