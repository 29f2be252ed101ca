"""Reference to an installable game package.

Only the identifying attributes are kept; the full package metadata (download
URL, changelog, install state) belongs to the package manager and is looked
up from these.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

__all__ = ["PackageReference"]


@dataclass(frozen=True)
class PackageReference:
    id: str
    version: str
    name: Optional[str] = None
