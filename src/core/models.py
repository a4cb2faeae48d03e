"""Immutable dataclasses describing repository contents.

The contents endpoint answers with either a JSON array (a directory) or a
single JSON object (a file, symlink or submodule). The fetch step turns
that into one of two explicit variants, DirectoryListing or SingleEntry,
so the formatting code never has to inspect raw JSON shapes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Union


@dataclass(frozen=True)
class RepoRef:
    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass(frozen=True)
class DirectoryEntry:
    name: str
    type: str
    path: str

    def as_dict(self) -> Dict[str, str]:
        return {"name": self.name, "type": self.type, "path": self.path}


@dataclass(frozen=True)
class FileContent:
    path: str
    text: str = ""


@dataclass(frozen=True)
class DirectoryListing:
    # Upstream order is preserved; GitHub does not promise any sorting.
    entries: Tuple[DirectoryEntry, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SingleEntry:
    name: str
    path: str
    type: str
    encoding: Optional[str] = None
    content: Optional[str] = None


RepoContent = Union[DirectoryListing, SingleEntry]
