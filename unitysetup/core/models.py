"""
Data model shared by the provisioning components.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple


@dataclass(frozen=True)
class VersionSpec:
    """
    A Unity editor version pinned to an exact build.

    Attributes:
        version: Release identifier (e.g., '2022.3.10f1', '2023.1.0b4')
        changeset: Build identifier (e.g., 'ff3792e53c62')
    """

    version: str
    changeset: str

    @property
    def is_resolved(self) -> bool:
        """Both fields are known."""
        return bool(self.version) and bool(self.changeset)

    def __str__(self) -> str:
        return f"{self.version} ({self.changeset})"


@dataclass(frozen=True)
class ModuleRequest:
    """
    Ordered set of optional editor modules to install.

    Names are lower-cased and de-duplicated keeping the first occurrence;
    order is preserved because it determines the hub flag order.
    """

    names: Tuple[str, ...]
    child_modules: bool = False

    @classmethod
    def from_names(
        cls, names: Optional[Iterable[str]], child_modules: bool = False
    ) -> "ModuleRequest":
        ordered = {}
        for name in names or ():
            name = name.strip().lower()
            if name:
                ordered.setdefault(name, None)
        return cls(names=tuple(ordered), child_modules=child_modules)

    def __bool__(self) -> bool:
        return bool(self.names)

    def to_args(self) -> List[str]:
        """
        Build hub arguments for this request.

        Example:
            >>> ModuleRequest.from_names(["Android", "ios"], True).to_args()
            ['--module', 'android', '--module', 'ios', '--childModules']
        """
        args: List[str] = []
        for name in self.names:
            args.extend(["--module", name])
        if self.child_modules:
            args.append("--childModules")
        return args
