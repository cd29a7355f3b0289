"""Path: immutable location trail built during the diff walk.

A path is a tuple of components, each either a ``Field`` (object key) or an
``Index`` (array position).  Appending returns a new ``Path``; sibling
branches of the walk each hold their own value and never observe each
other's components.

Rendering:
- Root (no components) -> ``(root)``
- Field ``name``       -> ``.name``
- Index ``i``          -> ``[i]``

e.g. ``ROOT.field("data").field("users").index(1).field("id")`` renders as
``.data.users[1].id``.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ROOT", "Field", "Index", "Path", "PathComponent"]

ROOT_LABEL = "(root)"


@dataclass(frozen=True, slots=True)
class Field:
    """An object key component."""

    name: str

    def __str__(self) -> str:
        return f".{self.name}"


@dataclass(frozen=True, slots=True)
class Index:
    """An array position component."""

    position: int

    def __str__(self) -> str:
        return f"[{self.position}]"


PathComponent = Field | Index


@dataclass(frozen=True, slots=True)
class Path:
    """Immutable sequence of path components, root first."""

    components: tuple[PathComponent, ...] = ()

    def append(self, component: PathComponent) -> Path:
        return Path((*self.components, component))

    def field(self, name: str) -> Path:
        return self.append(Field(name))

    def index(self, position: int) -> Path:
        return self.append(Index(position))

    @property
    def is_root(self) -> bool:
        return not self.components

    def __len__(self) -> int:
        return len(self.components)

    def __str__(self) -> str:
        if not self.components:
            return ROOT_LABEL
        return "".join(str(component) for component in self.components)


ROOT = Path()
