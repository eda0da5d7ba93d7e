"""Native scene container: the `overall` and `world` scopes of a PBRT scene."""

import copy
import logging

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator

from omegaconf import DictConfig, OmegaConf

from pbrtremodel.errors import SceneStructureError
from pbrtremodel.scene.elements import ElementKind, SceneElement

console_logger = logging.getLogger(__name__)

# Elements a base scene must carry exactly once before it can be remodeled.
REQUIRED_OVERALL_KINDS = (
    ElementKind.CAMERA,
    ElementKind.SAMPLER,
    ElementKind.PIXEL_FILTER,
    ElementKind.SURFACE_INTEGRATOR,
)


@dataclass
class SceneScope:
    """An ordered, mutable list of scene elements."""

    name: str
    """Scope name ("overall" or "world")."""

    elements: list[SceneElement] = field(default_factory=list)

    def __iter__(self) -> Iterator[SceneElement]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def find(self, kind: ElementKind) -> SceneElement | None:
        """Return the first element of the given kind, or None."""
        for element in self.elements:
            if element.kind == kind:
                return element
        return None

    def find_all(self, kind: ElementKind) -> list[SceneElement]:
        return [element for element in self.elements if element.kind == kind]

    def count(self, kind: ElementKind) -> int:
        return len(self.find_all(kind))

    def require(self, kind: ElementKind) -> SceneElement:
        """Return the first element of the given kind.

        Raises:
            SceneStructureError: If the scope has no such element.
        """
        element = self.find(kind)
        if element is None:
            raise SceneStructureError(
                f"Scope '{self.name}' has no {kind.value} element"
            )
        return element

    def append(self, element: SceneElement) -> None:
        self.elements.append(element)

    def remove(self, kind: ElementKind) -> SceneElement | None:
        """Remove the first element of the given kind and return it."""
        for index, element in enumerate(self.elements):
            if element.kind == kind:
                return self.elements.pop(index)
        return None

    def replace(self, old: SceneElement, new: SceneElement) -> None:
        """Swap `old` for `new`, keeping its position in the scope.

        Raises:
            SceneStructureError: If `old` is not part of this scope.
        """
        for index, element in enumerate(self.elements):
            if element is old:
                self.elements[index] = new
                return
        raise SceneStructureError(
            f"Cannot replace {old.kind.value} '{old.type}': not in scope "
            f"'{self.name}'"
        )


@dataclass
class NativeScene:
    """Renderer scene split into global settings and scene content."""

    overall: SceneScope = field(default_factory=lambda: SceneScope("overall"))
    """Global renderer settings: camera, sampler, filter, integrators, ..."""

    world: SceneScope = field(default_factory=lambda: SceneScope("world"))
    """Scene content between WorldBegin and WorldEnd."""

    def copy(self) -> "NativeScene":
        """Return an independent copy; no scope is shared with the original."""
        return copy.deepcopy(self)

    def validate_base(self) -> None:
        """Check that the scene can be remodeled.

        Raises:
            SceneStructureError: If a required global element is missing or
                duplicated.
        """
        for kind in REQUIRED_OVERALL_KINDS:
            count = self.overall.count(kind)
            if count != 1:
                raise SceneStructureError(
                    f"Base scene needs exactly one {kind.value} in 'overall', "
                    f"found {count}"
                )

    def to_dict(self) -> dict[str, Any]:
        return {
            "overall": [element.to_dict() for element in self.overall],
            "world": [element.to_dict() for element in self.world],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | DictConfig) -> "NativeScene":
        """Build a scene from its declarative description.

        Args:
            data: Mapping with optional `overall` and `world` lists. Each entry
                has `kind`, `type` and an optional `parameters` list of
                `{name, type, value}` mappings.

        Returns:
            The scene.
        """
        if isinstance(data, DictConfig):
            data = OmegaConf.to_container(data, resolve=True)

        unknown = set(data) - {"overall", "world"}
        if unknown:
            raise ValueError(f"Unknown scene scopes: {sorted(unknown)}")

        return cls(
            overall=SceneScope(
                "overall",
                [SceneElement.from_dict(e) for e in data.get("overall") or []],
            ),
            world=SceneScope(
                "world", [SceneElement.from_dict(e) for e in data.get("world") or []]
            ),
        )

    @classmethod
    def from_yaml(cls, path: Path | str) -> "NativeScene":
        """Load a scene description from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Scene description does not exist: {path}")
        scene = cls.from_dict(OmegaConf.load(path))
        console_logger.info(
            f"Loaded scene {path} ({len(scene.overall)} global elements, "
            f"{len(scene.world)} world elements)"
        )
        return scene
