"""Immutable scene elements (cameras, samplers, integrators, lights, ...)."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from pbrtremodel.scene.params import ParamData, ParamType, ParamValue


class ElementKind(str, Enum):
    """Element kinds, named after the PBRT directive that declares them."""

    CAMERA = "Camera"
    SAMPLER = "Sampler"
    PIXEL_FILTER = "PixelFilter"
    FILM = "Film"
    SURFACE_INTEGRATOR = "SurfaceIntegrator"
    VOLUME_INTEGRATOR = "VolumeIntegrator"
    RENDERER = "Renderer"
    LIGHT_SOURCE = "LightSource"
    VOLUME = "Volume"
    SHAPE = "Shape"
    MATERIAL = "Material"


@dataclass(frozen=True)
class SceneElement:
    """A typed node of a native scene.

    Elements are values: every "modification" returns a new element, which the
    caller swaps into its scope.
    """

    kind: ElementKind
    """Directive the element is declared with."""

    type: str
    """Renderer-specific subtype, e.g. "perspective" or "stratified"."""

    parameters: tuple[tuple[str, ParamValue], ...] = field(default_factory=tuple)
    """Ordered (name, value) pairs. Names are unique within an element."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", ElementKind(self.kind))
        object.__setattr__(self, "parameters", tuple(self.parameters))
        names = [name for name, _ in self.parameters]
        if len(names) != len(set(names)):
            raise ValueError(
                f"Duplicate parameter names in {self.kind.value} '{self.type}': "
                f"{names}"
            )

    @classmethod
    def create(
        cls,
        kind: ElementKind | str,
        type: str,
        parameters: list[tuple[str, ParamType | str, Any]] | None = None,
    ) -> "SceneElement":
        """Build an element from (name, tag, value) triples.

        Args:
            kind: Element kind.
            type: Element subtype.
            parameters: Parameters in declaration order.

        Returns:
            The new element.
        """
        params = tuple(
            (name, ParamValue.of(tag, value)) for name, tag, value in parameters or []
        )
        return cls(kind=ElementKind(kind), type=type, parameters=params)

    @property
    def parameter_names(self) -> list[str]:
        return [name for name, _ in self.parameters]

    def get(self, name: str) -> ParamValue | None:
        for param_name, value in self.parameters:
            if param_name == name:
                return value
        return None

    def value(self, name: str) -> ParamData | None:
        """Return the bare value of a parameter, or None when absent."""
        param = self.get(name)
        return None if param is None else param.value

    def with_parameter(
        self, name: str, tag: ParamType | str, value: Any
    ) -> "SceneElement":
        """Return a copy with the parameter set.

        An existing parameter of the same name is replaced in place so the
        declaration order is kept; otherwise the parameter is appended.
        """
        new_value = ParamValue.of(tag, value)
        params = list(self.parameters)
        for index, (param_name, _) in enumerate(params):
            if param_name == name:
                params[index] = (name, new_value)
                break
        else:
            params.append((name, new_value))
        return replace(self, parameters=tuple(params))

    def with_type(self, type: str) -> "SceneElement":
        """Return a copy with a different subtype and the same parameters."""
        return replace(self, type=type)

    def cleared(self, type: str | None = None) -> "SceneElement":
        """Return a copy with no parameters and, optionally, a new subtype."""
        return replace(self, type=self.type if type is None else type, parameters=())

    def to_dict(self) -> dict[str, Any]:
        """Serialize into the declarative form read by `NativeScene.from_dict`."""
        return {
            "kind": self.kind.value,
            "type": self.type,
            "parameters": [
                {
                    "name": name,
                    "type": value.tag.value,
                    "value": list(value.value)
                    if isinstance(value.value, tuple)
                    else value.value,
                }
                for name, value in self.parameters
            ],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SceneElement":
        """Inverse of `to_dict`."""
        if "kind" not in data or "type" not in data:
            raise ValueError(f"Scene element needs 'kind' and 'type': {data}")
        return cls.create(
            kind=data["kind"],
            type=data["type"],
            parameters=[
                (param["name"], param["type"], param["value"])
                for param in data.get("parameters") or []
            ],
        )
