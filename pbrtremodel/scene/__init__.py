from .elements import ElementKind, SceneElement
from .native_scene import NativeScene, SceneScope
from .params import ParamType, ParamValue
from .writer import format_scene, write_scene

__all__ = [
    "ElementKind",
    "NativeScene",
    "ParamType",
    "ParamValue",
    "SceneElement",
    "SceneScope",
    "format_scene",
    "write_scene",
]
