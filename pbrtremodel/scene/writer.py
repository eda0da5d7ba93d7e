"""Write native scenes in the PBRT text scene-description format."""

import logging

from pathlib import Path

from pbrtremodel.scene.elements import SceneElement
from pbrtremodel.scene.native_scene import NativeScene
from pbrtremodel.scene.params import ParamType, ParamValue

console_logger = logging.getLogger(__name__)


def _format_number(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    # Integral floats keep a compact form, e.g. 35 rather than 35.0.
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def _quote(text: str) -> str:
    """Quote a string token, escaping characters the scene lexer treats specially."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def format_param(name: str, param: ParamValue) -> str:
    """Format one parameter, e.g. `"float fov" [35]`."""
    declaration = _quote(f"{param.tag.value} {name}")
    if param.tag == ParamType.BOOL:
        return f'{declaration} "{"true" if param.value else "false"}"'
    if isinstance(param.value, str):
        return f"{declaration} {_quote(param.value)}"
    numbers = " ".join(_format_number(v) for v in param.as_list())
    return f"{declaration} [{numbers}]"


def format_element(element: SceneElement, indent: str = "") -> str:
    """Format an element as a directive with one parameter per line."""
    lines = [f"{indent}{element.kind.value} {_quote(element.type)}"]
    for name, param in element.parameters:
        lines.append(f"{indent}    {format_param(name, param)}")
    return "\n".join(lines)


def format_scene(scene: NativeScene) -> str:
    """Format a whole scene: global settings, then the world block."""
    blocks = [format_element(element) for element in scene.overall]
    blocks.append("WorldBegin")
    blocks.extend(format_element(element, indent="    ") for element in scene.world)
    blocks.append("WorldEnd")
    return "\n".join(blocks) + "\n"


def write_scene(scene: NativeScene, path: Path | str) -> Path:
    """Write a scene file, creating parent directories as needed.

    Returns:
        Path of the written file.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_scene(scene))
    console_logger.debug(f"Wrote scene file {path}")
    return path
