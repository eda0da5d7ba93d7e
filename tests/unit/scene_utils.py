"""Scene and condition builders shared by the unit tests."""

from pbrtremodel.conditions import ConditionRow
from pbrtremodel.scene import ElementKind, NativeScene, SceneElement, SceneScope

LENS = "dgauss.22deg.50.0mm"


def make_base_scene() -> NativeScene:
    """A generic scene as produced by the scene conversion step."""
    overall = SceneScope(
        "overall",
        [
            SceneElement.create(
                ElementKind.CAMERA, "perspective", [("fov", "float", 45)]
            ),
            SceneElement.create(
                ElementKind.SAMPLER,
                "lowdiscrepancy",
                [("pixelsamples", "integer", 8)],
            ),
            SceneElement.create(
                ElementKind.PIXEL_FILTER,
                "gaussian",
                [("xwidth", "float", 2), ("ywidth", "float", 2)],
            ),
            SceneElement.create(
                ElementKind.SURFACE_INTEGRATOR,
                "directlighting",
                [("maxdepth", "integer", 5)],
            ),
        ],
    )
    world = SceneScope(
        "world",
        [SceneElement.create(ElementKind.SHAPE, "sphere", [("radius", "float", 1)])],
    )
    return NativeScene(overall=overall, world=world)


def make_row(**values) -> ConditionRow:
    """A complete radiance condition for a single lens camera.

    Keyword arguments override or add values; pass None to drop a value.
    """
    defaults = {
        "imageName": "test_condition",
        "type": "lens",
        "lens": LENS,
        "mode": "radiance",
        "pixelSamples": 1024,
        "filmDistance": 50.0,
        "filmDiagonal": 30.0,
        "microlens": (0, 0),
        "fNumber": 2.0,
        "fog": "false",
        "diffraction": "true",
        "chromaticAberration": "false",
    }
    defaults.update(values)
    return ConditionRow({k: v for k, v in defaults.items() if v is not None})
