"""Camera variants and the camera element each one produces."""

import logging

from enum import Enum

from pbrtremodel.conditions import ConditionRow
from pbrtremodel.errors import InvalidParameterError
from pbrtremodel.remodel.config import RemodelConfig
from pbrtremodel.remodel.lens import parse_focal_length
from pbrtremodel.scene import ParamType, SceneElement

console_logger = logging.getLogger(__name__)

REALISTIC_DIFFRACTION = "realisticDiffraction"


class CameraVariant(Enum):
    """Camera styles selected by the `type` condition."""

    PERSPECTIVE = "perspective"
    PINHOLE = "pinhole"
    LIGHTFIELD = "lightfield"
    LENS = "lens"
    """Single lens without a microlens array. Selected by any `type` that is
    not one of the other variants."""

    @classmethod
    def parse(cls, value: str | None) -> "CameraVariant":
        for variant in (cls.PERSPECTIVE, cls.PINHOLE, cls.LIGHTFIELD):
            if value == variant.value:
                return variant
        console_logger.debug(f"Camera type {value!r} uses the single lens camera")
        return cls.LENS

    @property
    def uses_lens(self) -> bool:
        return self in (CameraVariant.LIGHTFIELD, CameraVariant.LENS)


def build_camera(
    variant: CameraVariant,
    camera: SceneElement,
    row: ConditionRow,
    config: RemodelConfig,
) -> SceneElement:
    """Return the camera element for a condition row.

    Args:
        variant: Selected camera variant.
        camera: The scene's current camera.
        row: Condition row providing film and lens parameters.
        config: Engine constants.

    Returns:
        A new camera element. `camera` itself is left untouched.

    Raises:
        MissingParameterError: If a value the variant needs is absent.
        InvalidParameterError: If the f-number is not positive or the
            microlens counts are not two non-negative integers.
        MalformedLensNameError: If the focal length cannot be parsed.
    """
    if variant == CameraVariant.PERSPECTIVE:
        return camera.with_parameter("fov", ParamType.FLOAT, config.perspective_fov)

    context = f"{variant.value} camera"
    film_diagonal = row.require_number("filmDiagonal", context)
    film_distance = row.require_number("filmDistance", context)

    if variant == CameraVariant.PINHOLE:
        return SceneElement.create(
            camera.kind,
            "pinhole",
            [
                ("filmdiag", ParamType.FLOAT, film_diagonal),
                ("filmdistance", ParamType.FLOAT, film_distance),
            ],
        )

    lens = row.require_string("lens", context)
    focal_length = parse_focal_length(lens)
    f_number = row.require_number("fNumber", context)
    if not f_number > 0:
        raise InvalidParameterError(f"fNumber must be positive, got {f_number}")

    if variant == CameraVariant.LIGHTFIELD:
        microlens = row.get_vector("microlens", (0, 0))
        if len(microlens) != 2:
            raise InvalidParameterError(
                f"microlens must have two entries (rows, columns), got {microlens}"
            )
        if not all(float(count).is_integer() and count >= 0 for count in microlens):
            raise InvalidParameterError(
                f"microlens entries must be non-negative integers, got {microlens}"
            )
        microlens = tuple(int(count) for count in microlens)
    else:
        microlens = (0, 0)

    return SceneElement.create(
        camera.kind,
        REALISTIC_DIFFRACTION,
        [
            ("aperture_diameter", ParamType.FLOAT, focal_length / f_number),
            ("filmdiag", ParamType.FLOAT, film_diagonal),
            ("filmdistance", ParamType.FLOAT, film_distance),
            ("num_pinholes_h", ParamType.FLOAT, microlens[0]),
            ("num_pinholes_w", ParamType.FLOAT, microlens[1]),
            # Microlens emulation is always off; only the pinhole counts apply.
            ("microlens_enabled", ParamType.FLOAT, 0),
            ("diffractionEnabled", ParamType.BOOL, row.get_flag("diffraction", True)),
            (
                "chromaticAberrationEnabled",
                ParamType.BOOL,
                row.get_flag("chromaticAberration", False),
            ),
            ("specfile", ParamType.STRING, config.lens_file(lens)),
        ],
    )
