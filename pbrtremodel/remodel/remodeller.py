"""Rewrite a generic native scene for one condition row.

The engine works on two independent axes, the camera variant (`type`) and the
render mode (`mode`), and then adds fog and a spectral renderer when a
radiance render asks for them. Unknown camera types fall through to the single
lens camera and unknown modes to radiance rendering.
"""

import logging

from pbrtremodel.conditions import ConditionRow
from pbrtremodel.remodel.augmentations import (
    environment_light,
    fog_integrator,
    fog_volume,
    spectral_renderer,
)
from pbrtremodel.remodel.camera import CameraVariant, build_camera
from pbrtremodel.remodel.config import RemodelConfig
from pbrtremodel.remodel.modes import RenderMode, metadata_preset, radiance_preset
from pbrtremodel.scene import ElementKind, NativeScene

console_logger = logging.getLogger(__name__)


def remodel(
    scene: NativeScene, row: ConditionRow, config: RemodelConfig | None = None
) -> NativeScene:
    """Apply a condition row to a native scene.

    The scene's scopes are modified in place and the scene is returned. Pass a
    fresh copy per row (see `remodel_copy`); the engine is not idempotent.

    Args:
        scene: Scene with exactly one camera, sampler, pixel filter and surface
            integrator in its `overall` scope.
        row: Render parameters.
        config: Engine constants. Defaults to `RemodelConfig()`.

    Returns:
        The remodeled scene.

    Raises:
        SceneStructureError: If the scene lacks a required element.
        MissingParameterError: If the row lacks a value the selected camera
            variant or render mode needs.
        InvalidParameterError: If a row value is unusable.
        MalformedLensNameError: If the lens name has no parsable focal length.
    """
    config = config or RemodelConfig()
    scene.validate_base()

    variant = CameraVariant.parse(row.get("type"))
    mode = RenderMode.parse(row.get("mode"))
    console_logger.debug(
        f"Remodeling {row.name}: camera={variant.value}, mode={mode.value}"
    )

    # Build every replacement first so a failing row leaves the scene as is.
    camera = scene.overall.require(ElementKind.CAMERA)
    integrator = scene.overall.require(ElementKind.SURFACE_INTEGRATOR)
    sampler = scene.overall.require(ElementKind.SAMPLER)
    pixel_filter = scene.overall.require(ElementKind.PIXEL_FILTER)

    new_camera = build_camera(variant, camera, row, config)
    if mode.is_metadata:
        preset = metadata_preset(mode)
    else:
        preset = radiance_preset(row, integrator, sampler, pixel_filter)
    use_fog = not mode.is_metadata and row.get_flag("fog", False)
    use_spectral = (
        not mode.is_metadata
        and row.get_flag("chromaticAberration", False)
        and variant != CameraVariant.PINHOLE
    )

    scene.world.append(environment_light(config))

    scene.overall.replace(camera, new_camera)
    scene.overall.replace(integrator, preset.integrator)
    scene.overall.replace(sampler, preset.sampler)
    scene.overall.replace(pixel_filter, preset.pixel_filter)

    if use_fog:
        # Surface and volume integrators are mutually exclusive.
        scene.overall.remove(ElementKind.SURFACE_INTEGRATOR)
        scene.overall.append(fog_integrator(config))
        scene.world.append(fog_volume(config))

    if use_spectral:
        scene.overall.append(spectral_renderer())

    console_logger.debug(
        f"Remodeled {row.name}: camera '{new_camera.type}', integrator "
        f"'{preset.integrator.type}', fog={use_fog}, spectral={use_spectral}"
    )
    return scene


def remodel_copy(
    base_scene: NativeScene, row: ConditionRow, config: RemodelConfig | None = None
) -> NativeScene:
    """Remodel a fresh copy of `base_scene`, leaving the base untouched."""
    return remodel(base_scene.copy(), row, config)
