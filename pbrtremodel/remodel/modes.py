"""Render modes and the integrator/sampler/filter presets they apply."""

import logging

from dataclasses import dataclass
from enum import Enum

from pbrtremodel.conditions import ConditionRow
from pbrtremodel.errors import InvalidParameterError
from pbrtremodel.scene import ElementKind, ParamType, SceneElement

console_logger = logging.getLogger(__name__)


class RenderMode(Enum):
    """What a render produces, selected by the `mode` condition."""

    DEPTH = "depth"
    MATERIAL = "material"
    MESH = "mesh"
    RADIANCE = "radiance"
    """Stochastic radiance rendering. Selected by any `mode` that is not a
    metadata mode."""

    @classmethod
    def parse(cls, value: str | None) -> "RenderMode":
        for mode in (cls.DEPTH, cls.MATERIAL, cls.MESH):
            if value == mode.value:
                return mode
        if value != cls.RADIANCE.value:
            console_logger.debug(f"Render mode {value!r} renders radiance")
        return cls.RADIANCE

    @property
    def is_metadata(self) -> bool:
        """Whether the mode extracts per-pixel ground truth."""
        return self != RenderMode.RADIANCE


@dataclass(frozen=True)
class ModePreset:
    """Replacement elements for the global render settings."""

    integrator: SceneElement
    sampler: SceneElement
    pixel_filter: SceneElement


def metadata_preset(mode: RenderMode) -> ModePreset:
    """Deterministic one-sample settings for ground-truth extraction.

    A single un-jittered sample and a half-pixel box filter keep every pixel's
    value from a single surface, without blending across pixel borders.
    """
    if not mode.is_metadata:
        raise ValueError(f"{mode} is not a metadata mode")
    return ModePreset(
        integrator=SceneElement.create(
            ElementKind.SURFACE_INTEGRATOR,
            "metadata",
            [("strategy", ParamType.STRING, mode.value)],
        ),
        sampler=SceneElement.create(
            ElementKind.SAMPLER,
            "stratified",
            [
                ("jitter", ParamType.BOOL, False),
                ("xsamples", ParamType.INTEGER, 1),
                ("ysamples", ParamType.INTEGER, 1),
                ("pixelsamples", ParamType.INTEGER, 1),
            ],
        ),
        pixel_filter=SceneElement.create(
            ElementKind.PIXEL_FILTER,
            "box",
            [
                ("xwidth", ParamType.FLOAT, 0.5),
                ("ywidth", ParamType.FLOAT, 0.5),
            ],
        ),
    )


def radiance_preset(
    row: ConditionRow,
    integrator: SceneElement,
    sampler: SceneElement,
    pixel_filter: SceneElement,
) -> ModePreset:
    """Path tracing with the scene's own sampler and filter.

    Raises:
        MissingParameterError: If the row has no `pixelSamples`.
    """
    pixel_samples = row.require_number("pixelSamples", "radiance mode")
    if pixel_samples < 1 or not float(pixel_samples).is_integer():
        raise InvalidParameterError(
            f"pixelSamples must be a positive integer, got {pixel_samples}"
        )
    return ModePreset(
        integrator=integrator.with_type("path"),
        sampler=sampler.with_parameter(
            "pixelsamples", ParamType.INTEGER, pixel_samples
        ),
        pixel_filter=pixel_filter,
    )
