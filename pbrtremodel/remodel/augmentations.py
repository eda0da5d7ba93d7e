"""Elements the engine adds on top of the base scene."""

from pbrtremodel.remodel.config import RemodelConfig
from pbrtremodel.scene import ElementKind, ParamType, SceneElement

FOG_MEDIUM = "water"
SINGLE_SCATTERING_INTEGRATOR = "single"
SPECTRAL_RENDERER = "spectralrenderer"


def environment_light(config: RemodelConfig) -> SceneElement:
    """Infinite light lit by the sky map, used as a lighting reference."""
    scale = config.environment_scale
    return SceneElement.create(
        ElementKind.LIGHT_SOURCE,
        "infinite",
        [
            ("nsamples", ParamType.INTEGER, config.environment_samples),
            ("mapname", ParamType.STRING, config.resource(config.environment_map)),
            ("scale", ParamType.COLOR, (scale, scale, scale)),
        ],
    )


def fog_integrator(config: RemodelConfig) -> SceneElement:
    return SceneElement.create(
        ElementKind.VOLUME_INTEGRATOR,
        SINGLE_SCATTERING_INTEGRATOR,
        [("stepsize", ParamType.FLOAT, config.fog_step_size)],
    )


def fog_volume(config: RemodelConfig) -> SceneElement:
    """A water medium box enclosing the whole scene."""
    return SceneElement.create(
        ElementKind.VOLUME,
        FOG_MEDIUM,
        [
            ("p0", ParamType.POINT, config.fog_p0),
            ("p1", ParamType.POINT, config.fog_p1),
            (
                "absorptionCurveFile",
                ParamType.SPECTRUM,
                config.resource(config.fog_absorption_file),
            ),
            (
                "phaseFunctionFile",
                ParamType.STRING,
                config.resource(config.fog_phase_function_file),
            ),
            (
                "scatteringCurveFile",
                ParamType.SPECTRUM,
                config.resource(config.fog_scattering_file),
            ),
        ],
    )


def spectral_renderer() -> SceneElement:
    return SceneElement(kind=ElementKind.RENDERER, type=SPECTRAL_RENDERER)
