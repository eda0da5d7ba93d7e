"""Fixed reference data used by the remodeling engine."""

import logging

from dataclasses import dataclass

from omegaconf import DictConfig, OmegaConf

console_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RemodelConfig:
    """Constants the engine writes into every scene.

    Paths are relative to the render working folder, which holds a copy of
    the shared `resources` directory. The engine never reads these files.
    """

    resource_dir: str = "resources"
    """Directory prefix of every referenced resource file."""

    environment_map: str = "sky.exr"
    """Environment map of the infinite light."""

    environment_samples: int = 128
    """Light samples taken from the environment map."""

    environment_scale: float = 1e18
    """Uniform radiance scale of the environment light. Deliberately huge so
    the sky acts as an overexposed lighting reference."""

    perspective_fov: float = 35.0
    """Field of view in degrees forced on perspective cameras."""

    fog_step_size: float = 50000.0
    """Ray-marching step size of the single-scattering volume integrator."""

    fog_p0: tuple[float, float, float] = (-1e8, -1e8, -1e7)
    """Lower corner of the fog volume."""

    fog_p1: tuple[float, float, float] = (1e8, 1e8, 1e8)
    """Upper corner of the fog volume."""

    fog_absorption_file: str = "abs.spd"
    fog_phase_function_file: str = "phase.spd"
    fog_scattering_file: str = "scat.spd"

    def __post_init__(self) -> None:
        if self.environment_samples < 1:
            raise ValueError(
                f"environment_samples must be positive, got {self.environment_samples}"
            )
        if self.fog_step_size <= 0:
            raise ValueError(
                f"fog_step_size must be positive, got {self.fog_step_size}"
            )
        if len(self.fog_p0) != 3 or len(self.fog_p1) != 3:
            raise ValueError("fog_p0 and fog_p1 must be 3-D points")
        object.__setattr__(self, "fog_p0", tuple(float(v) for v in self.fog_p0))
        object.__setattr__(self, "fog_p1", tuple(float(v) for v in self.fog_p1))
        if any(lo >= hi for lo, hi in zip(self.fog_p0, self.fog_p1)):
            raise ValueError(f"Fog box is empty: p0={self.fog_p0}, p1={self.fog_p1}")

    def resource(self, name: str) -> str:
        """Return the scene-relative path of a resource file."""
        return f"{self.resource_dir}/{name}"

    def lens_file(self, lens: str) -> str:
        """Return the datasheet path of a lens, `<resource_dir>/<lens>.dat`."""
        return self.resource(f"{lens}.dat")

    @classmethod
    def from_config(cls, cfg: DictConfig | None) -> "RemodelConfig":
        """Create config from a Hydra/OmegaConf subtree.

        Missing keys keep their defaults.

        Args:
            cfg: Remodel config subtree (cfg.remodel).

        Returns:
            RemodelConfig instance.
        """
        if cfg is None:
            return cls()
        values = OmegaConf.to_container(cfg, resolve=True)
        unknown = set(values) - set(cls.__dataclass_fields__)
        if unknown:
            raise ValueError(f"Unknown remodel config keys: {sorted(unknown)}")
        for key in ("fog_p0", "fog_p1"):
            if key in values:
                values[key] = tuple(values[key])
        config = cls(**values)
        console_logger.debug(f"Remodel config: {config}")
        return config
