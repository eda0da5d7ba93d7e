"""Condition-driven remodeling of native PBRT scenes."""

from pbrtremodel.remodel.camera import CameraVariant, build_camera
from pbrtremodel.remodel.config import RemodelConfig
from pbrtremodel.remodel.lens import parse_focal_length
from pbrtremodel.remodel.modes import RenderMode
from pbrtremodel.remodel.remodeller import remodel, remodel_copy

__all__ = [
    "CameraVariant",
    "RemodelConfig",
    "RenderMode",
    "build_camera",
    "parse_focal_length",
    "remodel",
    "remodel_copy",
]
