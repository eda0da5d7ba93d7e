"""Lens name handling.

Lens names encode several dot separated fields, e.g. `dgauss.22deg.50.0mm`
for a double Gauss design with a 22 degree field of view and a 50 mm focal
length. The focal length is the text between the second `.` and the first
`mm`.
"""

import math

from pbrtremodel.errors import MalformedLensNameError


def parse_focal_length(lens: str) -> float:
    """Extract the focal length in millimeters from a lens name.

    Args:
        lens: Lens name, e.g. "dgauss.22deg.50.0mm".

    Returns:
        The focal length, e.g. 50.0.

    Raises:
        MalformedLensNameError: If the name has no second `.`, no `mm` after
            it, or the text between them is not a finite positive number.
    """
    first_dot = lens.find(".")
    second_dot = lens.find(".", first_dot + 1) if first_dot >= 0 else -1
    if second_dot < 0:
        raise MalformedLensNameError(lens, "expected at least two '.' separators")

    mm = lens.find("mm")
    if mm < 0:
        raise MalformedLensNameError(lens, "no 'mm' focal length suffix")
    if mm <= second_dot:
        raise MalformedLensNameError(
            lens, "the first 'mm' must come after the second '.'"
        )

    text = lens[second_dot + 1 : mm]
    try:
        focal_length = float(text)
    except ValueError:
        raise MalformedLensNameError(
            lens, f"focal length '{text}' is not a number"
        ) from None
    if not math.isfinite(focal_length):
        raise MalformedLensNameError(lens, f"focal length {text} is not finite")
    if not focal_length > 0:
        raise MalformedLensNameError(lens, f"focal length {text} is not positive")
    return focal_length
