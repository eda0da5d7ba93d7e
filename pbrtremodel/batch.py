"""Remodel a base scene once per condition row.

Rows are independent: each one is applied to its own copy of the base scene.
A row that fails with a `RemodelError` is recorded and skipped, so the other
rows are still produced. With `fail_fast=True` the first failure is raised
instead.
"""

import logging

from dataclasses import dataclass
from pathlib import Path

from pbrtremodel.conditions import ConditionRow, ConditionTable
from pbrtremodel.errors import ConditionFileError, RemodelError
from pbrtremodel.remodel import RemodelConfig, remodel_copy
from pbrtremodel.scene import NativeScene, write_scene

console_logger = logging.getLogger(__name__)

SCENE_FILE_SUFFIX = ".pbrt"


@dataclass
class RowResult:
    """Outcome of remodeling one condition row."""

    row: ConditionRow

    scene: NativeScene | None = None
    """The remodeled scene, None if the row failed."""

    scene_path: Path | None = None
    """Written scene file, None if no output directory was given or the row
    failed."""

    error: RemodelError | None = None

    @property
    def success(self) -> bool:
        return self.error is None


def remodel_conditions(
    base_scene: NativeScene,
    conditions: ConditionTable | list[ConditionRow],
    config: RemodelConfig | None = None,
    output_dir: Path | str | None = None,
    fail_fast: bool = False,
) -> list[RowResult]:
    """Remodel `base_scene` for every condition row.

    A row whose name matches an earlier written row fails with
    `ConditionFileError`, so no scene file is overwritten.

    Args:
        base_scene: Generic scene; never modified.
        conditions: Rows to apply, in processing order.
        config: Engine constants.
        output_dir: If given, each scene is written to
            `<output_dir>/<row name>.pbrt`.
        fail_fast: Raise the first row error instead of recording it.

    Returns:
        One result per row, in input order.

    Raises:
        SceneStructureError: If the base scene cannot be remodeled at all.
        RemodelError: The first row error, when `fail_fast` is set.

    """
    config = config or RemodelConfig()
    # A broken base scene would fail every row the same way.
    base_scene.validate_base()
    output_dir = Path(output_dir) if output_dir is not None else None

    rows = list(conditions)
    results: list[RowResult] = []
    written_names: set[str] = set()
    for position, row in enumerate(rows, start=1):
        try:
            scene = remodel_copy(base_scene, row, config)
            if output_dir is not None and row.name in written_names:
                raise ConditionFileError(
                    f"Condition name '{row.name}' is used by an earlier row; "
                    "its scene file would be overwritten"
                )
        except RemodelError as e:
            if fail_fast:
                raise
            console_logger.error(f"Condition {row.name} failed: {e}")
            results.append(RowResult(row=row, error=e))
            continue

        scene_path = None
        if output_dir is not None:
            scene_path = write_scene(
                scene, output_dir / f"{row.name}{SCENE_FILE_SUFFIX}"
            )
            written_names.add(row.name)
        results.append(RowResult(row=row, scene=scene, scene_path=scene_path))
        console_logger.info(f"[{position}/{len(rows)}] Remodeled {row.name}")

    failed = [result for result in results if not result.success]
    if failed:
        console_logger.warning(
            f"{len(failed)} of {len(results)} conditions failed: "
            f"{', '.join(result.row.name for result in failed)}"
        )
    return results
