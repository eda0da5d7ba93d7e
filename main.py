"""
Main file for the project. Remodels a base scene for every row of a conditions
file and writes one PBRT scene file per row.
"""

import logging
import os
import sys
import time

from datetime import timedelta
from pathlib import Path

import hydra

from hydra.utils import to_absolute_path
from omegaconf import DictConfig, OmegaConf

from pbrtremodel.batch import remodel_conditions
from pbrtremodel.conditions import ConditionTable
from pbrtremodel.remodel import RemodelConfig
from pbrtremodel.scene import NativeScene
from pbrtremodel.utils.logging import LOG_FORMAT, FileLoggingContext

console_logger = logging.getLogger(__name__)


def run_local(cfg: DictConfig) -> int:
    """Run the batch described by `cfg`.

    Returns:
        Process exit code: 0 if every condition was remodeled, 1 otherwise.
    """
    start_time = time.time()
    OmegaConf.resolve(cfg)

    output_dir = Path(to_absolute_path(cfg.output_dir))
    output_dir.mkdir(parents=True, exist_ok=True)

    with FileLoggingContext(log_file_path=output_dir / "remodel.log"):
        console_logger.info(f"Outputs will be saved to: {output_dir}")

        resolved_config_yaml = OmegaConf.to_yaml(cfg)
        console_logger.info("Resolved configuration:\n" + resolved_config_yaml)
        (output_dir / "resolved_config.yaml").write_text(resolved_config_yaml)

        base_scene = NativeScene.from_yaml(to_absolute_path(cfg.base_scene))
        conditions = ConditionTable.from_file(to_absolute_path(cfg.conditions_file))
        remodel_config = RemodelConfig.from_config(cfg.get("remodel"))

        results = remodel_conditions(
            base_scene=base_scene,
            conditions=conditions,
            config=remodel_config,
            output_dir=output_dir,
            fail_fast=cfg.fail_fast,
        )

        num_failed = sum(not result.success for result in results)
        console_logger.info(
            f"Remodeled {len(results) - num_failed}/{len(results)} conditions in "
            f"{timedelta(seconds=time.time() - start_time)}"
        )
    return 0 if num_failed == 0 else 1


@hydra.main(version_base=None, config_path="configurations", config_name="config")
def run(cfg: DictConfig):
    # Configure logging level from LOGLEVEL environment variable.
    log_level = os.environ.get("LOGLEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format=LOG_FORMAT,
    )

    exit_code = run_local(cfg)
    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    run()
