import hydra
from loguru import logger
from omegaconf import DictConfig, OmegaConf

from mazeevo.entrypoint import run_demo
from mazeevo.utils.logger_setup import setup_logger


@hydra.main(version_base=None, config_path="config", config_name="config")
def main(cfg: DictConfig) -> None:
    """Main entrypoint with Hydra configuration management."""
    log_file_path = setup_logger(
        log_dir=cfg.logging.log_dir,
        level=cfg.logging.level,
        rotation=cfg.logging.rotation,
        retention=cfg.logging.retention,
        module_levels=OmegaConf.to_container(cfg.logging.module_levels),
    )
    logger.info(
        "Working directory: {}.",
        hydra.core.hydra_config.HydraConfig.get().runtime.output_dir,
    )
    logger.info(f"Log file: {log_file_path}")
    try:
        run_demo(cfg)
    except Exception as e:  # pylint: disable=broad-except
        logger.error(f"Decode run failed: {e}")
        raise


if __name__ == "__main__":
    main()
