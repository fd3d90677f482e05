import sys

from engine.pipeline import Pipeline
from utils.config import DetectorConfig
from utils.logger import AppLogger


def main(config=None):
    logger = AppLogger()

    try:
        if config is None:
            config = DetectorConfig()

        Pipeline(config, logger=logger.log).run()
    except Exception as e:
        logger.error(f"❌ {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
