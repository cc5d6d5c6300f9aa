import logging
import sys

from mdblog.dependencies import build_site_builder
from mdblog.settings import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> int:
    try:
        report = build_site_builder(settings).build()
    except Exception as e:
        logger.error(f"Site build failed: {e}", exc_info=True)
        return 1

    for failure in report.failures:
        logger.warning(f"Page omitted: {failure.slug} ({failure.error})")
    logger.info(f"Site build completed: {len(report.pages)} pages in {report.output_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
