from contextlib import asynccontextmanager
import logging

from cvscore.scoring import load_scoring_constants
from cvscore.taxonomy import get_default_taxonomy_provider

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    # Fail at startup, not on the first request, when a data file is broken.
    constants = load_scoring_constants()
    taxonomy = get_default_taxonomy_provider()
    logger.info(
        "scoring_ready scoring_version=%s taxonomy_version=%s market=%s",
        constants.version,
        taxonomy.version,
        taxonomy.market,
    )
    yield
