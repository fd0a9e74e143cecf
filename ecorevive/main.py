# ecorevive/main.py
import uvicorn

from ecorevive.api import create_app
from ecorevive.data.seed import seed
from ecorevive.utils.settings import SEED_SAMPLE_DATA
from ecorevive.utils.logging import get_logger

logger = get_logger(__name__)

app = create_app()

if SEED_SAMPLE_DATA:
    seed(app.state.store)
    logger.info("Sample data loaded into the in-memory store")

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
