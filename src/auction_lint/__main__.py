import logging

import uvicorn

from auction_lint.config import settings

if __name__ == "__main__":
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "auction_lint.api:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
