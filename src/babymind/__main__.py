"""Serve the BabyMind API: python -m babymind"""

import uvicorn

from babymind.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "babymind.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
