"""Application entry point for the match history service."""

import uvicorn
from match_history.core import get_global_settings

if __name__ == "__main__":
    settings = get_global_settings()
    uvicorn.run(
        "match_history.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
