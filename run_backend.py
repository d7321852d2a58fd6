#!/usr/bin/env python3
"""Start the Timber Plan Generator API server."""

import uvicorn

from timberplan.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "timberplan.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        reload_dirs=["timberplan"],
    )
