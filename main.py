"""
Run with:   python main.py
Or `uvicorn main:app --port 8000` if you prefer the CLI.
"""

from aslan.infrastructure.config import ClientConfig
from aslan.infrastructure.logging import configure_logging
from aslan.server import create_app
import uvicorn

config = ClientConfig.from_env()
configure_logging(config.log_level, config.log_format)

app = create_app()

if __name__ == "__main__":

    # For reload to work, we need to use an import string instead of the app object
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=config.port,
        reload=True,     # set True for auto-reload in dev
        log_level=config.log_level.lower(),
    )
