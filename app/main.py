import uvicorn
from dotenv import load_dotenv

from infrastructure.logging import get_module_logger
from infrastructure.services import get_settings
from server import server

server_app = server.handler
logger = get_module_logger()

load_dotenv()


def main():
    """Serve the application with uvicorn."""
    settings = get_settings()
    logger.info("server_starting", site_name=settings.SITE_NAME, prefix=settings.PREFIX)
    uvicorn.run(server_app, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
