import uvicorn

from adblend import config
from adblend.api.app import app
from adblend.logger import json_logger as logger


def main():
    logger.info("Application starting up...")
    # log_config=None keeps uvicorn on the handlers installed by setup_logging
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_config=None)


if __name__ == "__main__":
    main()
