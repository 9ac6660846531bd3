import uvicorn
from trackify.api.server import create_app
from trackify.config.config_loader import ConfigLoader, DEFAULT_CONFIG_FILE
from trackify.database.mongodb_manager import MongoDBManager
from trackify.utils.logger import configure_logging, get_logger


class LookupSystem:
    def __init__(self, config_file: str = DEFAULT_CONFIG_FILE):
        self.config = ConfigLoader.load_config(config_file)
        configure_logging(self.config)
        self.logger = get_logger(__name__)

        self.db = MongoDBManager(self.config)
        self.app = create_app(self.config, self.db)

    def run(self):
        host = self.config['server']['host']
        port = self.config['server']['port']
        self.logger.info(f"Server is running on port {port}")
        uvicorn.run(self.app, host=host, port=port)


def main():
    LookupSystem().run()
