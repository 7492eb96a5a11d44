from nettag.logger import init_logger
from nettag.config import ConfigService, get_config_service

__version__ = '0.1.0'

# Initialize logger
logger = init_logger()
