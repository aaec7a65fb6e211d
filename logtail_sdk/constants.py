import os

from dotenv import load_dotenv

load_dotenv(dotenv_path=".env")

# Logger Constants
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
SERVICE_NAME: str = os.getenv("LOGTAIL_SERVICE_NAME", "logtail-sdk")

# Alarm Constants
ALARM_LOG_LEVEL = os.getenv("LOGTAIL_ALARM_LOG_LEVEL", "WARNING").upper()

# Pipeline Constants
DEFAULT_CONFIG_NAME = os.getenv("LOGTAIL_CONFIG_NAME", "default")
