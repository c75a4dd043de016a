import sys
import os

# Add the project root to sys.path to allow imports from tiktok_relay
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tiktok_relay.core.config import Settings
from tiktok_relay.core.log import configure_logging
from tiktok_relay.main import create_app

settings = Settings()
configure_logging(settings.LOG_LEVEL)

# Vercel needs the variable 'app'
app = create_app(settings)
