"""
Runtime configuration loaded from the environment (.env supported)
"""
import os
from dotenv import load_dotenv

load_dotenv()

DB_PATH = os.getenv("CAFEZINHO_DB_PATH", os.path.join("data", "cafezinho.db"))

PORT = int(os.getenv("PORT", 3335))
DEBUG = os.getenv("DEBUG", "False").lower() == "true"
SECRET_KEY = os.getenv("SECRET_KEY", "cafezinho-dev-key")

# Zero-padded width of human readable order numbers (#0001)
ORDER_NUMBER_WIDTH = int(os.getenv("ORDER_NUMBER_WIDTH", 4))

# Phone that receives shared orders
STORE_PHONE_NUMBER = os.getenv("STORE_PHONE_NUMBER", "5511999999999")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
