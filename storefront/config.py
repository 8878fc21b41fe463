import os

DEFAULT_CATALOG = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data", "products.json")

class Config:
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Every Nth order may redeem a discount code
    NTH_ORDER = int(os.getenv("NTH_ORDER", "3"))
    DISCOUNT_PERCENT = os.getenv("DISCOUNT_PERCENT", "10")

    CATALOG_PATH = os.getenv("CATALOG_PATH", DEFAULT_CATALOG)
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
