"""
Main entry point for the Cafezinho terminal storefront
"""
import config
from core.log_setup import configure_logging
from core.storefront import CafezinhoStore
from ui.simple_ui import SimpleStoreUI


def main():
    configure_logging(config.LOG_LEVEL)
    store = CafezinhoStore(config.DB_PATH)
    SimpleStoreUI(store).run()


if __name__ == "__main__":
    main()
