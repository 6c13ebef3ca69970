"""
Console entry point for the ShopEase storefront
"""
import logging

from core.config import Settings
from core.storefront import ShopEaseStorefront
from ui.simple_ui import SimpleStorefrontUI


def main():
    # Console storefront against the configured database
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    print("=== ShopEase Storefront ===")
    storefront = ShopEaseStorefront(settings)
    SimpleStorefrontUI(storefront).run()


if __name__ == "__main__":
    main()
