import logging
import sys

from dotenv import load_dotenv

from config.settings import Settings
from console.bankcmd import BankConsole
from src.services.bank_service import BankService


def configure_logging(settings: Settings) -> None:
    handler = logging.FileHandler(filename=settings.log_file, encoding='utf-8', mode='a')
    handler.setFormatter(logging.Formatter('%(asctime)s:%(levelname)s:%(name)s: %(message)s'))
    for name in ('src', 'console'):
        logger = logging.getLogger(name)
        logger.setLevel(settings.log_level)
        logger.addHandler(handler)


def main() -> int:
    load_dotenv()
    try:
        settings = Settings.load()
    except ValueError as err:
        print(f"Configuration error: {err}", file=sys.stderr)
        return 1
    configure_logging(settings)

    service = BankService(max_amount=settings.max_amount)
    return BankConsole(service, settings).run()


if __name__ == '__main__':
    sys.exit(main())
