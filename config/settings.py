"""Configuration management for the console bank."""
import logging
import os
from dataclasses import dataclass
from decimal import Decimal

from src.models.exceptions import InvalidAmountError
from src.models.money import as_money

CURRENCY_SYMBOLS = {
    'GBP': '£',
    'USD': '$',
    'EUR': '€',
    'INR': '₹',
    'TRY': '₺',
}


@dataclass
class Settings:
    """Configuration settings for the console bank.

    This class centralizes all configuration values, replacing hardcoded
    values throughout the codebase.
    """

    # Display
    currency: str = 'GBP'

    # Business Rules
    max_amount: Decimal = Decimal('1000000000000')  # 1T

    # Statement Configuration
    statement_size: int = 10

    # Logging Configuration
    log_file: str = 'bank.log'
    log_level: str = 'INFO'

    @property
    def currency_symbol(self) -> str:
        return CURRENCY_SYMBOLS[self.currency]

    @classmethod
    def load(cls) -> 'Settings':
        """Load settings from environment variables.

        Variables that are not set keep their default value.

        Returns:
            Settings: A Settings instance with values from environment variables.

        Raises:
            ValueError: If an environment variable holds an invalid value.
        """
        defaults = cls()

        currency = os.getenv('BANK_CURRENCY', defaults.currency).strip().upper()
        if currency not in CURRENCY_SYMBOLS:
            raise ValueError(f"BANK_CURRENCY must be one of {', '.join(CURRENCY_SYMBOLS)}")

        raw_max = os.getenv('BANK_MAX_AMOUNT')
        max_amount = defaults.max_amount
        if raw_max is not None:
            try:
                max_amount = as_money(raw_max)
            except InvalidAmountError:
                raise ValueError("BANK_MAX_AMOUNT must be a number") from None
            if max_amount <= 0:
                raise ValueError("BANK_MAX_AMOUNT must be a positive number")

        raw_size = os.getenv('BANK_STATEMENT_SIZE')
        statement_size = defaults.statement_size
        if raw_size is not None:
            try:
                statement_size = int(raw_size)
            except ValueError:
                raise ValueError("BANK_STATEMENT_SIZE must be an integer") from None
            if statement_size <= 0:
                raise ValueError("BANK_STATEMENT_SIZE must be greater than zero")

        log_level = os.getenv('BANK_LOG_LEVEL', defaults.log_level).strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"BANK_LOG_LEVEL is not a logging level: {log_level}")

        return cls(
            currency=currency,
            max_amount=max_amount,
            statement_size=statement_size,
            log_file=os.getenv('BANK_LOG_FILE', defaults.log_file),
            log_level=log_level,
        )
