"""Built-in rule kinds. Importing this package registers them."""

from app.validation.rules import amount_limit, counterparty_check, currency_check  # noqa: F401
