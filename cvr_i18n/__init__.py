"""cvr-i18n: lint and tidy locale JSON files against a base locale."""

__version__ = "0.1.0"
