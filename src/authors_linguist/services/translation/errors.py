"""Errors raised by the translation client."""


class TranslationFailure(Exception):
    """The structured reply could not be parsed into a TranslationResult."""
