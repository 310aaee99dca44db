# windowquote/errors.py
from __future__ import annotations


class QuoteError(Exception):
    """Base class for every error the UI turns into a notice."""


class ValidationError(QuoteError):
    pass


class AuthError(QuoteError):
    pass


class AuthNotReadyError(QuoteError):
    pass


class FetchError(QuoteError):
    pass


class SaveError(QuoteError):
    pass


class SaveInProgressError(SaveError):
    pass


class DeleteError(QuoteError):
    pass
