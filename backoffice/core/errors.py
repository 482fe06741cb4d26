# backoffice/core/errors.py

import logging
from contextlib import contextmanager

logger = logging.getLogger(__name__)


class BackOfficeError(Exception):
    """Base error rendered to the caller as ``{"message": ...}``."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidDataError(BackOfficeError):
    status_code = 400


class NotFoundError(BackOfficeError):
    status_code = 404


class StoreError(BackOfficeError):
    status_code = 500


@contextmanager
def store_errors(message: str):
    """
    Turns any unexpected failure inside the block into a StoreError carrying
    a generic message. Errors that already know their status pass through.
    """
    try:
        yield
    except BackOfficeError:
        raise
    except Exception as exc:
        logger.exception(message)
        raise StoreError(message) from exc
