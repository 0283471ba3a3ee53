"""
Database error translation.

Django raises its own `DatabaseError` hierarchy regardless of backend. The
context manager below maps it onto the API error taxonomy so handlers never
see driver exceptions.
"""
import logging
from contextlib import contextmanager

from django.db import DatabaseError, InterfaceError, OperationalError

from .exceptions import QueryFailed, StoreUnavailable

logger = logging.getLogger(__name__)


@contextmanager
def store_errors():
    """
    Translate database failures raised inside the block.

    Usage:
        with store_errors():
            Task.objects.filter(...).update(...)
    """
    try:
        yield
    except (OperationalError, InterfaceError) as e:
        logger.warning(f"Store unavailable: {e}")
        raise StoreUnavailable(str(e)) from e
    except DatabaseError as e:
        logger.warning(f"Query failed: {e}")
        raise QueryFailed(str(e)) from e
