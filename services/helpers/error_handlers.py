"""Error taxonomy and helpers shared by the services and routes"""
import logging
from typing import Callable, Any
from functools import wraps

logger = logging.getLogger(__name__)


class StellarLinkError(Exception):
    """Base class for errors raised by Stellar Link services"""
    status_code = 500


class InputError(StellarLinkError):
    """Request is missing fields or carries invalid values"""
    status_code = 400


class PermissionDeniedError(StellarLinkError):
    """Caller is not allowed to act on the record"""
    status_code = 403


class UpstreamError(StellarLinkError):
    """Language model call failed or returned nothing usable"""
    status_code = 502


class PersistenceError(StellarLinkError):
    """A store read or write failed"""
    status_code = 500


class NotFoundError(PersistenceError):
    """Requested record does not exist"""
    status_code = 404


def store_operation(name: str) -> Callable:
    """Turn any exception escaping a Supabase call into a PersistenceError.

    Errors that are already part of the taxonomy pass through untouched.
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            try:
                return func(*args, **kwargs)
            except StellarLinkError:
                raise
            except Exception as e:
                logger.error(f"Store operation '{name}' failed: {str(e)}")
                raise PersistenceError(f"{name} failed: {str(e)}") from e
        return wrapper
    return decorator


def error_response(error: StellarLinkError):
    """Build the JSON body and status for a service error"""
    return {'error': str(error) or error.__class__.__name__}, error.status_code


def handle_service_error(error: Exception, action: str):
    """Map any exception from a service call to a JSON body and status"""
    if isinstance(error, StellarLinkError):
        return error_response(error)
    logger.error(f"Error {action}: {str(error)}", exc_info=True)
    return {'error': 'Internal server error'}, 500
