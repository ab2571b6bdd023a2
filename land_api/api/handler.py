"""
Uniform request handling for contract-backed routes.

Every route is wrapped by `contract_endpoint`, which acquires the contract
handle, runs the route body, and always answers with an envelope: a
`SuccessEnvelope` on success, an `ErrorEnvelope` on any failure.
"""
import functools
import inspect
import logging
import re
from typing import Any, Callable, Optional

from fastapi import Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.concurrency import run_in_threadpool

from ..core.accessor import ResourceAccessor
from ..core.config import settings
from ..core.errors import ContractConnectionError, LandApiError, ValidationError
from ..core.serialization import utc_timestamp
from ..schemas.envelope import ErrorDetail, ErrorEnvelope, SuccessEnvelope
from .deps import get_accessor

logger = logging.getLogger(__name__)

_POSITIVE_INT = re.compile(r"[0-9]+")

UINT256_MAX = 2**256 - 1
# len(str(UINT256_MAX))
UINT256_DIGITS = 78


def parse_positive_int(value: str, name: str) -> int:
    """Parse a path parameter that must be a positive integer."""
    text = str(value)
    if len(text) > UINT256_DIGITS or not _POSITIVE_INT.fullmatch(text):
        raise ValidationError(f"{name} must be a positive integer, got {value!r}")

    number = int(text)
    if number < 1 or number > UINT256_MAX:
        raise ValidationError(f"{name} must be between 1 and 2**256 - 1, got {value!r}")
    return number


async def invoke(operation: Callable[..., Any], *args):
    """Run one contract operation, off the event loop if it is synchronous."""
    if inspect.iscoroutinefunction(operation):
        return await operation(*args)
    return await run_in_threadpool(operation, *args)


def success_response(data: Any, message: str, warning: Optional[str] = None) -> JSONResponse:
    if isinstance(data, BaseModel):
        data = data.model_dump(by_alias=True)
    envelope = SuccessEnvelope(
        data=data, message=message, timestamp=utc_timestamp(), warning=warning
    )
    return JSONResponse(status_code=200, content=envelope.model_dump(exclude_none=True))


def error_response(
    error: Exception, message: str, endpoint: str, note: Optional[str] = None
) -> JSONResponse:
    if isinstance(error, LandApiError):
        details, code = error.message, error.code
    else:
        details, code = str(error), LandApiError.code

    logger.error(f"Error in {endpoint}: {details}")

    status_code = 500
    if settings.SEPARATE_CLIENT_ERRORS and isinstance(error, LandApiError):
        status_code = error.status_code

    envelope = ErrorEnvelope(
        error=ErrorDetail(
            message=message,
            details=details,
            code=code,
            timestamp=utc_timestamp(),
            endpoint=endpoint,
            note=note,
        )
    )
    return JSONResponse(status_code=status_code, content=envelope.model_dump(exclude_none=True))


def contract_endpoint(
    endpoint: str,
    failure_message: str,
    success_message: str,
    warning: Optional[str] = None,
    note: Optional[str] = None,
):
    """
    Turn `async def route(contract, **params)` into a FastAPI endpoint.

    The wrapped route receives the live contract handle as its first
    argument; FastAPI sees the remaining parameters plus an injected
    `accessor` dependency. A `ContractConnectionError` drops the handle so
    the next request reconnects.
    """

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, accessor: ResourceAccessor, **kwargs):
            try:
                contract = accessor.acquire()
                data = await func(contract, *args, **kwargs)
            except Exception as e:
                if isinstance(e, ContractConnectionError):
                    accessor.invalidate()
                return error_response(e, failure_message, endpoint, note)
            return success_response(data, success_message, warning)

        params = [
            param
            for name, param in inspect.signature(func).parameters.items()
            if name != "contract"
        ]
        params.append(
            inspect.Parameter(
                "accessor",
                inspect.Parameter.KEYWORD_ONLY,
                default=Depends(get_accessor),
                annotation=ResourceAccessor,
            )
        )
        wrapper.__signature__ = inspect.Signature(params)
        return wrapper

    return decorator
