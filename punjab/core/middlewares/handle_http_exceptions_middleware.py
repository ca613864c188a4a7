import logging
import os
from typing import Any, Callable, Awaitable

from punjab.contracts.middleware import Middleware
from punjab.exceptions import HttpException, ServerErrorException, PolicyNotAuthorizedException
from punjab.exceptions.common_exceptions import AppException


class HandleHttpExceptionsMiddleware(Middleware):
    """Middleware for handling exceptions for HTTP requests."""

    async def handle(self, next_handler: Callable[..., Awaitable[Any]], *args, **kwargs) -> Any:
        try:
            return await next_handler(*args, **kwargs)
        except HttpException as e:
            return e.to_response()
        except PolicyNotAuthorizedException as e:
            return e.to_response()
        except AppException as e:
            logging.exception("Application exception while handling request", exc_info=e)
            if os.getenv("ENV") == "debug":
                raise e

            return e.to_response()
        except Exception as e:
            logging.exception("Unhandled exception while handling request", exc_info=e)
            if os.getenv("ENV") == "debug":
                raise e

            return ServerErrorException().to_response()
