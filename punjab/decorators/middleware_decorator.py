from typing import Type, Callable, Union
import inspect
from punjab.contracts.middleware import Middleware


def middleware(middleware_class_or_instance: Union[Type[Middleware], Middleware]):
    """
    Decorator to apply a middleware class or instance to an async handler

    Usage:
        @middleware(HandleHttpExceptionsMiddleware)  # Class
        async def show_post(post_id):
            ...

        @middleware(AuthorizeMiddleware("update", "post"))  # Instance
        async def update_post(post):
            ...
    """
    if inspect.isclass(middleware_class_or_instance):
        if not issubclass(middleware_class_or_instance, Middleware):
            raise TypeError(f"{middleware_class_or_instance} must inherit from Middleware")
        middleware_instance = middleware_class_or_instance()
    else:
        if not isinstance(middleware_class_or_instance, Middleware):
            raise TypeError(f"{middleware_class_or_instance} must be an instance of Middleware")
        middleware_instance = middleware_class_or_instance

    def decorator(func: Callable) -> Callable:
        return middleware_instance(func)

    return decorator
