"""Hook system for API clients.

Hooks are plain callables receiving a call context object. A client class
declares its built-in hooks with ``@with_hooks`` and every public API method
is wrapped with ``@invoke_with_hooks(context_factory)``:

    >>> @with_hooks(hooks=Hooks(pre_hooks=[metrics_hook]))
    ... class Api:
    ...     def __init__(self, hooks: Hooks | None = None) -> None: ...
    ...
    ...     @invoke_with_hooks(lambda self: ApiCallContext(...))
    ...     def users(self) -> list[User]: ...

Built-in hooks always run before user supplied hooks.
"""

import functools
import inspect
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

type Hook = Callable[[Any], None]


@dataclass(frozen=True)
class Hooks:
    """Hooks to run around an API call.

    Attributes:
        pre_hooks: Called before the API call
        post_hooks: Called after the API call, on success and on error
        error_hooks: Called when the API call raises
    """

    pre_hooks: list[Hook] = field(default_factory=list)
    post_hooks: list[Hook] = field(default_factory=list)
    error_hooks: list[Hook] = field(default_factory=list)

    def merge(self, other: "Hooks | None") -> "Hooks":
        """Return new Hooks with ``other`` appended after these hooks."""
        if other is None:
            return self
        return Hooks(
            pre_hooks=[*self.pre_hooks, *other.pre_hooks],
            post_hooks=[*self.post_hooks, *other.post_hooks],
            error_hooks=[*self.error_hooks, *other.error_hooks],
        )

    def invoke[R](
        self, context: Any, func: Callable[..., R], *args: Any, **kwargs: Any
    ) -> R:
        """Run ``func`` surrounded by the hooks."""
        for hook in self.pre_hooks:
            hook(context)
        try:
            return func(*args, **kwargs)
        except Exception:
            for hook in self.error_hooks:
                hook(context)
            raise
        finally:
            for hook in self.post_hooks:
                hook(context)


def with_hooks[C: type](hooks: Hooks) -> Callable[[C], C]:
    """Class decorator merging built-in ``hooks`` with the ``hooks`` init argument.

    The merged result is stored as ``self._hooks``.

    Raises:
        ValueError: On instantiation, if ``__init__`` has no ``hooks`` parameter
    """

    def decorator(cls: C) -> C:
        original_init = cls.__init__  # type: ignore[misc]

        @functools.wraps(original_init)
        def __init__(self: Any, *args: Any, **kwargs: Any) -> None:
            signature = inspect.signature(original_init)
            if "hooks" not in signature.parameters:
                raise ValueError(
                    f"{cls.__name__} must have a 'hooks' parameter in __init__"
                )
            bound = signature.bind(self, *args, **kwargs)
            self._hooks = hooks.merge(bound.arguments.get("hooks"))
            original_init(self, *args, **kwargs)

        cls.__init__ = __init__  # type: ignore[misc]
        return cls

    return decorator


def invoke_with_hooks[F: Callable[..., Any]](
    context_factory: Callable[[Any], Any],
) -> Callable[[F], F]:
    """Method decorator running the instance's ``_hooks`` around the call.

    Args:
        context_factory: Builds the hook context from ``self``
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
            hooks: Hooks = getattr(self, "_hooks", None) or Hooks()
            return hooks.invoke(context_factory(self), func, self, *args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator
