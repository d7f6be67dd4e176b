"""OpenTelemetry tracing helpers for the task service.

`trace_function` wraps a single sync or async callable in a span, and
`trace_class` applies it to every public method of a class:

```python
@trace_class(kind=SpanKind.SERVER)
class Handler:
    async def on_get_task(self, task_id): ...
```

Spans are no-ops unless an OpenTelemetry SDK is configured by the
application embedding the service.
"""

import functools
import inspect
import logging

from collections.abc import Callable
from typing import Any

from opentelemetry import trace
from opentelemetry.trace import SpanKind as _SpanKind
from opentelemetry.trace import StatusCode


SpanKind = _SpanKind
__all__ = ['SpanKind', 'trace_class', 'trace_function']
INSTRUMENTING_MODULE_NAME = 'taskapi'
INSTRUMENTING_MODULE_VERSION = '0.1.0'

logger = logging.getLogger(__name__)


def _run_extractor(
    attribute_extractor: Callable[..., None] | None,
    span_name: str,
    span: Any,
    args: tuple,
    kwargs: dict,
    result: Any,
    exception: Exception | None,
) -> None:
    if not attribute_extractor:
        return
    try:
        attribute_extractor(span, args, kwargs, result, exception)
    except Exception as e:
        logger.error(f'attribute_extractor error in span {span_name}: {e}')


def trace_function(
    func: Callable | None = None,
    *,
    span_name: str | None = None,
    kind: SpanKind = SpanKind.INTERNAL,
    attributes: dict[str, Any] | None = None,
    attribute_extractor: Callable[..., None] | None = None,
):
    """Decorator that records each call of `func` in its own span.

    Usable bare (`@trace_function`) or with arguments
    (`@trace_function(span_name='store.create')`).

    Args:
        func: The function being decorated; `None` when called with
            arguments.
        span_name: Span name, defaults to `'<module>.<qualname>'`.
        kind: The `SpanKind` of the created span.
        attributes: Static attributes set on every span.
        attribute_extractor: Called as
            `attribute_extractor(span, args, kwargs, result, exception)`
            once the call finishes, whether or not it raised. Errors it
            raises are logged and swallowed.

    Returns:
        The wrapped function, or a decorator when `func` is `None`.
    """
    if func is None:
        return functools.partial(
            trace_function,
            span_name=span_name,
            kind=kind,
            attributes=attributes,
            attribute_extractor=attribute_extractor,
        )

    actual_span_name = span_name or f'{func.__module__}.{func.__qualname__}'
    is_async_func = inspect.iscoroutinefunction(func)

    def _start_span():
        tracer = trace.get_tracer(
            INSTRUMENTING_MODULE_NAME, INSTRUMENTING_MODULE_VERSION
        )
        return tracer.start_as_current_span(actual_span_name, kind=kind)

    def _apply_attributes(span) -> None:
        for key, value in (attributes or {}).items():
            span.set_attribute(key, value)

    @functools.wraps(func)
    async def async_wrapper(*args, **kwargs):
        with _start_span() as span:
            _apply_attributes(span)
            result = None
            exception = None
            try:
                result = await func(*args, **kwargs)
                span.set_status(StatusCode.OK)
                return result
            except Exception as e:
                exception = e
                span.record_exception(e)
                span.set_status(StatusCode.ERROR, description=str(e))
                raise
            finally:
                _run_extractor(
                    attribute_extractor,
                    actual_span_name,
                    span,
                    args,
                    kwargs,
                    result,
                    exception,
                )

    @functools.wraps(func)
    def sync_wrapper(*args, **kwargs):
        with _start_span() as span:
            _apply_attributes(span)
            result = None
            exception = None
            try:
                result = func(*args, **kwargs)
                span.set_status(StatusCode.OK)
                return result
            except Exception as e:
                exception = e
                span.record_exception(e)
                span.set_status(StatusCode.ERROR, description=str(e))
                raise
            finally:
                _run_extractor(
                    attribute_extractor,
                    actual_span_name,
                    span,
                    args,
                    kwargs,
                    result,
                    exception,
                )

    return async_wrapper if is_async_func else sync_wrapper


def trace_class(
    include_list: list[str] | None = None,
    exclude_list: list[str] | None = None,
    kind: SpanKind = SpanKind.INTERNAL,
):
    """Class decorator tracing the public methods of the decorated class.

    Dunder methods are never traced. Other methods whose name starts with
    an underscore are skipped unless named in `include_list`. When
    `include_list` is given only those methods are wrapped; otherwise every
    public method not named in `exclude_list` is.

    Args:
        include_list: Names of the methods to trace.
        exclude_list: Names of the methods to leave alone.
        kind: The `SpanKind` used for every method span.
    """
    exclude_list = exclude_list or []

    def decorator(cls):
        for name, method in inspect.getmembers(cls, inspect.isfunction):
            if name.startswith('__') and name.endswith('__'):
                continue
            if name.startswith('_') and name not in (include_list or []):
                continue
            if include_list and name not in include_list:
                continue
            if not include_list and name in exclude_list:
                continue
            setattr(
                cls,
                name,
                trace_function(
                    span_name=f'{cls.__module__}.{cls.__name__}.{name}',
                    kind=kind,
                )(method),
            )
        return cls

    return decorator
