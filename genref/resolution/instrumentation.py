"""
Instrumentation helpers for tracing and logging resolver operations.

The decorators keep the resolution algorithm free of bookkeeping: they
look up the tracer (`self.debug_tracer`) and the log method (`self.log`)
on the decorated object and do nothing when tracing is disabled.
"""
from functools import wraps
from typing import Any, Callable, List, Optional
import inspect


def trace_method(
    method_name: Optional[str] = None,
    param_names: Optional[List[str]] = None,
    max_str_length: int = 200
) -> Callable:
    """
    Decorator to record call, return and exception events of a resolver method.

    Args:
        method_name: Name to use in traces (if None, uses actual method name)
        param_names: List of parameter names to capture. If None, captures all
                     parameters with string truncation. If empty list, captures none.
        max_str_length: Maximum length for stringified parameter values

    Usage:
        @trace_method(param_names=['resolved', 'target'])
        def resolve_to(self, resolved, target):
            ...
    """
    def decorator(original_method: Callable) -> Callable:
        @wraps(original_method)
        def wrapper(self, *args, **kwargs):
            tracer = getattr(self, 'debug_tracer', None)
            if tracer is None or not tracer.enabled:
                return original_method(self, *args, **kwargs)

            trace_name = method_name or original_method.__name__
            params = {}
            if param_names is None or param_names:
                sig = inspect.signature(original_method)
                try:
                    bound_args = sig.bind(self, *args, **kwargs)
                    bound_args.apply_defaults()
                    for param_name, param_value in bound_args.arguments.items():
                        if param_name == 'self':
                            continue
                        if param_names is None or param_name in param_names:
                            params[param_name] = _stringify_value(
                                param_value, max_str_length)
                except (TypeError, ValueError):
                    # Fallback if binding fails
                    params['args'] = str(args)[:max_str_length]
                    params['kwargs'] = str(kwargs)[:max_str_length]

            tracer.enter(trace_name, params)
            try:
                result = original_method(self, *args, **kwargs)
            except Exception as e:
                tracer.fail(trace_name, e)
                raise
            tracer.leave(trace_name, _stringify_value(result, max_str_length))
            return result

        return wrapper
    return decorator


def log_step(step):
    """Log the begin and the end of a resolver operation via `self.log`."""
    @wraps(step)
    def wrapped_step(self, *args, **kwargs):
        entity = "{}-{}".format(self.__class__.__name__, step.__name__)
        self.log("{}: Begin {}".format(
            entity, ", ".join(_stringify_value(arg) for arg in args)))
        try:
            result = step(self, *args, **kwargs)
        except Exception as e:
            self.log("{}: Failed ({})".format(entity, e))
            raise
        self.log("{}: End {}".format(entity, _stringify_value(result)))
        return result

    return wrapped_step


def trace_decision(resolver, decision: str, candidate: Any) -> None:
    """
    Record the branch a greedy walk committed to.

    Safe to call even if tracing is disabled.

    Usage:
        trace_decision(self, 'superclass', superclass)
    """
    tracer = getattr(resolver, 'debug_tracer', None)
    if tracer is not None:
        tracer.decide(decision, _stringify_value(candidate))


def _truncate(result: str, max_length: int) -> str:
    if len(result) > max_length:
        return result[:max_length] + '...'
    return result


def _stringify_value(value: Any, max_length: int = 200) -> str:
    """
    Convert a value to a string representation suitable for tracing.
    """
    if value is None:
        return 'None'

    if isinstance(value, (bool, int, float)):
        return str(value)

    if isinstance(value, (list, tuple, set)):
        items = [_stringify_value(item, max_length // 4)
                 for item in list(value)[:5]]
        if len(value) > 5:
            items.append(f'... +{len(value) - 5} more')
        return _truncate(f"[{', '.join(items)}]", max_length)

    # Types, references and resolved types render as `Name<Args>`
    if hasattr(value, 'get_name'):
        return _truncate(value.get_name(), max_length)

    return _truncate(str(value), max_length)

