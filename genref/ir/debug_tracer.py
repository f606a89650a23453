from collections import Counter
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional
import inspect
import json


@dataclass
class ResolutionEvent:
    """A single step recorded while resolving a type.

    `kind` is one of 'call', 'return', 'exception' or 'decision'. A call
    event opens a traced resolver operation; the other kinds belong to the
    innermost open operation, identified by `call_id`.
    """
    operation: str
    kind: str
    call_id: int
    parent_call_id: int
    depth: int
    arguments: Dict[str, str] = field(default_factory=dict)
    result: Optional[str] = None
    # Greedy walk: 'superclass' or 'interface', and the type it moved to
    decision: Optional[str] = None
    candidate: Optional[str] = None
    exception_type: Optional[str] = None
    message: Optional[str] = None
    stack_trace: List[Dict[str, Any]] = field(default_factory=list)


class DebugTracer:
    """Records the operations a resolver performs and the branch choices of
    `resolve_to`, so that a walk through a hierarchy can be replayed.
    """
    def __init__(self, enabled=False, capture_stack=False):
        self.enabled = enabled
        self.capture_stack = capture_stack
        self.events: List[ResolutionEvent] = []
        self.call_stack = []  # (call id, operation) of the open operations
        self._last_call_id = 0

    @property
    def depth(self):
        return len(self.call_stack)

    def _current(self):
        return self.call_stack[-1] if self.call_stack else (0, None)

    def _record(self, **kwargs):
        if self.capture_stack:
            # Skip this method and the tracer method that called it
            kwargs['stack_trace'] = [
                {'file': frame.filename, 'line': frame.lineno,
                 'function': frame.function}
                for frame in inspect.stack()[2:]
            ]
        event = ResolutionEvent(depth=self.depth, **kwargs)
        self.events.append(event)
        return event

    def enter(self, operation: str, arguments: Dict[str, str]):
        if not self.enabled:
            return
        self._last_call_id += 1
        parent_call_id, _ = self._current()
        self._record(operation=operation, kind='call',
                     call_id=self._last_call_id,
                     parent_call_id=parent_call_id,
                     arguments=dict(arguments))
        self.call_stack.append((self._last_call_id, operation))

    def _leave(self, operation, **kwargs):
        call_id, current = self.call_stack.pop()
        assert current == operation, \
            "Leaving {} while {} is open".format(operation, current)
        parent_call_id, _ = self._current()
        self._record(operation=operation, call_id=call_id,
                     parent_call_id=parent_call_id, **kwargs)

    def leave(self, operation: str, result: str):
        if not self.enabled:
            return
        self._leave(operation, kind='return', result=result)

    def fail(self, operation: str, exception: Exception):
        if not self.enabled:
            return
        self._leave(operation, kind='exception',
                    exception_type=type(exception).__name__,
                    message=str(exception))

    def decide(self, decision: str, candidate: str):
        """Record the branch the innermost open operation committed to."""
        if not self.enabled:
            return
        call_id, operation = self._current()
        parent_call_id = (self.call_stack[-2][0]
                          if len(self.call_stack) > 1 else 0)
        self._record(operation=operation, kind='decision', call_id=call_id,
                     parent_call_id=parent_call_id, decision=decision,
                     candidate=candidate)

    def get_events(self, kind=None) -> List[ResolutionEvent]:
        if kind is None:
            return list(self.events)
        return [event for event in self.events if event.kind == kind]

    def get_decisions(self):
        return [(event.decision, event.candidate)
                for event in self.get_events('decision')]

    def get_call_stats(self) -> Dict[str, int]:
        return dict(Counter(event.operation
                            for event in self.get_events('call')))

    def to_json_string(self) -> str:
        return json.dumps({
            'events': [asdict(event) for event in self.events],
            'call_stats': self.get_call_stats(),
            'total_events': len(self.events),
        }, indent=2)

    def to_json(self, trace_path):
        if not self.enabled:
            return
        with open(trace_path, 'w') as f:
            f.write(self.to_json_string())

    def clear(self):
        self.events = []
        self.call_stack = []
        self._last_call_id = 0
