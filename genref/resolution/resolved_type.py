from __future__ import annotations
from typing import Sequence, Tuple

from genref.ir import types as tp


class ResolvedType(object):
    """A fully instantiated generic type: a raw type and its concrete
    type arguments, e.g. `HashSetOfX<Integer, String>`.

    The arguments correspond positionally to the type parameters of the raw
    type and are always concrete types. A resolved type never changes after
    construction, so it can be shared freely.
    """

    __slots__ = ('raw_type', 'type_args')

    def __init__(self, raw_type: tp.SimpleClassifier,
                 type_args: Sequence[tp.Type] = ()):
        assert raw_type is not None, "The raw type must not be None"
        type_args = tuple(type_args)
        assert all(t_arg.is_concrete() for t_arg in type_args), \
            "Type arguments of {} must be concrete, got {}".format(
                raw_type.get_name(), list(type_args))
        # No arguments stands for a generic raw type reached through a raw
        # reference.
        assert not type_args or \
            len(type_args) == len(raw_type.type_parameters), \
            "You should provide {} types for {}".format(
                len(raw_type.type_parameters), raw_type.get_name())
        object.__setattr__(self, 'raw_type', raw_type)
        object.__setattr__(self, 'type_args', type_args)

    def __setattr__(self, name, value):
        raise AttributeError("ResolvedType is immutable")

    def __delattr__(self, name):
        raise AttributeError("ResolvedType is immutable")

    def get_raw_type(self) -> tp.SimpleClassifier:
        return self.raw_type

    def get_type_args(self) -> Tuple[tp.Type, ...]:
        return self.type_args

    def get_name(self):
        return self.__str__()

    def is_parameterized(self):
        return len(self.type_args) > 0

    def get_type_variable_assignments(self):
        # Empty for a generic raw type reached through a raw reference.
        return dict(zip(self.raw_type.type_parameters, self.type_args))

    def __eq__(self, other):
        if not isinstance(other, ResolvedType):
            return False
        return (self.raw_type == other.raw_type and
                self.type_args == other.type_args)

    def __hash__(self):
        return hash((self.raw_type, self.type_args))

    def __str__(self):
        if not self.type_args:
            return self.raw_type.get_name()
        return "{}<{}>".format(self.raw_type.get_name(),
                               ", ".join(t.get_name() for t in self.type_args))

    def __repr__(self):
        return "ResolvedType [rawType={}, actualParameters=[{}]]".format(
            self.raw_type.get_name(),
            ", ".join(t.get_name() for t in self.type_args))
