from __future__ import annotations
from typing import List, Optional, Union


class Type(object):
    def __init__(self, name):
        self.name = name

    def __str__(self):
        return str(self.name)

    def __repr__(self):
        return self.__str__()

    def is_type_var(self):
        return False

    def is_concrete(self):
        """
        A concrete type can appear as a type argument of a resolved type:
        it carries no type variables, no wildcard and no argument list.
        """
        return False

    def get_name(self):
        return str(self.name)


class SimpleClassifier(Type):
    """A declared, non-generic raw type.

    The classifier is its own declaration: it records the declared
    superclass reference, the declared interface references (in declaration
    order) and whether it is an interface. Interfaces never declare a
    superclass.
    """

    def __init__(self, name: str, superclass: Reference = None,
                 interfaces: List[Reference] = None,
                 interface: bool = False):
        super().__init__(name)
        assert not (interface and superclass is not None), \
            "Interface {} cannot declare a superclass".format(name)
        self.superclass = _to_reference(superclass)
        self.interfaces = [_to_reference(i) for i in interfaces or []]
        self.interface = interface
        self.declared = False

    @property
    def type_parameters(self) -> List[TypeParameter]:
        return []

    def implement(self, *interfaces):
        """Append interface references to a classifier that is not yet
        declared in a catalog.

        References that mention the classifier itself, such as
        `Integer implements Comparable<Integer>`, can only be built once the
        classifier exists.
        """
        assert not self.declared, \
            "{} is already declared".format(self.name)
        self.interfaces.extend(_to_reference(i) for i in interfaces)
        return self

    def is_concrete(self):
        return True

    def is_interface(self):
        return self.interface

    def reference(self) -> RawReference:
        return RawReference(self)

    def get_declared_supertypes(self) -> List[Reference]:
        supertypes = [] if self.superclass is None else [self.superclass]
        return supertypes + self.interfaces

    def __str__(self):
        return "{}{}".format(
            self.name,
            '' if not self.get_declared_supertypes() else " <: (" +
            ', '.join(map(str, self.get_declared_supertypes())) + ")"
        )

    def __eq__(self, other):
        """Raw types are identified by their kind and their name."""
        return (self.__class__ == other.__class__ and
                self.name == other.name)

    def __hash__(self):
        return hash(str(self.__class__) + str(self.name))


class TypeParameter(Type):
    """A type parameter, scoped to the type constructor that declares it.

    Two parameters are the same parameter only if they share both name and
    owner, so `T` of `InterfaceT<T>` never matches `T` of `HashSetOfX<T, X>`.
    """

    def __init__(self, name: str):
        super().__init__(name)
        self.owner = None

    def bind(self, owner: str):
        assert self.owner in (None, owner), \
            "Type parameter {} is already declared by {}".format(
                self.name, self.owner)
        self.owner = owner
        return self

    def is_type_var(self):
        return True

    def __eq__(self, other):
        return (self.__class__ == other.__class__ and
                self.name == other.name and
                self.owner == other.owner)

    def __hash__(self):
        return hash(str(self.name) + str(self.owner))


class WildCardType(Type):
    """The unbounded wildcard `?`. Never a concrete argument."""

    def __init__(self):
        super().__init__("?")

    def __eq__(self, other):
        return self.__class__ == other.__class__

    def __hash__(self):
        return hash(str(self.__class__))


class TypeConstructor(SimpleClassifier):
    """A declared generic raw type, e.g. `HashSetOfX<T, X>`.

    The constructor claims its type parameters: each one is bound to the
    constructor's name, so references to it from other declarations are
    told apart from references to a parameter of the same name.
    """

    def __init__(self, name: str, type_parameters: List[TypeParameter],
                 superclass: Reference = None,
                 interfaces: List[Reference] = None,
                 interface: bool = False):
        assert len(type_parameters) != 0, "type_parameters is empty"
        names = [t_param.name for t_param in type_parameters]
        assert len(set(names)) == len(names), \
            "Duplicate type parameters in {}<{}>".format(
                name, ', '.join(names))
        self._type_parameters = [t_param.bind(name)
                                 for t_param in type_parameters]
        super().__init__(name, superclass, interfaces, interface)

    @property
    def type_parameters(self) -> List[TypeParameter]:
        return list(self._type_parameters)

    def new(self, type_args: List[Type]) -> ParameterizedReference:
        return ParameterizedReference(self, type_args)

    def __str__(self):
        return "{}<{}>{}{}".format(
            self.name,
            ', '.join(map(str, self._type_parameters)),
            ' <: ' if self.get_declared_supertypes() else '',
            ', '.join(map(str, self.get_declared_supertypes())))


class RawReference(object):
    """A super-type reference without an argument list, e.g. `Runnable`."""

    __slots__ = ('raw_type',)

    def __init__(self, raw_type: SimpleClassifier):
        assert isinstance(raw_type, SimpleClassifier), \
            "{} is not a raw type".format(raw_type)
        object.__setattr__(self, 'raw_type', raw_type)

    def __setattr__(self, name, value):
        raise AttributeError("References are immutable")

    @property
    def type_args(self):
        return ()

    def is_parameterized(self):
        return False

    def is_type_var(self):
        return False

    def is_concrete(self):
        return False

    def get_name(self):
        return self.raw_type.get_name()

    def __eq__(self, other):
        return (self.__class__ == other.__class__ and
                self.raw_type == other.raw_type)

    def __hash__(self):
        return hash(self.raw_type)

    def __str__(self):
        return self.raw_type.get_name()

    def __repr__(self):
        return self.__str__()


class ParameterizedReference(object):
    """A super-type reference with an argument list, e.g. `HashSet<X>`.

    Each argument is either one of the declaring type's parameters or a
    concrete type.
    """

    __slots__ = ('raw_type', 'type_args')

    def __init__(self, raw_type: TypeConstructor, type_args: List[Type]):
        assert isinstance(raw_type, TypeConstructor), \
            "{} is not a type constructor".format(raw_type)
        assert len(raw_type.type_parameters) == len(type_args), \
            "You should provide {} types for {}".format(
                len(raw_type.type_parameters), raw_type)
        object.__setattr__(self, 'raw_type', raw_type)
        object.__setattr__(self, 'type_args', tuple(type_args))

    def __setattr__(self, name, value):
        raise AttributeError("References are immutable")

    def is_parameterized(self):
        return True

    def is_type_var(self):
        return False

    def is_concrete(self):
        return False

    def get_name(self):
        return self.__str__()

    def __eq__(self, other):
        return (self.__class__ == other.__class__ and
                self.raw_type == other.raw_type and
                self.type_args == other.type_args)

    def __hash__(self):
        return hash((self.raw_type, self.type_args))

    def __str__(self):
        return "{}<{}>".format(self.raw_type.get_name(),
                               ", ".join(t.get_name() for t in self.type_args))

    def __repr__(self):
        return self.__str__()


Reference = Union[RawReference, ParameterizedReference]


def _to_reference(t) -> Optional[Reference]:
    """Accept a bare classifier wherever a raw reference is expected."""
    if t is None or isinstance(t, (RawReference, ParameterizedReference)):
        return t
    if isinstance(t, SimpleClassifier):
        return RawReference(t)
    raise TypeError("Cannot use {!r} as a super-type reference".format(t))
