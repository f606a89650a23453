"""
Resolution of the concrete instantiations of a type's ancestors.

Given `HashSetOfX<Integer, String>`, declared as

    class HashSetOfX<T, X> extends HashSet<X>
        implements InterfaceT<T>, InterfaceX<X>

the resolver maps the actual arguments <Integer, String> onto the type
parameters <T, X> and carries them through the declared super references:

    HashSetOfX<T, X>       -> HashSet<X>             HashSet<String>
    HashSet<E>             -> AbstractSet<E>         AbstractSet<String>
    AbstractSet<E>         -> AbstractCollection<E>  AbstractCollection<String>
    AbstractCollection<E>  -> Collection<E>          Collection<String>

`resolve_to` performs that walk in one call.
"""
from typing import List

from genref.ir import types as tp
from genref.ir.catalog import TypeCatalog
from genref.ir.debug_tracer import DebugTracer
from genref.resolution.errors import (
    NoPathToTarget, NoSuperclass, UnresolvableArgument,
    UnsupportedTypeExpression)
from genref.resolution.instrumentation import (
    log_step, trace_decision, trace_method)
from genref.resolution.resolved_type import ResolvedType


class Resolver(object):
    def __init__(self, catalog: TypeCatalog, logger=None, options=None):
        assert catalog is not None, 'The given catalog must not be None'
        self.catalog = catalog
        self.logger = logger
        self.options = options or {}
        self.debug_tracer = None
        if self.options.get("trace", False):
            self.debug_tracer = DebugTracer(
                enabled=True,
                capture_stack=self.options.get("capture_stack", False))
        if self.logger:
            self.logger.log_info()

    def log(self, msg):
        if self.logger is not None:
            self.logger.log(msg)

    @trace_method(param_names=['type_expression'])
    def resolve(self, type_expression) -> ResolvedType:
        """Create the initial resolved type of a type expression.

        Accepts a raw type (or a raw reference to it) and a parameterized
        reference whose arguments are all concrete types.
        """
        if isinstance(type_expression, ResolvedType):
            return type_expression
        if isinstance(type_expression, tp.SimpleClassifier):
            return ResolvedType(type_expression)
        if isinstance(type_expression, tp.RawReference):
            return ResolvedType(type_expression.raw_type)
        if isinstance(type_expression, tp.ParameterizedReference):
            if not all(t_arg.is_concrete()
                       for t_arg in type_expression.type_args):
                raise UnsupportedTypeExpression(type_expression)
            return ResolvedType(type_expression.raw_type,
                                type_expression.type_args)
        raise UnsupportedTypeExpression(type_expression)

    def substitute(self, source: ResolvedType,
                   reference: tp.Reference) -> ResolvedType:
        """Resolve one declared super reference of `source`.

        Every argument of `reference` that is a type parameter of
        `source.raw_type` is replaced by the argument of `source` at the
        parameter's position. Concrete arguments are kept as they are.
        """
        if not reference.is_parameterized():
            return ResolvedType(reference.raw_type)
        type_parameters = self.catalog.type_parameters_of(source.raw_type)
        type_args = []
        for t_arg in reference.type_args:
            if t_arg.is_type_var() and t_arg in type_parameters:
                index = type_parameters.index(t_arg)
                if index >= len(source.type_args):
                    # `source` was resolved from a raw reference.
                    raise UnresolvableArgument(source, reference, t_arg)
                type_args.append(source.type_args[index])
            elif t_arg.is_concrete():
                type_args.append(t_arg)
            else:
                raise UnresolvableArgument(source, reference, t_arg)
        return ResolvedType(reference.raw_type, type_args)

    @trace_method(param_names=['resolved'])
    @log_step
    def resolve_superclass(self, resolved: ResolvedType) -> ResolvedType:
        if self.catalog.is_interface(resolved.raw_type):
            raise NoSuperclass(resolved)
        superclass = self.catalog.declared_superclass_of(resolved.raw_type)
        if superclass is None:
            raise NoSuperclass(resolved)
        return self.substitute(resolved, superclass)

    @trace_method(param_names=['resolved'])
    @log_step
    def resolve_interfaces(self, resolved: ResolvedType) -> List[ResolvedType]:
        return [self.substitute(resolved, iface)
                for iface in self.catalog.declared_interfaces_of(
                    resolved.raw_type)]

    def _has_superclass(self, resolved):
        return (not self.catalog.is_interface(resolved.raw_type) and
                self.catalog.declared_superclass_of(resolved.raw_type)
                is not None)

    def _step_towards(self, resolved, target):
        """
        Pick the next type on the way to `target`: the superclass if its raw
        type is assignable to `target`, otherwise the first such interface.
        The choice is final: a dead end further up is not retried through
        another branch.
        """
        if self._has_superclass(resolved):
            superclass = self.resolve_superclass(resolved)
            if self.catalog.is_assignable(superclass.raw_type, target):
                trace_decision(self, 'superclass', superclass)
                self.log("Following superclass {}".format(superclass))
                return superclass
        for iface in self.resolve_interfaces(resolved):
            if self.catalog.is_assignable(iface.raw_type, target):
                trace_decision(self, 'interface', iface)
                self.log("Following interface {}".format(iface))
                return iface
        raise NoPathToTarget(resolved, target)

    def resolution_path(self, resolved: ResolvedType,
                        target) -> List[ResolvedType]:
        """Return the types visited on the way from `resolved` to `target`,
        both ends included.
        """
        path = [resolved]
        while path[-1].raw_type != target:
            path.append(self._step_towards(path[-1], target))
        return path

    @trace_method(param_names=['resolved', 'target'])
    @log_step
    def resolve_to(self, resolved: ResolvedType, target) -> ResolvedType:
        """Walk up the hierarchy of `resolved` until reaching `target`.

        Returns the resolved type whose raw type is `target`; `resolved`
        itself when it already is an instantiation of `target`.
        """
        return self.resolution_path(resolved, target)[-1]

    def is_instance_of(self, resolved: ResolvedType, target) -> bool:
        return self.catalog.is_assignable(resolved.raw_type, target)

    def type_arguments_of(self, resolved: ResolvedType, target):
        """The type arguments `resolved` instantiates `target` with, e.g.,
        (String,) for `HashSetOfX<Integer, String>` and `Collection`.
        """
        return self.resolve_to(resolved, target).type_args
