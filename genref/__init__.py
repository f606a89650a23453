from genref.resolution.errors import (
    ResolutionError, UnsupportedTypeExpression, UnresolvableArgument,
    NoSuperclass, NoPathToTarget)
from genref.resolution.resolved_type import ResolvedType
from genref.resolution.resolver import Resolver

__all__ = [
    'Resolver',
    'ResolvedType',
    'ResolutionError',
    'UnsupportedTypeExpression',
    'UnresolvableArgument',
    'NoSuperclass',
    'NoPathToTarget',
]
