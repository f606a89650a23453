class ResolutionError(ValueError):
    """Base class of every failure reported by the resolver.

    Failures are contract violations of the caller or unsupported shapes in
    the catalog, never transient conditions: retrying does not help.
    """


class UnsupportedTypeExpression(ResolutionError):
    def __init__(self, expression):
        self.expression = expression
        super().__init__("Unable to handle {}".format(expression))


class UnresolvableArgument(ResolutionError):
    def __init__(self, source, reference, argument):
        self.source = source
        self.reference = reference
        self.argument = argument
        super().__init__(
            "Cannot resolve argument {} of {} from {}: it is neither a "
            "concrete type nor a type parameter of {}".format(
                argument, reference, source, source.raw_type.get_name()))


class NoSuperclass(ResolutionError):
    def __init__(self, resolved):
        self.resolved = resolved
        super().__init__(
            "Type does not have a superclass {}".format(resolved))


class NoPathToTarget(ResolutionError):
    def __init__(self, resolved, target):
        self.resolved = resolved
        self.target = target
        super().__init__(
            "No supertype or interface of {} is assignable to {}".format(
                resolved, target.get_name()))
