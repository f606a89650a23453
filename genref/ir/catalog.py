"""
The type catalog: the read-only source of declared type parameters and
declared super-type references of raw types.

The resolver never inspects declarations on its own; it only goes through
the `TypeCatalog` interface, so any source of declarations (hand-built
declarations, a reflection layer, a parsed program) can back it.
"""
from typing import Dict, Iterator, List, Optional

from genref.ir import types as tp


class TypeCatalog(object):
    """Queries the resolver needs from a source of type declarations."""

    def type_parameters_of(self, raw_type) -> List[tp.TypeParameter]:
        raise NotImplementedError(
            "You have to implement 'type_parameters_of()'")

    def declared_superclass_of(self, raw_type) -> Optional[tp.Reference]:
        raise NotImplementedError(
            "You have to implement 'declared_superclass_of()'")

    def declared_interfaces_of(self, raw_type) -> List[tp.Reference]:
        raise NotImplementedError(
            "You have to implement 'declared_interfaces_of()'")

    def is_interface(self, raw_type) -> bool:
        raise NotImplementedError("You have to implement 'is_interface()'")

    def is_assignable(self, candidate, target) -> bool:
        """
        True iff a value of raw type `candidate` is assignable to raw type
        `target`, i.e., `target` is `candidate` or one of its transitive
        declared ancestors.
        """
        raise NotImplementedError("You have to implement 'is_assignable()'")


class DeclarationCatalog(TypeCatalog):
    """An in-memory catalog over declared classifiers.

    Classes that do not declare a superclass extend the root type, like
    every Java class extends `Object`. The root type and interfaces have no
    superclass.
    """

    def __init__(self, root: tp.SimpleClassifier = None):
        self.root = root if root is not None else tp.SimpleClassifier("Object")
        assert not self.root.is_interface(), "The root type is an interface"
        self._declarations: Dict[str, tp.SimpleClassifier] = {}
        self.declare(self.root)

    def declare(self, *classifiers):
        for classifier in classifiers:
            if not isinstance(classifier, tp.SimpleClassifier):
                raise TypeError(
                    "Only classifiers can be declared, got {!r}".format(
                        classifier))
            declared = self._declarations.get(classifier.name)
            assert declared is None or declared is classifier, \
                "{} is already declared".format(classifier.name)
            self._declarations[classifier.name] = classifier
            classifier.declared = True
        return self

    def get(self, name: str) -> tp.SimpleClassifier:
        return self._declarations[name]

    def __contains__(self, raw_type):
        if isinstance(raw_type, str):
            return raw_type in self._declarations
        return self._declarations.get(raw_type.name) == raw_type

    def __iter__(self) -> Iterator[tp.SimpleClassifier]:
        return iter(self._declarations.values())

    def __len__(self):
        return len(self._declarations)

    def type_parameters_of(self, raw_type):
        return raw_type.type_parameters

    def declared_superclass_of(self, raw_type):
        if raw_type.is_interface() or raw_type == self.root:
            return None
        if raw_type.superclass is None:
            return self.root.reference()
        return raw_type.superclass

    def declared_interfaces_of(self, raw_type):
        return list(raw_type.interfaces)

    def is_interface(self, raw_type):
        return raw_type.is_interface()

    def get_direct_supertypes(self, raw_type) -> List[tp.SimpleClassifier]:
        superclass = self.declared_superclass_of(raw_type)
        references = [] if superclass is None else [superclass]
        references.extend(self.declared_interfaces_of(raw_type))
        return [ref.raw_type for ref in references]

    def get_supertypes(self, raw_type):
        """Return raw_type and the transitive closure of its supertypes"""
        stack = [raw_type]
        visited = {raw_type}
        while stack:
            source = stack.pop()
            for supertype in self.get_direct_supertypes(source):
                if supertype not in visited:
                    visited.add(supertype)
                    stack.append(supertype)
        return visited

    def is_assignable(self, candidate, target):
        # Interfaces do not extend the root type, but are assignable to it.
        if candidate == target or target == self.root:
            return True
        return target in self.get_supertypes(candidate)
