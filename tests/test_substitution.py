"""
Single-step substitution and the initial resolution of type expressions.
"""
import pytest

from genref.ir import types as tp
from genref.ir.builtins import BuiltinFactory
from genref.resolution.errors import (
    UnresolvableArgument, UnsupportedTypeExpression)
from genref.resolution.resolved_type import ResolvedType
from genref.resolution.resolver import Resolver


def make_resolver():
    bt_factory = BuiltinFactory()
    return bt_factory, Resolver(bt_factory.get_catalog())


def test_substitute_parameters_by_position():
    bt_factory, resolver = make_resolver()
    string = bt_factory.get_string_type()
    integer = bt_factory.get_integer_type()
    # class Swapped<A, B> implements Map<B, A>
    a, b = tp.TypeParameter("A"), tp.TypeParameter("B")
    swapped = tp.TypeConstructor(
        "Swapped", [a, b], interfaces=[bt_factory.get_map_type().new([b, a])])
    source = resolver.resolve(swapped.new([string, integer]))
    assert resolver.substitute(source, swapped.interfaces[0]) == \
        ResolvedType(bt_factory.get_map_type(), [integer, string])


def test_substitute_repeated_parameter():
    bt_factory, resolver = make_resolver()
    string = bt_factory.get_string_type()
    # class Diagonal<T> extends HashMap<T, T>
    t = tp.TypeParameter("T")
    diagonal = tp.TypeConstructor(
        "Diagonal", [t],
        superclass=bt_factory.get_hash_map_type().new([t, t]))
    source = resolver.resolve(diagonal.new([string]))
    assert resolver.resolve_superclass(source) == \
        ResolvedType(bt_factory.get_hash_map_type(), [string, string])


def test_substitute_keeps_concrete_arguments():
    bt_factory, resolver = make_resolver()
    string = bt_factory.get_string_type()
    integer = bt_factory.get_integer_type()
    # class Index<V> extends HashMap<String, V>
    v = tp.TypeParameter("V")
    index = tp.TypeConstructor(
        "Index", [v],
        superclass=bt_factory.get_hash_map_type().new([string, v]))
    source = resolver.resolve(index.new([integer]))
    assert resolver.resolve_superclass(source) == \
        ResolvedType(bt_factory.get_hash_map_type(), [string, integer])


def test_substitute_raw_reference():
    bt_factory, resolver = make_resolver()
    source = resolver.resolve(
        bt_factory.get_hash_set_type().new([bt_factory.get_string_type()]))
    result = resolver.substitute(source, bt_factory.get_cloneable_type().reference())
    assert result == ResolvedType(bt_factory.get_cloneable_type())
    assert result.type_args == ()


def test_substitute_raw_reference_to_generic_type():
    bt_factory, resolver = make_resolver()
    # class Legacy extends ArrayList
    legacy = tp.SimpleClassifier(
        "Legacy", superclass=bt_factory.get_array_list_type())
    source = resolver.resolve(legacy)
    assert resolver.resolve_superclass(source) == \
        ResolvedType(bt_factory.get_array_list_type())


def test_substitute_is_a_single_step():
    bt_factory, resolver = make_resolver()
    source = resolver.resolve(
        bt_factory.get_hash_set_type().new([bt_factory.get_string_type()]))
    result = resolver.substitute(source, bt_factory.get_hash_set_type().superclass)
    assert result.raw_type == bt_factory.get_abstract_set_type()


def test_foreign_type_parameter_is_unresolvable():
    bt_factory, resolver = make_resolver()
    string = bt_factory.get_string_type()
    e = tp.TypeParameter("E")
    holder = tp.TypeConstructor("Holder", [e])
    # Holder<E> is resolved against a reference mentioning another type's E
    other_e = bt_factory.get_list_type().type_parameters[0]
    reference = bt_factory.get_collection_type().new([other_e])
    source = resolver.resolve(holder.new([string]))
    with pytest.raises(UnresolvableArgument) as excinfo:
        resolver.substitute(source, reference)
    assert excinfo.value.argument == other_e
    assert excinfo.value.source is source
    assert excinfo.value.reference is reference


def test_same_name_parameter_of_another_type_is_unresolvable():
    bt_factory, resolver = make_resolver()
    # Both declare a parameter named E; only Holder's own E may be replaced.
    holder = tp.TypeConstructor("Holder", [tp.TypeParameter("E")])
    list_e = bt_factory.get_list_type().type_parameters[0]
    assert list_e.name == holder.type_parameters[0].name
    source = resolver.resolve(holder.new([bt_factory.get_string_type()]))
    with pytest.raises(UnresolvableArgument):
        resolver.substitute(
            source, bt_factory.get_collection_type().new([list_e]))


def test_wildcard_argument_is_unresolvable():
    bt_factory, resolver = make_resolver()
    # class Anything extends ArrayList<?>
    anything = tp.SimpleClassifier(
        "Anything",
        superclass=bt_factory.get_array_list_type().new([tp.WildCardType()]))
    source = resolver.resolve(anything)
    with pytest.raises(UnresolvableArgument):
        resolver.resolve_superclass(source)


def test_nested_argument_is_unresolvable():
    bt_factory, resolver = make_resolver()
    string = bt_factory.get_string_type()
    # class Rows<T> extends ArrayList<List<T>>
    t = tp.TypeParameter("T")
    list_of_t = bt_factory.get_list_type().new([t])
    rows = tp.TypeConstructor(
        "Rows", [t],
        superclass=bt_factory.get_array_list_type().new([list_of_t]))
    source = resolver.resolve(rows.new([string]))
    with pytest.raises(UnresolvableArgument):
        resolver.resolve_superclass(source)


def test_raw_source_cannot_fill_parameters():
    bt_factory, resolver = make_resolver()
    raw_hash_set = resolver.resolve(bt_factory.get_hash_set_type())
    with pytest.raises(UnresolvableArgument):
        resolver.resolve_superclass(raw_hash_set)


def test_resolve_raw_type():
    bt_factory, resolver = make_resolver()
    string = bt_factory.get_string_type()
    assert resolver.resolve(string) == ResolvedType(string)
    assert resolver.resolve(string.reference()) == ResolvedType(string)


def test_resolve_parameterized_reference():
    bt_factory, resolver = make_resolver()
    string = bt_factory.get_string_type()
    integer = bt_factory.get_integer_type()
    resolved = resolver.resolve(
        bt_factory.get_hash_map_type().new([string, integer]))
    assert resolved.raw_type == bt_factory.get_hash_map_type()
    assert resolved.type_args == (string, integer)


def test_resolve_resolved_type():
    bt_factory, resolver = make_resolver()
    resolved = ResolvedType(bt_factory.get_string_type())
    assert resolver.resolve(resolved) is resolved


@pytest.mark.parametrize("make_argument", [
    lambda bt: tp.TypeParameter("T"),
    lambda bt: tp.WildCardType(),
    lambda bt: bt.get_list_type().new([bt.get_string_type()]),
    lambda bt: bt.get_string_type().reference(),
])
def test_resolve_rejects_non_concrete_arguments(make_argument):
    bt_factory, resolver = make_resolver()
    expression = bt_factory.get_list_type().new([make_argument(bt_factory)])
    with pytest.raises(UnsupportedTypeExpression) as excinfo:
        resolver.resolve(expression)
    assert excinfo.value.expression is expression


@pytest.mark.parametrize("expression", [
    None,
    "List<String>",
    tp.TypeParameter("T"),
    tp.WildCardType(),
])
def test_resolve_rejects_other_expressions(expression):
    _, resolver = make_resolver()
    with pytest.raises(UnsupportedTypeExpression):
        resolver.resolve(expression)
