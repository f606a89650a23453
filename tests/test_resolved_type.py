import pytest

from genref.ir import types as tp
from genref.ir.builtins import BuiltinFactory
from genref.resolution.resolved_type import ResolvedType


bt_factory = BuiltinFactory()
integer = bt_factory.get_integer_type()
string = bt_factory.get_string_type()
hash_map = bt_factory.get_hash_map_type()


def test_equal_values_hash_alike():
    first = ResolvedType(hash_map, [string, integer])
    second = ResolvedType(hash_map, (string, integer))
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


def test_argument_order_matters():
    assert ResolvedType(hash_map, [string, integer]) != \
        ResolvedType(hash_map, [integer, string])


def test_raw_type_matters():
    assert ResolvedType(bt_factory.get_list_type(), [string]) != \
        ResolvedType(bt_factory.get_set_type(), [string])


def test_not_equal_to_other_objects():
    resolved = ResolvedType(bt_factory.get_list_type(), [string])
    assert resolved != bt_factory.get_list_type()
    assert resolved != bt_factory.get_list_type().new([string])


def test_immutable():
    resolved = ResolvedType(bt_factory.get_list_type(), [string])
    with pytest.raises(AttributeError):
        resolved.raw_type = bt_factory.get_set_type()
    with pytest.raises(AttributeError):
        resolved.type_args = (integer,)
    with pytest.raises(AttributeError):
        del resolved.raw_type


def test_type_args_are_a_tuple():
    args = [string]
    resolved = ResolvedType(bt_factory.get_list_type(), args)
    args.append(integer)
    assert resolved.get_type_args() == (string,)
    assert resolved.get_raw_type() == bt_factory.get_list_type()


def test_type_args_must_be_concrete():
    with pytest.raises(AssertionError):
        ResolvedType(bt_factory.get_list_type(), [tp.TypeParameter("E")])
    with pytest.raises(AssertionError):
        ResolvedType(bt_factory.get_list_type(), [tp.WildCardType()])


def test_type_args_match_type_parameters():
    with pytest.raises(AssertionError):
        ResolvedType(hash_map, [string])
    with pytest.raises(AssertionError):
        ResolvedType(hash_map, [string, integer, string])
    with pytest.raises(AssertionError):
        ResolvedType(string, [integer])
    # A generic raw type may still go without arguments.
    assert ResolvedType(hash_map).type_args == ()


def test_raw_type_is_required():
    with pytest.raises(AssertionError):
        ResolvedType(None)


def test_non_generic():
    resolved = ResolvedType(string)
    assert resolved.type_args == ()
    assert not resolved.is_parameterized()
    assert str(resolved) == "String"


def test_str_and_repr():
    resolved = ResolvedType(hash_map, [string, integer])
    assert str(resolved) == "HashMap<String, Integer>"
    assert repr(resolved) == \
        "ResolvedType [rawType=HashMap, actualParameters=[String, Integer]]"


def test_type_variable_assignments():
    resolved = ResolvedType(hash_map, [string, integer])
    k, v = hash_map.type_parameters
    assert resolved.get_type_variable_assignments() == {k: string, v: integer}
    assert ResolvedType(hash_map).get_type_variable_assignments() == {}
