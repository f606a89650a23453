"""
A ready-made catalog holding a slice of the Java platform hierarchy.

    Iterable<T>
      Collection<E>
        Set<E>, List<E>
    AbstractCollection<E> : Collection<E>
      AbstractSet<E> : Set<E>
        HashSet<E> : Set<E>, Cloneable, Serializable
      AbstractList<E> : List<E>
        ArrayList<E> : List<E>, RandomAccess, Cloneable, Serializable
    AbstractMap<K, V> : Map<K, V>
      HashMap<K, V> : Map<K, V>, Cloneable, Serializable
    Number : Serializable
      Integer : Comparable<Integer>
    String : Serializable, Comparable<String>, CharSequence
    Boolean : Serializable, Comparable<Boolean>
"""
from genref.ir import types as tp
from genref.ir.catalog import DeclarationCatalog


def _interface(name, *type_parameters, interfaces=None):
    if type_parameters:
        return tp.TypeConstructor(name, list(type_parameters),
                                  interfaces=interfaces, interface=True)
    return tp.SimpleClassifier(name, interfaces=interfaces, interface=True)


class BuiltinFactory(object):
    def __init__(self):
        self._catalog = DeclarationCatalog(tp.SimpleClassifier("Object"))

        self.serializable = _interface("Serializable")
        self.cloneable = _interface("Cloneable")
        self.random_access = _interface("RandomAccess")
        self.runnable = _interface("Runnable")
        self.char_sequence = _interface("CharSequence")
        self.comparable = _interface("Comparable", tp.TypeParameter("T"))

        self.number = tp.SimpleClassifier(
            "Number", interfaces=[self.serializable])
        # The Comparable<X> references name the classifier being declared.
        self.integer = tp.SimpleClassifier("Integer", superclass=self.number)
        self.integer.implement(self.comparable.new([self.integer]))
        self.string = tp.SimpleClassifier("String")
        self.string.implement(
            self.serializable,
            self.comparable.new([self.string]),
            self.char_sequence,
        )
        self.boolean = tp.SimpleClassifier("Boolean")
        self.boolean.implement(
            self.serializable, self.comparable.new([self.boolean]))

        t = tp.TypeParameter("T")
        self.iterable = _interface("Iterable", t)
        e = tp.TypeParameter("E")
        self.collection = _interface(
            "Collection", e, interfaces=[self.iterable.new([e])])
        e = tp.TypeParameter("E")
        self.set = _interface("Set", e,
                              interfaces=[self.collection.new([e])])
        e = tp.TypeParameter("E")
        self.list = _interface("List", e,
                               interfaces=[self.collection.new([e])])

        e = tp.TypeParameter("E")
        self.abstract_collection = tp.TypeConstructor(
            "AbstractCollection", [e],
            interfaces=[self.collection.new([e])])
        e = tp.TypeParameter("E")
        self.abstract_set = tp.TypeConstructor(
            "AbstractSet", [e],
            superclass=self.abstract_collection.new([e]),
            interfaces=[self.set.new([e])])
        e = tp.TypeParameter("E")
        self.hash_set = tp.TypeConstructor(
            "HashSet", [e],
            superclass=self.abstract_set.new([e]),
            interfaces=[self.set.new([e]), self.cloneable,
                        self.serializable])
        e = tp.TypeParameter("E")
        self.abstract_list = tp.TypeConstructor(
            "AbstractList", [e],
            superclass=self.abstract_collection.new([e]),
            interfaces=[self.list.new([e])])
        e = tp.TypeParameter("E")
        self.array_list = tp.TypeConstructor(
            "ArrayList", [e],
            superclass=self.abstract_list.new([e]),
            interfaces=[self.list.new([e]), self.random_access,
                        self.cloneable, self.serializable])

        k, v = tp.TypeParameter("K"), tp.TypeParameter("V")
        self.map = _interface("Map", k, v)
        k, v = tp.TypeParameter("K"), tp.TypeParameter("V")
        self.abstract_map = tp.TypeConstructor(
            "AbstractMap", [k, v], interfaces=[self.map.new([k, v])])
        k, v = tp.TypeParameter("K"), tp.TypeParameter("V")
        self.hash_map = tp.TypeConstructor(
            "HashMap", [k, v],
            superclass=self.abstract_map.new([k, v]),
            interfaces=[self.map.new([k, v]), self.cloneable,
                        self.serializable])

        self._catalog.declare(
            self.serializable, self.cloneable, self.random_access,
            self.runnable, self.char_sequence, self.comparable,
            self.number, self.integer, self.string, self.boolean,
            self.iterable, self.collection, self.set, self.list,
            self.abstract_collection, self.abstract_set, self.hash_set,
            self.abstract_list, self.array_list,
            self.map, self.abstract_map, self.hash_map,
        )

    def get_catalog(self) -> DeclarationCatalog:
        return self._catalog

    def get_object_type(self):
        return self._catalog.root

    def get_number_type(self):
        return self.number

    def get_integer_type(self):
        return self.integer

    def get_string_type(self):
        return self.string

    def get_boolean_type(self):
        return self.boolean

    def get_serializable_type(self):
        return self.serializable

    def get_cloneable_type(self):
        return self.cloneable

    def get_runnable_type(self):
        return self.runnable

    def get_char_sequence_type(self):
        return self.char_sequence

    def get_comparable_type(self):
        return self.comparable

    def get_iterable_type(self):
        return self.iterable

    def get_collection_type(self):
        return self.collection

    def get_set_type(self):
        return self.set

    def get_list_type(self):
        return self.list

    def get_abstract_collection_type(self):
        return self.abstract_collection

    def get_abstract_set_type(self):
        return self.abstract_set

    def get_hash_set_type(self):
        return self.hash_set

    def get_abstract_list_type(self):
        return self.abstract_list

    def get_array_list_type(self):
        return self.array_list

    def get_map_type(self):
        return self.map

    def get_abstract_map_type(self):
        return self.abstract_map

    def get_hash_map_type(self):
        return self.hash_map

