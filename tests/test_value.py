import pytest
from schemautils.merge import IncompatibleMerge
from schemautils.value import (Array, Bool, Empty, Null, Number, Object, String,
                               Url, from_data)


def test_equality_is_by_variant_and_payload():
    assert String('x') == String('x')
    assert String('x') != Url('x')
    assert Null() == Null(None)
    assert Null(String('x')) != Null()
    assert Empty() == Empty()
    assert hash(Object('a', ['x'], {'x': Bool(True)})) == hash(Object('a', ['x'], {'x': Bool(True)}))


def test_number_kind():
    assert Number(3).kind == 'Int'
    assert Number(3.5).kind == 'Double'
    assert Number(3.0).is_double


def test_object_keys_must_match_fields():
    with pytest.raises(ValueError):
        Object('user', ['id', 'id'], {'id': Number(1)})
    with pytest.raises(ValueError):
        Object('user', ['id'], {'id': Number(1), 'name': String('a')})


def test_object_field_order_matters():
    fields = {'a': Bool(True), 'b': Bool(False)}
    assert Object('x', ['a', 'b'], fields) != Object('x', ['b', 'a'], fields)


def test_from_data():
    value = from_data({'id': 1, 'ok': True, 'score': 1.5, 'tags': ['a'], 'owner': None}, 'user')

    assert value == Object('user', ['id', 'ok', 'score', 'tags', 'owner'], {
        'id': Number(1),
        'ok': Bool(True),
        'score': Number(1.5),
        'tags': Array('tags', [String('a')]),
        'owner': Null(),
    })


def test_from_data_merges_list_items():
    value = from_data([{'a': 1}, {'a': 2.5, 'b': True}], 'cars')

    assert value == Array('cars', [
        Object('cars', ['a', 'b'], {'a': Number(2.5), 'b': Null(Bool(True))}),
    ])


def test_from_data_empty_list():
    assert from_data([], 'tags') == Array('tags', [Empty()])


def test_from_data_rejects_mixed_list():
    with pytest.raises(IncompatibleMerge):
        from_data([1, True], 'tags')


def test_from_data_stringifies_keys():
    value = from_data({1: 'x', 'b': None}, 'root')

    assert value.keys == ('1', 'b')
    assert value.dictionary['1'] == String('x')


def test_number_equality_tells_int_from_double():
    assert Number(3) != Number(3.0)
    assert Number(3) == Number(3)
    assert hash(Number(3.5)) == hash(Number(3.5))
