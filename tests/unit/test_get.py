from lpath import UNDEFINED, lpath


def test_get__nested_scalar():
    data = {'a': {'b': {'c': 1}}}
    path = 'a.b.c'
    default = None
    expected = 1

    assert lpath.get(data, path, default=default) == expected


def test_get__list_index():
    data = {'items': [{'total': 10}, {'total': 20}]}
    path = 'items[1].total'
    expected = 20

    assert lpath.get(data, path) == expected


def test_get__negative_list_index():
    data = {'items': [1, 2, 3]}
    path = 'items[-1]'
    expected = 3

    assert lpath.get(data, path) == expected


def test_get__nested_list_index():
    data = {'grid': [[1, 2], [3, 4]]}
    path = 'grid[1][0]'
    expected = 3

    assert lpath.get(data, path) == expected


def test_get__string_index_key_reads_mapping():
    data = {'x': {'ab': 7}}
    path = 'x[ab]'
    expected = 7

    assert lpath.get(data, path) == expected


def test_get__numeric_index_on_mapping_matches_string_key():
    data = {'x': {'3': 'three'}}
    path = 'x[3]'
    expected = 'three'

    assert lpath.get(data, path) == expected


def test_get__dotted_numeric_segment_indexes_list():
    data = {'items': ['a', 'b']}
    path = 'items.1'
    expected = 'b'

    assert lpath.get(data, path) == expected


def test_get__empty_path_returns_root():
    data = {'a': 1}

    assert lpath.get(data, '') is data


def test_get__missing_key_returns_default():
    data = {'a': {'b': {}}}
    path = 'a.b.missing'
    default = 'n/a'
    expected = 'n/a'

    assert lpath.get(data, path, default=default) == expected


def test_get__missing_key_without_default_returns_none():
    assert lpath.get({'a': {}}, 'a.b') is None


def test_get__null_intermediate_returns_default():
    data = {'a': None}
    path = 'a.b.c'
    default = 0
    expected = 0

    assert lpath.get(data, path, default=default) == expected


def test_get__absent_intermediate_returns_default():
    data = {'a': {}}
    path = 'a.b.c.d'
    default = 'fallback'

    assert lpath.get(data, path, default=default) == 'fallback'


def test_get__final_null_is_returned_instead_of_default():
    data = {'a': {'b': None}}

    assert lpath.get(data, 'a.b', default='fallback') is None


def test_get__none_root_returns_default():
    assert lpath.get(None, 'a', default=5) == 5


def test_get__out_of_range_index_returns_default():
    data = {'items': [1]}

    assert lpath.get(data, 'items[4]', default='none') == 'none'


def test_get__index_on_scalar_string_reads_character():
    data = {'word': 'hello'}

    assert lpath.get(data, 'word[1]') == 'e'


def test_get__function_call_on_string():
    data = {'name': 'ada'}
    path = 'name.upper()'
    expected = 'ADA'

    assert lpath.get(data, path) == expected


def test_get__function_call_with_literal_arguments():
    data = {'name': 'a-b-c'}
    path = "name.replace('-', '+')"
    expected = 'a+b+c'

    assert lpath.get(data, path) == expected


def test_get__function_call_with_numeric_argument():
    data = {'name': 'a,b,c'}
    path = 'name.split(",", 1)'
    expected = ['a', 'b,c']

    assert lpath.get(data, path) == expected


def test_get__chained_function_calls_and_index():
    data = {'csv': ' x;y;z '}
    path = 'csv.strip().split(";")[2]'
    expected = 'z'

    assert lpath.get(data, path) == expected


def test_get__method_on_object(person):
    data = {'person': person}
    path = "person.greet('hi', '?')"
    expected = 'hi ada lovelace?'

    assert lpath.get(data, path) == expected


def test_get__function_returning_container_is_navigable(person):
    assert lpath.get(person, 'profile().tags[1]') == 'engines'
    assert lpath.get(person, 'profile().display') == 'Ada Lovelace'


def test_get__attribute_on_object(person):
    assert lpath.get({'p': person}, 'p.tags[0]') == 'math'


def test_get__callable_stored_in_mapping():
    data = {'ops': {'add': lambda a, b: a + b}}

    assert lpath.get(data, 'ops.add(2, 3)') == 5


def test_get__mapping_method_is_invocable():
    data = {'a': {'x': 1, 'y': 2}}

    assert sorted(lpath.get(data, 'a.keys()')) == ['x', 'y']


def test_get__function_call_receives_structured_arguments():
    data = {'fn': lambda items, options: (items, options)}
    path = 'fn([1, 2], {"deep": true, "n": null})'
    expected = ([1, 2], {'deep': True, 'n': None})

    assert lpath.get(data, path) == expected


def test_get__undefined_argument_is_passed_through():
    data = {'fn': lambda value: value}

    assert lpath.get(data, 'fn(undefined)', default='fallback') == 'fallback'
    assert lpath.get(data, 'fn(null)', default='fallback') is None


def test_get__non_callable_member_returns_default():
    data = {'name': 'ada'}

    assert lpath.get(data, 'name.missing()', default='fallback') == 'fallback'
    assert lpath.get({'n': 1}, 'n()', default='fallback') == 'fallback'


def test_get__call_on_null_result_returns_default(person):
    assert lpath.get(person, 'nothing().anything', default='fallback') == 'fallback'


def test_get__exception_inside_called_member_returns_default():
    def boom():
        raise RuntimeError('boom')

    assert lpath.get({'boom': boom}, 'boom()', default='fallback') == 'fallback'


def test_get__non_string_path_returns_default():
    assert lpath.get({'a': 1}, 42, default='fallback') == 'fallback'


def test_get__unterminated_bracket_reads_until_end():
    data = {'a': {'b': 1}}

    assert lpath.get(data, 'a[b', default='fallback') == 1


def test_get__is_repeatable_and_has_no_side_effects():
    data = {'a': {'b': [1, 2]}}
    snapshot = {'a': {'b': [1, 2]}}

    first = lpath.get(data, 'a.b[5].c', default='d')
    second = lpath.get(data, 'a.b[5].c', default='d')

    assert first == second == 'd'
    assert data == snapshot


def test_get__never_returns_undefined_marker():
    assert lpath.get({}, 'a') is not UNDEFINED


def test_get__index_key_beyond_digit_limit_reads_mapping():
    key = '1' * 5000
    data = {'x': {key: 'v'}}

    assert lpath.get(data, f'x[{key}]') == 'v'
