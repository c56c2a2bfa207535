import pytest

from dashboard_client.filters import FilterState, selectable_options


def make_filters():
    return FilterState(
        ['classId', 'sectionId', 'subjectId', 'day'],
        dependencies={'classId': ['sectionId'], 'sectionId': ['subjectId']},
    )


def test_parent_change_clears_dependents_before_listeners_run():
    filters = make_filters()
    filters.set('classId', '5')
    filters.set('sectionId', '2')
    filters.set('subjectId', '9')

    seen = []
    filters.subscribe(lambda changed: seen.append((changed, dict(filters.values))))

    filters.set('classId', '6')

    changed, values = seen[0]
    assert changed == ['classId', 'sectionId', 'subjectId']
    assert values == {'classId': '6', 'sectionId': '', 'subjectId': '', 'day': ''}


def test_unchanged_value_does_not_notify():
    filters = make_filters()
    filters.set('day', 'Monday')
    calls = []
    filters.subscribe(calls.append)
    assert filters.set('day', 'Monday') == []
    assert calls == []


def test_independent_filter_keeps_others():
    filters = make_filters()
    filters.set('classId', '5')
    filters.set('day', 'Friday')
    assert filters.get('classId') == '5'


def test_params_skip_unset_values():
    filters = make_filters()
    filters.set('classId', '5')
    filters.set('day', 'all')
    assert filters.params() == {'classId': '5'}


def test_is_complete():
    filters = make_filters()
    filters.set('classId', '5')
    assert not filters.is_complete(['classId', 'sectionId'])
    filters.set('sectionId', '2')
    assert filters.is_complete(['classId', 'sectionId'])


def test_unknown_filter():
    with pytest.raises(KeyError):
        make_filters().set('bus', '1')


def test_selectable_options_drop_records_without_id():
    records = [{'id': 1, 'name': 'A'}, {'id': '', 'name': 'Ghost'}, {'name': 'No id'}, None, {'id': 0, 'name': 'Zero'}]
    assert selectable_options(records) == [{'id': 1, 'name': 'A'}, {'id': 0, 'name': 'Zero'}]
