import pytest

from spatial_dbscan.clustering.errors import DBScanError, InvalidParameterError
from spatial_dbscan.clustering.parameters import define_parameters, validate_parameters


def test_defaults_are_valid():
    params = define_parameters()
    assert validate_parameters(params) is params
    assert params['dbscan_params'] == {'eps': 5.0, 'min_points': 2}
    assert params['point_params']['point_type'] == 'euclidean'
    assert params['debug_mode'] is False


def test_define_parameters_returns_fresh_dicts():
    a = define_parameters()
    a['dbscan_params']['eps'] = 99
    assert define_parameters()['dbscan_params']['eps'] == 5.0


def test_missing_dbscan_section():
    params = define_parameters()
    del params['dbscan_params']
    with pytest.raises(InvalidParameterError):
        validate_parameters(params)


@pytest.mark.parametrize("section, key, value", [
    ('dbscan_params', 'eps', 0),
    ('dbscan_params', 'eps', float('nan')),
    ('dbscan_params', 'min_points', -2),
    ('point_params', 'point_type', 'polar'),
])
def test_invalid_values(section, key, value):
    params = define_parameters()
    params[section][key] = value
    with pytest.raises(InvalidParameterError):
        validate_parameters(params)


def test_error_hierarchy():
    # Callers may catch either the package base class or the builtin
    assert issubclass(InvalidParameterError, DBScanError)
    assert issubclass(InvalidParameterError, ValueError)
