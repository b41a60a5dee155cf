import json

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np
import pytest
import scipy.io as sio

from spatial_dbscan.clustering.data_loader import load_points
from spatial_dbscan.clustering.dbscan import DBScan
from spatial_dbscan.clustering.errors import InvalidParameterError
from spatial_dbscan.clustering.export_to_json import create_result_data
from spatial_dbscan.clustering.models.euclidean_point import EuclideanPoint
from spatial_dbscan.clustering.models.identifiers import ClusterId, PointId
from spatial_dbscan.clustering.models.lat_lng_point import LatLngPoint
from spatial_dbscan.clustering.parameters import define_parameters
from spatial_dbscan.clustering.save_result import save_clustering_result
from spatial_dbscan.clustering.visualize_clusters import plot_clusters
from spatial_dbscan.data_adapter import adapt_array_to_points, adapt_points_to_array
from spatial_dbscan.main_batch import run_batch


@pytest.fixture
def params():
    return define_parameters()


# --- Loading ---

def test_load_csv(tmp_path, params, scenario_rows):
    path = tmp_path / "points.csv"
    np.savetxt(path, scenario_rows, delimiter=',', header='id,x,y')
    data = load_points(str(path), params)
    assert data.shape == (7, 3)
    np.testing.assert_allclose(data, scenario_rows)


def test_load_single_row_csv(tmp_path, params):
    path = tmp_path / "one.csv"
    path.write_text("1.5,2.5\n")
    assert load_points(str(path), params).shape == (1, 2)


def test_load_json_list_and_object(tmp_path, params, scenario_rows):
    as_list = tmp_path / "list.json"
    as_list.write_text(json.dumps(scenario_rows.tolist()))
    as_object = tmp_path / "object.json"
    as_object.write_text(json.dumps({'points': scenario_rows.tolist()}))

    np.testing.assert_allclose(load_points(str(as_list), params), scenario_rows)
    np.testing.assert_allclose(load_points(str(as_object), params), scenario_rows)


def test_load_mat(tmp_path, params, scenario_rows):
    path = tmp_path / "points.mat"
    sio.savemat(str(path), {'points': scenario_rows})
    np.testing.assert_allclose(load_points(str(path), params), scenario_rows)

    params['io_params']['mat_variable'] = 'other'
    assert load_points(str(path), params) is None


def test_load_failures_return_none(tmp_path, params):
    assert load_points(str(tmp_path / "missing.csv"), params) is None

    unsupported = tmp_path / "points.txt"
    unsupported.write_text("1,2\n")
    assert load_points(str(unsupported), params) is None

    broken = tmp_path / "broken.csv"
    broken.write_text("1,2\nthree,4\n")
    assert load_points(str(broken), params) is None


# --- Adapting ---

def test_adapt_euclidean_with_id_column(params, scenario_rows):
    params['point_params']['id_column'] = 0
    points = adapt_array_to_points(scenario_rows, params)
    assert [p.point_id().value for p in points] == scenario_rows[:, 0].astype(int).tolist()
    assert points[0] == EuclideanPoint(1, (1.0, 1.0))


def test_adapt_uses_row_index_and_selected_columns(params):
    data = np.array([[9.0, 1.0, 2.0], [9.0, 3.0, 4.0]])
    params['point_params']['coord_columns'] = [1, 2]
    points = adapt_array_to_points(data, params)
    assert points == [EuclideanPoint(0, (1.0, 2.0)), EuclideanPoint(1, (3.0, 4.0))]


def test_adapt_latlng(params):
    params['point_params'].update({'point_type': 'latlng', 'lat_column': 1, 'lng_column': 0})
    points = adapt_array_to_points([[10.0, 50.0], [11.0, 51.0]], params)
    assert points[0] == LatLngPoint(0, lat=50.0, lng=10.0)
    np.testing.assert_allclose(adapt_points_to_array(points), [[10.0, 50.0], [11.0, 51.0]])


def test_adapt_rejects_duplicate_ids_and_unknown_type(params):
    params['point_params']['id_column'] = 0
    with pytest.raises(InvalidParameterError):
        adapt_array_to_points([[1, 0.0], [1, 5.0]], params)

    params['point_params'].update({'id_column': None, 'point_type': 'polar'})
    with pytest.raises(InvalidParameterError):
        adapt_array_to_points([[0.0, 0.0]], params)


def test_adapt_drops_rows_with_non_finite_values(params, caplog):
    data = np.array([[i, i] for i in range(30)], dtype=float)
    data[7] = [np.nan, 0.0]
    data[12, 1] = np.inf

    points = adapt_array_to_points(data, params)

    ids = [p.point_id().value for p in points]
    assert ids == [i for i in range(30) if i not in (7, 12)]
    assert "Dropping 2 rows" in caplog.text


def test_non_finite_rows_do_not_split_clusters(params):
    data = np.array([[i, i] for i in range(30)], dtype=float)
    data[7] = [np.nan, 0.0]

    result = DBScan(eps=1.5, min_points=2).run(adapt_array_to_points(data, params))

    assert result.num_clusters == 2
    assert sorted(p.point_id().value for p in result.clusters[ClusterId(1)]) == list(range(7))
    assert sorted(p.point_id().value for p in result.clusters[ClusterId(2)]) == list(range(8, 30))
    assert result.noise_ids() == []


def test_adapt_ignores_non_finite_values_in_unused_columns(params):
    params['point_params']['coord_columns'] = [0, 1]
    points = adapt_array_to_points([[0.0, 0.0, np.nan], [1.0, 1.0, 2.0]], params)
    assert len(points) == 2


def test_points_to_array_keeps_leading_axes():
    points = [EuclideanPoint(0, (1.0, 2.0, 3.0)), EuclideanPoint(1, (4.0, 5.0, 6.0))]
    assert adapt_points_to_array(points).shape == (2, 3)
    np.testing.assert_allclose(adapt_points_to_array(points, axes=2), [[1.0, 2.0], [4.0, 5.0]])
    assert adapt_points_to_array([], axes=3).shape == (0, 3)


def test_adapt_empty(params):
    assert adapt_array_to_points(np.empty((0, 2)), params) == []
    assert adapt_points_to_array([]).shape == (0, 2)


# --- Export ---

def test_create_result_data(scenario_points, params):
    result = DBScan(eps=5, min_points=2).run(scenario_points)
    data = create_result_data(result, params)

    assert data['summary'] == {'numPoints': 7, 'numClusters': 2, 'numNoise': 1, 'eps': 5.0, 'minPoints': 2}
    assert [c['id'] for c in data['clusters']] == [1, 2]
    assert data['clusters'][1]['points'] == [{'id': 1000, 'coords': [1000.0, 1000.0]},
                                             {'id': 1001, 'coords': [1001.0, 1001.0]}]
    assert data['labels']['2000'] == -1
    assert data['labels']['5'] == 1
    assert data['noise'] == [2000]
    json.dumps(data)


def test_create_result_data_latlng_info():
    points = [LatLngPoint(1, 0.0, 0.0, info='depot'), LatLngPoint(2, 0.0, 0.001)]
    data = create_result_data(DBScan(eps=500, min_points=2).run(points))
    assert data['clusters'][0]['points'][0] == {'id': 1, 'lat': 0.0, 'lng': 0.0, 'info': 'depot'}
    assert 'info' not in data['clusters'][0]['points'][1]
    assert data['summary']['eps'] is None


def test_save_json_and_mat(tmp_path, scenario_points, params):
    result = DBScan(eps=5, min_points=2).run(scenario_points)
    params['io_params']['save_mat'] = True
    target = tmp_path / "nested" / "result.json"

    written = save_clustering_result(result, str(target), params)

    assert json.loads(target.read_text()) == written
    mat = sio.loadmat(str(tmp_path / "nested" / "result.mat"))
    assert mat['labels'].tolist() == [[1, 1], [2, 1], [3, 1], [5, 1], [1000, 2], [1001, 2], [2000, -1]]
    assert mat['clusterSizes'].tolist() == [[1, 4], [2, 2]]


def test_plot_clusters(tmp_path, scenario_points):
    result = DBScan(eps=5, min_points=2).run(scenario_points)
    save_path = tmp_path / "clusters.png"
    ax = plot_clusters(result, scenario_points, title="scenario", save_path=str(save_path))
    assert save_path.exists()
    assert ax.get_title() == "scenario"
    # Two clusters plus the noise layer
    assert len(ax.collections) == 3
    plt.close(ax.figure)


# --- Batch ---

def test_run_batch_end_to_end(tmp_path, params, scenario_rows):
    input_path = tmp_path / "points.csv"
    np.savetxt(input_path, scenario_rows, delimiter=',')
    output_path = tmp_path / "out" / "result.json"
    params['point_params']['id_column'] = 0
    params['io_params']['save_plot'] = True

    result = run_batch(str(input_path), str(output_path), params)

    assert result.num_clusters == 2
    assert result.labels[PointId(2000)].is_noise
    assert json.loads(output_path.read_text())['summary']['numClusters'] == 2
    assert (tmp_path / "out" / "result.png").exists()
    plt.close('all')


def test_run_batch_missing_input(tmp_path, params):
    assert run_batch(str(tmp_path / "missing.csv"), str(tmp_path / "r.json"), params) is None


def test_run_batch_rejects_bad_parameters(tmp_path, params):
    params['dbscan_params']['eps'] = -1
    with pytest.raises(InvalidParameterError):
        run_batch(str(tmp_path / "points.csv"), params=params)


def test_main_with_file_argument_runs_batch(tmp_path, monkeypatch, scenario_rows):
    from main import main

    input_path = tmp_path / "points.csv"
    np.savetxt(input_path, scenario_rows[:, 1:], delimiter=',')
    # Default output_dir is relative
    monkeypatch.chdir(tmp_path)

    result = main([str(input_path)])

    assert result.num_clusters == 2
    assert list((tmp_path / "output").glob("clustering_result_*.json"))
