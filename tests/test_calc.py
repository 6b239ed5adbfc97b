import re

import pytest

from localenu.calc import centroid_lat_lon
from localenu.utils.logging import _reset_warnings


def test_centroid_lat_lon():
    assert centroid_lat_lon([(0, 0), (2, 4)]) == (1, 2)
    assert centroid_lat_lon([(42.5, 3.0)]) == (42.5, 3.0)

    # Any iterable is accepted
    assert centroid_lat_lon((lat, lon) for lat, lon in [(10., 20.), (20., 40.)]) == (15., 30.)

    lat, lon = centroid_lat_lon([(1., 1.), (2., 2.), (3., 6.)])
    assert lat == pytest.approx(2.)
    assert lon == pytest.approx(3.)


def test_centroid_lat_lon_empty():
    with pytest.raises(ValueError):
        centroid_lat_lon([])

    with pytest.raises(ValueError):
        centroid_lat_lon(iter(()))


def test_centroid_lat_lon_antimeridian(caplog):
    _reset_warnings()

    # Planar mean is kept, but the limitation is reported
    assert centroid_lat_lon([(0., 179.), (0., -179.)]) == (0., 0.)
    assert 'antimeridian' in caplog.text

    centroid_lat_lon([(1., 179.5), (1., -179.5)])
    assert len(re.findall('antimeridian', caplog.text)) == 1


def test_centroid_lat_lon_no_warning_for_small_area(caplog):
    _reset_warnings()
    centroid_lat_lon([(42.680067, 3.034061), (42.680499, 3.035775)])
    assert caplog.text == ''
