"""
Tests for the air pollution family builder.
"""

import re
from datetime import datetime, timedelta, timezone

import pytest

from openweather_requests import air
from openweather_requests.domains import AirRequestType
from openweather_requests.errors import InvalidRequest, InvalidRequestType
from openweather_requests.air import AirRequest

from conftest import path_of, query_of


class TestAccessors:
    def test_appid(self):
        req = AirRequest()
        req.appid("1111")
        assert req.appid() == "1111"

    def test_request_type(self):
        req = AirRequest().request_type(AirRequestType.SO2)
        assert req.request_type() is AirRequestType.SO2

    def test_coords(self):
        assert AirRequest().coords(1, 2).coords() == {"lat": 1, "lon": 2}

    def test_datetime(self):
        req = AirRequest().datetime("2020-01-01T00:00:00Z")
        assert req.datetime() == "2020-01-01T00:00:00Z"

    def test_datetime_defaults_to_now(self):
        before = datetime.now(timezone.utc).replace(microsecond=0)
        stamp = AirRequest().datetime()
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z", stamp)
        built = datetime.strptime(stamp, "%Y-%m-%dT%H:%M:%SZ").replace(tzinfo=timezone.utc)
        assert before <= built <= before + timedelta(minutes=1)

    def test_seeded_datetime(self):
        req = AirRequest({"type": "no2", "datetime": "2019-05-05T10:00:00Z"})
        assert req.request_type() is AirRequestType.NO2
        assert req.datetime() == "2019-05-05T10:00:00Z"


class TestFactories:
    @pytest.mark.parametrize(
        "factory, member",
        [
            (air.ozone, AirRequestType.O3),
            (air.carbon_monoxide, AirRequestType.CO),
            (air.sulfur_dioxide, AirRequestType.SO2),
            (air.nitrogen_dioxide, AirRequestType.NO2),
        ],
    )
    def test_type(self, factory, member):
        assert factory().request_type() is member


class TestDefaultKey:
    def test_new_request_uses_default(self):
        air.default_key("111")
        assert AirRequest().appid() == "111"
        assert air.ozone().appid() == "111"

    def test_override(self):
        air.default_key("111")
        assert AirRequest().appid("222").appid() == "222"


class TestUrl:
    def test_ozone_scenario(self):
        url = air.ozone().appid("K").coords(1, 2).datetime("2020-01-01T00:00:00Z").url()
        assert "api.openweathermap.org" in url
        assert path_of(url) == "/pollution/v1/o3/1,2/2020-01-01T00:00:00Z.json"
        assert query_of(url) == {"appid": "K"}

    @pytest.mark.parametrize("factory, name", [
        (air.carbon_monoxide, "co"),
        (air.sulfur_dioxide, "so2"),
        (air.nitrogen_dioxide, "no2"),
    ])
    def test_pollutant_in_path(self, factory, name):
        url = factory().appid("K").coords(39.74, -104.99).datetime("2020-01-01Z").url()
        assert path_of(url) == f"/pollution/v1/{name}/39.74,-104.99/2020-01-01Z.json"

    def test_small_coordinates_in_decimal(self):
        url = air.ozone().appid("K").coords(0.00001, -0.000002).datetime("2020-01-01Z").url()
        assert path_of(url) == "/pollution/v1/o3/0.00001,-0.000002/2020-01-01Z.json"

    def test_datetime_object(self):
        moment = datetime(2020, 1, 1, 6, 30, tzinfo=timezone(timedelta(hours=6)))
        url = air.ozone().appid("K").coords(1, 2).datetime(moment).url()
        assert path_of(url).endswith("/2020-01-01T00:30:00Z.json")

    def test_unknown_pollutant(self):
        with pytest.raises(InvalidRequestType):
            AirRequest().request_type("pm25").appid("K").coords(1, 2).url()


class TestValidate:
    def test_valid(self):
        air.ozone().appid("K").coords(1, 2).validate()

    def test_missing_coords(self):
        with pytest.raises(InvalidRequest) as exc_info:
            air.ozone().appid("K").validate()
        errors = exc_info.value.errors
        assert "Missing required path parameter: 'lat'" in errors
        assert "Missing required path parameter: 'lon'" in errors
