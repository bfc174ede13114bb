import pytest

from nearby_customers.errors import RecordProcessingError
from nearby_customers.models.domain import CustomerRecord, EligibleCustomer
from nearby_customers.schemas.customers import build_run_config
from nearby_customers.services.customers import customer_distance, filter_eligible, is_eligible, to_eligible


def _record(user_id, lat, lon, name=None, line_index=0) -> CustomerRecord:
    name = name or f"Customer {user_id}"
    return CustomerRecord(
        line_index=line_index,
        user_id=user_id,
        name=name,
        latitude=lat,
        longitude=lon,
        raw={"user_id": user_id, "name": name, "latitude": lat, "longitude": lon},
    )


def _config(tmp_path, **overrides):
    return build_run_config({"filePath": tmp_path / "unused.txt", **overrides})


def test_customer_within_two_hundred_kilometres_is_eligible(tmp_path):
    config = _config(tmp_path, distance=200)
    record = _record(25, "52.833502", "-8.522153", name="David Behan")

    assert customer_distance(record, config) == pytest.approx(161.35, abs=0.5)
    assert is_eligible(record, config)


def test_customer_beyond_threshold_is_not_eligible(tmp_path):
    config = _config(tmp_path, distance=100)

    assert not is_eligible(_record(25, 52.833502, -8.522153), config)


def test_threshold_is_inclusive(tmp_path):
    record = _record(1, 53.0, -7.0)
    exact = customer_distance(record, _config(tmp_path, distance=0))

    assert is_eligible(record, _config(tmp_path, distance=exact))


def test_distance_respects_unit(tmp_path):
    record = _record(25, 52.833502, -8.522153)

    # ~100.3 miles
    assert not is_eligible(record, _config(tmp_path, distance=100, distanceUnit="MI"))
    assert is_eligible(record, _config(tmp_path, distance=101, distanceUnit="MI"))


def test_customer_at_source_point_has_zero_distance(tmp_path):
    record = _record(1, 53.339428, -6.257664)

    assert customer_distance(record, _config(tmp_path, distance=0)) == 0
    assert is_eligible(record, _config(tmp_path, distance=0))


def test_distance_is_measured_from_configured_source(tmp_path):
    record = _record(25, 52.833502, -8.522153)
    config = _config(tmp_path, sourceCoordinates={"latitude": 52.833502, "longitude": -8.522153})

    assert customer_distance(record, config) == 0


def test_to_eligible_projects_id_and_name():
    assert to_eligible(_record(9, 1, 1, name="Jack")) == EligibleCustomer(user_id=9, name="Jack")


def test_filter_keeps_order_and_skips_broken_records(tmp_path):
    records = [
        _record(3, 53.3, -6.2, line_index=0),
        _record(4, None, -6.2, line_index=1),
        _record(5, 40.0, -3.7, line_index=2),
        _record(6, "north", -6.2, line_index=3),
        _record(1, 53.2, -6.3, line_index=4),
    ]

    eligible = filter_eligible(records, _config(tmp_path, distance=100))

    assert [customer.user_id for customer in eligible] == [3, 1]


def test_filter_strict_raises_for_broken_record(tmp_path):
    records = [_record(3, 53.3, -6.2), _record(4, None, -6.2, name="Ian Kehoe")]

    with pytest.raises(RecordProcessingError) as excinfo:
        filter_eligible(records, _config(tmp_path, distance=100, showErrorForFailedCustomerProcessing=True))

    assert "Ian Kehoe" in excinfo.value.message
    assert excinfo.value.record is records[1]
