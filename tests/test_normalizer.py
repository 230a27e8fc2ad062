from rfcaps.CapabilityApi.DeviceCapabilities.models import Band, NormalizedBand
from rfcaps.CapabilityApi.DeviceCapabilities.normalizer import group_bands


def _summary(bands):
    return [(b.bandNumber, b.technology, b.dlBandClass, b.ulBandClass) for b in bands]


def test_band_classes_merge_into_one_row():
    grouped = group_bands([
        {"id": "b1", "bandNumber": "2", "technology": "LTE", "dlBandClass": "A"},
        {"id": "b2", "bandNumber": "2", "technology": "LTE", "dlBandClass": "C"},
    ])
    assert _summary(grouped) == [("2", "LTE", "A/C", "-")]
    assert grouped[0].id == "b1"


def test_empty_and_missing_input():
    assert group_bands([]) == []
    assert group_bands(None) == []


def test_incomplete_records_are_dropped():
    grouped = group_bands([
        {"bandNumber": None, "technology": "LTE"},
        {"bandNumber": "7", "technology": ""},
        {"bandNumber": "5", "technology": "LTE", "dlBandClass": "A", "ulBandClass": "A"},
    ])
    assert _summary(grouped) == [("5", "LTE", "A", "A")]


def test_same_number_different_technology_stays_apart():
    grouped = group_bands([
        {"id": "1", "bandNumber": "41", "technology": "LTE", "dlBandClass": "A"},
        {"id": "2", "bandNumber": "41", "technology": "NR", "dlBandClass": "A"},
    ])
    assert len(grouped) == 2
    assert {b.technology for b in grouped} == {"LTE", "NR"}


def test_classes_sorted_and_unique():
    grouped = group_bands([
        Band(id="x", bandNumber="66", technology="LTE", dlBandClass="C", ulBandClass="A"),
        Band(id="y", bandNumber="66", technology="LTE", dlBandClass="A", ulBandClass="A"),
        Band(id="z", bandNumber="66", technology="LTE", dlBandClass="C"),
        Band(id="w", bandNumber="66", technology="LTE", dlBandClass="B"),
    ])
    assert _summary(grouped) == [("66", "LTE", "A/B/C", "A")]


def test_first_seen_group_order_and_synthesized_id():
    grouped = group_bands([
        {"bandNumber": "66", "technology": "LTE"},
        {"id": "b2", "bandNumber": "2", "technology": "LTE"},
        {"id": "b66", "bandNumber": "66", "technology": "LTE", "dlBandClass": "B"},
    ])
    assert [b.bandNumber for b in grouped] == ["66", "2"]
    assert grouped[0].id == "66-LTE"
    assert grouped[0].dlBandClass == "B"


def test_regrouping_is_stable():
    raw = [
        {"id": "1", "bandNumber": "2", "technology": "LTE", "dlBandClass": "A"},
        {"id": "2", "bandNumber": "2", "technology": "LTE", "dlBandClass": "C", "ulBandClass": "A"},
        {"id": "3", "bandNumber": "n77", "technology": "NR"},
    ]
    once = group_bands(raw)
    twice = group_bands(once)
    assert twice == once
    assert all(isinstance(b, NormalizedBand) for b in twice)


def test_numeric_band_number_is_kept():
    grouped = group_bands([
        {"id": "z", "bandNumber": 0, "technology": "GSM", "dlBandClass": "A"},
        {"bandNumber": 0, "technology": "GSM", "ulBandClass": "A"},
    ])
    assert _summary(grouped) == [("0", "GSM", "A", "A")]


def test_grouped_and_raw_rows_merge_sorted():
    grouped = group_bands([
        {"id": "g", "bandNumber": "2", "technology": "LTE", "dlBandClass": "A/C", "ulBandClass": "-"},
        {"id": "r", "bandNumber": "2", "technology": "LTE", "dlBandClass": "B", "ulBandClass": "A"},
    ])
    assert _summary(grouped) == [("2", "LTE", "A/B/C", "A")]
