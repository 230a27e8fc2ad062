from rfcaps.CapabilityApi.DeviceCapabilities.dedupe import dedupe_by_id
from rfcaps.CapabilityApi.DeviceCapabilities.models import Device


def test_repeated_id_kept_once():
    result = dedupe_by_id([{"id": "d1"}, {"id": "d1"}, {"id": "d2"}])
    assert len(result) == 2
    assert sorted(r["id"] for r in result) == ["d1", "d2"]


def test_last_occurrence_wins():
    result = dedupe_by_id([
        {"id": "d1", "seen": 1},
        {"id": "d2", "seen": 2},
        {"id": "d1", "seen": 3},
    ])
    assert result == [{"id": "d2", "seen": 2}, {"id": "d1", "seen": 3}]


def test_missing_ids_are_not_coalesced():
    result = dedupe_by_id([{"id": None}, {"name": "no id"}, {"id": "d1"}])
    assert len(result) == 3


def test_models_and_empty_input():
    a = Device(id="d1", vendor="Apple", modelNum="A3090")
    b = Device(id="d1", vendor="Apple", modelNum="A3090", marketName="iPhone 16")
    assert dedupe_by_id([a, b]) == [b]
    assert dedupe_by_id([]) == []
    assert dedupe_by_id(None) == []
