from __future__ import annotations

import sys
from pathlib import Path

# Make the mobile_storage package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mobile_storage.domain.mobiles import Mobile  # noqa: E402
from mobile_storage.repositories.base import MobileRepository  # noqa: E402
from mobile_storage.repositories.memory_repository import InMemoryMobileRepository  # noqa: E402


def test_satisfies_repository_protocol():
    assert isinstance(InMemoryMobileRepository(), MobileRepository)


def test_add_rejects_equal_record_but_accepts_same_imei_other_model():
    repo = InMemoryMobileRepository()
    assert repo.add(Mobile("111", "Pixel")) is True
    assert repo.add(Mobile("111", "Pixel")) is False
    assert repo.add(Mobile("111", "Galaxy")) is True
    assert repo.count() == 2


def test_remove_reports_whether_record_was_present():
    repo = InMemoryMobileRepository([Mobile("111", "Pixel")])
    assert repo.remove(Mobile("111", "Galaxy")) is False
    assert repo.remove(Mobile("111", "Pixel")) is True
    assert repo.remove(Mobile("111", "Pixel")) is False
    assert repo.count() == 0


def test_find_by_imei_scans_past_non_matching_records():
    repo = InMemoryMobileRepository(Mobile(f"imei-{i}", "Model") for i in range(50))
    assert repo.find_by_imei("imei-37") == Mobile("imei-37", "Model")
    assert repo.find_by_imei("missing") is None


def test_find_by_imei_with_shared_imei_returns_one_of_them():
    repo = InMemoryMobileRepository([Mobile("111", "Pixel"), Mobile("111", "Galaxy")])
    assert repo.find_by_imei("111") in {Mobile("111", "Pixel"), Mobile("111", "Galaxy")}


def test_list_mobiles_is_a_snapshot():
    repo = InMemoryMobileRepository([Mobile("111", "Pixel")])
    snapshot = repo.list_mobiles()
    repo.add(Mobile("222", "Galaxy"))
    repo.remove(Mobile("111", "Pixel"))
    assert snapshot == frozenset({Mobile("111", "Pixel")})
    assert repo.list_mobiles() == frozenset({Mobile("222", "Galaxy")})


def test_initial_mobiles_are_deduplicated():
    repo = InMemoryMobileRepository([Mobile("111", "Pixel"), Mobile("111", "Pixel")])
    assert repo.count() == 1
    assert repo.contains(Mobile("111", "Pixel"))
