"""按日期分组测试"""
from datetime import datetime

from app.models.submission import Submission
from app.services.order_service import group_by_day
from app.utils.date_utils import day_key


def make_submission(id: int, created_at: datetime) -> Submission:
    return Submission(
        id=id,
        phone=f"1380000{id:04d}",
        created_at=created_at,
        submit_day=created_at.date(),
        is_updated=False,
    )


class TestGroupByDay:

    def test_empty(self):
        assert group_by_day([]) == []

    def test_keeps_input_order(self):
        rows = [
            make_submission(3, datetime(2024, 12, 14, 20, 0)),
            make_submission(2, datetime(2024, 12, 14, 8, 0)),
            make_submission(1, datetime(2024, 12, 13, 23, 59, 59)),
        ]
        groups = group_by_day(rows)

        assert [g.date for g in groups] == ["2024-12-14", "2024-12-13"]
        assert [s.id for s in groups[0].items] == [3, 2]
        assert [s.id for s in groups[1].items] == [1]

    def test_wire_names(self):
        groups = group_by_day([make_submission(1, datetime(2024, 12, 14, 8, 0))])
        dumped = groups[0].model_dump(by_alias=True, mode="json")

        assert set(dumped) == {"date", "list"}
        assert dumped["list"][0]["createdAt"] == "2024-12-14T08:00:00"
        assert dumped["list"][0]["isUpdated"] is False


def test_day_key_pads_month_and_day():
    assert day_key(datetime(2024, 1, 5, 0, 0)) == "2024-01-05"
