"""UI 开关接口测试"""
import asyncio

from sqlalchemy.ext.asyncio import async_sessionmaker

from app.services.ui_flag import UIFlagStore


def ui_enabled(client) -> bool:
    resp = client.get("/ui-status")
    assert resp.status_code == 200
    return resp.json()["data"]["isUIEnabled"]


def read_with_new_store(db_engine) -> bool:
    """用全新的 UIFlagStore（相当于重启后的进程）读取库中的状态"""
    session_factory = async_sessionmaker(db_engine, expire_on_commit=False)

    async def read():
        async with session_factory() as session:
            return await UIFlagStore(default=False).get(session)

    return asyncio.run(read())


class TestUIFlag:

    def test_default_disabled(self, client):
        assert ui_enabled(client) is False

    def test_toggle_on_and_off(self, client):
        resp = client.post("/toggle-ui", json={"enable": True})
        assert resp.status_code == 200
        assert resp.json() == {"code": 200, "message": "UI 状态更新成功", "data": {"isUIEnabled": True}}
        assert ui_enabled(client) is True

        client.post("/toggle-ui", json={"enable": False})
        assert ui_enabled(client) is False

    def test_non_boolean_rejected_and_flag_unchanged(self, client):
        client.post("/toggle-ui", json={"enable": True})

        for bad in ("yes", "true", 1, None):
            resp = client.post("/toggle-ui", json={"enable": bad})
            assert resp.status_code == 400
            assert resp.json()["code"] == 400

        assert ui_enabled(client) is True

    def test_missing_enable_rejected(self, client):
        resp = client.post("/toggle-ui", json={})
        assert resp.status_code == 400
        assert ui_enabled(client) is False


class TestUIFlagPersistence:

    def test_value_survives_new_store(self, client, db_engine):
        client.post("/toggle-ui", json={"enable": True})
        assert read_with_new_store(db_engine) is True

        client.post("/toggle-ui", json={"enable": False})
        assert read_with_new_store(db_engine) is False

    def test_unset_flag_uses_store_default(self, db_engine):
        session_factory = async_sessionmaker(db_engine, expire_on_commit=False)

        async def read():
            async with session_factory() as session:
                return await UIFlagStore(default=True).get(session)

        assert asyncio.run(read()) is True


class TestUIFlagStoreFailure:

    def test_status_store_failure(self, client, drop_table):
        drop_table("app_flags")
        resp = client.get("/ui-status")
        assert resp.status_code == 500
        body = resp.json()
        assert body["code"] == 500
        assert body["message"] == "状态获取失败"
        assert "app_flags" in body["error"]

    def test_toggle_store_failure(self, client, drop_table):
        drop_table("app_flags")
        resp = client.post("/toggle-ui", json={"enable": True})
        assert resp.status_code == 500
        body = resp.json()
        assert body["code"] == 500
        assert body["message"] == "UI 状态更新失败"
