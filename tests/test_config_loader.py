"""
Tests for connection declaration loading
"""

import json

import pytest

from src.connection_hub.core import (
    ConnectionConfigError,
    NamedConnectionConfig,
    build_connection_config,
    load_connection_config,
)


@pytest.fixture
def config_file(tmp_path):
    def _write(content):
        path = tmp_path / "connections.json"
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write


class TestBuildConnectionConfig:
    def test_snake_case_entries(self):
        configs = build_connection_config(
            [
                {
                    "store_name": "redis",
                    "connection_name": "cache",
                    "service_path": "src.connection_hub.services.redis_store",
                    "props": {"db": 1},
                    "should_ensure": True,
                }
            ]
        )

        config = configs[0]
        assert isinstance(config, NamedConnectionConfig)
        assert config.store_name == "redis"
        assert config.props == {"db": 1}
        assert config.should_ensure is True
        assert config.connection is None
        assert config.label == "redis['cache']"

    def test_camel_case_entries(self):
        configs = build_connection_config(
            [
                {
                    "storeName": "mongo",
                    "connectionName": "primary",
                    "servicePath": "app.mongo",
                    "connectHandlerName": "open",
                    "shouldEnsure": True,
                }
            ]
        )

        config = configs[0]
        assert config.service_path == "app.mongo"
        assert config.handler_name("connect") == "open"
        assert config.handler_name("ensure") == "ensure"
        assert config.handler_name("disconnect") == "disconnect"

    def test_defaults(self):
        config = build_connection_config(
            [{"store_name": "mysql", "connection_name": "db"}]
        )[0]

        assert config.props == {}
        assert config.should_ensure is False
        assert config.service_path is None

    @pytest.mark.parametrize(
        "entry",
        [
            {"connection_name": "db"},
            {"store_name": "mysql"},
            {"store_name": "", "connection_name": "db"},
        ],
    )
    def test_invalid_entry_raises(self, entry):
        with pytest.raises(ConnectionConfigError, match="第 0 条"):
            build_connection_config([entry])

    def test_non_list_raises(self):
        with pytest.raises(ConnectionConfigError):
            build_connection_config({"store_name": "mysql"})


class TestLoadConnectionConfig:
    def test_loads_file(self, config_file):
        path = config_file(
            [
                {"storeName": "redis", "connectionName": "cache"},
                {"storeName": "mysql", "connectionName": "db"},
            ]
        )

        configs = load_connection_config(path)

        assert [c.label for c in configs] == ["redis['cache']", "mysql['db']"]

    @pytest.mark.parametrize("path", [None, ""])
    def test_empty_path_returns_empty_list(self, path):
        assert load_connection_config(path) == []

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(ConnectionConfigError, match="不存在"):
            load_connection_config(tmp_path / "missing.json")

    def test_invalid_json_raises(self, config_file):
        with pytest.raises(ConnectionConfigError, match="格式错误"):
            load_connection_config(config_file("{not json"))

    def test_non_array_raises(self, config_file):
        with pytest.raises(ConnectionConfigError):
            load_connection_config(config_file({"storeName": "redis"}))
