"""
Tests for handler resolution by service path
"""

import textwrap

import pytest

from src.connection_hub.core import HandlerResolutionError, resolve_handler


def write_module(root, relative_path, source):
    path = root / relative_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(source), encoding="utf-8")


@pytest.fixture
def service_root(tmp_path, monkeypatch):
    monkeypatch.syspath_prepend(str(tmp_path))
    return tmp_path


class TestResolveHandler:
    def test_function_in_connection_module(self, service_root):
        write_module(service_root, "svc_plain/__init__.py", "")
        write_module(
            service_root,
            "svc_plain/connection.py",
            """
            def connect(props):
                return ("connected", props["host"])
            """,
        )

        handler = resolve_handler("svc_plain", "connect")

        assert handler({"host": "db"}) == ("connected", "db")

    def test_submodule_with_named_export(self, service_root):
        write_module(service_root, "svc_pkg/__init__.py", "")
        write_module(service_root, "svc_pkg/connection/__init__.py", "")
        write_module(
            service_root,
            "svc_pkg/connection/open_db.py",
            """
            def open_db(props):
                return "opened"
            """,
        )

        assert resolve_handler("svc_pkg", "open_db")({}) == "opened"

    def test_submodule_with_default_export(self, service_root):
        write_module(service_root, "svc_default/__init__.py", "")
        write_module(service_root, "svc_default/connection/__init__.py", "")
        write_module(
            service_root,
            "svc_default/connection/ensure.py",
            """
            async def _ensure(props):
                return None

            default = _ensure
            """,
        )

        handler = resolve_handler("svc_default", "ensure")

        assert handler.__name__ == "_ensure"

    def test_object_with_default_attribute(self, service_root):
        write_module(service_root, "svc_wrapped/__init__.py", "")
        write_module(
            service_root,
            "svc_wrapped/connection.py",
            """
            class _Wrapper:
                @staticmethod
                def default(props):
                    return "wrapped"

            disconnect = _Wrapper()
            """,
        )

        assert resolve_handler("svc_wrapped", "disconnect")({}) == "wrapped"

    def test_missing_service_module(self, service_root):
        with pytest.raises(HandlerResolutionError) as exc_info:
            resolve_handler("svc_does_not_exist", "connect")

        assert exc_info.value.service_path == "svc_does_not_exist"
        assert exc_info.value.handler_name == "connect"

    def test_missing_handler(self, service_root):
        write_module(service_root, "svc_empty/__init__.py", "")
        write_module(service_root, "svc_empty/connection.py", "VALUE = 1\n")

        with pytest.raises(HandlerResolutionError, match="svc_empty.connection.connect"):
            resolve_handler("svc_empty", "connect")

    def test_non_callable_handler(self, service_root):
        write_module(service_root, "svc_value/__init__.py", "")
        write_module(service_root, "svc_value/connection.py", "connect = 42\n")

        with pytest.raises(HandlerResolutionError):
            resolve_handler("svc_value", "connect")

    @pytest.mark.parametrize("service_path", [None, ""])
    def test_empty_service_path(self, service_path):
        with pytest.raises(HandlerResolutionError):
            resolve_handler(service_path, "connect")

    def test_bundled_redis_service(self):
        from src.connection_hub.services.redis_store import connection

        assert resolve_handler("src.connection_hub.services.redis_store", "connect") is (
            connection.connect
        )
