"""Tests for wren.cli._resolve — finding the Router behind MODULE[:ATTR]."""

import sys
import types

import pytest

from wren.cli._resolve import RouterLookupError, describe, resolve_router
from wren.routing.router import Router


def _install(monkeypatch: pytest.MonkeyPatch, name: str, **attrs: object) -> types.ModuleType:
    mod = types.ModuleType(name)
    for key, value in attrs.items():
        setattr(mod, key, value)
    monkeypatch.setitem(sys.modules, name, mod)
    return mod


class TestExplicitAttribute:
    def test_router_instance(self, monkeypatch: pytest.MonkeyPatch) -> None:
        api = Router()
        _install(monkeypatch, "_wren_explicit", api=api)
        assert resolve_router("_wren_explicit:api") is api

    def test_factory_called(self, monkeypatch: pytest.MonkeyPatch) -> None:
        built = Router()
        _install(monkeypatch, "_wren_factory", make=lambda: built)
        assert resolve_router("_wren_factory:make") is built

    def test_factory_returning_other_type(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _install(monkeypatch, "_wren_bad_factory", make=lambda: 42)
        with pytest.raises(RouterLookupError, match=r"returned int, expected a Router"):
            resolve_router("_wren_bad_factory:make")

    def test_factory_exception_propagates(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def make() -> Router:
            raise ValueError("no config")

        _install(monkeypatch, "_wren_raising", make=make)
        with pytest.raises(ValueError, match="no config"):
            resolve_router("_wren_raising:make")

    def test_non_router_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _install(monkeypatch, "_wren_str", router="just a string")
        with pytest.raises(RouterLookupError, match=r"is a str, expected a Router"):
            resolve_router("_wren_str:router")

    def test_missing_attribute(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _install(monkeypatch, "_wren_empty_attr")
        with pytest.raises(RouterLookupError, match="no attribute 'nope'"):
            resolve_router("_wren_empty_attr:nope")


class TestModuleSearch:
    def test_prefers_router_name(self, monkeypatch: pytest.MonkeyPatch) -> None:
        main = Router()
        _install(monkeypatch, "_wren_pref", router=main, admin=Router())
        assert resolve_router("_wren_pref") is main

    def test_single_router_any_name(self, monkeypatch: pytest.MonkeyPatch) -> None:
        links = Router()
        _install(monkeypatch, "_wren_single", links=links, other="x")
        assert resolve_router("_wren_single") is links

    def test_private_names_skipped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        links = Router()
        _install(monkeypatch, "_wren_private", links=links, _scratch=Router())
        assert resolve_router("_wren_private") is links

    def test_several_routers_ambiguous(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _install(monkeypatch, "_wren_many", api=Router(), admin=Router())
        with pytest.raises(RouterLookupError, match=r"several Routers \(admin, api\)"):
            resolve_router("_wren_many")

    def test_no_router(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _install(monkeypatch, "_wren_none", value=1)
        with pytest.raises(RouterLookupError, match="defines no Router"):
            resolve_router("_wren_none")

    def test_missing_module(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            resolve_router("nonexistent_module_xyz")


class TestDescribe:
    def test_counts_and_state(self) -> None:
        r = Router()
        r.add_alias("id", "[0-9]+")
        r.register(["/a/{id}", "/b/{id}"], lambda url, route, params: None)
        assert describe(r) == "2 template(s), 1 route(s), 1 alias(es), open"
        r.freeze()
        assert describe(r).endswith(", frozen")
