from __future__ import annotations

import builtins

import pytest

from sapperbench import host


@pytest.fixture
def clean_builtins(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in host.AMBIENT_NAMES:
        monkeypatch.setattr(builtins, name, None, raising=False)
        monkeypatch.delattr(builtins, name)


def _never_called(*_args, **_kwargs) -> None:
    raise AssertionError("listener must not be invoked")


ODD_ARGS = [
    (),
    (None,),
    ("", 0),
    ("key", object(), [1, 2, 3]),
    (b"\x00", float("nan"), {"a": 1}),
]


def test_install_publishes_ambient_names(clean_builtins) -> None:
    assert not host.installed()
    stub = host.install()
    assert host.installed()
    assert builtins.window is stub.window
    assert builtins.document is stub.document
    assert builtins.localStorage is stub.localStorage
    assert set(stub.bindings()) == {"window", "document", "localStorage"}


def test_install_twice_is_idempotent(clean_builtins) -> None:
    first = host.install()
    bound = {name: getattr(builtins, name) for name in host.AMBIENT_NAMES}
    second = host.install()
    assert first is second
    for name in host.AMBIENT_NAMES:
        assert getattr(builtins, name) is bound[name]
    assert builtins.window.devicePixelRatio == 1
    assert builtins.localStorage.getItem("k") is None


def test_installed_detects_replaced_binding(clean_builtins, monkeypatch) -> None:
    host.install()
    monkeypatch.setattr(builtins, "document", object())
    assert not host.installed()


def test_device_pixel_ratio_is_constant() -> None:
    window = host.stub().window
    assert window.devicePixelRatio == 1


@pytest.mark.parametrize("args", ODD_ARGS)
def test_storage_read_is_always_absent(args) -> None:
    storage = host.stub().localStorage
    assert storage.getItem(*args) is None


def test_storage_write_is_dropped() -> None:
    storage = host.stub().localStorage
    assert storage.setItem("best", "42") is None
    assert storage.getItem("best") is None
    assert storage.setItem() is None
    assert storage.setItem("k", "v", extra=True) is None


@pytest.mark.parametrize("args", ODD_ARGS)
def test_element_lookup_is_never_found(args) -> None:
    document = host.stub().document
    assert document.getElementById(*args) is None


@pytest.mark.parametrize(
    "hook",
    [
        lambda stub: stub.window.addEventListener,
        lambda stub: stub.window.requestAnimationFrame,
        lambda stub: stub.document.addEventListener,
    ],
)
def test_registration_hooks_never_invoke_listener(hook) -> None:
    register = hook(host.stub())
    assert register("resize", _never_called) is None
    assert register(_never_called) is None
    assert register("keydown", _never_called, {"passive": True}) is None
    assert register(listener=_never_called) is None
    assert register() is None


def test_stub_reprs_name_the_ambient_global() -> None:
    stub = host.stub()
    assert "window" in repr(stub.window)
    assert "document" in repr(stub.document)
    assert "localStorage" in repr(stub.localStorage)


def test_stub_accessor_matches_installed_record(clean_builtins) -> None:
    import sapperbench

    record = sapperbench.stub()
    assert not host.installed()
    assert sapperbench.install() is record
    assert record.bindings()["window"] is builtins.window
