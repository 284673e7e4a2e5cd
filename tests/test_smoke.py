"""Smoke tests to verify package structure and imports work."""


def test_import_types():
    """Test that core types can be imported."""
    from pending_option import Err, Nothing, NothingType, Ok, Option, Result, Some, UnwrapError

    assert Ok is not None
    assert Err is not None
    assert Some is not None
    assert Nothing is not None
    assert NothingType is not None
    assert Option is not None
    assert Result is not None
    assert issubclass(UnwrapError, RuntimeError)


def test_import_factories():
    from pending_option import collect, from_nullable, none, pending_option, some

    assert some is not None
    assert none is not None
    assert from_nullable is not None
    assert collect is not None
    assert pending_option is not None


def test_import_async():
    """Test that async utilities can be imported."""
    from pending_option.async_ import (
        PendingOption,
        async_collect,
        async_filter_some,
        async_first_some,
        async_iter_some,
    )

    assert PendingOption is not None
    assert async_collect is not None
    assert async_filter_some is not None
    assert async_first_some is not None
    assert async_iter_some is not None


def test_import_decorators():
    from pending_option.decorators import safe, safe_async

    assert safe is not None
    assert safe_async is not None


def test_import_config():
    from pending_option import OptionConfig, get_config, init

    assert OptionConfig is not None
    assert get_config is not None
    assert init is not None


def test_all_exports_resolve():
    import pending_option

    for name in pending_option.__all__:
        assert hasattr(pending_option, name), name
