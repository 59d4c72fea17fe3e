import pytest

from catlog import Category, LogDispatcher, Sink

DEBUG_TAG = "\x1b[33m[DEBUG]:\x1b[0m"
ERROR_TAG = "\x1b[31m[ERROR]:\x1b[0m"
SUCCESS_TAG = "\x1b[32m[SUCCESS]:\x1b[0m"


def emit_all(d: LogDispatcher) -> None:
    d.info("i")
    d.debug("fn", "d")
    d.error("a.py", "fn", 1, "e")
    d.success("fn")


def test_error_example_goes_to_stderr(capsys):
    d = LogDispatcher(categories=[Category.ERROR])
    d.error("a.cpp", "foo", 10, "bad", "input")
    out = capsys.readouterr()
    assert out.out == ""
    assert out.err == f"{ERROR_TAG} a.cpp : 10 : foo : bad input \n"


def test_info_example_has_no_tag_or_timestamp(capsys):
    d = LogDispatcher(categories=[Category.INFO])
    d.info(1, 2, 3)
    out = capsys.readouterr()
    assert out.out == "1 2 3 \n"
    assert out.err == ""


def test_debug_and_success_render_colored_tags_on_stdout(capsys):
    d = LogDispatcher()
    d.debug("load", "x", 42)
    d.success("init")
    out = capsys.readouterr().out
    assert out == f"{DEBUG_TAG} load : x 42 \n{SUCCESS_TAG} init \n"


def test_wildcard_lets_every_category_through(capsys):
    d = LogDispatcher(categories=[Category.ALL])
    emit_all(d)
    out = capsys.readouterr()
    assert out.out.count("\n") == 3
    assert out.err.count("\n") == 1


@pytest.mark.parametrize("enabled", [[], [Category.INFO], [Category.DEBUG, Category.SUCCESS]])
def test_disabled_categories_write_nothing(capsys, enabled):
    d = LogDispatcher(categories=enabled)
    d.error("a.py", "fn", 1, "e")
    if Category.INFO not in enabled:
        d.info("i")
    out = capsys.readouterr()
    assert out.err == ""
    if Category.INFO not in enabled:
        assert out.out == ""


def test_set_enabled_categories_replaces_rather_than_adds(capsys):
    d = LogDispatcher()
    d.set_enabled_categories(Category.DEBUG)
    d.set_enabled_categories([Category.INFO])
    d.debug("fn", "hidden")
    d.info("shown")
    assert capsys.readouterr().out == "shown \n"
    assert d.enabled.categories == frozenset({Category.INFO})


def test_empty_reconfiguration_silences_everything(capsys):
    d = LogDispatcher()
    d.set_enabled_categories()
    emit_all(d)
    out = capsys.readouterr()
    assert out.out == "" and out.err == ""


def test_none_sink_suppresses_regardless_of_filter(capsys):
    d = LogDispatcher(categories=[Category.ALL])
    d.set_sink(Sink.NONE)
    emit_all(d)
    out = capsys.readouterr()
    assert out.out == "" and out.err == ""
    d.set_sink("console")
    d.info("back")
    assert capsys.readouterr().out == "back \n"


def test_filtered_record_is_never_rendered(capsys):
    class Exploding:
        def __str__(self) -> str:  # pragma: no cover - must not be called
            raise AssertionError("rendered a suppressed record")

    d = LogDispatcher(categories=[Category.ERROR])
    d.info(Exploding())
    d.set_sink(Sink.NONE)
    d.error("a.py", "fn", 1, Exploding())
    assert capsys.readouterr().out == ""


def test_render_failure_is_swallowed(capsys):
    class Broken:
        def __str__(self) -> str:
            raise RuntimeError("boom")

    d = LogDispatcher()
    d.info("before", Broken())
    d.info("after")
    assert capsys.readouterr().out == "after \n"


def test_closed_stream_does_not_raise(monkeypatch):
    import io
    import sys

    stream = io.StringIO()
    stream.close()
    monkeypatch.setattr(sys, "stdout", stream)
    LogDispatcher().info("lost")


def test_detached_stdout_is_silently_skipped(monkeypatch):
    import sys

    monkeypatch.setattr(sys, "stdout", None)
    d = LogDispatcher()
    d.info("lost")
    d.success("fn")


def test_binary_stderr_does_not_raise(monkeypatch):
    import io
    import sys

    raw = io.BytesIO()
    monkeypatch.setattr(sys, "stderr", raw)
    LogDispatcher().error("a.py", "fn", 1, "lost")
    assert raw.getvalue() == b""


def test_value_that_logs_while_rendering_does_not_deadlock(capsys):
    d = LogDispatcher()

    class Chatty:
        def __str__(self) -> str:
            d.info("inner")
            return "outer"

    d.info(Chatty())
    assert capsys.readouterr().out == "inner \nouter \n"
