import io

from mdstore.navigation import DEFAULT_DATA_PATH, Session, go_to
from mdstore.render import Renderer


def _session(keys=None):
    stream = io.StringIO()
    out = Renderer(stream)
    session = Session(out, keys or iter([]).__next__, "products.dat")
    return session, out, stream


def test_go_to_repeats_until_page_returns_true():
    results = iter([0, 0, 1, 0])
    session, out, stream = _session()
    seen = []

    def page(current):
        seen.append(current)
        out.p("page")
        return next(results)

    assert go_to(page, session) is None
    assert stream.getvalue() == "page\npage\npage\n"
    assert out.height == 3
    assert all(current is session for current in seen)


def test_go_to_returns_after_single_true():
    session, out, stream = _session()

    def page(current):
        out.p("once")
        return True

    assert go_to(page, session) is None
    assert stream.getvalue() == "once\n"
    assert out.height == 1


def test_go_to_nested_pages():
    inner_results = iter([False, True])
    session, out, stream = _session()

    def inner(current):
        out.p("inner")
        return next(inner_results)

    def outer(current):
        out.p("outer")
        go_to(inner, current)
        return True

    assert go_to(outer, session) is None
    assert stream.getvalue().splitlines() == ["outer", "inner", "inner"]
    assert out.height == 3


def test_session_uses_given_key_source():
    session, _, _ = _session(iter([10, 27]).__next__)
    assert [session.keys(), session.keys()] == [10, 27]
    assert session.data_path == "products.dat"
    assert session.products is None


def test_session_default_data_path():
    session = Session(Renderer(io.StringIO()), iter([]).__next__)
    assert session.data_path == DEFAULT_DATA_PATH