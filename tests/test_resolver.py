"""Tests for proxypass.resolver module."""

import pytest

from proxypass.resolver import BaseContext, base_context, resolve


@pytest.fixture
def base():
    return base_context("https://a.com/dir/page.html")


class TestBaseContext:
    def test_origin_and_protocol(self, base):
        assert base.origin == "https://a.com"
        assert base.protocol == "https:"

    def test_directory_keeps_trailing_slash(self, base):
        assert base.directory == "https://a.com/dir/"

    def test_bare_host(self):
        assert base_context("https://a.com").directory == "https://a.com/"

    def test_directory_path_ignores_query(self):
        ctx = base_context("https://a.com/search?q=a/b")
        assert ctx.directory == "https://a.com/"

    def test_port_kept_in_origin(self):
        assert base_context("http://a.com:8080/x/y").origin == "http://a.com:8080"

    def test_userinfo_dropped_from_origin(self):
        assert base_context("https://user:pw@a.com/x").origin == "https://a.com"

    def test_relative_url_rejected(self):
        with pytest.raises(ValueError):
            base_context("a.com/page")


class TestResolve:
    @pytest.mark.parametrize("reference", [
        "http://b.com/x",
        "https://b.com/x?y=1#z",
    ])
    def test_absolute_unchanged(self, base, reference):
        assert resolve(reference, base) == reference

    @pytest.mark.parametrize("reference", [
        "",
        "#section",
        "data:image/png;base64,AAAA",
        "javascript:void(0)",
    ])
    def test_passthrough_unchanged(self, base, reference):
        assert resolve(reference, base) == reference

    def test_protocol_relative(self, base):
        assert resolve("//cdn.a.com/lib.js", base) == "https://cdn.a.com/lib.js"

    def test_protocol_relative_http_base(self):
        ctx = base_context("http://a.com/")
        assert resolve("//cdn.a.com/lib.js", ctx) == "http://cdn.a.com/lib.js"

    def test_root_relative_ignores_path_depth(self):
        ctx = base_context("https://a.com/one/two/three/page.html")
        assert resolve("/path", ctx) == "https://a.com/path"

    def test_path_relative(self, base):
        assert resolve("img.png", base) == "https://a.com/dir/img.png"

    def test_parent_segments(self):
        ctx = base_context("https://a.com/dir/sub/page.html")
        assert resolve("../up.png", ctx) == "https://a.com/dir/up.png"

    def test_dot_segment(self, base):
        assert resolve("./here.html", base) == "https://a.com/dir/here.html"

    def test_failure_returns_reference(self):
        broken = BaseContext(
            origin="https://a.com",
            protocol="https:",
            directory="https://[::1/",
        )
        assert resolve("img.png", broken) == "img.png"
