"""Tests for the tag-transforming sanitizer."""

import pytest

from content_renderer.exceptions import ConfigurationError
from content_renderer.markdown.postprocessors.sanitizer import TagTransformingSanitizer

from .conftest import make_options

MIXED_HTML = (
    '<html><p>Hi <a href="https://other.org/x">there</a> <a href="/local">local</a> '
    '<img src="https://example.com/i.png" alt="i"> <b onclick="x()">bold</b>'
    "<style>p { color: red }</style> <custom>unwrapped</custom> "
    '<a href="https://steewit.com">bad</a> <a data-hashtag="Hive">#hive</a></p></html>'
)


class TestAllowList:
    def test_allowed_markup_kept(self, sanitizer):
        html = "<h1>Title</h1><p>Text with <em>emphasis</em> and <strong>bold</strong>.</p>"
        assert sanitizer.sanitize(html) == html

    def test_disallowed_tag_unwrapped(self, sanitizer):
        assert sanitizer.sanitize("<p><custom>kept text</custom></p>") == "<p>kept text</p>"

    @pytest.mark.parametrize("tag", ["style", "iframe", "object", "textarea", "svg", "form"])
    def test_dangerous_tag_dropped_with_content(self, sanitizer, tag):
        out = sanitizer.sanitize(f"<p>ok</p><{tag}>secret</{tag}>")
        assert "secret" not in out
        assert f"<{tag}" not in out
        assert "<p>ok</p>" in out

    def test_disallowed_attributes_removed(self, sanitizer):
        assert sanitizer.sanitize('<p onclick="alert(1)" style="x">Click</p>') == "<p>Click</p>"

    def test_comments_removed(self, sanitizer):
        assert "<!--" not in sanitizer.sanitize("<p>a<!-- note -->b</p>")

    def test_script_left_for_security_gate(self, sanitizer):
        out = sanitizer.sanitize("<p>a</p><script>alert(1)</script>")
        assert "<script>" in out

    def test_html_root_preserved(self, sanitizer):
        assert sanitizer.sanitize("<html><p>x</p></html>") == "<html><p>x</p></html>"

    def test_idempotent(self, sanitizer):
        once = sanitizer.sanitize(MIXED_HTML)
        assert sanitizer.sanitize(once) == once

    def test_idempotent_with_css_classes(self):
        sanitizer = TagTransformingSanitizer(
            make_options(css_class_for_external_links="ext", css_class_for_internal_links="int")
        )
        once = sanitizer.sanitize(MIXED_HTML)
        assert sanitizer.sanitize(once) == once


class TestLinks:
    def test_external_link_attributes(self, sanitizer):
        out = sanitizer.sanitize('<a href="https://other.org/x">x</a>')
        assert 'href="https://other.org/x"' in out
        assert 'target="_blank"' in out
        assert 'rel="nofollow noopener"' in out
        assert 'title="This link will take you away from example.com"' in out

    def test_nofollow_and_target_toggles(self):
        sanitizer = TagTransformingSanitizer(
            make_options(add_nofollow_to_links=False, add_target_blank_to_links=False)
        )
        out = sanitizer.sanitize('<a href="https://other.org/x" target="_top" rel="opener">x</a>')
        assert "target" not in out
        assert "rel=" not in out

    def test_internal_link_attributes(self):
        sanitizer = TagTransformingSanitizer(make_options(css_class_for_internal_links="internal"))
        out = sanitizer.sanitize('<a href="/@alice" target="_blank">alice</a>')
        assert 'class="internal"' in out
        assert "target" not in out
        assert "title" not in out

    def test_css_classes_by_classification(self):
        sanitizer = TagTransformingSanitizer(
            make_options(css_class_for_internal_links="int", css_class_for_external_links="ext")
        )
        out = sanitizer.sanitize(
            '<a href="https://blog.example.com/p">a</a><a href="https://other.org">b</a>'
        )
        internal, external = out.split("</a>")[:2]
        assert 'class="int"' in internal
        assert 'class="ext"' in external

    def test_external_class_predicate(self):
        sanitizer = TagTransformingSanitizer(
            make_options(
                css_class_for_external_links="ext",
                add_external_css_class_to_matching_links_fn=lambda url: "/outbound/" in url,
            )
        )
        out = sanitizer.sanitize('<a href="/outbound/x">x</a>')
        assert 'class="ext"' in out

    def test_protocol_less_link_gets_https(self, sanitizer):
        assert 'href="https://other.org/page"' in sanitizer.sanitize('<a href="other.org/page">x</a>')

    def test_javascript_link_neutralized(self, sanitizer):
        out = sanitizer.sanitize('<a href="javascript:alert(1)">x</a>')
        assert 'href="javascript:' not in out

    def test_phishing_link_defanged(self, sanitizer, localization):
        out = sanitizer.sanitize('<p><a href="https://steewit.com/x"><b>free</b> money</a></p>')
        assert out == f'<p><span class="phishy">free money [{localization.phishing_warning}]</span></p>'

    def test_is_link_safe_fn_rejects(self):
        sanitizer = TagTransformingSanitizer(make_options(is_link_safe_fn=lambda url: "blocked" not in url))
        out = sanitizer.sanitize('<a href="https://blocked.org">x</a><a href="https://fine.org">y</a>')
        assert "blocked.org" not in out
        assert "fine.org" in out
        assert out.count('class="phishy"') == 1

    def test_tagged_links_rewritten(self):
        sanitizer = TagTransformingSanitizer(
            make_options(
                hashtag_url_fn=lambda tag: f"/created/{tag}",
                usertag_url_fn=lambda account: f"/profile/{account}",
            )
        )
        out = sanitizer.sanitize(
            '<a data-hashtag="Hive" href="https://evil.test">#Hive</a> <a data-usertag="alice">@alice</a>'
        )
        assert 'href="/created/hive"' in out
        assert 'href="/profile/alice"' in out
        assert "data-" not in out
        assert "evil.test" not in out

    def test_mailto_never_kept_as_mailto(self, sanitizer):
        out = sanitizer.sanitize('<a href="mailto:a@b.org">mail</a>')
        assert 'href="mailto:' not in out

    def test_anchor_without_href_kept(self, sanitizer):
        assert sanitizer.sanitize("<p><a>name</a></p>") == "<p><a>name</a></p>"


class TestImages:
    def test_image_proxied(self):
        sanitizer = TagTransformingSanitizer(
            make_options(image_proxy_fn=lambda url: f"https://proxy.test/0x0/{url}")
        )
        out = sanitizer.sanitize('<img src="https://x.test/a.png" alt="a">')
        assert 'src="https://proxy.test/0x0/https://x.test/a.png"' in out

    def test_image_with_executable_src_removed(self, sanitizer):
        out = sanitizer.sanitize('<p>a<img src="javascript:alert(1)">b</p>')
        assert "<img" not in out
        assert out == "<p>ab</p>"

    def test_image_without_src_removed(self, sanitizer):
        assert sanitizer.sanitize("<p><img alt='x'></p>") == "<p></p>"

    def test_images_suppressed(self, localization):
        sanitizer = TagTransformingSanitizer(make_options(do_not_show_images=True))
        out = sanitizer.sanitize('<p><img src="https://x.test/a.png"><img src="::bad::"></p>')
        assert "<img" not in out
        assert out.count(localization.no_image) == 2


class TestConstruction:
    def test_missing_options(self):
        with pytest.raises(ConfigurationError):
            TagTransformingSanitizer(None)

    def test_wrong_localization_type(self, options):
        with pytest.raises(ConfigurationError):
            TagTransformingSanitizer(options, {"noImage": "x"})
