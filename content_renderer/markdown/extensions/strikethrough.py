# content_renderer/markdown/extensions/strikethrough.py
"""
``~~text~~`` → ``<del>text</del>``

Python-Markdown has no strikethrough of its own.
"""

from markdown.extensions import Extension
from markdown.inlinepatterns import SimpleTagInlineProcessor

STRIKETHROUGH_RE = r"(~{2})(?!~)(.+?)(?<!~)~{2}"


class StrikethroughExtension(Extension):
    def extendMarkdown(self, md):
        # Ahead of emphasis so ``~~**x**~~`` nests correctly
        md.inlinePatterns.register(
            SimpleTagInlineProcessor(STRIKETHROUGH_RE, "del"), "strikethrough", 65
        )


def makeExtension(**kwargs):
    return StrikethroughExtension(**kwargs)
