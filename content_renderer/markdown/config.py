from .extensions import StrikethroughExtension


def get_markdown_config(breaks: bool = True):
    """
    Configuration for the Python-Markdown conversion step.

    Raw HTML is passed through untouched (the sanitizer runs later) and
    smart typography stays off: the ``smarty`` extension is never loaded,
    so quotes and dashes inside code spans keep their exact characters.
    """
    extensions = [
        "fenced_code",
        "tables",
        "sane_lists",
        StrikethroughExtension(),
    ]
    if breaks:
        # single newlines become <br>
        extensions.append("nl2br")

    return {
        "extensions": extensions,
        "output_format": "html",
    }
