from __future__ import annotations

"""
Path Rewriting Helpers.

Translate filesystem paths into public URLs (article root stripped, URL
root prepended) and derive the short labels used for directory links.
"""

from typing import Optional


def dir2url(path: str, article_root: Optional[str], url_root: str) -> str:
    """
    Rewrite a filesystem path into its public URL.

    A leading article_root is stripped and url_root is prepended. When
    article_root is unset the path is used as given.

    Re-applying the rewrite is a no-op: a value equal to url_root, or
    url_root followed by '/', is taken as already rewritten. A filesystem
    path outside article_root that itself has that shape (url_root '/menu'
    and path '/menu/x') is indistinguishable from a rewritten one and is
    also returned unchanged.

    Args:
        path: Filesystem path (or an already rewritten URL).
        article_root: Filesystem prefix representing the site root.
        url_root: Public base URL.

    Returns:
        str: The rewritten URL.
    """
    if article_root and path.startswith(article_root):
        return url_root + path[len(article_root):]
    if _is_rewritten(path, url_root):
        return path
    return url_root + path


def _is_rewritten(path: str, url_root: str) -> bool:
    # Stripping an article root leaves '' or '/...' behind url_root
    if not path.startswith(url_root):
        return False
    rest = path[len(url_root):]
    return rest == "" or rest.startswith("/")


def dir2txt(path: str, url_root: str, url_root_text: str, top_dir_text: str) -> str:
    """
    Derive the display label of a directory URL.

    Returns url_root_text for the URL root itself, the last path segment
    when there is one, and top_dir_text otherwise.
    """
    if path == url_root:
        return url_root_text
    if "/" in path:
        last = path.rsplit("/", 1)[1]
        if last:
            return last
    return top_dir_text
