"""
Top‑level package for the Todo App.

The server lives in the ``app`` subpackage and can be imported with
fully qualified names such as ``todo_app.app.main``.  The browser page
is shipped as package data under ``app/static``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
