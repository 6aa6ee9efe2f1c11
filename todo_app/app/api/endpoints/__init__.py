"""
Endpoint subpackage.

Each module defines an APIRouter for one concern.  JSON routers are
aggregated in ``router.py``; ``pages`` is included by the application
directly because it is not part of the ``/api`` prefix.
"""
