"""
Endpoint modules.

Each module defines an ``APIRouter`` for one collection (or for
uploads).  Collection routes follow the original URL scheme: the list
is served under the plural name and single records under the singular
name, e.g. ``GET /destinations`` and ``GET /destination/{id}``.
"""
