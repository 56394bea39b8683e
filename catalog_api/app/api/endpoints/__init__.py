"""
Endpoint subpackage.

Each module in this package defines an APIRouter for one resource
kind (users, products) or for the static informational routes.  The
routers are aggregated in ``router.py`` at the package level and then
included in the main application.
"""
