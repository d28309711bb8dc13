# routers/__init__.py
from .properties import router as properties_router
from .tenants import router as tenants_router
from .leases import router as leases_router
from .transactions import router as transactions_router
from .maintenance import router as maintenance_router
from .documents import router as documents_router
from .health import router as health_router

all_routers = [
     properties_router,
     tenants_router,
     leases_router,
     transactions_router,
     maintenance_router,
     documents_router,
     health_router,
]

__all__ = ["all_routers"]
