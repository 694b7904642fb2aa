"""
API route modules.
"""

from .expand import router as expand_router
from .charts import router as charts_router
from .units import router as units_router

__all__ = ['expand_router', 'charts_router', 'units_router']
