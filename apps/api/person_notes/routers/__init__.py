from .persons import router as persons_router

ROUTERS = (persons_router,)

__all__ = ["ROUTERS", "persons_router"]
