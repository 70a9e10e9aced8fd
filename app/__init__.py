from fastapi import FastAPI
from .api import routes_formula, routes_utils

def create_app() -> FastAPI:
    """App factory to create FastAPI instance."""
    app = FastAPI(
        title="Propositional Formula API",
        description="Parses propositional formulas, simplifies them and translates them to conjunction/negation form.",
        version="1.0.0"
    )

    # Register API routers
    app.include_router(routes_utils.router, prefix="/api/utils", tags=["Utils"])
    app.include_router(routes_formula.router, prefix="/api/formula", tags=["Formula"])

    return app
