import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from healthtrack.config import CORS_ORIGINS, LOG_LEVEL
from healthtrack.routes.dashboard_routes import router as dashboard_router
from healthtrack.routes.health_routes import router as health_router

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Health Tracker Insights")


@app.get("/api/v1/health-check")
async def health():
    return {"status": "ok", "message": "Backend is alive!"}


app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(dashboard_router)
logger.info("Routers mounted: %s, %s", health_router.prefix, dashboard_router.prefix)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("healthtrack.main:app", host="0.0.0.0", port=8000, reload=True)
