# winway/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from winway.catalog.routes import router as catalog_router
from winway.core.config import get_settings
from winway.core.database import init_db
from winway.core.logging import configure_logging
from winway.desk_ticket.routes import router as desk_ticket_router
from winway.my_night.routes import router as my_night_router
from winway.profile.routes import router as profile_router
from winway.service_request.routes import router as service_request_router

settings = get_settings()
configure_logging(settings.LOG_LEVEL)
init_db()

app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESC,
    version=settings.APP_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(catalog_router)
app.include_router(service_request_router)
app.include_router(desk_ticket_router)
app.include_router(profile_router)
app.include_router(my_night_router)

@app.get("/health", tags=["Health"])
def health():
    return {"status": "ok"}
