import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Ensure all SQLAlchemy models are imported so metadata is complete
import ministry_admin.models  # noqa: F401
from ministry_admin import __version__
from ministry_admin.api import analytics, church_events, churches, contact, members, ministers
from ministry_admin.api.ministry_reference import ranks_router, skills_router
from ministry_admin.api.system import router as system_router
from ministry_admin.errors import install_error_handlers

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

DEFAULT_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173,http://127.0.0.1:5173"

app = FastAPI(title=os.getenv("APP_NAME", "Ministry Admin Backend"), version=__version__)

# --- CORS for the admin frontend ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in os.getenv("CORS_ORIGINS", DEFAULT_ORIGINS).split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

install_error_handlers(app)

# Routers
app.include_router(system_router)  # /health, /version

app.include_router(churches.router)       # /api/churches (+ scoped members/ministers, stats)
app.include_router(members.router)        # /api/members
app.include_router(ministers.router)      # /api/ministers (+ /{id}/{collection})
app.include_router(ranks_router)          # /api/ministry-ranks
app.include_router(skills_router)         # /api/ministry-skills
app.include_router(church_events.router)  # /api/church-events
app.include_router(contact.router)        # /api/contact
app.include_router(analytics.router)      # /api/analytics
