import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from prescripta import __version__
from prescripta.settings import API_DEBUG, API_HOST, API_PORT, LOG_FORMAT, LOG_LEVEL
from .case import router as case_router
from .reference import router as reference_router

logging.basicConfig(level="DEBUG" if API_DEBUG else LOG_LEVEL, format=LOG_FORMAT)

app = FastAPI(
    title="Prescripta API",
    version=__version__,
    description="HTTP layer over a single criminal case: procedural events, limitation windows and timeline.",
)

# --- CORS ----------------------------------------------------------
# Dev-only origins for the desk front end.
origins = [
    "http://localhost:5173",    # Vite dev server default port
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["GET", "PUT", "OPTIONS"],
    allow_headers=["Content-Type", "Accept"],
)

app.include_router(case_router)
app.include_router(reference_router)


# ---------- health-check ----------
@app.get("/")
def root():
    return {"status": "ok", "msg": "Prescripta API is alive"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.main:app", host=API_HOST, port=API_PORT, reload=API_DEBUG)
