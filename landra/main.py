import logging
import os

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
import uvicorn

from landra.config import APP_HOST, APP_PORT, DEBUG, LOG_LEVEL, UPLOAD_DIR
from landra.database.init import Base, engine
from landra.database import models  # noqa: F401  registers tables on Base.metadata
from landra.services.errors import first_error_message
from landra.responses.base import build_response
from landra.responses.error import bad_request_error, unauthorized_error
from landra.routes import (
    auth_routes,
    property_routes,
    unit_routes,
    tenant_routes,
    lease_routes,
    payment_routes,
    image_routes,
)

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

Base.metadata.create_all(bind=engine)

app = FastAPI(title="Landra API", debug=DEBUG)

os.makedirs(UPLOAD_DIR, exist_ok=True)
app.mount(f"/{UPLOAD_DIR}", StaticFiles(directory=UPLOAD_DIR), name=UPLOAD_DIR)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return bad_request_error(first_error_message(exc.errors()))


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    if exc.status_code == 401:
        return unauthorized_error(exc.detail)
    return build_response(exc.status_code, "failure", message=str(exc.detail))


app.include_router(auth_routes.router)
app.include_router(property_routes.router)
app.include_router(unit_routes.router)
app.include_router(tenant_routes.router)
app.include_router(lease_routes.router)
app.include_router(payment_routes.router)
app.include_router(image_routes.router)


@app.get("/")
def read_root():
    return {"name": "Landra API", "version": "1.0.0"}


if __name__ == "__main__":
    uvicorn.run("landra.main:app", host=APP_HOST, port=APP_PORT, reload=DEBUG)
