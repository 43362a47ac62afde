import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, FastAPI, Header, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import Settings, get_settings
from database import UserStore
from errors import ComplaintPortalError
from logging_config import setup_logging
from schemas import Complaint, ComplaintEntry, LoginRequest, MessageResponse, User
from service import ComplaintService

logger = logging.getLogger(__name__)

SECRET_HEADER = "X-Secret-Code"


def create_app(settings: Optional[Settings] = None, store: Optional[UserStore] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings)

    if store is None:
        store = UserStore()
        if settings.seed_users:
            store.seed()

    app = FastAPI(title=settings.app_name)
    app.state.service = ComplaintService(store)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(build_router())
    return app


# --------- Errors ---------

def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ComplaintPortalError)
    async def portal_error(request: Request, exc: ComplaintPortalError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def invalid_payload(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": "Invalid request payload", "code": "INVALID_REQUEST"})

    @app.exception_handler(Exception)
    async def internal_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal server error", "code": "INTERNAL_ERROR"})


# --------- Routes ---------

def get_service(request: Request) -> ComplaintService:
    return request.app.state.service


def build_router():
    router = APIRouter()

    @router.get("/")
    def root(service: ComplaintService = Depends(get_service)):
        return {"service": "Complaint Portal API is running", "users": service.store.count()}

    @router.post("/login", response_model=User)
    def login(payload: LoginRequest, service: ComplaintService = Depends(get_service)):
        return service.login(payload.secret_code)

    @router.post("/register", response_model=User, status_code=201)
    def register(payload: User, service: ComplaintService = Depends(get_service)):
        return service.register_user(payload)

    @router.post("/submitComplaint", response_model=Complaint, status_code=201)
    def submit_complaint(
        payload: Complaint,
        secret_code: Optional[str] = Header(None, alias=SECRET_HEADER),
        service: ComplaintService = Depends(get_service),
    ):
        return service.submit_complaint(secret_code, payload)

    @router.get("/getAllComplaintsForUser", response_model=List[Complaint])
    def complaints_for_user(
        secret_code: Optional[str] = Header(None, alias=SECRET_HEADER),
        service: ComplaintService = Depends(get_service),
    ):
        return service.list_own_complaints(secret_code)

    @router.get("/getAllComplaintsForAdmin", response_model=List[ComplaintEntry])
    def complaints_for_admin(
        secret_code: Optional[str] = Header(None, alias=SECRET_HEADER),
        service: ComplaintService = Depends(get_service),
    ):
        return service.list_all_complaints(secret_code)

    @router.get("/viewComplaint", response_model=Complaint)
    def view_complaint(
        complaint_id: str = Query("", alias="id"),
        secret_code: Optional[str] = Header(None, alias=SECRET_HEADER),
        service: ComplaintService = Depends(get_service),
    ):
        return service.view_complaint(secret_code, complaint_id)

    @router.post("/resolveComplaint", response_model=MessageResponse)
    def resolve_complaint(
        complaint_id: str = Query("", alias="id"),
        secret_code: Optional[str] = Header(None, alias=SECRET_HEADER),
        service: ComplaintService = Depends(get_service),
    ):
        service.resolve_complaint(secret_code, complaint_id)
        return {"message": "Complaint resolved successfully"}

    return router


app = create_app()

if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
