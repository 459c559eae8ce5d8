from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.storage import Storage
from app.middleware import add_request_id_and_process_time
from app.utils.broadcast import ConnectionManager
from app.routes.service_route import service_router
from app.routes.service_addon_route import service_addon_router
from app.routes.availability_route import availability_router
from app.routes.booking_route import booking_router
from app.routes.message_route import message_router, ws_router
from app.routes.ai_route import ai_router
from app.routes.user_route import user_router


def create_app(storage: Optional[Storage] = None) -> FastAPI:
    app = FastAPI(
        title="Booking API",
        version="1.0.0",
        description="Bookings, service catalogue, client messaging and AI persona settings for a small business.",
    )
    app.state.storage = storage or Storage()
    app.state.broadcaster = ConnectionManager()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(add_request_id_and_process_time)

    @app.get("/", status_code=200)
    async def home():
        return {"message": "Welcome to the Booking API"}

    @app.get("/api/health", status_code=200)
    async def health():
        return {"status": "ok"}

    app.include_router(service_router, prefix="/api", tags=["Services"])
    app.include_router(service_addon_router, prefix="/api", tags=["Service Add-ons"])
    app.include_router(availability_router, prefix="/api", tags=["Availability"])
    app.include_router(booking_router, prefix="/api", tags=["Bookings"])
    app.include_router(message_router, prefix="/api", tags=["Messages"])
    app.include_router(ai_router, prefix="/api", tags=["AI"])
    app.include_router(user_router, prefix="/api", tags=["Users"])
    app.include_router(ws_router)
    return app


app = create_app()
