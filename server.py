from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from videotube.api.responses import ApiResponse, register_exception_handlers
from videotube.api.v1.endpoints.videos import router as video_router
from videotube.config import get_settings
from videotube.logging_config import setup_logging


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title="VideoTube Backend API")

    # Setup CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Register routers
    app.include_router(video_router)

    @app.get("/")
    async def root():
        return ApiResponse(200, {"status": "ok"}, "VideoTube Backend is running").to_response()

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=get_settings().port)
