from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from linebot.v3.exceptions import InvalidSignatureError

from app.api.routes import router
from app.assets.startup import init_vocabulary_for_app

# Configure logging
logging.basicConfig(level=logging.DEBUG)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    init_vocabulary_for_app()
    yield


app = FastAPI(title="shiritori-bot", version="0.1.0", lifespan=_lifespan)
app.include_router(router)


@app.exception_handler(InvalidSignatureError)
async def _invalid_signature(request: Request, exc: InvalidSignatureError) -> JSONResponse:
    # Anything not signed by LINE (including non-LINE traffic) stops here.
    logger.warning("Rejected webhook on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content={"result": "署名検証に失敗しました"})


@app.get("/info")
async def info() -> dict[str, str]:
    return {"name": "shiritori-bot", "version": "0.1.0"}
