# app/routers/greeting.py
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app.services.greeter import greeting
from app.settings import Settings, get_settings

router = APIRouter(tags=["greeting"])


@router.get("/", response_class=PlainTextResponse, summary="Static greeting")
async def hello_world(settings: Settings = Depends(get_settings)):
    return greeting(settings)
