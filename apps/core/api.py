"""Health endpoints. No state, no auth, no failure modes."""
from django.http import HttpRequest
from ninja import Router

from .schemas import MessageOut

router = Router(tags=["Health"])


@router.get("/ping", response=MessageOut, auth=None)
def ping(request: HttpRequest):
    return {"message": "pong"}


@router.get("/sayhello", response=MessageOut, auth=None)
def sayhello(request: HttpRequest):
    return {"message": "hello"}
