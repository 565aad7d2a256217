# app/services/static_responder.py
from typing import Sequence, Mapping, Type

from fastapi import FastAPI
from pydantic import BaseModel

from app.api.routers.health import router as health_router


def create_static_app(
    title: str,
    records: Sequence[Mapping],
    response_model: Type[BaseModel],
    service_name: str,
) -> FastAPI:
    """
    Serwis zwracajacy stala kolekcje pod GET /.
    - zadnych parametrow z requestu
    - ta sama odpowiedz dla kazdego wywolania
    Linia "listening on port" jest logowana w app.utils.server.serve, po bind.
    """
    payload = [dict(r) for r in records]

    app = FastAPI(title=title, version="1.0.0")
    app.state.service_name = service_name

    @app.get(
        "/",
        response_model=list[response_model],
        response_model_exclude_none=True,
        tags=[service_name],
    )
    def list_records():
        return payload

    app.include_router(health_router)

    return app
