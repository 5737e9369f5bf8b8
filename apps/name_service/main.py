"""HTTP entry point for the name service.

Three routes share one :class:`apps.name_service.NameHandler`.  Every
response is a ``NameResponse`` envelope with status 200; failures are carried
by the envelope's ``success`` flag.
"""

from typing import Optional

import uvicorn
from fastapi import FastAPI, Request

from apps.name_service import NameHandler
from lib.config.name_service_loader import NameServiceConfig, load_name_service_config
from lib.contracts.envelope import NameResponse
from lib.telemetry.logger import configure_logging, get_logger

log = get_logger(__name__)


def create_app(cfg: Optional[NameServiceConfig] = None, handler: Optional[NameHandler] = None) -> FastAPI:
    cfg = cfg or NameServiceConfig()
    handler = handler or NameHandler.from_config(cfg)
    app = FastAPI(title="Name Service")
    app.state.config = cfg
    app.state.handler = handler

    @app.get("/", response_model=NameResponse)
    async def default_name():
        """Return a name built around the default base."""

        return handler.default_name()

    @app.get("/{name:path}", response_model=NameResponse)
    async def named_from_path(name: str):
        """Return a name built around the rest of the path, slashes included."""

        return handler.named_from_path({"name": name})

    @app.post("/", response_model=NameResponse)
    async def named_from_body(request: Request):
        """Return a name built around the ``name`` field of the JSON body."""

        return handler.named_from_body(await request.body())

    return app


config = load_name_service_config()
app = create_app(config)


def main() -> None:
    configure_logging(config.log_level)
    log.info("Name service listening on http://%s:%d", config.host, config.port)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
