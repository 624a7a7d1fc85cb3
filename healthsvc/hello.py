from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from healthsvc.schemas import HELLO_BODY
from healthsvc.server import serve


def create_app() -> FastAPI:
    app = FastAPI(title="healthsvc-hello", docs_url=None, redoc_url=None, openapi_url=None)

    @app.get("/", response_class=PlainTextResponse)
    def root() -> str:
        return HELLO_BODY

    return app


app = create_app()


def main() -> None:
    serve(app)


if __name__ == "__main__":
    main()
