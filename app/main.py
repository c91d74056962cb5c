from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from contextlib import asynccontextmanager

from app.core.search_service import SearchService
from app.api.routes import search
from app.api.errors import search_error_handler
from app.core.exceptions import SearchError


@asynccontextmanager
async def lifespan(app: FastAPI):
    # tests may install a pre-loaded service before startup
    if getattr(app.state, "search_service", None) is None:
        app.state.search_service = SearchService()
        app.state.search_service.load_data()
    yield


app = FastAPI(
    title="User Search",
    lifespan=lifespan,
)


@app.get("/", response_class=PlainTextResponse)
def hello_world():
    return "Hello World"


app.include_router(search.router, prefix="/search", tags=["search"])
app.add_exception_handler(SearchError, search_error_handler)
