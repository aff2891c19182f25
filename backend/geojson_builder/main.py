import logging

from geojson_builder.core.exceptions import InvalidGeometry
from geojson_builder.core.settings import Settings
from geojson_builder.routers import geometry as geometry_router
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse


logging.basicConfig(level=Settings.LOG_LEVEL, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
logger = logging.getLogger(__name__)


app = FastAPI(title='geojson-builder')

app.add_middleware(
    CORSMiddleware,
    allow_origins=Settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"], # Allows all methods
    allow_headers=["*"], # Allows all headers
)

app.include_router(geometry_router.api_router, prefix='/geometries', tags=['geometry'])


@app.exception_handler(InvalidGeometry)
async def invalid_geometry_handler(request: Request, exc: InvalidGeometry):
    logger.warning('Rejected %s: %s', request.url.path, exc)
    return JSONResponse(
        status_code=422,
        content={'detail': {'message': str(exc), 'rule': exc.rule, 'count': exc.count, 'path': list(exc.path)}},
    )
