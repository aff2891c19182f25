import os


def _read_origins(value: str) -> list[str]:
    return [origin.strip() for origin in value.split(',') if origin.strip() != '']


class Settings:
    LOG_LEVEL: str = os.getenv('GEOJSON_LOG_LEVEL', 'INFO').upper()

    # 0 disables the guard on nested GeometryCollection depth
    MAX_COLLECTION_DEPTH: int = int(os.getenv('GEOJSON_MAX_COLLECTION_DEPTH', '0'))

    CORS_ORIGINS: list[str] = _read_origins(os.getenv(
        'GEOJSON_CORS_ORIGINS',
        'http://localhost:5173,https://localhost:5173,http://localhost:3000,https://localhost:3000',
    ))
