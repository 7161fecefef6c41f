#!/usr/bin/env python3
"""
Servidor HTTP (REST API) de solo lectura sobre el cliente de contenido
Pensado para frontends que renderizan páginas a partir de WordPress headless
"""

import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from . import config
from .helpers import to_card
from .wordpress_client import ContentClient

# Configurar logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Crear aplicación FastAPI
app = FastAPI(
    title="WordPress Content HTTP API",
    description="API HTTP de solo lectura para contenido de WordPress",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Cliente global
content_client: Optional[ContentClient] = None


def parse_categories(categories: Optional[str]) -> List[int]:
    """Convierte "1,2,3" en [1, 2, 3]"""
    if not categories:
        return []
    try:
        return [int(c) for c in categories.split(',') if c.strip()]
    except ValueError:
        raise HTTPException(status_code=422, detail=f"Categorías inválidas: {categories}")


def get_client() -> ContentClient:
    if not content_client:
        raise HTTPException(status_code=500, detail="Cliente de contenido no inicializado")
    return content_client


# === Eventos de inicio ===

@app.on_event("startup")
async def startup_event():
    """Inicializa el cliente al arrancar el servidor"""
    global content_client

    content_client = ContentClient()
    logger.info(f"Cliente de contenido inicializado: {content_client.api_base}")


# === Endpoints de Salud ===

@app.get("/")
async def root():
    """Endpoint raíz - información del servidor"""
    return {
        "name": "WordPress Content HTTP API",
        "version": "1.0.0",
        "status": "running",
        "wordpress_url": config.WP_URL
    }


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "client": content_client is not None
    }


# === Endpoints de contenido ===

@app.get("/posts")
async def list_posts(per_page: int = 12, page: int = 1, categories: Optional[str] = None):
    """Lista posts; una página vacía también significa que WordPress no respondió"""
    client = get_client()
    result = await client.list_posts(
        per_page=per_page,
        page=page,
        categories=parse_categories(categories)
    )
    return result.model_dump(by_alias=True)


@app.get("/cards")
async def list_post_cards(per_page: int = 12, page: int = 1, categories: Optional[str] = None):
    """Lista posts ya preparados para tarjetas (texto plano, fecha formateada)"""
    client = get_client()
    result = await client.list_posts(
        per_page=per_page,
        page=page,
        categories=parse_categories(categories)
    )
    return {
        "cards": [to_card(post).model_dump() for post in result.posts],
        "total_pages": result.total_pages
    }


@app.get("/posts/{slug}")
async def get_post(slug: str):
    """Obtiene un post por slug"""
    client = get_client()
    post = await client.get_post_by_slug(slug)
    if post is None:
        raise HTTPException(status_code=404, detail=f"Post {slug} no encontrado")
    return post.model_dump(by_alias=True)


@app.get("/slugs")
async def list_slugs():
    """Todos los slugs publicados (resultado parcial si alguna página falla)"""
    client = get_client()
    return {"slugs": await client.list_all_slugs()}


@app.get("/categories")
async def list_categories():
    client = get_client()
    categories = await client.list_categories()
    return {"categories": [c.model_dump() for c in categories]}


# === Main ===

if __name__ == "__main__":
    import uvicorn

    print("=" * 60)
    print("WordPress Content HTTP Server")
    print("=" * 60)
    print(f"Puerto: {config.PORT}")
    print(f"WordPress: {config.WP_URL}")
    print()

    uvicorn.run(app, host="0.0.0.0", port=config.PORT)
