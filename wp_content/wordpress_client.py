"""
Cliente de contenido para el REST API de WordPress (headless)
Solo lectura: listado de posts, post por slug, slugs y categorías

Ninguna operación lanza excepciones. Ante un error de red, un status no
exitoso o un cuerpo que no es JSON, cada operación devuelve su valor por
defecto, por lo que "sin resultados" y "API caída" son indistinguibles
para quien llama.
"""

import logging
from typing import Any, List, Optional, Sequence

import httpx
from pydantic import TypeAdapter, ValidationError

from . import config
from .models import Category, PageResult, Post, PostSlug

logger = logging.getLogger(__name__)

TOTAL_PAGES_HEADER = 'X-WP-TotalPages'
SLUGS_PER_PAGE = 100
CATEGORIES_PER_PAGE = 100

_posts_adapter = TypeAdapter(List[Post])
_slugs_adapter = TypeAdapter(List[PostSlug])
_categories_adapter = TypeAdapter(List[Category])


def parse_total_pages(response: httpx.Response) -> int:
    """Lee X-WP-TotalPages; 1 si falta o no es un número"""
    value = response.headers.get(TOTAL_PAGES_HEADER)
    if not value:
        return 1
    try:
        return int(value.strip())
    except ValueError:
        return 1


class ContentClient:
    """Cliente sin estado para leer contenido del REST API de WordPress"""

    def __init__(self, api_base: Optional[str] = None, timeout: Optional[float] = None):
        self.api_base = (api_base or config.API_BASE).rstrip('/')
        self.timeout = config.WP_TIMEOUT if timeout is None else timeout
        self.headers = {'Accept': 'application/json'}

    async def _get(self, endpoint: str, params: Optional[dict] = None) -> Optional[httpx.Response]:
        """
        Realiza una petición GET y devuelve la respuesta solo si es usable

        Devuelve None si hubo error de red, status no exitoso o el cuerpo
        no es JSON. Quien llama traduce None a su valor por defecto.
        """
        url = f"{self.api_base}{endpoint}"

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.get(url, headers=self.headers, params=params)
            except httpx.HTTPError as e:
                logger.warning(f"Error HTTP en {url}: {e}")
                return None

        if not response.is_success:
            logger.warning(f"Status {response.status_code} en {response.url}")
            return None

        content_type = response.headers.get('content-type', '')
        if 'json' not in content_type.lower():
            logger.warning(f"Respuesta no JSON ({content_type or 'sin content-type'}) en {response.url}")
            return None

        return response

    @staticmethod
    def _decode(response: httpx.Response, adapter: TypeAdapter) -> Optional[Any]:
        """Decodifica y valida el cuerpo JSON; None si no tiene la forma esperada"""
        try:
            return adapter.validate_json(response.content)
        except (ValidationError, ValueError) as e:
            logger.warning(f"Cuerpo inesperado en {response.url}: {e}")
            return None

    # === Posts ===
    async def list_posts(self, per_page: int = 12, page: int = 1,
                         categories: Optional[Sequence[int]] = None) -> PageResult:
        """
        Lista posts con recursos embebidos, más recientes primero

        Un fallo devuelve PageResult(posts=[], total_pages=0), igual que una
        página vacía sin cabecera de paginación.
        """
        params = {
            'per_page': str(per_page),
            'page': str(page),
            '_embed': 'true',
            'orderby': 'date',
            'order': 'desc',
        }
        if categories:
            params['categories'] = ','.join(str(c) for c in categories)

        response = await self._get('/posts', params=params)
        if response is None:
            return PageResult(posts=[], total_pages=0)

        posts = self._decode(response, _posts_adapter)
        if posts is None:
            return PageResult(posts=[], total_pages=0)

        return PageResult(posts=posts, total_pages=parse_total_pages(response))

    async def get_post_by_slug(self, slug: str) -> Optional[Post]:
        """Obtiene un post por su slug; None si no existe o si falla la petición"""
        response = await self._get('/posts', params={'slug': slug, '_embed': 'true'})
        if response is None:
            return None

        posts = self._decode(response, _posts_adapter)
        if not posts:
            return None
        return posts[0]

    async def list_all_slugs(self) -> List[str]:
        """
        Recorre todas las páginas de posts y acumula sus slugs

        Las páginas se piden una a una, en orden. El total de páginas se
        vuelve a leer de cada respuesta, así que el recorrido sigue el último
        valor observado. Si una página falla se devuelven los slugs
        acumulados hasta ese momento.
        """
        slugs: List[str] = []
        page = 1

        while True:
            params = {'per_page': str(SLUGS_PER_PAGE), 'page': str(page), '_fields': 'slug'}
            response = await self._get('/posts', params=params)
            if response is None:
                logger.info(f"Recorrido de slugs detenido en la página {page} ({len(slugs)} slugs)")
                break

            posts = self._decode(response, _slugs_adapter)
            if posts is None:
                break
            slugs.extend(p.slug for p in posts)

            total_pages = parse_total_pages(response)
            logger.debug(f"Página {page}/{total_pages} de slugs: {len(posts)} posts")
            if page >= total_pages:
                break
            page += 1

        return slugs

    # === Categorías ===
    async def list_categories(self) -> List[Category]:
        """Lista hasta 100 categorías con posts; [] si falla la petición"""
        params = {'per_page': str(CATEGORIES_PER_PAGE), 'hide_empty': 'true'}
        response = await self._get('/categories', params=params)
        if response is None:
            return []

        categories = self._decode(response, _categories_adapter)
        return categories if categories is not None else []
