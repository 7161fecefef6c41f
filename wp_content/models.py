"""
Modelos del cliente de contenido de WordPress
Proyecciones de solo lectura de las respuestas del REST API
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional


class WPModel(BaseModel):
    """Base común: ignora campos desconocidos y acepta alias o nombre"""
    model_config = ConfigDict(populate_by_name=True, extra='ignore', frozen=True)


class Rendered(WPModel):
    """Campo con HTML renderizado (title, content, excerpt)"""
    rendered: str = ""


class FeaturedMedia(WPModel):
    """Imagen destacada embebida"""
    source_url: str = ""
    alt_text: str = ""


class Term(WPModel):
    """Término de taxonomía embebido (categoría o etiqueta)"""
    id: int = 0
    name: str = ""
    slug: str = ""


class Embedded(WPModel):
    """Recursos relacionados resueltos con _embed"""
    featured_media: Optional[List[FeaturedMedia]] = Field(default=None, alias='wp:featuredmedia')
    terms: Optional[List[List[Term]]] = Field(default=None, alias='wp:term')

    @field_validator('terms', mode='before')
    @classmethod
    def drop_unresolved_terms(cls, groups):
        """WordPress embebe objetos de error ({"code": ...}) para términos que no puede resolver"""
        if not isinstance(groups, list):
            return groups
        return [
            [t for t in group if isinstance(t, dict) and 'code' not in t]
            if isinstance(group, list) else []
            for group in groups
        ]


class Post(WPModel):
    """Datos del post de WordPress"""
    id: int
    slug: str
    title: Rendered = Field(default_factory=Rendered)
    content: Rendered = Field(default_factory=Rendered)
    excerpt: Rendered = Field(default_factory=Rendered)
    date: str = ""
    modified: str = ""
    featured_media: int = 0
    categories: List[int] = Field(default_factory=list)
    embedded: Optional[Embedded] = Field(default=None, alias='_embedded')


class PostSlug(WPModel):
    """Respuesta reducida con _fields=slug"""
    slug: str


class Category(WPModel):
    """Categoría de WordPress"""
    id: int
    name: str
    slug: str
    count: int = 0


class PageResult(WPModel):
    """Página de posts junto con el total de páginas (X-WP-TotalPages)"""
    posts: List[Post] = Field(default_factory=list)
    total_pages: int = 0


class PostCard(WPModel):
    """Post listo para renderizar en una tarjeta"""
    id: int
    slug: str
    title: str
    excerpt: str
    date: str
    image_url: Optional[str] = None
    image_alt: str = ""
    categories: List[str] = Field(default_factory=list)
